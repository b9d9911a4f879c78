"""Helpers shared by the test suite."""

import json
from datetime import datetime, timedelta

import requests

from flyby.types.imagery import CaptureRecord

DAY_ZERO = datetime(2024, 1, 1)


def create_response(
    status_code: int = 200,
    payload: dict | None = None,
    text: str | None = None,
    url: str = "https://api.nasa.gov/planetary/earth/assets",
) -> requests.Response:
    """Create a requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.reason = "OK" if status_code < 400 else "Error"
    if text is None:
        text = json.dumps(payload if payload is not None else {})
    response._content = text.encode("utf-8")
    return response


def create_records(*days: float) -> list[CaptureRecord]:
    """Create capture records that many days after DAY_ZERO."""
    return [CaptureRecord(date=DAY_ZERO + timedelta(days=day)) for day in days]


def create_assets_payload(*dates: str) -> dict:
    return {
        "count": len(dates),
        "results": [
            {"date": date, "id": f"LC8_L1T_TOA/LC80{i:02d}"}
            for i, date in enumerate(dates)
        ],
    }
