from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CaptureRecord(BaseModel):
    """A single historical capture of imagery for a location.

    Only ``date`` is used for predictions; any other fields returned by the
    catalog (asset ``id``, ...) are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    date: datetime
    id: str | None = None


class AssetsResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    results: list[CaptureRecord] = Field(default_factory=list)
