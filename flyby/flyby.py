from typing import Any

from flyby.client import FlyByClient


def fly_by(latitude: Any, longitude: Any, client: FlyByClient | None = None) -> str:
    """Predict the next capture for a coordinate and format it for display.

    A default client, configured from the environment, is created when none
    is given.
    """
    if client is None:
        client = FlyByClient()
    next_capture = client.imagery.predict_next_capture(latitude, longitude)
    return f"Next time: {next_capture.isoformat()}"
