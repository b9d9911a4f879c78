from flyby.imagery.imagery import Imagery
from flyby.imagery.prediction import (
    capture_instants,
    mean_capture_interval,
    predict_next_capture,
)

__all__ = [
    "Imagery",
    "capture_instants",
    "mean_capture_interval",
    "predict_next_capture",
]
