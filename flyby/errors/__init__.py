from flyby.errors.api_errors import (
    CatalogError,
    NotAuthenticatedError,
    NotFoundError,
    RateLimitedError,
)
from flyby.errors.flyby_error import FlyByError
from flyby.errors.prediction_errors import InsufficientDataError
from flyby.errors.validation_errors import (
    MissingFieldError,
    OutOfRangeError,
    ValidationError,
)

__all__ = [
    "CatalogError",
    "FlyByError",
    "InsufficientDataError",
    "MissingFieldError",
    "NotAuthenticatedError",
    "NotFoundError",
    "OutOfRangeError",
    "RateLimitedError",
    "ValidationError",
]
