from typing import Any

from flyby.errors.flyby_error import FlyByError
from flyby.types.geo import COORDINATE_BOUNDS


class ValidationError(FlyByError):
    def __init__(self, field: str, message: str, details: str | None = None):
        super().__init__(message, details=details)
        self.field = field


class MissingFieldError(ValidationError):
    def __init__(self, field: str):
        super().__init__(
            field,
            f"Missing {field}",
            details=f"The {field} parameter is required.",
        )


class OutOfRangeError(ValidationError):
    def __init__(self, field: str, value: Any):
        low, high = COORDINATE_BOUNDS[field]
        super().__init__(
            field,
            f"Invalid {field}: {value!r}",
            details=(
                f"{field.capitalize()} must be a number "
                f"between {low:g} and {high:g}."
            ),
        )
        self.value = value
