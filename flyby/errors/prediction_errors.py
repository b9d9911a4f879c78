from flyby.errors.flyby_error import FlyByError


class InsufficientDataError(FlyByError):
    def __init__(self, count: int):
        super().__init__(
            "Not enough imagery to make a prediction",
            details=f"At least 2 captures are required, got {count}.",
        )
        self.count = count
