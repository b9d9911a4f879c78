from flyby.errors.flyby_error import FlyByError


class CatalogError(FlyByError):
    def __init__(
        self,
        status_code: int | None = None,
        detail: str | None = None,
        message: str | None = None,
    ):
        if message is None:
            message = (
                f"Catalog request failed with status code {status_code}"
                if status_code is not None
                else "Catalog request failed"
            )
        super().__init__(message, details=detail)
        self.status_code = status_code
        self.detail = detail


class NotAuthenticatedError(CatalogError):
    def __init__(self, status_code: int | None = None, detail: str | None = None):
        super().__init__(
            status_code,
            detail or "Please check your API key and try again.",
            message="Not authenticated",
        )

    def __str__(self):
        msg = super().__str__()
        if self.status_code:
            msg += f"\nStatus code: {self.status_code}"
        return msg


class NotFoundError(CatalogError):
    def __init__(self, status_code: int | None = None, detail: str | None = None):
        super().__init__(
            status_code,
            detail or "The requested resource was not found.",
            message="Not found",
        )


class RateLimitedError(CatalogError):
    def __init__(self, status_code: int | None = None, detail: str | None = None):
        super().__init__(
            status_code,
            detail or "The API key has exceeded its request quota.",
            message="Rate limit exceeded",
        )
