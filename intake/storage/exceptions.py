class StorageFailure(Exception):
    """Raised when an artifact cannot be transmitted to storage."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
