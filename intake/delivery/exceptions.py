class DeliveryHttpError(Exception):
    """A non-2xx response from the delivery endpoint."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Delivery endpoint responded with status {status_code}")
        self.status_code = status_code
        self.body = body


class DeliveryFailure(Exception):
    """Raised when a payload could not be delivered."""

    def __init__(
        self,
        message: str,
        last_error: BaseException | None = None,
        attempts: int = 0,
    ) -> None:
        super().__init__(message)
        self.last_error = last_error
        self.attempts = attempts

    @property
    def status_code(self) -> int | None:
        if isinstance(self.last_error, DeliveryHttpError):
            return self.last_error.status_code
        return None


class TerminalDeliveryRejection(DeliveryFailure):
    """Raised on a 4xx response. Never retried."""
