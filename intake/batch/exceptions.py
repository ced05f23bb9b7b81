from intake.batch.models import BatchOutcome


class BatchError(Exception):
    """Base exception for submission-level failures."""


class RateLimitExceeded(BatchError):
    """Raised when too many submissions were made within the rate window."""

    def __init__(self, retry_after_seconds: int) -> None:
        super().__init__(f"Too many submissions; retry in {retry_after_seconds} seconds")
        self.retry_after_seconds = retry_after_seconds


class NoFilesSubmitted(BatchError):
    """Raised when a submission carries no files."""


class BatchFailed(BatchError):
    """Raised when not a single file of the batch succeeded."""

    def __init__(self, outcome: BatchOutcome) -> None:
        super().__init__(f"All {outcome.total} files failed")
        self.outcome = outcome
