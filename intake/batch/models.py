from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class FileState(str, Enum):
    """Per-file lifecycle within a batch."""

    PENDING = "pending"
    VALIDATING = "validating"
    NORMALIZING = "normalizing"
    UPLOADING = "uploading"
    DELIVERING = "delivering"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (FileState.SUCCEEDED, FileState.FAILED)


@dataclass(frozen=True)
class FileOutcome:
    """Terminal result for one file of a batch."""

    file_name: str
    success: bool
    artifact_id: str | None = None
    error_message: str | None = None
    error_category: str | None = None


@dataclass(frozen=True)
class BatchOutcome:
    """Ordered, immutable per-file results of one submission."""

    results: tuple[FileOutcome, ...] = field(default_factory=tuple)

    def with_result(self, outcome: FileOutcome) -> "BatchOutcome":
        return BatchOutcome(results=(*self.results, outcome))

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def success(self) -> bool:
        """At least one file made it through; partial failures still count."""
        return self.succeeded > 0


@dataclass(frozen=True)
class ProgressEvent:
    """Advisory progress notification for the presentation layer."""

    file_name: str
    state: FileState
    completed: int
    total: int


ProgressCallback = Callable[[ProgressEvent], None]
