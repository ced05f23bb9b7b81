import asyncio
from collections.abc import Sequence

from intake.batch.exceptions import BatchFailed, NoFilesSubmitted, RateLimitExceeded
from intake.batch.messages import DEFAULT_LANGUAGE, classify_error, rejection_message
from intake.batch.models import (
    BatchOutcome,
    FileOutcome,
    FileState,
    ProgressCallback,
    ProgressEvent,
)
from intake.batch.rate_limiter import RateLimiter
from intake.logging.logger import Log
from intake.processor.models import CandidateFile
from intake.processor.processor import Processor
from intake.validation.exceptions import SubmissionRejected, ValidationRejection
from intake.validation.fields import validate_fields
from intake.validation.models import SubmitterInfo
from intake.validation.sanitizer import sanitize_input


class BatchOrchestrator:
    """Runs a submitted batch one file at a time.

    A failure in any stage of file i is recorded against that file and the
    batch moves on to file i+1. File i+1 starts only after file i reached a
    terminal state.
    """

    def __init__(
        self,
        processor: Processor,
        rate_limiter: RateLimiter,
        inter_file_pause_seconds: float = 0.5,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._processor = processor
        self._rate_limiter = rate_limiter
        self._pause = inter_file_pause_seconds
        self._language = language

    async def submit(
        self,
        files: Sequence[CandidateFile],
        submitter: SubmitterInfo | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> BatchOutcome:
        """Gate, validate and run one user submission.

        Raises:
            RateLimitExceeded: if the submission rate limit is reached.
            NoFilesSubmitted: if ``files`` is empty.
            SubmissionRejected: if any submitter field is invalid.
            BatchFailed: if no file succeeded.
        """
        if not self._rate_limiter.check():
            retry_after = self._rate_limiter.seconds_until_reset()
            Log.warning(f"Submission rate limit reached, retry in {retry_after}s")
            raise RateLimitExceeded(retry_after)
        self._rate_limiter.record()

        if not files:
            raise NoFilesSubmitted("At least one file is required")

        if submitter is not None:
            errors = validate_fields(submitter)
            if errors:
                raise SubmissionRejected(errors)

        Log.info(f"Submission accepted: {len(files)} file(s)")
        outcome = await self.run(files, on_progress)
        if not outcome.success:
            raise BatchFailed(outcome)
        return outcome

    async def run(
        self,
        files: Sequence[CandidateFile],
        on_progress: ProgressCallback | None = None,
    ) -> BatchOutcome:
        """Process every file in order and fold the results into a BatchOutcome."""
        total = len(files)
        outcome = BatchOutcome()
        for index, candidate in enumerate(files):
            if index > 0 and self._pause > 0:
                await asyncio.sleep(self._pause)
            result = await self._process_one(candidate, outcome.total, total, on_progress)
            outcome = outcome.with_result(result)
            self._emit(
                on_progress,
                candidate.name,
                FileState.SUCCEEDED if result.success else FileState.FAILED,
                outcome.total,
                total,
            )

        Log.info(f"Batch finished: {outcome.succeeded}/{outcome.total} files succeeded")
        return outcome

    async def _process_one(
        self,
        candidate: CandidateFile,
        completed: int,
        total: int,
        on_progress: ProgressCallback | None,
    ) -> FileOutcome:
        def on_state(state: FileState) -> None:
            self._emit(on_progress, candidate.name, state, completed, total)

        try:
            context = await self._processor.process(candidate, on_state=on_state)
        except Exception as exc:
            category = classify_error(exc)
            Log.error(f"File {candidate.name} failed ({category.value}): {exc}")
            return FileOutcome(
                file_name=candidate.name,
                success=False,
                error_message=self._error_message(candidate, exc),
                error_category=category.value,
            )

        artifact_id = context.record.artifact_id if context.record is not None else None
        return FileOutcome(file_name=candidate.name, success=True, artifact_id=artifact_id)

    def _error_message(self, candidate: CandidateFile, exc: Exception) -> str:
        if isinstance(exc, ValidationRejection) and exc.verdict.reason is not None:
            return rejection_message(
                sanitize_input(candidate.name), exc.verdict.reason, self._language
            )
        return str(exc)

    @staticmethod
    def _emit(
        on_progress: ProgressCallback | None,
        file_name: str,
        state: FileState,
        completed: int,
        total: int,
    ) -> None:
        if on_progress is None:
            return
        event = ProgressEvent(file_name=file_name, state=state, completed=completed, total=total)
        try:
            on_progress(event)
        except Exception as exc:
            Log.warning(f"Progress callback failed for {file_name}: {exc}")
