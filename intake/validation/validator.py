from typing import ClassVar

from intake.logging.logger import Log
from intake.processor.models import CandidateFile, file_extension
from intake.validation.models import RejectionReason, ValidationVerdict
from intake.validation.sanitizer import sanitize_input
from intake.validation.sniffer import sniff

DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024


class FileValidator:
    """Accepts or rejects candidate files.

    Checks run in a fixed order and stop at the first failure:
    name safety -> size -> type/extension -> executable disguise -> content.
    """

    ALLOWED_MEDIA_TYPES: ClassVar[frozenset[str]] = frozenset(
        {"image/jpeg", "image/jpg", "image/png", "application/pdf"}
    )
    ALLOWED_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(
        {".jpg", ".jpeg", ".png", ".pdf"}
    )
    EXECUTABLE_EXTENSIONS: ClassVar[tuple[str, ...]] = (
        ".exe",
        ".bat",
        ".cmd",
        ".scr",
        ".pif",
        ".com",
        ".jar",
        ".js",
        ".vbs",
        ".ps1",
    )

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> None:
        self._max_file_size = max_file_size

    def validate(self, file: CandidateFile) -> ValidationVerdict:
        """Run every check against the file and return the first failure, if any."""
        sanitized_name = sanitize_input(file.name)

        if any(token in file.name for token in ("..", "/", "\\")):
            return self._reject(
                file,
                RejectionReason.PATH_TRAVERSAL,
                f'"{sanitized_name}" contains path characters',
            )

        if file.size > self._max_file_size:
            return self._reject(
                file,
                RejectionReason.OVERSIZE,
                f'"{sanitized_name}" exceeds {self._max_file_size} bytes',
            )

        extension = file_extension(sanitized_name)
        if (
            file.media_type.lower() not in self.ALLOWED_MEDIA_TYPES
            or extension not in self.ALLOWED_EXTENSIONS
        ):
            return self._reject(
                file,
                RejectionReason.TYPE_MISMATCH,
                f'"{sanitized_name}" has unsupported type {file.media_type!r} '
                f"or extension {extension!r}",
            )

        lowered = sanitized_name.lower()
        if any(ext in lowered for ext in self.EXECUTABLE_EXTENSIONS):
            return self._reject(
                file,
                RejectionReason.EXECUTABLE_DISGUISE,
                f'"{sanitized_name}" looks like an executable',
            )

        if not sniff(file.content, file.media_type):
            return self._reject(
                file,
                RejectionReason.CONTENT_MISMATCH,
                f'"{sanitized_name}" content does not match {file.media_type!r}',
            )

        return ValidationVerdict.accept()

    @staticmethod
    def _reject(
        file: CandidateFile,
        reason: RejectionReason,
        detail: str,
    ) -> ValidationVerdict:
        Log.security_event(
            "file",
            reason.value,
            name_length=len(file.name),
            declared_type=file.media_type,
            size_bytes=file.size,
        )
        return ValidationVerdict.reject(reason, detail)
