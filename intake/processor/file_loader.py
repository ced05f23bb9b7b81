import mimetypes
from pathlib import Path

from intake.processor.exceptions import FileReadError
from intake.processor.models import CandidateFile

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class FileLoader:
    """Reads a local file into a CandidateFile.

    The declared media type is guessed from the file name, the way a browser
    fills in the type of a picked file; content is not inspected here.
    """

    def load(self, path: Path) -> CandidateFile:
        """Read file bytes from disk.

        Raises:
            FileReadError: if the path does not exist or cannot be read.
        """
        if not path.is_file():
            raise FileReadError(f"File not found: {path}")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
        media_type, _ = mimetypes.guess_type(path.name)
        return CandidateFile(
            content=content,
            media_type=media_type or DEFAULT_MEDIA_TYPE,
            name=path.name,
            size=len(content),
        )
