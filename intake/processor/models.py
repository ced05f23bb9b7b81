from dataclasses import dataclass

PDF_MEDIA_TYPE = "application/pdf"
PDF_EXTENSION = ".pdf"


def file_extension(name: str) -> str:
    """Lower-cased extension including the dot, or '' when the name has none."""
    index = name.rfind(".")
    if index == -1:
        return ""
    return name[index:].lower()


@dataclass(frozen=True)
class CandidateFile:
    """A file as received from the caller, before any validation."""

    content: bytes
    media_type: str
    name: str
    size: int

    @property
    def extension(self) -> str:
        return file_extension(self.name)


@dataclass(frozen=True)
class NormalizedArtifact:
    """Storage-ready document derived from exactly one CandidateFile."""

    content: bytes
    source_name: str
    converted: bool
    media_type: str = PDF_MEDIA_TYPE


@dataclass(frozen=True)
class StorageRecord:
    """Result of storing one artifact. artifact_id links storage and delivery."""

    artifact_id: str
    stored_name: str
    access_url: str
    original_name: str
    byte_size: int
    media_type: str
    converted: bool
    signed: bool = True
