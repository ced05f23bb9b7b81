import re
from dataclasses import dataclass
from enum import Enum


class RejectionReason(str, Enum):
    """Why a candidate file was refused. Only the first failing check is reported."""

    PATH_TRAVERSAL = "path_traversal"
    OVERSIZE = "oversize"
    TYPE_MISMATCH = "type_mismatch"
    EXECUTABLE_DISGUISE = "executable_disguise"
    CONTENT_MISMATCH = "content_mismatch"


@dataclass(frozen=True)
class ValidationVerdict:
    """Accept/reject decision for one candidate file."""

    accepted: bool
    reason: RejectionReason | None = None
    detail: str = ""

    @classmethod
    def accept(cls) -> "ValidationVerdict":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectionReason, detail: str) -> "ValidationVerdict":
        return cls(accepted=False, reason=reason, detail=detail)


class FieldKind(str, Enum):
    """Submitter fields accepted alongside a batch."""

    FULL_NAME = "fullName"
    EMAIL = "email"
    DESCRIPTION = "description"


@dataclass(frozen=True)
class FieldRule:
    """Length ceiling and whitelist pattern for one field kind."""

    max_length: int
    pattern: re.Pattern[str] | None = None


@dataclass(frozen=True)
class FieldError:
    """A single submitter-field problem, keyed for localized display."""

    field: FieldKind
    reason: str
    message_key: str


@dataclass(frozen=True)
class SubmitterInfo:
    """Who is submitting the batch."""

    full_name: str = ""
    email: str = ""
    description: str = ""

    def value_of(self, kind: FieldKind) -> str:
        if kind is FieldKind.FULL_NAME:
            return self.full_name
        if kind is FieldKind.EMAIL:
            return self.email
        return self.description
