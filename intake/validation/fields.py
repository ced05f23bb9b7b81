"""Submitter field validation against a static rule table."""

import re

from intake.logging.logger import Log
from intake.validation.models import FieldError, FieldKind, FieldRule, SubmitterInfo
from intake.validation.sanitizer import has_script_marker

_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

FIELD_RULES: dict[FieldKind, FieldRule] = {
    FieldKind.FULL_NAME: FieldRule(
        max_length=100,
        pattern=re.compile(r"^[a-zA-ZÀ-ÿĀ-ſ\s'-]{2,100}$"),
    ),
    FieldKind.EMAIL: FieldRule(max_length=254, pattern=_EMAIL_RE),
    FieldKind.DESCRIPTION: FieldRule(max_length=1000),
}

REQUIRED_FIELDS = frozenset({FieldKind.FULL_NAME, FieldKind.EMAIL})
_MIN_NAME_LENGTH = 2


def validate_fields(info: SubmitterInfo) -> list[FieldError]:
    """Return every field problem found; an empty list means the submitter is valid."""
    errors: list[FieldError] = []
    for kind in FieldKind:
        error = _validate_field(kind, info.value_of(kind).strip())
        if error is not None:
            errors.append(error)
    return errors


def _validate_field(kind: FieldKind, raw: str) -> FieldError | None:
    if has_script_marker(raw):
        return _fail(kind, raw, "Potential XSS attempt", "invalid-input")

    if not raw:
        if kind in REQUIRED_FIELDS:
            return FieldError(field=kind, reason="missing", message_key="required-field")
        return None

    if len(raw) > FIELD_RULES[kind].max_length:
        return _fail(kind, raw, "Invalid input length", "invalid-format")

    if kind is FieldKind.FULL_NAME and len(raw) < _MIN_NAME_LENGTH:
        return FieldError(field=kind, reason="too_short", message_key="name-length")

    pattern = FIELD_RULES[kind].pattern
    if pattern is not None and not pattern.match(raw):
        if kind is FieldKind.EMAIL:
            return _fail(kind, raw, "Invalid email format", "invalid-email")
        return _fail(kind, raw, "Invalid input format", "invalid-format")

    return None


def _fail(kind: FieldKind, raw: str, reason: str, message_key: str) -> FieldError:
    Log.security_event(kind.value, reason, value_length=len(raw))
    return FieldError(field=kind, reason=reason, message_key=message_key)
