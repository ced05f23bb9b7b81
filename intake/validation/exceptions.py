from intake.validation.models import FieldError, ValidationVerdict


class ValidationRejection(Exception):
    """Raised when a candidate file fails validation. User-correctable."""

    def __init__(self, verdict: ValidationVerdict) -> None:
        super().__init__(verdict.detail)
        self.verdict = verdict


class SubmissionRejected(Exception):
    """Raised when the submitter fields of a batch fail validation."""

    def __init__(self, errors: list[FieldError]) -> None:
        fields = ", ".join(error.field.value for error in errors)
        super().__init__(f"Invalid submitter fields: {fields}")
        self.errors = errors
