import asyncio

import httpx
import pytest

from intake.batch.messages import (
    ErrorCategory,
    batch_summary,
    classify_error,
    rejection_message,
    translate,
    user_message,
)
from intake.batch.models import BatchOutcome, FileOutcome
from intake.delivery.exceptions import (
    DeliveryFailure,
    DeliveryHttpError,
    TerminalDeliveryRejection,
)
from intake.storage.exceptions import StorageFailure
from intake.validation.exceptions import ValidationRejection
from intake.validation.models import RejectionReason, ValidationVerdict


def _outcome(*flags: bool) -> BatchOutcome:
    outcome = BatchOutcome()
    for index, flag in enumerate(flags):
        outcome = outcome.with_result(FileOutcome(file_name=f"f{index}.pdf", success=flag))
    return outcome


class TestClassifyError:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (400, ErrorCategory.INVALID_DATA),
            (422, ErrorCategory.INVALID_DATA),
            (401, ErrorCategory.AUTH),
            (403, ErrorCategory.AUTH),
            (429, ErrorCategory.RATE_LIMITED),
            (500, ErrorCategory.SERVER_ERROR),
            (503, ErrorCategory.SERVER_ERROR),
        ],
    )
    def test_delivery_status_codes(self, status: int, expected: ErrorCategory) -> None:
        exc = TerminalDeliveryRejection("rejected", last_error=DeliveryHttpError(status), attempts=1)
        assert classify_error(exc) is expected

    def test_storage_status_code(self) -> None:
        assert classify_error(StorageFailure("denied", status_code=403)) is ErrorCategory.AUTH

    def test_validation_rejection(self) -> None:
        verdict = ValidationVerdict.reject(RejectionReason.TYPE_MISMATCH, "bad type")
        assert classify_error(ValidationRejection(verdict)) is ErrorCategory.VALIDATION

    def test_timeout_in_last_error(self) -> None:
        exc = DeliveryFailure("gave up", last_error=asyncio.TimeoutError(), attempts=3)
        assert classify_error(exc) is ErrorCategory.TIMEOUT

    def test_network_error_as_cause(self) -> None:
        try:
            try:
                raise httpx.ConnectError("refused")
            except httpx.ConnectError as inner:
                raise StorageFailure("upload failed") from inner
        except StorageFailure as exc:
            assert classify_error(exc) is ErrorCategory.NETWORK

    def test_unknown_error(self) -> None:
        assert classify_error(RuntimeError("boom")) is ErrorCategory.GENERIC


class TestTranslate:
    def test_spanish_is_default(self) -> None:
        assert translate("required-field") == "Este campo es requerido."

    def test_english(self) -> None:
        assert translate("required-field", "en") == "This field is required."

    def test_unknown_language_falls_back_to_spanish(self) -> None:
        assert translate("required-field", "fr") == "Este campo es requerido."

    def test_unknown_key_is_returned_as_is(self) -> None:
        assert translate("no-such-key", "en") == "no-such-key"

    def test_parameters_are_interpolated(self) -> None:
        assert translate("too-many-attempts", "en", seconds=42) == "Too many attempts. Wait 42 seconds."

    def test_user_message(self) -> None:
        assert user_message(ErrorCategory.TIMEOUT, "en") == "The request took too long. Please try again."

    def test_rejection_message_quotes_file_name(self) -> None:
        message = rejection_message("scan.exe.pdf", RejectionReason.EXECUTABLE_DISGUISE, "en")
        assert message == '"scan.exe.pdf" file type not allowed for security reasons.'


class TestBatchSummary:
    def test_single_success(self) -> None:
        assert batch_summary(_outcome(True), "en") == "Your invoice has been submitted successfully."

    def test_partial_success(self) -> None:
        assert batch_summary(_outcome(True, False, True), "en") == (
            "2 of 3 invoices submitted successfully."
        )

    def test_all_succeeded_in_multi_file_batch(self) -> None:
        assert batch_summary(_outcome(True, True), "es") == (
            "2 de 2 facturas enviadas correctamente."
        )

    def test_total_failure(self) -> None:
        assert batch_summary(_outcome(False, False), "en") == "Error submitting form. Please try again."
