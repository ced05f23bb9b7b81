"""User-facing failure categories and their Spanish/English messages."""

import asyncio
from enum import Enum

import httpx

from intake.batch.models import BatchOutcome
from intake.delivery.exceptions import DeliveryFailure, DeliveryHttpError
from intake.storage.exceptions import StorageFailure
from intake.validation.exceptions import ValidationRejection
from intake.validation.models import RejectionReason

DEFAULT_LANGUAGE = "es"


class ErrorCategory(str, Enum):
    INVALID_DATA = "invalid-data-error"
    AUTH = "auth-error"
    RATE_LIMITED = "rate-limit-error"
    SERVER_ERROR = "server-error"
    TIMEOUT = "timeout-error"
    NETWORK = "network-error"
    VALIDATION = "validation-error"
    GENERIC = "form-error"


MESSAGES: dict[str, dict[str, str]] = {
    "es": {
        "invalid-data-error": "Los datos enviados son inválidos. Por favor, revise el formulario.",
        "auth-error": "Error de autenticación. Por favor, contacte al soporte.",
        "rate-limit-error": "Demasiadas solicitudes. Por favor, espere un momento.",
        "server-error": "Error del servidor. Por favor, inténtelo más tarde.",
        "timeout-error": "La solicitud tardó demasiado. Por favor, inténtelo de nuevo.",
        "network-error": "Error de conexión. Verifique su conexión a internet.",
        "validation-error": "El archivo no superó la validación.",
        "form-error": "Error al enviar el formulario. Por favor, inténtelo de nuevo.",
        "file-path-error": "contiene caracteres no permitidos.",
        "file-too-large": "es muy grande. Máximo 5MB.",
        "file-type-error": "no permitido. Solo se aceptan JPG, PNG y PDF.",
        "file-executable-error": "tipo de archivo no permitido por seguridad.",
        "file-content-error": "no coincide con su tipo de archivo.",
        "file-required": "Debe seleccionar una factura para enviar.",
        "required-field": "Este campo es requerido.",
        "name-length": "El nombre debe tener al menos 2 caracteres.",
        "invalid-email": "Por favor ingrese un correo electrónico válido.",
        "invalid-input": "Entrada no válida detectada.",
        "invalid-format": "Formato de entrada no válido.",
        "too-many-attempts": "Demasiados intentos. Espere {seconds} segundos.",
        "success-message": "Su factura ha sido enviada correctamente.",
        "partial-success": "{succeeded} de {total} facturas enviadas correctamente.",
    },
    "en": {
        "invalid-data-error": "The submitted data is invalid. Please check the form.",
        "auth-error": "Authentication error. Please contact support.",
        "rate-limit-error": "Too many requests. Please wait a moment.",
        "server-error": "Server error. Please try again later.",
        "timeout-error": "The request took too long. Please try again.",
        "network-error": "Connection error. Check your internet connection.",
        "validation-error": "The file did not pass validation.",
        "form-error": "Error submitting form. Please try again.",
        "file-path-error": "contains characters that are not allowed.",
        "file-too-large": "is too large. Maximum 5MB.",
        "file-type-error": "not allowed. Only JPG, PNG and PDF are accepted.",
        "file-executable-error": "file type not allowed for security reasons.",
        "file-content-error": "does not match its file type.",
        "file-required": "You must select an invoice to submit.",
        "required-field": "This field is required.",
        "name-length": "Name must be at least 2 characters long.",
        "invalid-email": "Please enter a valid email address.",
        "invalid-input": "Invalid input detected.",
        "invalid-format": "Invalid input format.",
        "too-many-attempts": "Too many attempts. Wait {seconds} seconds.",
        "success-message": "Your invoice has been submitted successfully.",
        "partial-success": "{succeeded} of {total} invoices submitted successfully.",
    },
}

_REJECTION_KEYS: dict[RejectionReason, str] = {
    RejectionReason.PATH_TRAVERSAL: "file-path-error",
    RejectionReason.OVERSIZE: "file-too-large",
    RejectionReason.TYPE_MISMATCH: "file-type-error",
    RejectionReason.EXECUTABLE_DISGUISE: "file-executable-error",
    RejectionReason.CONTENT_MISMATCH: "file-content-error",
}


def translate(key: str, lang: str = DEFAULT_LANGUAGE, **params: object) -> str:
    catalog = MESSAGES.get(lang, MESSAGES[DEFAULT_LANGUAGE])
    text = catalog.get(key, key)
    return text.format(**params) if params else text


def classify_error(exc: BaseException) -> ErrorCategory:
    """Map a per-file failure to the category shown to the user."""
    if isinstance(exc, ValidationRejection):
        return ErrorCategory.VALIDATION

    status_code = _status_code_of(exc)
    if status_code is not None:
        if status_code in (400, 422):
            return ErrorCategory.INVALID_DATA
        if status_code in (401, 403):
            return ErrorCategory.AUTH
        if status_code == 429:
            return ErrorCategory.RATE_LIMITED
        if status_code >= 500:
            return ErrorCategory.SERVER_ERROR

    cause = exc.last_error if isinstance(exc, DeliveryFailure) else exc.__cause__
    for candidate in (exc, cause):
        if isinstance(candidate, (asyncio.TimeoutError, httpx.TimeoutException)):
            return ErrorCategory.TIMEOUT
        if isinstance(candidate, httpx.TransportError):
            return ErrorCategory.NETWORK
    return ErrorCategory.GENERIC


def user_message(category: ErrorCategory, lang: str = DEFAULT_LANGUAGE) -> str:
    return translate(category.value, lang)


def rejection_message(file_name: str, reason: RejectionReason, lang: str = DEFAULT_LANGUAGE) -> str:
    return f'"{file_name}" {translate(_REJECTION_KEYS[reason], lang)}'


def batch_summary(outcome: BatchOutcome, lang: str = DEFAULT_LANGUAGE) -> str:
    """Final message for a finished batch: full success, partial success or failure."""
    if not outcome.success:
        return translate(ErrorCategory.GENERIC.value, lang)
    if outcome.failed == 0 and outcome.total == 1:
        return translate("success-message", lang)
    return translate("partial-success", lang, succeeded=outcome.succeeded, total=outcome.total)


def _status_code_of(exc: BaseException) -> int | None:
    if isinstance(exc, (DeliveryFailure, StorageFailure, DeliveryHttpError)):
        return exc.status_code
    return None
