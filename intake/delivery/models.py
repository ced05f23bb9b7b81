from dataclasses import dataclass
from typing import Any

from intake.config.settings import Settings
from intake.logging.logger import Log

_TIMEOUT_RANGE_MS = (5000, 60000)
_RETRIES_RANGE = (0, 5)


@dataclass(frozen=True)
class DeliveryPayload:
    """What the downstream endpoint receives; anything else is fetched by artifact_id."""

    artifact_id: str
    access_url: str

    def to_json(self) -> dict[str, str]:
        return {"uuid": self.artifact_id, "fileUrl": self.access_url}


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a successful delivery.

    body is None when the endpoint answered 2xx with an empty or non-JSON body.
    """

    status_code: int
    attempts: int
    body: Any = None


@dataclass(frozen=True)
class DeliveryConfig:
    """Webhook endpoint settings, resolved once at pipeline construction."""

    endpoint: str
    timeout_ms: int = 30000
    max_retries: int = 2
    auth_token: str | None = None

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_settings(cls, settings: Settings) -> "DeliveryConfig":
        config = cls(
            endpoint=settings.webhook_url,
            timeout_ms=settings.webhook_timeout_ms,
            max_retries=settings.webhook_max_retries,
            auth_token=settings.webhook_auth_token or None,
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Reject a missing or non-HTTP endpoint; only warn on out-of-range tuning.

        Raises:
            ValueError: if the endpoint is not an http(s) URL.
        """
        if not self.endpoint or not self.endpoint.startswith("http"):
            raise ValueError("Invalid webhook URL configuration")
        low, high = _TIMEOUT_RANGE_MS
        if not low <= self.timeout_ms <= high:
            Log.warning(
                f"Webhook timeout should be between {low // 1000}-{high // 1000} seconds, "
                f"got {self.timeout_ms}ms"
            )
        low, high = _RETRIES_RANGE
        if not low <= self.max_retries <= high:
            Log.warning(
                f"Webhook retries should be between {low}-{high}, got {self.max_retries}"
            )
