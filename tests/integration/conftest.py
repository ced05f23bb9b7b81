import json
from collections.abc import Callable

import httpx
import pytest

from intake.config.settings import Settings

STORAGE_ENDPOINT = "https://storage.example.com/storage/v1/object/invoices"
WEBHOOK_URL = "https://hooks.example.com/webhook/invoice-processing"


class FakeBackend:
    """In-memory storage endpoint and webhook behind an httpx.MockTransport."""

    storage_endpoint = STORAGE_ENDPOINT
    webhook_url = WEBHOOK_URL

    def __init__(self) -> None:
        self.stored: dict[str, bytes] = {}
        self.deliveries: list[dict[str, str]] = []
        self.webhook_statuses: list[int] = []
        self.sign_status = 200

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url == WEBHOOK_URL:
            return self._webhook(request)
        if url.startswith(f"{STORAGE_ENDPOINT}/sign/"):
            return self._sign(url.removeprefix(f"{STORAGE_ENDPOINT}/sign/"))
        if url.startswith(f"{STORAGE_ENDPOINT}/"):
            name = url.removeprefix(f"{STORAGE_ENDPOINT}/")
            self.stored[name] = request.content
            return httpx.Response(200, json={"Key": f"invoices/{name}"})
        return httpx.Response(404)

    def _sign(self, name: str) -> httpx.Response:
        if self.sign_status != 200:
            return httpx.Response(self.sign_status, json={"error": "unavailable"})
        return httpx.Response(200, json={"signedURL": f"/sign/{name}?token=t0k3n"})

    def _webhook(self, request: httpx.Request) -> httpx.Response:
        status = self.webhook_statuses.pop(0) if self.webhook_statuses else 200
        if status == 200:
            self.deliveries.append(json.loads(request.content))
            return httpx.Response(200, json={"received": True})
        return httpx.Response(status, text="unavailable")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def integration_settings() -> Callable[..., Settings]:
    def _make(**overrides: object) -> Settings:
        values: dict[str, object] = {
            "webhook_url": WEBHOOK_URL,
            "storage_endpoint": STORAGE_ENDPOINT,
            "storage_api_key": "service-key",
            "inter_file_pause_seconds": 0,
        }
        values.update(overrides)
        return Settings(**values)

    return _make
