"""Webhook delivery with per-attempt timeout and exponential backoff.

Attempt n (0-indexed) is followed, when it fails with a retryable error, by a
wait of 2**n seconds. 4xx responses are terminal; 5xx, other non-2xx
statuses, request errors and timeouts are retried until max_retries
additional attempts have been made.
"""

import asyncio
import json
from typing import Any

import httpx

from intake.delivery.exceptions import (
    DeliveryFailure,
    DeliveryHttpError,
    TerminalDeliveryRejection,
)
from intake.delivery.models import DeliveryConfig, DeliveryPayload, DeliveryResult
from intake.logging.logger import Log


def backoff_seconds(attempt: int) -> int:
    return 2**attempt


class DeliveryClient:
    """Posts delivery payloads to the configured webhook."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def deliver(self, payload: DeliveryPayload, config: DeliveryConfig) -> DeliveryResult:
        """Deliver one payload, retrying retryable failures.

        Raises:
            TerminalDeliveryRejection: on a 4xx response.
            DeliveryFailure: when every attempt failed.
        """
        max_attempts = max(config.max_retries, 0) + 1
        last_error: BaseException | None = None

        for attempt in range(max_attempts):
            Log.info(
                f"Delivering artifact {payload.artifact_id} "
                f"(attempt {attempt + 1}/{max_attempts})"
            )
            try:
                return await self._attempt(payload, config, attempt + 1)
            except DeliveryHttpError as exc:
                if 400 <= exc.status_code < 500:
                    Log.error(
                        f"Delivery of {payload.artifact_id} rejected with "
                        f"status {exc.status_code}, not retrying"
                    )
                    raise TerminalDeliveryRejection(
                        f"Delivery rejected with status {exc.status_code}: {exc.body}",
                        last_error=exc,
                        attempts=attempt + 1,
                    ) from exc
                last_error = exc
            except asyncio.TimeoutError as exc:
                last_error = exc
                Log.warning(
                    f"Delivery attempt {attempt + 1} timed out after {config.timeout_ms}ms"
                )
            except httpx.RequestError as exc:
                last_error = exc
                Log.warning(f"Delivery attempt {attempt + 1} failed: {exc}")

            if attempt < max_attempts - 1:
                delay = backoff_seconds(attempt)
                Log.warning(
                    f"Retrying delivery of {payload.artifact_id} in {delay}s "
                    f"(last error: {last_error})"
                )
                await asyncio.sleep(delay)

        Log.error(
            f"Delivery of {payload.artifact_id} failed after {max_attempts} attempts: {last_error}"
        )
        raise DeliveryFailure(
            f"Delivery failed after {max_attempts} attempts: {last_error}",
            last_error=last_error,
            attempts=max_attempts,
        ) from last_error

    async def _attempt(
        self,
        payload: DeliveryPayload,
        config: DeliveryConfig,
        attempts: int,
    ) -> DeliveryResult:
        response = await asyncio.wait_for(
            self._client.post(
                config.endpoint,
                json=payload.to_json(),
                headers=self._headers(config),
            ),
            timeout=config.timeout_seconds,
        )
        if not response.is_success:
            raise DeliveryHttpError(response.status_code, response.text)
        Log.info(f"Delivered artifact {payload.artifact_id} (status {response.status_code})")
        return DeliveryResult(
            status_code=response.status_code,
            attempts=attempts,
            body=self._parse_body(response.content),
        )

    @staticmethod
    def _headers(config: DeliveryConfig) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if config.auth_token:
            headers["Authorization"] = f"Bearer {config.auth_token}"
        return headers

    @staticmethod
    def _parse_body(content: bytes) -> Any:
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except ValueError:
            Log.debug("Delivery response body is not JSON; treating as implicit success")
            return None
