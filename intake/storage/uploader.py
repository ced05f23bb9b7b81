"""Upload of normalized artifacts to a content-addressed storage endpoint.

Each artifact is stored under a freshly generated UUID4 name. After the upload a
signed, time-limited URL is requested; when signing fails the deterministic
public URL is used instead, so a signing problem never fails the upload.
Nothing here retries.
"""

import uuid
from typing import Any

import httpx

from intake.logging.logger import Log
from intake.processor.models import (
    PDF_EXTENSION,
    PDF_MEDIA_TYPE,
    CandidateFile,
    NormalizedArtifact,
    StorageRecord,
)
from intake.storage.exceptions import StorageFailure

_SIGNED_URL_KEYS = ("signedURL", "signedUrl", "url")


def generate_artifact_id() -> str:
    """Random UUID4; version and variant bits are set by uuid4()."""
    return str(uuid.uuid4())


def stored_name_for(
    artifact_id: str,
    artifact: NormalizedArtifact,
    original: CandidateFile,
) -> str:
    if artifact.converted or original.extension == PDF_EXTENSION:
        return f"{artifact_id}{PDF_EXTENSION}"
    return f"{artifact_id}{original.extension}"


class StorageUploader:
    """Stores artifacts and resolves an access URL for each one."""

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        endpoint: str,
        api_key: str,
        signed_url_expires_in: int = 3600,
    ) -> None:
        self._client = client
        self._endpoint = endpoint.rstrip("/")
        self._api_key = api_key
        self._expires_in = signed_url_expires_in

    async def upload(
        self,
        artifact: NormalizedArtifact,
        original: CandidateFile,
    ) -> StorageRecord:
        """Upload one artifact and return its StorageRecord.

        Raises:
            StorageFailure: on a transport error or a non-2xx upload response.
        """
        artifact_id = generate_artifact_id()
        stored_name = stored_name_for(artifact_id, artifact, original)
        media_type = artifact.media_type or PDF_MEDIA_TYPE

        await self._put_object(stored_name, artifact.content, media_type)
        Log.info(f"Stored {len(artifact.content)} bytes as {stored_name}")

        access_url, signed = await self._resolve_access_url(stored_name)
        return StorageRecord(
            artifact_id=artifact_id,
            stored_name=stored_name,
            access_url=access_url,
            original_name=original.name,
            byte_size=len(artifact.content),
            media_type=media_type,
            converted=artifact.converted,
            signed=signed,
        )

    def public_url(self, stored_name: str) -> str:
        return f"{self._endpoint}/public/{stored_name}"

    async def _put_object(self, stored_name: str, content: bytes, media_type: str) -> None:
        headers = {**self._auth_headers(), "Content-Type": media_type}
        try:
            response = await self._client.post(
                f"{self._endpoint}/{stored_name}",
                content=content,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise StorageFailure(f"Storage upload failed: {exc}") from exc
        if not response.is_success:
            raise StorageFailure(
                f"Storage upload failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

    async def _resolve_access_url(self, stored_name: str) -> tuple[str, bool]:
        try:
            return await self._sign(stored_name), True
        except Exception as exc:
            Log.warning(f"Signed URL unavailable for {stored_name}, using public URL: {exc}")
            return self.public_url(stored_name), False

    async def _sign(self, stored_name: str) -> str:
        response = await self._client.post(
            f"{self._endpoint}/sign/{stored_name}",
            json={"expiresIn": self._expires_in},
            headers=self._auth_headers(),
        )
        response.raise_for_status()
        data: Any = response.json()
        if not isinstance(data, dict):
            raise ValueError("Signed URL response must be an object")
        for key in _SIGNED_URL_KEYS:
            url = data.get(key)
            if isinstance(url, str) and url:
                return self._absolute(url)
        raise ValueError(f"Signed URL response has none of {list(_SIGNED_URL_KEYS)}")

    def _absolute(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._endpoint}/{url.lstrip('/')}"

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "apikey": self._api_key,
        }
