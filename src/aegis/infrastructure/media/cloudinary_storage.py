"""Cloudinary media storage over the REST upload API."""

from __future__ import annotations

import hashlib
import logging
import re
import secrets
import time
from typing import Any

import httpx

from aegis.application.ports import MediaAsset, MediaStorage, MediaUploadError

logger = logging.getLogger(__name__)

CLOUDINARY_API_BASE = "https://api.cloudinary.com/v1_1"
# quality auto, delivered as webp
DEFAULT_TRANSFORMATION = "q_auto,f_webp"

_WHITESPACE = re.compile(r"\s+")


def build_public_id(filename: str) -> str:
    """Derive a public id from the file name plus a random suffix.

    ``"My Photo.PNG"`` becomes something like ``"my_photo_3fa9c1"``.
    """
    stem = _WHITESPACE.sub("_", filename).lower().split(".")[0] or "file"
    return f"{stem}_{secrets.token_hex(3)}"


def sign_params(params: dict[str, Any], api_secret: str) -> str:
    """Cloudinary request signature (SHA-1 over sorted params + secret)."""
    payload = "&".join(
        f"{key}={params[key]}"
        for key in sorted(params)
        if params[key] not in (None, "")
    )
    return hashlib.sha1(  # NOQA: S324
        f"{payload}{api_secret}".encode(),
    ).hexdigest()


class CloudinaryMediaStorage(MediaStorage):
    """HTTP client wrapper for the Cloudinary upload API."""

    def __init__(  # NOQA: PLR0913
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        timeout: float = 30.0,
        transformation: str = DEFAULT_TRANSFORMATION,
        base_url: str = CLOUDINARY_API_BASE,
    ):
        self._api_key = api_key
        self._api_secret = api_secret
        self._timeout = timeout
        self._transformation = transformation
        self._base_url = f"{base_url.rstrip('/')}/{cloud_name}"
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _signed(self, params: dict[str, Any]) -> dict[str, Any]:
        params = {**params, "timestamp": int(time.time())}
        return {
            **params,
            "api_key": self._api_key,
            "signature": sign_params(params, self._api_secret),
        }

    async def upload(
        self,
        content: bytes,
        filename: str,
        content_type: str,
        folder: str,
    ) -> MediaAsset:
        data = self._signed(
            {
                "folder": folder,
                "public_id": build_public_id(filename),
                "transformation": self._transformation,
            }
        )
        client = await self._get_client()
        try:
            response = await client.post(
                "/auto/upload",
                data=data,
                files={"file": (filename, content, content_type)},
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Cloudinary upload returned %d: %s",
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            msg = "Media upload failed"
            raise MediaUploadError(
                msg,
                details={"status": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Cloudinary upload failed: %s", e)
            msg = "Media upload failed"
            raise MediaUploadError(msg) from e

        logger.info("Uploaded %s to folder %s", body["public_id"], folder)
        return MediaAsset(public_id=body["public_id"], url=body["secure_url"])

    async def delete(self, public_id: str) -> None:
        client = await self._get_client()
        try:
            response = await client.post(
                "/image/destroy",
                data=self._signed({"public_id": public_id}),
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Cloudinary delete of %s failed: %s", public_id, e)
            msg = "Media deletion failed"
            raise MediaUploadError(msg) from e

        result = response.json().get("result")
        if result != "ok":
            logger.info("Cloudinary delete of %s returned %s", public_id, result)
