"""Port for third-party media storage."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from aegis_identity.domain.shared.exceptions import DomainException, ErrorCode


class MediaUploadError(DomainException):
    """Raised when the storage provider rejects or fails an operation."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.MEDIA_UPLOAD_FAILED, details=details)


class MediaDisabledError(DomainException):
    """Raised when media storage is not configured."""

    def __init__(self, message: str = "Media storage is not configured"):
        super().__init__(message, code=ErrorCode.MEDIA_DISABLED)


@dataclass(frozen=True)
class MediaAsset:
    public_id: str
    url: str


class MediaStorage(ABC):
    """Stores uploaded files and returns their public location."""

    @abstractmethod
    async def upload(
        self,
        content: bytes,
        filename: str,
        content_type: str,
        folder: str,
    ) -> MediaAsset:
        """Upload one file into ``folder``."""

    @abstractmethod
    async def delete(self, public_id: str) -> None:
        """Delete a previously uploaded file."""

    async def close(self) -> None:  # NOQA: B027
        """Release underlying connections."""
