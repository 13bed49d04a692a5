from aegis.application.ports.media_storage import (
    MediaAsset,
    MediaDisabledError,
    MediaStorage,
    MediaUploadError,
)

__all__ = [
    "MediaAsset",
    "MediaDisabledError",
    "MediaStorage",
    "MediaUploadError",
]
