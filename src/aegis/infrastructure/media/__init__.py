from aegis.infrastructure.media.cloudinary_storage import (
    CloudinaryMediaStorage,
    build_public_id,
    sign_params,
)

__all__ = ["CloudinaryMediaStorage", "build_public_id", "sign_params"]
