"""Media upload router backed by the configured media storage."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status

from aegis.application.ports import MediaAsset
from aegis.presentation.api.config import get_api_settings
from aegis.presentation.api.dependencies import CurrentPrincipal, MediaStorageDep
from aegis.presentation.api.schemas.media import MediaResponse
from aegis_config.settings import Settings
from aegis_identity.domain.shared import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_api_settings)]

ALLOWED_CONTENT_TYPES = frozenset({"image/png", "image/jpg", "image/jpeg"})


async def _read_validated(upload: UploadFile, settings: Settings) -> bytes:
    if upload.content_type not in ALLOWED_CONTENT_TYPES:
        msg = f"Unsupported file type: {upload.content_type}"
        raise ValidationError(
            msg,
            details={"allowed": sorted(ALLOWED_CONTENT_TYPES)},
        )

    content = await upload.read()
    max_bytes = settings.media_max_file_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        msg = f"File exceeds {settings.media_max_file_size_mb}MB limit"
        raise ValidationError(msg, details={"size": len(content)})
    return content


def _to_response(asset: MediaAsset) -> MediaResponse:
    return MediaResponse(public_id=asset.public_id, url=asset.url)


@router.patch(
    "/file/{folder}",
    summary="Upload a single image",
    responses={
        400: {"description": "Unsupported type or file too large"},
        502: {"description": "Storage provider rejected the upload"},
        503: {"description": "Media storage not configured"},
    },
)
async def upload_file(
    folder: str,
    principal: CurrentPrincipal,
    storage: MediaStorageDep,
    settings: SettingsDep,
    file: UploadFile = File(...),
) -> MediaResponse:
    content = await _read_validated(file, settings)
    asset = await storage.upload(
        content=content,
        filename=file.filename or "upload",
        content_type=file.content_type or "application/octet-stream",
        folder=folder,
    )
    logger.info("User %s uploaded %s", principal.email, asset.public_id)
    return _to_response(asset)


@router.patch(
    "/files/{folder}",
    summary="Upload several images",
    responses={
        400: {"description": "Too many files, unsupported type or file too large"},
        502: {"description": "Storage provider rejected the upload"},
        503: {"description": "Media storage not configured"},
    },
)
async def upload_files(
    folder: str,
    principal: CurrentPrincipal,
    storage: MediaStorageDep,
    settings: SettingsDep,
    files: list[UploadFile] = File(...),
) -> list[MediaResponse]:
    if len(files) > settings.media_max_files:
        msg = f"At most {settings.media_max_files} files per request"
        raise ValidationError(msg, details={"count": len(files)})

    # Validate everything before the first upload
    contents = [await _read_validated(f, settings) for f in files]

    assets = []
    for upload, content in zip(files, contents):
        assets.append(
            await storage.upload(
                content=content,
                filename=upload.filename or "upload",
                content_type=upload.content_type or "application/octet-stream",
                folder=folder,
            )
        )
    logger.info("User %s uploaded %d files to %s", principal.email, len(assets), folder)
    return [_to_response(a) for a in assets]


@router.delete(
    "/{public_id:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an uploaded file",
)
async def delete_file(
    public_id: str,
    principal: CurrentPrincipal,
    storage: MediaStorageDep,
) -> None:
    await storage.delete(public_id)
    logger.info("User %s deleted media %s", principal.email, public_id)
