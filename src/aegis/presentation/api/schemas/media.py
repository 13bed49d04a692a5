"""Media upload schemas."""

from pydantic import BaseModel, ConfigDict


class MediaResponse(BaseModel):
    public_id: str
    url: str

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "public_id": "avatars/my_photo_3fa9c1",
                "url": "https://res.cloudinary.com/demo/image/upload/avatars/my_photo_3fa9c1.webp",
            },
        },
    )
