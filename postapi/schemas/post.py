"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostCreate(BaseModel):
    """Create a new post."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)


class PostUpdate(BaseModel):
    """Partial update of a post. Omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)

    @field_validator("title", "content")
    @classmethod
    def reject_null(cls, value: str | None) -> str:
        # Only runs for supplied values; an explicit null cannot clear a required column.
        if value is None:
            raise ValueError("Field may not be null")
        return value


class PostResponse(BaseModel):
    """Post response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None
    title: str
    content: str
    created_at: datetime
    updated_at: datetime


class PostEnvelope(BaseModel):
    data: PostResponse


class PostCreatedEnvelope(PostEnvelope):
    message: str


class PostListEnvelope(BaseModel):
    data: list[PostResponse]


class MessageResponse(BaseModel):
    message: str
