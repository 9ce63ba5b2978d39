"""Shared base for MongoDB entities."""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer


def validate_object_id(v: Any) -> ObjectId:
    """Accept an ObjectId or its 24-hex string form."""
    if isinstance(v, ObjectId):
        return v
    if isinstance(v, str) and ObjectId.is_valid(v):
        return ObjectId(v)
    raise ValueError("Invalid ObjectId")


def validate_object_id_str(v: Any) -> str:
    """Validate and convert ObjectId to string."""
    return str(validate_object_id(v))


PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(validate_object_id),
    PlainSerializer(str, return_type=str, when_used="json"),
]

PyObjectIdStr = Annotated[str, BeforeValidator(validate_object_id_str)]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseEntity(BaseModel):
    """Base for documents stored in MongoDB; ``id`` maps to ``_id``."""

    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        use_enum_values=True,
    )
