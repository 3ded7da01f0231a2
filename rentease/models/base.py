"""
Entity Base Model
Shared config for every persisted entity: camelCase on the wire, snake_case in Python
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_id(prefix: str) -> str:
    """Return a collision-free id such as ``prop-3f2a...``."""
    return f"{prefix}-{uuid.uuid4().hex}"


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current time, nudged past ``previous`` so updates always move forward."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )


class EntityModel(CamelModel):
    """Entity with id and created/updated timestamps."""
    id: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
