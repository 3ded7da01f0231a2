"""
Service Results
Every service operation returns a ServiceResult instead of raising for domain outcomes.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResultStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


def to_jsonable(value: Any) -> Any:
    """Serialize models (and lists/dicts of them) to camelCase JSON data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    return value


@dataclass
class ServiceResult(Generic[T]):
    status: ResultStatus
    data: Optional[T] = None
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == ResultStatus.OK

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "ServiceResult[T]":
        return cls(ResultStatus.OK, data, message)

    @classmethod
    def not_found(cls, message: str) -> "ServiceResult[T]":
        return cls(ResultStatus.NOT_FOUND, None, message)

    @classmethod
    def invalid(cls, message: str) -> "ServiceResult[T]":
        return cls(ResultStatus.INVALID, None, message)

    def to_envelope(self) -> dict:
        """The ``{success, data, message}`` envelope consumed by the UI."""
        envelope = {"success": self.success, "data": to_jsonable(self.data)}
        if self.message:
            envelope["message"] = self.message
        return envelope
