from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Envelope shared by every scorer endpoint, successful or not."""

    status_code: int
    data: Optional[T] = None
    detail: str

    @classmethod
    def ok(cls, data: Any, detail: str) -> "APIResponse":
        return cls(status_code=200, data=data, detail=detail)

    @classmethod
    def error(cls, status_code: int, detail: Any) -> "APIResponse":
        return cls(status_code=status_code, data=None, detail=str(detail))
