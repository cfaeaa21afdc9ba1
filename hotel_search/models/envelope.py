# hotel_search/models/envelope.py

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """
    Uniform wrapper around every listing response.

    `count` always equals `len(data)`; `data` is an empty list (never null)
    when there are no rows, and on failure. `error` is only set when
    `success` is false.
    """

    success: bool
    data: List[T] = Field(default_factory=list)
    count: int = 0
    error: Optional[str] = None

    @classmethod
    def ok(cls, items: List[T]) -> "ListResponse[T]":
        return cls(success=True, data=list(items), count=len(items))

    @classmethod
    def fail(cls, message: str) -> "ListResponse[T]":
        return cls(success=False, data=[], count=0, error=message)

    def to_json(self) -> Dict[str, Any]:
        """JSON-ready dict; `error` is omitted on success."""
        exclude = {"error"} if self.error is None else None
        return self.model_dump(mode="json", exclude=exclude)
