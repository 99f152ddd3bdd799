"""Generic response envelope."""
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResponseMessage(BaseModel, Generic[T]):
    """Message envelope, currently used for error responses only."""

    message: str
    content: Optional[T] = None

    def to_json(self) -> Dict[str, Any]:
        """Serialize, leaving ``content`` out entirely when it is empty."""
        return self.model_dump(mode="json", exclude_none=True)
