from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every endpoint: {success, data?, message?}"""
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, data=None, message: Optional[str] = None) -> "ApiResponse":
        return cls(success=True, data=data, message=message)


class MessageResponse(BaseModel):
    success: bool = True
    message: str
