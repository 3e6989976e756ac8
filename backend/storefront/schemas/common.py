from typing import Any, Dict, Generic, TypeVar
from fastapi import status
from pydantic import BaseModel, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Envelope for successful responses."""
    data: T


class ErrorResponse(BaseModel):
    """Envelope for error responses."""
    error: str
    code: str
    details: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Cart not found",
                "code": "CART_NOT_FOUND",
                "details": {}
            }
        }


class MessageResponse(BaseModel):
    message: str


# Error envelopes documented on every API router
ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
