"""
Error taxonomy for storefront operations.

Every error carries a stable machine-readable code, a human-readable
message and the HTTP status the API layer answers with.
"""
from typing import Any, Dict, Optional
from fastapi import status


class StoreError(Exception):
    """Base class for all errors raised by the storefront core."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code: str = "UNKNOWN_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Render the error envelope returned to API clients."""
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details
        }


class NotFoundError(StoreError):
    """A cart, product, item, order or discount code does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "NOT_FOUND"


class ValidationError(StoreError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "INVALID_INPUT"


class BusinessRuleViolation(StoreError):
    """Input is well formed but breaks a storefront rule."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "BUSINESS_RULE_VIOLATION"


class EnvironmentRestriction(StoreError):
    """Operation is not permitted in the current deployment mode."""
    status_code = status.HTTP_403_FORBIDDEN
    default_code = "ENVIRONMENT_RESTRICTED"


class InternalError(StoreError):
    """Unexpected failure while processing a request."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = "INTERNAL_ERROR"
