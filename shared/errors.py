"""
Shared error handling for the Items Access Layer.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel

from shared.logging import get_request_id


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class AccessLayerException(Exception):
    """Base exception for Items Access Layer components."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=get_request_id(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class ItemNotFoundError(AccessLayerException):
    """No item stored under the requested identifier."""

    def __init__(self, item_id: str, details: Optional[Dict[str, Any]] = None):
        self.item_id = item_id
        super().__init__("ITEM_NOT_FOUND", f"None item found with ID {item_id}", details)


class OriginRequestError(AccessLayerException):
    """The origin request failed at the transport level or with a non-2xx status.

    The message is the underlying cause, unmodified.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("ORIGIN_REQUEST_FAILED", message, details)

    @property
    def status_code(self) -> Optional[int]:
        return self.details.get("status_code")
