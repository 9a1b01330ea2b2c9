"""Pydantic models for guest declaration documents."""

from .errors import (
    DocumentError,
    ErrorCode,
    ErrorResponse,
    InternalErrorResponse,
)
from .guest_record import (
    DEFAULT_GUEST_COUNT,
    DEFAULT_SIGNATURE_LABEL,
    GuestRecord,
    RenderedDocument,
)

__all__ = [
    # Errors
    "DocumentError",
    "ErrorCode",
    "ErrorResponse",
    "InternalErrorResponse",
    # Guest record
    "DEFAULT_GUEST_COUNT",
    "DEFAULT_SIGNATURE_LABEL",
    "GuestRecord",
    "RenderedDocument",
]
