"""Standard error codes for the document generator.

Every failure surfaced to the caller maps to one of these codes. Messages are
kept in Portuguese because the HTTP contract returns them verbatim.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Error codes for document generation failures."""

    METHOD_NOT_ALLOWED = "ERR_DOC_001"
    MISSING_FIELD = "ERR_DOC_002"
    INTERNAL_ERROR = "ERR_DOC_003"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.METHOD_NOT_ALLOWED: "Método não permitido",
    ErrorCode.MISSING_FIELD: "Campo obrigatório ausente",
    ErrorCode.INTERNAL_ERROR: "Erro ao gerar documento",
}


class ErrorResponse(BaseModel):
    """Body returned for method and validation failures (405/400)."""

    model_config = ConfigDict(strict=True)

    error: str


class InternalErrorResponse(BaseModel):
    """Body returned for unexpected failures (500)."""

    model_config = ConfigDict(strict=True)

    error: str
    timestamp: str


class DocumentError(Exception):
    """Exception raised when a document request cannot be served.

    Caught by the API layer and converted to an ErrorResponse.
    """

    def __init__(
        self,
        code: ErrorCode,
        field: Optional[str] = None,
    ):
        self.code = code
        self.field = field
        if field:
            self.message = f"{ERROR_MESSAGES[code]}: {field}"
        else:
            self.message = ERROR_MESSAGES[code]
        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to the JSON error body."""
        return ErrorResponse(error=self.message)
