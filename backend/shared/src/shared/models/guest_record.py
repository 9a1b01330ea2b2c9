"""Guest record and rendered document models."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_GUEST_COUNT = "1"
DEFAULT_SIGNATURE_LABEL = "Confirmada digitalmente"


class GuestRecord(BaseModel):
    """Normalized guest-registration data used to render a declaration.

    Field aliases are the Portuguese keys of the incoming payload.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, frozen=True)

    name: str = Field(..., alias="nome", description="Guest full name (trimmed)")
    tax_id: str = Field(..., alias="cpf", description="CPF, digits only")
    email: str = Field(..., description="Email, trimmed and lowercased")
    accommodation_name: str = Field(
        ..., alias="acomodacao", description="Accommodation name (trimmed)"
    )
    id_document_number: str = Field(
        default="", alias="rg", description="RG number (trimmed), may be empty"
    )
    checkin_date: str = Field(
        default="", alias="checkin", description="Raw check-in date text"
    )
    checkout_date: str = Field(
        default="", alias="checkout", description="Raw check-out date text"
    )
    guest_count: str = Field(
        default=DEFAULT_GUEST_COUNT, alias="numHospedes", description="Number of guests"
    )
    phone: str = Field(default="", alias="telefone", description="Contact phone")
    signature_label: str = Field(
        default=DEFAULT_SIGNATURE_LABEL,
        alias="assinatura",
        description="Textual signature confirmation label",
    )


class RenderedDocument(BaseModel):
    """Successful document generation result.

    Serialized field names follow the JSON contract consumed by the
    downstream automation workflow.
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "success": True,
                    "html_content": "<!DOCTYPE html>...",
                    "filename": "Declaracao_Maria_Silva_1704110400000.html",
                    "data_geracao": "2024-01-01T12:00:00.000Z",
                    "hospede": "Maria Silva",
                    "acomodacao": "Chalé Vista Mar",
                }
            ]
        },
    )

    success: bool = True
    html_content: str = Field(..., description="Complete self-contained HTML document")
    filename: str = Field(..., description="Suggested file name, ends in .html")
    data_geracao: str = Field(..., description="Generation timestamp (ISO-8601, UTC)")
    hospede: str = Field(..., description="Guest name echoed back")
    acomodacao: str = Field(..., description="Accommodation name echoed back")
