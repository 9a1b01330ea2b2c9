"""Validation and normalization of raw guest-registration payloads."""

from collections.abc import Mapping
from typing import Any

from shared.models import (
    DEFAULT_GUEST_COUNT,
    DEFAULT_SIGNATURE_LABEL,
    DocumentError,
    ErrorCode,
    GuestRecord,
)
from shared.services.formatting import digits_only
from shared.utils.logging import get_logger, log_document_event

logger = get_logger(__name__)

# Checked in this order; the first missing one is reported
REQUIRED_FIELDS: tuple[str, ...] = ("nome", "cpf", "email", "acomodacao")


def _is_present(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def _as_text(value: Any) -> str:
    """Coerce a loosely-typed JSON value to text.

    Missing/falsy values become "". Numbers keep their JSON spelling
    (2.0 -> "2"), booleans render lowercase.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def validate_required_fields(payload: Mapping[str, Any]) -> None:
    """Ensure every required field is present and non-empty.

    Args:
        payload: Raw request body

    Raises:
        DocumentError: MISSING_FIELD naming the first absent field.
    """
    for field in REQUIRED_FIELDS:
        if not _is_present(payload.get(field)):
            log_document_event(logger, "validate", field=field, payload=repr(payload))
            raise DocumentError(ErrorCode.MISSING_FIELD, field=field)


def normalize_guest_record(payload: Mapping[str, Any]) -> GuestRecord:
    """Build a cleaned GuestRecord from a raw payload.

    Never fails for missing optional fields; they normalize to "" or
    their documented default.
    """
    return GuestRecord(
        name=_as_text(payload.get("nome")).strip(),
        id_document_number=_as_text(payload.get("rg")).strip(),
        tax_id=digits_only(_as_text(payload.get("cpf"))),
        email=_as_text(payload.get("email")).strip().lower(),
        accommodation_name=_as_text(payload.get("acomodacao")).strip(),
        checkin_date=_as_text(payload.get("checkin") or ""),
        checkout_date=_as_text(payload.get("checkout") or ""),
        guest_count=_as_text(payload.get("numHospedes") or DEFAULT_GUEST_COUNT),
        phone=_as_text(payload.get("telefone") or ""),
        signature_label=_as_text(payload.get("assinatura") or DEFAULT_SIGNATURE_LABEL),
    )
