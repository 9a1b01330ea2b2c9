"""Document generation services."""

from .document_renderer import DocumentRenderer, build_filename
from .formatting import (
    calculate_stay_length,
    format_cpf,
    format_date,
    parse_date,
)
from .guest_record import (
    REQUIRED_FIELDS,
    normalize_guest_record,
    validate_required_fields,
)

__all__ = [
    "DocumentRenderer",
    "build_filename",
    "calculate_stay_length",
    "format_cpf",
    "format_date",
    "parse_date",
    "REQUIRED_FIELDS",
    "normalize_guest_record",
    "validate_required_fields",
]
