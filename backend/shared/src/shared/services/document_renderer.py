"""Renderer for the guest responsibility declaration.

Turns a raw guest-registration payload into a self-contained HTML document
(inline CSS, no external resources) plus delivery metadata. Steps run in
order and any failure aborts before HTML is returned:

1. Validate required fields
2. Normalize field values
3. Render the Jinja2 template with computed stay length, CPF and dates

User-supplied strings are interpolated without HTML escaping unless
autoescape is enabled (DOCUMENT_AUTOESCAPE).
"""

import datetime as dt
import re
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

from shared.config import env_flag, get_timezone
from shared.models import GuestRecord, RenderedDocument
from shared.services.formatting import (
    calculate_stay_length,
    format_cpf,
    format_date,
    to_epoch_millis,
    to_iso_timestamp,
)
from shared.services.guest_record import normalize_guest_record, validate_required_fields
from shared.utils.logging import get_logger, log_document_event

logger = get_logger(__name__)

TEMPLATE_NAME = "declaracao_responsabilidade.html"
FILENAME_PREFIX = "Declaracao"

_WHITESPACE = re.compile(r"\s+")


def build_filename(name: str, moment: dt.datetime) -> str:
    """Suggested file name: Declaracao_<name>_<epoch millis>.html.

    Whitespace runs in the name become a single underscore.
    """
    safe_name = _WHITESPACE.sub("_", name)
    return f"{FILENAME_PREFIX}_{safe_name}_{to_epoch_millis(moment)}.html"


class DocumentRenderer:
    """Renders guest declarations from the packaged HTML template.

    Usage:
        renderer = DocumentRenderer()
        document = renderer.generate({"nome": "Maria", ...})
    """

    def __init__(
        self,
        timezone: str | None = None,
        autoescape: bool | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            timezone: IANA name for "today" and aware-date display
                (default: DOCUMENT_TIMEZONE env var, then America/Sao_Paulo)
            autoescape: HTML-escape user values
                (default: DOCUMENT_AUTOESCAPE env var, then False)
        """
        self.tz = get_timezone(timezone)
        self.autoescape = (
            autoescape if autoescape is not None else env_flag("DOCUMENT_AUTOESCAPE")
        )

        self._env = Environment(
            loader=PackageLoader("shared", "templates"),
            autoescape=self.autoescape,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self._env.filters["display_date"] = self.format_date

    def format_date(self, value: str) -> str:
        """Format date text as DD/MM/YYYY in the renderer's timezone."""
        return format_date(value, self.tz)

    def render_html(self, guest: GuestRecord, now: dt.datetime) -> str:
        """Render the declaration HTML for a normalized guest record.

        Args:
            guest: Normalized guest record
            now: Generation instant (aware)

        Returns:
            Complete HTML document
        """
        template = self._env.get_template(TEMPLATE_NAME)
        context = self._build_context(guest, now)
        return template.render(**context)

    def _build_context(self, guest: GuestRecord, now: dt.datetime) -> dict[str, Any]:
        return {
            "guest": guest,
            "formatted_tax_id": format_cpf(guest.tax_id),
            "stay_length": calculate_stay_length(guest.checkin_date, guest.checkout_date),
            "today": now.astimezone(self.tz).strftime("%d/%m/%Y"),
        }

    def generate(
        self,
        payload: Mapping[str, Any],
        now: dt.datetime | None = None,
    ) -> RenderedDocument:
        """Validate, normalize and render a raw guest payload.

        Args:
            payload: Raw request body with Portuguese field keys
            now: Generation instant, defaults to the current UTC time

        Returns:
            RenderedDocument with HTML and delivery metadata

        Raises:
            DocumentError: MISSING_FIELD when a required field is absent.
        """
        validate_required_fields(payload)
        guest = normalize_guest_record(payload)

        moment = now or dt.datetime.now(dt.UTC)
        html = self.render_html(guest, moment)
        filename = build_filename(guest.name, moment)

        log_document_event(
            logger,
            "render",
            guest=guest.name,
            accommodation=guest.accommodation_name,
            filename=filename,
            characters=len(html),
        )

        return RenderedDocument(
            html_content=html,
            filename=filename,
            data_geracao=to_iso_timestamp(moment),
            hospede=guest.name,
            acomodacao=guest.accommodation_name,
        )
