"""Unit tests for display formatting helpers.

Covers CPF grouping, DD/MM/YYYY date display and stay-length arithmetic.
"""

import datetime as dt
from zoneinfo import ZoneInfo

import pytest

from shared.services.formatting import (
    calculate_stay_length,
    digits_only,
    format_cpf,
    format_date,
    parse_date,
    to_epoch_millis,
    to_iso_timestamp,
)


class TestFormatCpf:
    """Tests for CPF display formatting."""

    def test_formats_eleven_digits(self) -> None:
        """11 digits are grouped as XXX.XXX.XXX-XX."""
        assert format_cpf("12345678901") == "123.456.789-01"

    def test_stripped_punctuated_cpf_round_trips(self) -> None:
        """A punctuated CPF reduced to digits formats back to the same text."""
        digits = digits_only("123.456.789-01")

        assert digits == "12345678901"
        assert format_cpf(digits) == "123.456.789-01"

    def test_short_value_passes_through(self) -> None:
        """Fewer than 11 digits are returned unformatted."""
        assert format_cpf("123") == "123"
        assert format_cpf("") == ""

    def test_only_first_eleven_digits_are_grouped(self) -> None:
        """Extra digits stay appended after the formatted prefix."""
        assert format_cpf("123456789012") == "123.456.789-012"


class TestParseDate:
    """Tests for date parsing."""

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "not a date", "2024-13-45", "31/02/2024"],
    )
    def test_invalid_returns_none(self, text: str) -> None:
        """Empty or invalid text yields None."""
        assert parse_date(text) is None

    def test_iso_date(self) -> None:
        """ISO dates parse to midnight."""
        assert parse_date("2024-01-04") == dt.datetime(2024, 1, 4)

    def test_iso_datetime_with_zulu(self) -> None:
        """Zulu suffix produces an aware UTC datetime."""
        parsed = parse_date("2024-01-04T14:30:00Z")

        assert parsed is not None
        assert parsed.tzinfo is not None
        assert parsed.utcoffset() == dt.timedelta(0)

    def test_brazilian_format(self) -> None:
        """DD/MM/YYYY is read day-first."""
        assert parse_date("04/01/2024") == dt.datetime(2024, 1, 4)


class TestFormatDate:
    """Tests for DD/MM/YYYY display."""

    def test_iso_date_is_reformatted(self) -> None:
        assert format_date("2024-01-04") == "04/01/2024"

    def test_unparsable_value_passes_through(self) -> None:
        """Unparsable text comes back unchanged."""
        assert format_date("próxima sexta") == "próxima sexta"
        assert format_date("") == ""

    def test_pass_through_is_idempotent(self) -> None:
        once = format_date("amanhã")
        assert format_date(once) == once

    def test_aware_datetime_uses_display_timezone(self) -> None:
        """01:00 UTC on the 4th is still the 3rd in São Paulo."""
        tz = ZoneInfo("America/Sao_Paulo")

        assert format_date("2024-01-04T01:00:00Z", tz) == "03/01/2024"

    def test_naive_datetime_ignores_timezone(self) -> None:
        tz = ZoneInfo("America/Sao_Paulo")

        assert format_date("2024-01-04T01:00:00", tz) == "04/01/2024"


class TestCalculateStayLength:
    """Tests for whole-day stay length."""

    def test_three_nights(self) -> None:
        assert calculate_stay_length("2024-01-01", "2024-01-04") == 3

    def test_fractional_day_rounds_up(self) -> None:
        """26 hours counts as two days."""
        assert calculate_stay_length("2024-01-01T10:00:00", "2024-01-02T12:00:00") == 2

    def test_brazilian_dates(self) -> None:
        assert calculate_stay_length("01/01/2024", "04/01/2024") == 3

    def test_checkout_before_checkin_defaults_to_one(self) -> None:
        assert calculate_stay_length("2024-01-04", "2024-01-01") == 1

    def test_same_day_defaults_to_one(self) -> None:
        assert calculate_stay_length("2024-01-01", "2024-01-01") == 1

    @pytest.mark.parametrize(
        ("checkin", "checkout"),
        [
            ("", "2024-01-04"),
            ("2024-01-01", ""),
            ("", ""),
            ("ontem", "2024-01-04"),
            ("2024-01-01", "depois"),
        ],
    )
    def test_missing_or_unparsable_defaults_to_one(
        self, checkin: str, checkout: str
    ) -> None:
        """Any missing or unparsable date yields exactly 1."""
        assert calculate_stay_length(checkin, checkout) == 1

    def test_mixed_naive_and_aware(self) -> None:
        """Naive side is taken as UTC instead of raising."""
        assert calculate_stay_length("2024-01-01", "2024-01-03T00:00:00Z") == 2


class TestTimestamps:
    """Tests for ISO and epoch helpers."""

    def test_iso_timestamp_has_millis_and_zulu(self) -> None:
        moment = dt.datetime(2024, 1, 1, 15, 0, tzinfo=dt.UTC)

        assert to_iso_timestamp(moment) == "2024-01-01T15:00:00.000Z"

    def test_iso_timestamp_converts_offsets(self) -> None:
        moment = dt.datetime(2024, 1, 1, 12, 0, tzinfo=ZoneInfo("America/Sao_Paulo"))

        assert to_iso_timestamp(moment) == "2024-01-01T15:00:00.000Z"

    def test_epoch_millis(self) -> None:
        moment = dt.datetime(2024, 1, 1, 15, 0, tzinfo=dt.UTC)

        assert to_epoch_millis(moment) == 1704121200000
