"""Pytest configuration and fixtures for the guest declaration backend tests.

This module provides reusable fixtures for testing:
- Deterministic environment (timezone, autoescape)
- Sample guest-registration payloads
- A fixed generation instant
"""

import datetime as dt
import os
from typing import Any, Generator

import pytest

# === Environment Setup ===

# Set before any renderer is built so cached services pick them up
os.environ.setdefault("DOCUMENT_TIMEZONE", "America/Sao_Paulo")
os.environ.setdefault("DOCUMENT_AUTOESCAPE", "false")


# === Service Fixtures ===


@pytest.fixture(autouse=True)
def reset_cached_services() -> Generator[None, None, None]:
    """Clear cached service instances before and after each test."""
    from api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === Sample Data Fixtures ===


@pytest.fixture
def guest_payload() -> dict[str, Any]:
    """Complete guest-registration payload with Portuguese keys."""
    return {
        "nome": "  Maria da Silva  ",
        "cpf": "123.456.789-01",
        "email": "  Maria.Silva@Example.COM ",
        "acomodacao": " Chalé Vista Mar ",
        "rg": " 12.345.678-9 ",
        "checkin": "2024-01-01",
        "checkout": "2024-01-04",
        "numHospedes": "2",
        "telefone": "(48) 99999-0000",
        "assinatura": "Confirmada digitalmente",
    }


@pytest.fixture
def minimal_payload() -> dict[str, Any]:
    """Payload with only the required fields."""
    return {
        "nome": "João Souza",
        "cpf": "98765432100",
        "email": "joao@example.com",
        "acomodacao": "Suíte 12",
    }


@pytest.fixture
def fixed_now() -> dt.datetime:
    """Generation instant: 2024-01-01 15:00 UTC (12:00 in São Paulo)."""
    return dt.datetime(2024, 1, 1, 15, 0, tzinfo=dt.UTC)
