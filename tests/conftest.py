"""
Test configuration and fixtures for dynaform tests.
"""

import io
import pytest
from datetime import date
from typing import Dict, Any
from unittest.mock import Mock

from dynaform.application.services import FormSession
from dynaform.domain.form import build_default_schema
from dynaform.shared.logging import LogLevel, configure_logging
from dynaform.shared.validation import ValidationEngine

FIXED_TODAY = date(2026, 10, 19)


@pytest.fixture
def today() -> date:
    """Pinned current date."""
    return FIXED_TODAY


@pytest.fixture
def clock(today):
    """Clock pinned to a known date so age checks are deterministic."""
    return lambda: today


@pytest.fixture
def schema(clock):
    """Registration schema using the fixed clock."""
    return build_default_schema(clock=clock)


@pytest.fixture
def engine() -> ValidationEngine:
    """Validation engine instance."""
    return ValidationEngine()


@pytest.fixture
def log_stream() -> io.StringIO:
    """Stream capturing structured log lines."""
    return io.StringIO()


@pytest.fixture
def logger(log_stream):
    """Structured logger writing to an in-memory stream."""
    return configure_logging("dynaform.test", level=LogLevel.DEBUG, output=log_stream)


@pytest.fixture
def mock_sink():
    """Mock submission sink."""
    return Mock()


@pytest.fixture
def session(schema, mock_sink, logger) -> FormSession:
    """Form session over the registration schema with a mock sink."""
    return FormSession(schema, sink=mock_sink, logger=logger)


@pytest.fixture
def valid_values() -> Dict[str, Any]:
    """Typed value-set satisfying every rule of the registration schema."""
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "5551234567",
        "age": 30,
        "address": "12 Analytical Way",
        "city": "London",
        "state": "Texas",
        "zip": "12345",
        "country": "UK",
        "username": "ada_l",
        "password": "engine123",
        "confirmPassword": "engine123",
        "dob": "1990-12-10",
        "gender": "Female",
        "subscribe": True,
        "comments": "",
        "emergencyContact": "5559876543",
        "relation": "Friend",
        "salary": 50000,
    }
