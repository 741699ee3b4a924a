"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from telemdec import FieldDescriptor, FieldType, MessageSchema


@pytest.fixture
def sample_hex() -> str:
    """17-byte sensor report used by both built-in variants."""
    return "08108b8182342d580104de00af01020164"


@pytest.fixture
def two_field_schema() -> MessageSchema:
    """Lenient big-endian schema whose last field ends at byte 4."""
    return MessageSchema(
        name="pair",
        fields=(
            FieldDescriptor("flags", 0, 1, FieldType.UINT8),
            FieldDescriptor("reading", 2, 2, FieldType.UINT16),
        ),
    )
