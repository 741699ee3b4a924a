"""Schema-driven codec for fixed-layout telemetry records.

This module provides decoding of hex-encoded buffers into named, typed,
scaled field values, and the inverse encoding used to build test frames.
"""

from __future__ import annotations

from .config import ByteOrder, DecoderConfig
from .decoder import decode, decode_lenient, decode_strict, parse_hex
from .encoder import encode
from .record import DecodedRecord, FieldValue
from .schema import FieldDescriptor, FieldType, MessageSchema

__all__ = [
    "decode",
    "decode_lenient",
    "decode_strict",
    "parse_hex",
    "encode",
    "ByteOrder",
    "DecoderConfig",
    "DecodedRecord",
    "FieldValue",
    "FieldDescriptor",
    "FieldType",
    "MessageSchema",
]
