"""telemdec: Schema-driven Telemetry Decoder

A Python library for decoding fixed-layout binary telemetry reports
(hex-encoded byte buffers) into named, typed, scaled fields according to a
declarative schema. Designed for sensor and IoT report parsing where the
message layout is static and known ahead of time.

Key Features:
- Immutable schemas built from field descriptors (or JSON documents)
- uint8, int16, uint16, hex and MAC address fields
- Big- or little-endian integers, optional scaling with fixed rounding
- Lenient or strict-length validation per schema

Quick Start:
    >>> from telemdec import DEVICE_ID_SCHEMA, decode
    >>>
    >>> record = decode("08108b8182342d580104de00af01020164", DEVICE_ID_SCHEMA)
    >>> record["deviceId"]
    '8b81'
    >>> record["temperature"]
    -870.4
"""

from __future__ import annotations

from .codec import (
    ByteOrder,
    DecodedRecord,
    DecoderConfig,
    FieldDescriptor,
    FieldType,
    FieldValue,
    MessageSchema,
    decode,
    decode_lenient,
    decode_strict,
    encode,
    parse_hex,
)
from .exceptions import (
    BoundsError,
    DecodeError,
    EncodeError,
    MalformedInputError,
    SchemaError,
    TelemdecError,
    UnsupportedTypeError,
)
from .models import FieldModel, SchemaModel, load_schema, schema_to_model
from .utils import coverage, field_sizes, required_length
from .variants import DEVICE_ID_SCHEMA, MAC_SCHEMA, VARIANTS, get_variant

__version__ = "0.1.0"

__all__ = [
    # Core API
    "decode",
    "decode_lenient",
    "decode_strict",
    "encode",
    "parse_hex",
    # Schema model
    "ByteOrder",
    "DecoderConfig",
    "FieldDescriptor",
    "FieldType",
    "MessageSchema",
    "DecodedRecord",
    "FieldValue",
    # Built-in variants
    "DEVICE_ID_SCHEMA",
    "MAC_SCHEMA",
    "VARIANTS",
    "get_variant",
    # Schema documents
    "FieldModel",
    "SchemaModel",
    "load_schema",
    "schema_to_model",
    # Sizing
    "required_length",
    "field_sizes",
    "coverage",
    # Exceptions
    "TelemdecError",
    "SchemaError",
    "UnsupportedTypeError",
    "DecodeError",
    "BoundsError",
    "MalformedInputError",
    "EncodeError",
    # Version
    "__version__",
]
