"""Record encoder, the inverse of decode().

This module provides the encode() function that writes field values back into
a schema's byte layout. It exists mainly to build test frames and to check
that decoding round-trips.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, cast

from ..exceptions import EncodeError
from .config import ByteOrder
from .schema import FieldDescriptor, FieldType, MessageSchema

_MAC_RE = re.compile(r"[0-9a-fA-F]{2}(:[0-9a-fA-F]{2})*")


def encode(values: Mapping[str, Any], schema: MessageSchema) -> str:
    """Encode field values into a lowercase hex string.

    The buffer is zero-filled and sized to ``schema.config.expected_length``
    in strict mode, otherwise to ``schema.required_length()``. Fields are
    written in schema order, so a later overlapping field overwrites an
    earlier one.

    Args:
        values: Mapping of field name to value (e.g. a DecodedRecord)
        schema: Schema describing the layout

    Returns:
        Lowercase hex text of the encoded buffer

    Raises:
        EncodeError: If a value is missing, malformed or out of range

    Example:
        >>> encode({"length": 8, "temperature": -870.4}, schema)
        '08000000000000000000de00'
    """
    size = schema.config.expected_length or schema.required_length()
    if size < schema.required_length():
        raise EncodeError(
            f"Schema {schema.name}: expected_length {size} is shorter than "
            f"the {schema.required_length()} bytes its fields need"
        )
    buffer = bytearray(size)

    for descriptor in schema.fields:
        if descriptor.name not in values:
            raise EncodeError(f"Missing value for field {descriptor.name}")
        raw = _encode_field(values[descriptor.name], descriptor, schema.config.byte_order)
        buffer[descriptor.offset : descriptor.offset + len(raw)] = raw

    return buffer.hex()


def _encode_field(value: Any, descriptor: FieldDescriptor, byte_order: ByteOrder) -> bytes:
    """Encode a single field value.

    Raises:
        EncodeError: If the value does not fit the field
    """
    field_type = descriptor.type

    if field_type.is_numeric:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EncodeError(
                f"Field {descriptor.name}: expected a number, got {type(value).__name__}"
            )
        try:
            raw = round(value / cast(float, descriptor.scale)) if descriptor.scaled else value
        except (OverflowError, ValueError) as e:
            raise EncodeError(f"Field {descriptor.name}: cannot scale {value}") from e
        if isinstance(raw, float):
            if not raw.is_integer():
                raise EncodeError(f"Field {descriptor.name}: {value} is not an integer")
            raw = int(raw)
        width = cast(int, field_type.width)
        try:
            return raw.to_bytes(width, byte_order.value, signed=field_type.signed)
        except OverflowError as e:
            raise EncodeError(
                f"Field {descriptor.name}: value {raw} out of range for {field_type.value}"
            ) from e

    if field_type is FieldType.HEX:
        try:
            raw_bytes = bytes.fromhex(value)
        except (TypeError, ValueError) as e:
            raise EncodeError(f"Field {descriptor.name}: invalid hex {value!r}") from e
        if len(raw_bytes) != descriptor.length:
            raise EncodeError(
                f"Field {descriptor.name}: expected {descriptor.length} bytes, got {len(raw_bytes)}"
            )
        return raw_bytes

    if field_type is FieldType.MAC:
        if not isinstance(value, str) or not _MAC_RE.fullmatch(value):
            raise EncodeError(f"Field {descriptor.name}: invalid MAC address {value!r}")
        raw_bytes = bytes(int(pair, 16) for pair in value.split(":"))
        if len(raw_bytes) != descriptor.length:
            raise EncodeError(
                f"Field {descriptor.name}: expected {descriptor.length} bytes, got {len(raw_bytes)}"
            )
        # Stored byte-reversed relative to the text form
        return raw_bytes[::-1]

    raise EncodeError(f"Field {descriptor.name}: unsupported type {field_type}")
