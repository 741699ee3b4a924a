"""Schema-driven decoder for fixed-layout telemetry records.

This module provides the decode() function that turns a hex-encoded buffer
into a DecodedRecord according to a MessageSchema. Decoding is a pure,
single-pass function of (schema, buffer): it performs no I/O and keeps no
state between calls.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping, Sequence, Union, cast

from ..exceptions import BoundsError, DecodeError, MalformedInputError
from .config import ByteOrder, DecoderConfig
from .record import DecodedRecord, FieldValue
from .schema import FieldDescriptor, FieldType, MessageSchema

SchemaLike = Union[MessageSchema, Sequence[Mapping[str, Any]]]

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def decode(data: str | bytes | None, schema: SchemaLike) -> DecodedRecord | None:
    """Decode a buffer into named, typed, scaled field values.

    Fields are extracted in schema order. For each field the byte window
    ``[offset, offset + length)`` is interpreted according to the field's type
    and the schema's byte order, then numeric values with a nonzero scale are
    multiplied by it and rounded to the configured precision.

    Args:
        data: Hex string (``0-9a-f``/``A-F``, even length) or raw bytes
        schema: MessageSchema, or a sequence of field mappings which is
            compiled into a lenient big-endian schema first

    Returns:
        DecodedRecord keyed by field name in schema order, or ``None`` when the
        schema is in strict-length mode and the input is empty or not exactly
        the expected length

    Raises:
        UnsupportedTypeError: If a field mapping names an unknown type
        MalformedInputError: If the hex text cannot be parsed into bytes
        BoundsError: If a field's window runs past the end of the buffer

    Examples:
        ```python
        from telemdec import DEVICE_ID_SCHEMA, MAC_SCHEMA, decode

        record = decode("08108b8182342d580104de00af01020164", DEVICE_ID_SCHEMA)
        record["deviceId"]     # '8b81'
        record["temperature"]  # -870.4

        # Strict-length variant: wrong length is a soft failure
        decode("0810", MAC_SCHEMA)  # None
        ```
    """
    if not isinstance(schema, MessageSchema):
        schema = MessageSchema.from_dicts(schema)

    config = schema.config
    if config.strict and not _passes_length_gate(data, config):
        return None

    buffer = data if isinstance(data, (bytes, bytearray)) else parse_hex(data)

    values: dict[str, FieldValue] = {}
    for descriptor in schema.fields:
        values[descriptor.name] = _decode_field(buffer, descriptor, config)

    return DecodedRecord(schema, values)


def decode_lenient(data: str | bytes, schema: MessageSchema) -> DecodedRecord:
    """Decode without the upfront length gate.

    The schema's byte order and precision are kept; any ``expected_length`` it
    carries is ignored, so a short buffer raises BoundsError instead of
    returning ``None``.
    """
    lenient = _with_config(
        schema, DecoderConfig(schema.config.byte_order, None, schema.config.precision)
    )
    return cast(DecodedRecord, decode(data, lenient))


def decode_strict(
    data: str | bytes | None, schema: MessageSchema, expected_length: int
) -> DecodedRecord | None:
    """Decode behind a length gate of exactly ``expected_length`` bytes.

    Returns:
        DecodedRecord, or ``None`` if the input is empty or the wrong length
    """
    strict = _with_config(
        schema,
        DecoderConfig(schema.config.byte_order, expected_length, schema.config.precision),
    )
    return decode(data, strict)


def parse_hex(text: str | None) -> bytes:
    """Parse hex text into bytes.

    Unlike ``bytes.fromhex`` this rejects whitespace: the input must be an
    even number of hex digits and nothing else.

    Raises:
        MalformedInputError: If the text is not valid hex
    """
    if not isinstance(text, str):
        raise MalformedInputError(f"Expected hex string, got {type(text).__name__}")
    if len(text) % 2:
        raise MalformedInputError(f"Hex input has odd length {len(text)}")
    if not _HEX_RE.fullmatch(text):
        raise MalformedInputError(f"Hex input contains non-hex characters: {text!r}")
    return bytes.fromhex(text)


def _passes_length_gate(data: str | bytes | None, config: DecoderConfig) -> bool:
    if not data:
        return False
    if isinstance(data, (bytes, bytearray)):
        return len(data) == config.expected_length
    return len(data) == config.expected_hex_length


def _decode_field(buffer: bytes, descriptor: FieldDescriptor, config: DecoderConfig) -> FieldValue:
    """Decode a single field value.

    Raises:
        BoundsError: If the field's window is not inside the buffer
    """
    if descriptor.end > len(buffer):
        raise BoundsError(descriptor.name, descriptor.offset, descriptor.length, len(buffer))

    reader = _READERS[descriptor.type]
    value: FieldValue = reader(buffer, descriptor, config.byte_order)

    if descriptor.scaled:
        value = _apply_scale(value, descriptor, config.precision)

    return value


def _apply_scale(raw: FieldValue, descriptor: FieldDescriptor, precision: int) -> float:
    """Multiply by scale and round to ``precision`` decimal places.

    Rounds ``raw * scale * 10**precision`` to the nearest integer (ties to
    even) and divides back, so -8704 * 0.1 becomes exactly -870.4.

    Raises:
        DecodeError: If the scaled value is too large to round
    """
    factor = 10**precision
    try:
        return round(raw * cast(float, descriptor.scale) * factor) / factor
    except OverflowError as e:
        raise DecodeError(
            f"Field {descriptor.name}: scaled value {raw} x {descriptor.scale} overflows"
        ) from e


def _read_int(buffer: bytes, descriptor: FieldDescriptor, byte_order: ByteOrder) -> int:
    width = cast(int, descriptor.type.width)
    end = descriptor.offset + width
    if end > len(buffer):
        raise BoundsError(descriptor.name, descriptor.offset, width, len(buffer))
    return int.from_bytes(
        buffer[descriptor.offset : end], byte_order.value, signed=descriptor.type.signed
    )


def _read_hex(buffer: bytes, descriptor: FieldDescriptor, byte_order: ByteOrder) -> str:
    return buffer[descriptor.offset : descriptor.end].hex()


def _read_mac(buffer: bytes, descriptor: FieldDescriptor, byte_order: ByteOrder) -> str:
    window = buffer[descriptor.offset : descriptor.end]
    return ":".join(f"{byte:02x}" for byte in reversed(window))


_READERS: dict[FieldType, Callable[[bytes, FieldDescriptor, ByteOrder], FieldValue]] = {
    FieldType.UINT8: _read_int,
    FieldType.INT16: _read_int,
    FieldType.UINT16: _read_int,
    FieldType.HEX: _read_hex,
    FieldType.MAC: _read_mac,
}


def _with_config(schema: MessageSchema, config: DecoderConfig) -> MessageSchema:
    return MessageSchema(fields=schema.fields, config=config, name=schema.name)
