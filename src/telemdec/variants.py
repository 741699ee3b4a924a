"""Built-in schema variants.

Two report layouts are in use:

- ``device-id``: big-endian integers, a 2-byte hex device id, no length gate.
- ``mac``: little-endian integers, a 6-byte MAC address, and a strict 17-byte
  (34 hex character) length gate.

Both are immutable MessageSchema values shared by every decode call.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .codec.config import ByteOrder, DecoderConfig
from .codec.schema import FieldDescriptor, FieldType, MessageSchema
from .exceptions import SchemaError

MAC_FRAME_LENGTH = 17

DEVICE_ID_SCHEMA = MessageSchema(
    name="device-id",
    fields=(
        FieldDescriptor("length", 0, 1, FieldType.UINT8),
        FieldDescriptor("messageType", 1, 1, FieldType.UINT8),
        FieldDescriptor("deviceId", 2, 2, FieldType.HEX),
        FieldDescriptor("temperature", 10, 2, FieldType.INT16, scale=0.1),
        FieldDescriptor("humidity", 12, 2, FieldType.UINT16, scale=0.1),
        FieldDescriptor("battery", 8, 1, FieldType.UINT8),
    ),
    config=DecoderConfig(byte_order=ByteOrder.BIG),
)

MAC_SCHEMA = MessageSchema(
    name="mac",
    fields=(
        FieldDescriptor("length", 0, 1, FieldType.UINT8),
        FieldDescriptor("messageType", 1, 1, FieldType.UINT8),
        FieldDescriptor("mac", 2, 6, FieldType.MAC),
        FieldDescriptor("battery", 8, 1, FieldType.UINT8),
        FieldDescriptor("temperature", 10, 2, FieldType.INT16, scale=0.1),
        FieldDescriptor("humidity", 12, 2, FieldType.UINT16, scale=0.1),
    ),
    config=DecoderConfig(byte_order=ByteOrder.LITTLE, expected_length=MAC_FRAME_LENGTH),
)

VARIANTS: Mapping[str, MessageSchema] = MappingProxyType(
    {
        DEVICE_ID_SCHEMA.name: DEVICE_ID_SCHEMA,
        MAC_SCHEMA.name: MAC_SCHEMA,
    }
)


def get_variant(name: str) -> MessageSchema:
    """Look up a built-in schema by name.

    Raises:
        SchemaError: If no variant has that name
    """
    try:
        return VARIANTS[name]
    except KeyError:
        raise SchemaError(
            f"Unknown schema variant {name!r}; available: {', '.join(sorted(VARIANTS))}"
        ) from None
