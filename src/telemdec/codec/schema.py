"""Schema model for fixed-layout telemetry records.

This module defines the closed set of field types, the per-field descriptor
and the immutable message schema that the decoder walks. Schemas are plain
value objects: construct them once and pass them explicitly into decode calls.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping

from ..exceptions import SchemaError, UnsupportedTypeError
from .config import ByteOrder, DecoderConfig


class FieldType(str, enum.Enum):
    """Supported field interpretations.

    Members:
        UINT8: single unsigned byte, 0-255
        INT16: signed 16-bit integer in the schema's byte order
        UINT16: unsigned 16-bit integer in the schema's byte order
        HEX: raw bytes rendered as lowercase hex, no separators
        MAC: raw bytes reversed, rendered as colon-separated lowercase hex pairs
    """

    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    HEX = "hex"
    MAC = "mac"

    @classmethod
    def parse(cls, value: Any, field_name: str | None = None) -> FieldType:
        """Convert a type name to a FieldType.

        Raises:
            UnsupportedTypeError: If the name is not one of the supported types
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedTypeError(value, field_name) from e

    @property
    def width(self) -> int | None:
        """Natural byte width, or None for variable-width types."""
        return _WIDTHS[self]

    @property
    def is_numeric(self) -> bool:
        """Whether values of this type are integers (and therefore scalable)."""
        return self in (FieldType.UINT8, FieldType.INT16, FieldType.UINT16)

    @property
    def signed(self) -> bool:
        return self is FieldType.INT16


_WIDTHS: dict[FieldType, int | None] = {
    FieldType.UINT8: 1,
    FieldType.INT16: 2,
    FieldType.UINT16: 2,
    FieldType.HEX: None,
    FieldType.MAC: 6,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """Location and interpretation of a single field.

    Attributes:
        name: Output key for the decoded value
        offset: Byte offset of the field's first byte
        length: Number of bytes the field occupies
        type: Field interpretation (a FieldType or its string name)
        scale: Optional multiplier for numeric fields. ``None`` and ``0``
            both mean "no scaling".
    """

    name: str
    offset: int
    length: int
    type: FieldType
    scale: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise SchemaError(f"Field name must be a non-empty string, got {self.name!r}")
        object.__setattr__(self, "type", FieldType.parse(self.type, self.name))

        if isinstance(self.offset, bool) or not isinstance(self.offset, int) or self.offset < 0:
            raise SchemaError(f"Field {self.name}: offset must be an int >= 0, got {self.offset!r}")
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length <= 0:
            raise SchemaError(f"Field {self.name}: length must be an int > 0, got {self.length!r}")
        if self.scale is not None and (
            isinstance(self.scale, bool)
            or not isinstance(self.scale, (int, float))
            or not math.isfinite(self.scale)
        ):
            raise SchemaError(
                f"Field {self.name}: scale must be a finite number, got {self.scale!r}"
            )

    @property
    def end(self) -> int:
        """Offset one past the field's last byte."""
        return self.offset + self.length

    @property
    def scaled(self) -> bool:
        """Whether decoding applies the scale.

        A scale of exactly 0 is treated as absent, and non-numeric fields are
        never scaled.
        """
        return bool(self.scale) and self.type.is_numeric

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FieldDescriptor:
        """Build a descriptor from a plain mapping.

        Raises:
            SchemaError: If a required key is missing
            UnsupportedTypeError: If the type name is not supported
        """
        missing = [key for key in ("name", "offset", "length", "type") if key not in data]
        if missing:
            raise SchemaError(f"Field descriptor {dict(data)!r} is missing {', '.join(missing)}")
        return cls(
            name=data["name"],
            offset=data["offset"],
            length=data["length"],
            type=data["type"],
            scale=data.get("scale"),
        )


@dataclass(frozen=True)
class MessageSchema:
    """Ordered, immutable set of field descriptors describing one record layout.

    Field order determines the key order of decoded records. Offsets need not
    be monotonic or contiguous; overlapping and gapped fields are legal.

    Example:
        >>> schema = MessageSchema(
        ...     fields=[
        ...         FieldDescriptor("length", 0, 1, FieldType.UINT8),
        ...         FieldDescriptor("temperature", 10, 2, FieldType.INT16, scale=0.1),
        ...     ],
        ... )
        >>> schema.field_names
        ('length', 'temperature')
    """

    fields: tuple[FieldDescriptor, ...]
    config: DecoderConfig = field(default_factory=DecoderConfig)
    name: str = "message"

    def __post_init__(self) -> None:
        fields = tuple(self.fields)
        if not fields:
            raise SchemaError(f"Schema {self.name} has no fields")
        seen: set[str] = set()
        for descriptor in fields:
            if not isinstance(descriptor, FieldDescriptor):
                raise SchemaError(
                    f"Schema {self.name}: expected FieldDescriptor, got {type(descriptor).__name__}"
                )
            if descriptor.name in seen:
                raise SchemaError(f"Schema {self.name}: duplicate field name {descriptor.name!r}")
            seen.add(descriptor.name)
        object.__setattr__(self, "fields", fields)

    @classmethod
    def from_dicts(
        cls,
        rows: Iterable[Mapping[str, Any]],
        *,
        name: str = "message",
        byte_order: ByteOrder | str = ByteOrder.BIG,
        expected_length: int | None = None,
        precision: int = 1,
    ) -> MessageSchema:
        """Create a schema from plain field mappings.

        Args:
            rows: Mappings with ``name``, ``offset``, ``length``, ``type`` and
                optional ``scale`` keys
            name: Schema name
            byte_order: Byte order for multi-byte integers
            expected_length: Exact buffer length in bytes (strict mode) or None
            precision: Decimal places kept after scaling

        Returns:
            MessageSchema instance
        """
        config = DecoderConfig(
            byte_order=byte_order,
            expected_length=expected_length,
            precision=precision,
        )
        return cls(
            fields=tuple(FieldDescriptor.from_dict(row) for row in rows),
            config=config,
            name=name,
        )

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self.fields)

    def get(self, name: str) -> FieldDescriptor:
        """Look up a field descriptor by name.

        Raises:
            KeyError: If no field has that name
        """
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        raise KeyError(name)

    def required_length(self) -> int:
        """Smallest buffer, in bytes, that satisfies every field's window."""
        return max(_read_end(descriptor) for descriptor in self.fields)


def _read_end(descriptor: FieldDescriptor) -> int:
    """Offset one past the last byte the decoder touches for this field."""
    width = descriptor.type.width if descriptor.type.is_numeric else None
    return descriptor.offset + max(descriptor.length, width or 0)
