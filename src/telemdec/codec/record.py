"""Decoded record container."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Union

from .schema import FieldType, MessageSchema

FieldValue = Union[int, float, str]


class DecodedRecord(Mapping[str, FieldValue]):
    """Read-only mapping of field name to decoded value, in schema order.

    Values are ``int`` for unscaled numeric fields, ``float`` for scaled
    numeric fields and ``str`` for ``hex`` and ``mac`` fields. Use ``kind()``
    to find out which interpretation produced a value.

    Example:
        >>> record = decode("08108b81", schema)
        >>> record["deviceId"]
        '8b81'
        >>> record.kind("deviceId")
        <FieldType.HEX: 'hex'>
    """

    __slots__ = ("_values", "_schema")

    def __init__(self, schema: MessageSchema, values: Mapping[str, FieldValue]) -> None:
        self._schema = schema
        self._values = dict(values)

    @property
    def schema(self) -> MessageSchema:
        return self._schema

    def kind(self, name: str) -> FieldType:
        """Declared type of the named field.

        Raises:
            KeyError: If the record has no such field
        """
        if name not in self._values:
            raise KeyError(name)
        return self._schema.get(name).type

    def to_dict(self) -> dict[str, FieldValue]:
        """Plain ``dict`` copy of the record."""
        return dict(self._values)

    def __getitem__(self, name: str) -> FieldValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, DecodedRecord):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DecodedRecord({self._schema.name}, {self._values!r})"
