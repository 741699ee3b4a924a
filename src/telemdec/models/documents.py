"""Schema documents and the JSON schema loader.

A schema document is the serialisable form of a MessageSchema:

    {
      "name": "mac",
      "byte_order": "little",
      "expected_length": 17,
      "fields": [
        {"name": "length", "offset": 0, "length": 1, "type": "uint8"},
        {"name": "temperature", "offset": 10, "length": 2, "type": "int16", "scale": 0.1}
      ]
    }
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..codec.config import ByteOrder, DecoderConfig
from ..codec.schema import FieldDescriptor, FieldType, MessageSchema
from ..exceptions import SchemaError

logger = logging.getLogger(__name__)


class FieldModel(BaseModel):
    """One field entry of a schema document.

    ``type`` is kept as a plain string here; it is checked against FieldType
    when the document is converted, so an unknown type surfaces as
    UnsupportedTypeError rather than a generic validation error.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    offset: int = Field(ge=0)
    length: int = Field(gt=0)
    type: str
    scale: Optional[float] = Field(default=None, allow_inf_nan=False)

    def to_descriptor(self) -> FieldDescriptor:
        return FieldDescriptor(
            name=self.name,
            offset=self.offset,
            length=self.length,
            type=FieldType.parse(self.type, self.name),
            scale=self.scale,
        )


class SchemaModel(BaseModel):
    """A complete schema document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = "message"
    byte_order: ByteOrder = ByteOrder.BIG
    expected_length: Optional[int] = Field(default=None, gt=0)
    precision: int = Field(default=1, ge=0)
    fields: List[FieldModel] = Field(min_length=1)

    @field_validator("fields")
    @classmethod
    def _unique_names(cls, fields: List[FieldModel]) -> List[FieldModel]:
        seen = set()
        for entry in fields:
            if entry.name in seen:
                raise ValueError(f"duplicate field name {entry.name!r}")
            seen.add(entry.name)
        return fields

    def to_schema(self) -> MessageSchema:
        """Convert the document to an immutable MessageSchema.

        Raises:
            UnsupportedTypeError: If a field names an unknown type
        """
        return MessageSchema(
            fields=tuple(entry.to_descriptor() for entry in self.fields),
            config=DecoderConfig(
                byte_order=self.byte_order,
                expected_length=self.expected_length,
                precision=self.precision,
            ),
            name=self.name,
        )


def schema_to_model(schema: MessageSchema) -> SchemaModel:
    """Convert a MessageSchema to its document form."""
    return SchemaModel(
        name=schema.name,
        byte_order=schema.config.byte_order,
        expected_length=schema.config.expected_length,
        precision=schema.config.precision,
        fields=[
            FieldModel(
                name=descriptor.name,
                offset=descriptor.offset,
                length=descriptor.length,
                type=descriptor.type.value,
                scale=descriptor.scale,
            )
            for descriptor in schema.fields
        ],
    )


def load_schema(path: str | Path) -> MessageSchema:
    """Load a schema document from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        MessageSchema built from the document

    Raises:
        SchemaError: If the file cannot be read or the document is invalid
        UnsupportedTypeError: If a field names an unknown type
    """
    path = Path(path)
    logger.debug("Loading schema from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaError(f"Cannot read schema file {path}: {e}") from e

    try:
        document = SchemaModel.model_validate_json(text)
    except ValidationError as e:
        raise SchemaError(f"Invalid schema document {path}: {e}") from e

    schema = document.to_schema()
    logger.debug(
        "Loaded schema %s: %d fields, %s-endian, %s",
        schema.name,
        len(schema),
        schema.config.byte_order.value,
        f"strict {schema.config.expected_length} bytes" if schema.config.strict else "lenient",
    )
    return schema
