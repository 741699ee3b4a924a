"""Pydantic schema documents for telemdec.

This module provides models for describing schemas as data (e.g. JSON files)
and converting them to MessageSchema values.
"""

from __future__ import annotations

from .documents import FieldModel, SchemaModel, load_schema, schema_to_model

__all__ = [
    "FieldModel",
    "SchemaModel",
    "load_schema",
    "schema_to_model",
]
