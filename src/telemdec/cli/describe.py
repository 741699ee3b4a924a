"""Schema layout CLI command."""

from __future__ import annotations

from ..codec.schema import MessageSchema
from ..utils.sizing import coverage


def describe_schema(schema: MessageSchema) -> None:
    """Print a field-by-field layout table for a schema.

    Args:
        schema: Schema to describe
    """
    config = schema.config
    summary = coverage(schema)

    print(f"{'=' * 19} {schema.name} {'=' * 19}")
    print(f"Byte order: {config.byte_order.value}-endian")
    if config.strict:
        print(
            f"Length gate: exactly {config.expected_length} bytes "
            f"({config.expected_hex_length} hex characters)"
        )
    else:
        print("Length gate: none (lenient)")
    print(f"Minimum buffer: {schema.required_length()} bytes")
    print()

    print(f"{'-' * 28} Fields {'-' * 28}")
    for i, descriptor in enumerate(schema.fields, 1):
        field_desc = f"{i}. {descriptor.name}"
        location = f"[{descriptor.offset}:{descriptor.end}] {descriptor.type.value}"
        if descriptor.scaled:
            location += f" x{descriptor.scale}"
        dots = "." * max(1, 54 - len(field_desc) - len(location))
        print(f"        {field_desc}{dots}{location}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Bytes read: {summary.covered_bytes} of {summary.total_bytes}")
    if summary.gaps:
        gaps = ", ".join(f"[{start}:{end}]" for start, end in summary.gaps)
        print(f"Unused ranges: {gaps}")
    if summary.overlaps:
        pairs = ", ".join(f"{first}/{second}" for first, second in summary.overlaps)
        print(f"Overlapping fields: {pairs}")
    print()
