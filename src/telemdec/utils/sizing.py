"""Layout size calculation utilities.

This module provides functions to inspect how a schema maps onto a buffer
without decoding anything.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..codec.schema import MessageSchema


@dataclass(frozen=True)
class Coverage:
    """Which bytes of a buffer a schema reads.

    Attributes:
        total_bytes: Buffer size considered
        covered_bytes: Number of bytes read by at least one field
        gaps: Half-open ``(start, end)`` byte ranges no field reads
        overlaps: Names of field pairs whose windows intersect
    """

    total_bytes: int
    covered_bytes: int
    gaps: tuple[tuple[int, int], ...]
    overlaps: tuple[tuple[str, str], ...]


def required_length(schema: MessageSchema) -> int:
    """Minimum buffer size in bytes for which every field decodes.

    Example:
        >>> required_length(DEVICE_ID_SCHEMA)
        14
    """
    return schema.required_length()


def field_sizes(schema: MessageSchema) -> dict[str, int]:
    """Get the size in bytes of each field, in schema order.

    Example:
        >>> field_sizes(DEVICE_ID_SCHEMA)
        {'length': 1, 'messageType': 1, 'deviceId': 2, 'temperature': 2, 'humidity': 2, 'battery': 1}
    """
    return {descriptor.name: descriptor.length for descriptor in schema.fields}


def coverage(schema: MessageSchema) -> Coverage:
    """Summarise covered bytes, gaps and overlapping fields.

    The buffer size is the strict ``expected_length`` when the schema has one,
    otherwise ``required_length()``.
    """
    total = schema.config.expected_length or schema.required_length()
    covered = [False] * max(total, schema.required_length())
    for descriptor in schema.fields:
        for index in range(descriptor.offset, descriptor.end):
            covered[index] = True
    covered = covered[:total]

    gaps: list[tuple[int, int]] = []
    start = None
    for index, used in enumerate(covered):
        if not used and start is None:
            start = index
        elif used and start is not None:
            gaps.append((start, index))
            start = None
    if start is not None:
        gaps.append((start, total))

    overlaps: list[tuple[str, str]] = []
    fields = schema.fields
    for i, first in enumerate(fields):
        for second in fields[i + 1 :]:
            if first.offset < second.end and second.offset < first.end:
                overlaps.append((first.name, second.name))

    return Coverage(
        total_bytes=total,
        covered_bytes=sum(covered),
        gaps=tuple(gaps),
        overlaps=tuple(overlaps),
    )
