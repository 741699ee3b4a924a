"""Decoder configuration.

This module provides the configuration dataclass shared by every schema
variant. A schema's configuration selects the byte order used for multi-byte
integers, whether an upfront length gate is applied, and the number of
decimal places kept for scaled values.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..exceptions import SchemaError


class ByteOrder(str, enum.Enum):
    """Byte order for multi-byte integer fields."""

    BIG = "big"
    LITTLE = "little"


@dataclass(frozen=True)
class DecoderConfig:
    """Configuration for a schema variant.

    Attributes:
        byte_order: Byte order of every multi-byte integer field in the schema
            (default big-endian).

        expected_length: Exact buffer size in bytes for strict-length mode.
            ``None`` (the default) selects lenient mode: no upfront check, and
            a short buffer surfaces as a BoundsError on the first field that
            runs past its end. When set, input whose hex text is not exactly
            ``2 * expected_length`` characters decodes to ``None``.

        precision: Decimal places kept after scaling (default 1, i.e. values
            are rounded to the nearest 0.1).

    Examples:
        ```python
        from telemdec import ByteOrder, DecoderConfig

        # Lenient, big-endian
        config = DecoderConfig()

        # Strict 17-byte frames, little-endian
        config = DecoderConfig(byte_order=ByteOrder.LITTLE, expected_length=17)
        ```
    """

    byte_order: ByteOrder = ByteOrder.BIG
    expected_length: int | None = None
    precision: int = 1

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        try:
            byte_order = ByteOrder(self.byte_order)
        except ValueError as e:
            raise SchemaError(
                f"byte_order must be 'big' or 'little', got {self.byte_order!r}"
            ) from e
        # Frozen dataclass: normalise plain strings to the enum member
        object.__setattr__(self, "byte_order", byte_order)

        if self.expected_length is not None:
            if isinstance(self.expected_length, bool) or not isinstance(self.expected_length, int):
                raise SchemaError(
                    f"expected_length must be an int, got {type(self.expected_length).__name__}"
                )
            if self.expected_length <= 0:
                raise SchemaError(f"expected_length must be > 0, got {self.expected_length}")

        if not isinstance(self.precision, int) or self.precision < 0:
            raise SchemaError(f"precision must be an int >= 0, got {self.precision!r}")

    @property
    def strict(self) -> bool:
        """Whether the upfront length gate is applied."""
        return self.expected_length is not None

    @property
    def expected_hex_length(self) -> int | None:
        """Expected number of hex characters in strict mode."""
        if self.expected_length is None:
            return None
        return self.expected_length * 2
