"""Exception hierarchy for telemdec.

All exceptions inherit from TelemdecError for easy catching of any
telemdec-specific error. A strict-length rejection is not an exception:
the decoder returns ``None`` instead.
"""

from __future__ import annotations


class TelemdecError(Exception):
    """Base exception for all telemdec errors."""

    pass


class SchemaError(TelemdecError):
    """Raised when a message schema is invalid.

    Examples:
        - Negative offset or non-positive length
        - Duplicate field names
        - Unknown byte order or invalid decoder configuration
    """

    pass


class UnsupportedTypeError(SchemaError):
    """Raised when a field declares a type the decoder does not implement."""

    def __init__(self, field_type: object, field_name: str | None = None) -> None:
        self.field_type = field_type
        self.field_name = field_name
        where = f" on field {field_name}" if field_name is not None else ""
        super().__init__(f"Unsupported field type: {field_type!r}{where}")


class DecodeError(TelemdecError):
    """Raised when decoding a buffer fails.

    Examples:
        - Field window runs past the end of the buffer
        - Hex input cannot be parsed into bytes
    """

    pass


class BoundsError(DecodeError):
    """Raised when a field's byte window falls outside the buffer."""

    def __init__(self, field_name: str, offset: int, length: int, buffer_length: int) -> None:
        self.field_name = field_name
        self.offset = offset
        self.length = length
        self.buffer_length = buffer_length
        super().__init__(
            f"Field {field_name}: bytes [{offset}, {offset + length}) out of bounds "
            f"for {buffer_length}-byte buffer"
        )


class MalformedInputError(DecodeError):
    """Raised when the hex input is not an even-length string of hex digits."""

    pass


class EncodeError(TelemdecError):
    """Raised when encoding a record back into bytes fails.

    Examples:
        - Value out of range for its field type
        - Missing field value
        - Malformed hex or MAC text
    """

    pass
