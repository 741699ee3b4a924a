"""Unit tests for decoding."""

from __future__ import annotations

import pytest

from telemdec import (
    DEVICE_ID_SCHEMA,
    MAC_SCHEMA,
    BoundsError,
    ByteOrder,
    DecodeError,
    DecodedRecord,
    DecoderConfig,
    FieldDescriptor,
    FieldType,
    MalformedInputError,
    MessageSchema,
    UnsupportedTypeError,
    decode,
    decode_lenient,
    decode_strict,
    parse_hex,
)
from telemdec.codec.decoder import _READERS


def _schema(*fields: FieldDescriptor, **config: object) -> MessageSchema:
    return MessageSchema(fields=fields, config=DecoderConfig(**config))  # type: ignore[arg-type]


class TestDeviceIdVariant:
    """Test the big-endian, lenient device-id layout."""

    def test_sample_report(self, sample_hex: str) -> None:
        """Test decoding the reference report."""
        record = decode(sample_hex, DEVICE_ID_SCHEMA)

        assert record is not None
        assert record["length"] == 8
        assert record["messageType"] == 16
        assert record["deviceId"] == "8b81"
        assert record["battery"] == 1
        # 0xde00 as signed big-endian = -8704
        assert record["temperature"] == -870.4
        # 0xaf01 big-endian = 44801
        assert record["humidity"] == 4480.1

    def test_key_order_follows_schema(self, sample_hex: str) -> None:
        """Test keys come out in schema order, not offset order."""
        record = decode(sample_hex, DEVICE_ID_SCHEMA)

        assert record is not None
        assert list(record) == [
            "length",
            "messageType",
            "deviceId",
            "temperature",
            "humidity",
            "battery",
        ]

    def test_value_types(self, sample_hex: str) -> None:
        """Test unscaled ints stay ints and scaled values become floats."""
        record = decode(sample_hex, DEVICE_ID_SCHEMA)

        assert record is not None
        assert isinstance(record["length"], int)
        assert isinstance(record["temperature"], float)
        assert isinstance(record["deviceId"], str)

    def test_short_buffer_raises_bounds_error(self) -> None:
        """Test lenient mode surfaces short input as a bounds failure."""
        with pytest.raises(BoundsError) as excinfo:
            decode("08108b81", DEVICE_ID_SCHEMA)

        assert excinfo.value.field_name == "temperature"
        assert excinfo.value.buffer_length == 4

    def test_uppercase_hex(self, sample_hex: str) -> None:
        """Test uppercase hex digits are accepted and output is lowercase."""
        record = decode(sample_hex.upper(), DEVICE_ID_SCHEMA)

        assert record is not None
        assert record["deviceId"] == "8b81"


class TestMacVariant:
    """Test the little-endian, strict-length MAC layout."""

    def test_exact_length_report(self, sample_hex: str) -> None:
        """Test a 34-character report decodes."""
        record = decode(sample_hex, MAC_SCHEMA)

        assert record is not None
        assert record["length"] == 8
        assert record["messageType"] == 16
        # Bytes 8b 81 82 34 2d 58, reversed
        assert record["mac"] == "58:2d:34:82:81:8b"
        assert record["battery"] == 1
        # 0x00de little-endian = 222
        assert record["temperature"] == 22.2
        # 0x01af little-endian = 431
        assert record["humidity"] == 43.1

    def test_odd_length_is_no_result(self, sample_hex: str) -> None:
        """Test a 35-character input yields None rather than an error."""
        assert decode(sample_hex + "0", MAC_SCHEMA) is None

    def test_long_input_is_no_result(self, sample_hex: str) -> None:
        """Test extra bytes fail the length gate."""
        assert decode(sample_hex + "00", MAC_SCHEMA) is None

    @pytest.mark.parametrize("data", ["", None, b""])
    def test_empty_input_is_no_result(self, data: object) -> None:
        """Test empty or absent input yields None."""
        assert decode(data, MAC_SCHEMA) is None  # type: ignore[arg-type]

    def test_gate_runs_before_hex_parsing(self) -> None:
        """Test junk of the wrong length is rejected softly, not as malformed."""
        assert decode("zz", MAC_SCHEMA) is None

    def test_right_length_bad_hex_is_malformed(self) -> None:
        """Test junk of the right length reaches the hex parser."""
        with pytest.raises(MalformedInputError):
            decode("zz" * 17, MAC_SCHEMA)

    def test_raw_bytes_input(self, sample_hex: str) -> None:
        """Test raw bytes are gated on byte length."""
        record = decode(bytes.fromhex(sample_hex), MAC_SCHEMA)

        assert record is not None
        assert record["mac"] == "58:2d:34:82:81:8b"
        assert decode(bytes(16), MAC_SCHEMA) is None


class TestFieldTypes:
    """Test interpretation of each field type."""

    def test_uint8(self) -> None:
        schema = _schema(FieldDescriptor("v", 0, 1, FieldType.UINT8))
        assert decode("ff", schema) == {"v": 255}

    def test_int16_big_endian(self) -> None:
        schema = _schema(FieldDescriptor("v", 0, 2, FieldType.INT16))
        assert decode("fffe", schema) == {"v": -2}

    def test_int16_little_endian(self) -> None:
        schema = _schema(FieldDescriptor("v", 0, 2, FieldType.INT16), byte_order=ByteOrder.LITTLE)
        assert decode("feff", schema) == {"v": -2}

    def test_uint16_byte_orders(self) -> None:
        field = FieldDescriptor("v", 0, 2, FieldType.UINT16)
        assert decode("0102", _schema(field)) == {"v": 0x0102}
        assert decode("0102", _schema(field, byte_order="little")) == {"v": 0x0201}

    def test_hex_is_lowercase_without_separators(self) -> None:
        schema = _schema(FieldDescriptor("v", 1, 3, FieldType.HEX))
        assert decode("00ABCDEF", schema) == {"v": "abcdef"}

    def test_mac_reversed_and_colon_separated(self) -> None:
        schema = _schema(FieldDescriptor("v", 0, 6, FieldType.MAC))
        assert decode("060504030201", schema) == {"v": "01:02:03:04:05:06"}

    def test_mac_ignores_byte_order(self) -> None:
        field = FieldDescriptor("v", 0, 6, FieldType.MAC)
        big = decode("0a0b0c0d0e0f", _schema(field))
        little = decode("0a0b0c0d0e0f", _schema(field, byte_order="little"))
        assert big == little == {"v": "0f:0e:0d:0c:0b:0a"}

    def test_every_type_has_a_reader(self) -> None:
        assert set(_READERS) == set(FieldType)

    def test_record_kind(self, sample_hex: str) -> None:
        record = decode(sample_hex, MAC_SCHEMA)
        assert isinstance(record, DecodedRecord)
        assert record.kind("mac") is FieldType.MAC
        assert record.kind("temperature") is FieldType.INT16
        with pytest.raises(KeyError):
            record.kind("missing")


class TestScaling:
    """Test scale and rounding rules."""

    def test_scale_rounds_to_one_decimal(self) -> None:
        schema = _schema(FieldDescriptor("v", 0, 2, FieldType.UINT16, scale=0.1))
        # 1234 * 0.1 = 123.4 (not 123.40000000000001)
        assert decode("04d2", schema) == {"v": 123.4}

    def test_scale_rounds_product(self) -> None:
        schema = _schema(FieldDescriptor("v", 0, 1, FieldType.UINT8, scale=0.33))
        # 100 * 0.33 = 33.0; 7 * 0.33 = 2.31 -> 2.3
        assert decode("64", schema) == {"v": 33.0}
        assert decode("07", schema) == {"v": 2.3}

    def test_zero_scale_means_no_scaling(self) -> None:
        """Test scale 0 behaves exactly like no scale."""
        scaled_zero = _schema(FieldDescriptor("v", 0, 2, FieldType.INT16, scale=0))
        unscaled = _schema(FieldDescriptor("v", 0, 2, FieldType.INT16))

        assert decode("ff9c", scaled_zero) == decode("ff9c", unscaled) == {"v": -100}
        record = decode("ff9c", scaled_zero)
        assert record is not None
        assert isinstance(record["v"], int)

    def test_non_numeric_fields_ignore_scale(self) -> None:
        schema = _schema(
            FieldDescriptor("h", 0, 2, FieldType.HEX, scale=10.0),
            FieldDescriptor("m", 0, 6, FieldType.MAC, scale=0.5),
        )
        assert decode("010203040506", schema) == {"h": "0102", "m": "06:05:04:03:02:01"}

    def test_scale_overflow_raises_decode_error(self) -> None:
        """Test a finite scale whose product overflows stays inside DecodeError."""
        schema = _schema(FieldDescriptor("v", 0, 2, FieldType.UINT16, scale=1e308))
        with pytest.raises(DecodeError, match="overflows"):
            decode("ffff", schema)

    def test_precision_configurable(self) -> None:
        schema = _schema(FieldDescriptor("v", 0, 2, FieldType.UINT16, scale=0.001), precision=2)
        assert decode("04d2", schema) == {"v": 1.23}


class TestDecodeErrors:
    """Test fatal decode failures."""

    def test_unsupported_type_in_mapping_schema(self) -> None:
        """Test an unknown type aborts before any output."""
        rows = [
            {"name": "ok", "offset": 0, "length": 1, "type": "uint8"},
            {"name": "bad", "offset": 1, "length": 1, "type": "unknown"},
        ]
        with pytest.raises(UnsupportedTypeError) as excinfo:
            decode("0102", rows)

        assert excinfo.value.field_type == "unknown"
        assert excinfo.value.field_name == "bad"

    def test_mapping_schema_decodes(self) -> None:
        """Test a plain list of mappings works as a lenient big-endian schema."""
        rows = [
            {"name": "a", "offset": 0, "length": 1, "type": "uint8"},
            {"name": "b", "offset": 1, "length": 2, "type": "int16", "scale": 0.1},
        ]
        assert decode("01ff9c", rows) == {"a": 1, "b": -10.0}

    def test_boundary(self, two_field_schema: MessageSchema) -> None:
        """Test a buffer of exactly the required length decodes, one byte less fails."""
        assert decode("01000203", two_field_schema) == {"flags": 1, "reading": 0x0203}

        with pytest.raises(BoundsError):
            decode("010002", two_field_schema)

    def test_numeric_read_beyond_declared_length(self) -> None:
        """Test an int16 declared with length 1 still needs two bytes."""
        schema = _schema(FieldDescriptor("v", 0, 1, FieldType.INT16))
        with pytest.raises(BoundsError):
            decode("01", schema)

    @pytest.mark.parametrize("text", ["abc", "0g", "01 02", "0x01"])
    def test_malformed_hex(self, text: str, two_field_schema: MessageSchema) -> None:
        with pytest.raises(MalformedInputError):
            decode(text, two_field_schema)

    def test_lenient_none_is_malformed(self, two_field_schema: MessageSchema) -> None:
        with pytest.raises(MalformedInputError):
            decode(None, two_field_schema)


class TestEntryPoints:
    """Test the named lenient/strict entry points."""

    def test_decode_lenient_skips_gate(self, sample_hex: str) -> None:
        """Test the MAC layout without its gate accepts trailing bytes."""
        record = decode_lenient(sample_hex + "ffff", MAC_SCHEMA)

        assert record["mac"] == "58:2d:34:82:81:8b"
        assert record["temperature"] == 22.2

    def test_decode_lenient_short_input_raises(self) -> None:
        with pytest.raises(BoundsError):
            decode_lenient("0810", MAC_SCHEMA)

    def test_decode_strict_gates_device_id_layout(self, sample_hex: str) -> None:
        assert decode_strict(sample_hex, DEVICE_ID_SCHEMA, 17) == decode(
            sample_hex, DEVICE_ID_SCHEMA
        )
        assert decode_strict(sample_hex, DEVICE_ID_SCHEMA, 16) is None

    def test_entry_points_keep_schema_unchanged(self, sample_hex: str) -> None:
        decode_lenient(sample_hex, MAC_SCHEMA)
        assert MAC_SCHEMA.config.expected_length == 17


class TestParseHex:
    """Test the strict hex parser."""

    def test_valid(self) -> None:
        assert parse_hex("00ff7F") == b"\x00\xff\x7f"

    def test_empty(self) -> None:
        assert parse_hex("") == b""

    def test_odd_length(self) -> None:
        with pytest.raises(MalformedInputError, match="odd length"):
            parse_hex("abc")
