"""Basic usage example for telemdec.

Decodes the same sensor report with both built-in variants and with a
schema loaded from a JSON document.
"""

from __future__ import annotations

from pathlib import Path

from telemdec import DEVICE_ID_SCHEMA, MAC_SCHEMA, decode, load_schema

REPORT = "08108b8182342d580104de00af01020164"


def main() -> None:
    print("=" * 60)
    print("telemdec Basic Usage Example")
    print("=" * 60)

    # 1. Device-id layout: big-endian, no length gate
    record = decode(REPORT, DEVICE_ID_SCHEMA)
    print(f"\n1. device-id: {record.to_dict() if record else None}")

    # 2. MAC layout: little-endian, exactly 17 bytes
    record = decode(REPORT, MAC_SCHEMA)
    print(f"2. mac:       {record.to_dict() if record else None}")

    # 3. Short input against the strict layout is a soft failure
    print(f"3. mac (short input): {decode(REPORT[:-2], MAC_SCHEMA)}")

    # 4. Same layout loaded from a schema document
    schema = load_schema(Path(__file__).parent / "schemas" / "mac.json")
    record = decode(REPORT, schema)
    print(f"4. mac.json:  {record.to_dict() if record else None}")


if __name__ == "__main__":
    main()
