"""Parse a hexadecimal program id string."""

import re

from ..constants import MAX_PROGRAM_ID

_HEX_ID = re.compile(r"^(?:0[xX])?([0-9a-fA-F]{1,16})$")


def parse_program_id(value: str) -> int:
    """Parse a hex program id (optional '0x' prefix, 1-16 digits) into an int.

    Raises:
        ValueError: If the string is not a valid 64-bit hex identifier
    """
    match = _HEX_ID.match(value.strip())
    if not match:
        raise ValueError(f"Invalid program id {value!r}: expected up to 16 hex digits")
    program_id = int(match.group(1), 16)
    if program_id > MAX_PROGRAM_ID:  # pragma: no cover - bounded by the pattern
        raise ValueError(f"Program id {value!r} does not fit in 64 bits")
    return program_id
