"""Shared constants for sysmod dot-directories and module identifiers."""

SYSMOD_HOME_EXT = ".sysmod"  # user-level state/config directory suffix

# Program id of the host overlay process; never manageable
RESERVED_PROGRAM_ID = 0x420000000007E51A

# Largest program id that fits in 64 bits
MAX_PROGRAM_ID = 0xFFFFFFFFFFFFFFFF
