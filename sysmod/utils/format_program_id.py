"""Render a program id the way module directories are named."""


def format_program_id(program_id: int) -> str:
    """Format a 64-bit program id as 16 upper-case hex digits (e.g. '0100000000000001')."""
    return f"{program_id:016X}"
