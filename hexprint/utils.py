"""
HexPrintFile - Utility Functions

Small arithmetic and formatting helpers shared by the dump modules.
"""


def align_up(value: int, alignment: int) -> int:
    """Align value up to the nearest multiple of alignment (any positive alignment)."""
    if value <= 0:
        return 0
    return -(-value // alignment) * alignment


def ceil_div(value: int, divisor: int) -> int:
    """Integer division rounding up."""
    return -(-value // divisor)


def digit_count(value: int) -> int:
    """Number of decimal digits needed to print value."""
    return len(str(abs(value)))


def zero_pad(value: int, width: int) -> str:
    """Format value as a zero-padded decimal of at least width digits."""
    return f"{value:0{width}d}"
