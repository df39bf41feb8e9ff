"""
HexPrintFile - Column Layout

Header and row formatting. Field widths are worked out once per dump from the
largest offset and count that will be shown, then passed to every call.
"""
from dataclasses import dataclass
from typing import Tuple

from hexprint.ranges import ByteRange, ChunkPlan, IndexOrigin
from hexprint.render import RenderedChunk
from hexprint.utils import digit_count, zero_pad

MIN_DIGITS = 5

HEX_HEADING = " HEX DATA "
RAW_HEADING = " RAW DATA "
OFFSET_HEADING = "ACTUAL BYTES"
COUNT_HEADING = "READ COUNT"


@dataclass(frozen=True)
class ColumnWidths:
    """Zero-pad widths for the offset and read-count fields."""
    offset_digits: int = MIN_DIGITS
    count_digits: int = MIN_DIGITS


def compute_widths(byte_range: ByteRange, plan: ChunkPlan) -> ColumnWidths:
    """Derive field widths from the largest values the dump will print."""
    return ColumnWidths(
        offset_digits=max(MIN_DIGITS, digit_count(byte_range.display_end)),
        count_digits=max(MIN_DIGITS, digit_count(plan.rounded_read_length)),
    )


def format_header(chunk_size: int, widths: ColumnWidths) -> Tuple[str, str]:
    """
    Build the table header.

    Returns:
        Tuple of (separator_line, header_line); the separator is '=' across
        the full header width.
    """
    hex_heading = HEX_HEADING.ljust(chunk_size * 3 + 1)
    raw_heading = RAW_HEADING.ljust(chunk_size + 2)
    offset_heading = OFFSET_HEADING.ljust(2 * widths.offset_digits + 5)
    count_heading = COUNT_HEADING.ljust(2 * widths.count_digits + 4)

    header = f"*{hex_heading}*   |{raw_heading}| {offset_heading} | {count_heading} "
    return "=" * len(header), header


def format_row(
    chunk_index: int,
    start_offset: int,
    end_offset: int,
    chunk_size: int,
    rendered: RenderedChunk,
    widths: ColumnWidths,
    origin: IndexOrigin = IndexOrigin.ZERO,
) -> str:
    """
    Format one table row.

    Args:
        chunk_index: Position of the chunk within the dump (0-based)
        start_offset: Zero-based file position of the first byte in the chunk
        end_offset: Zero-based file position of the last byte in the chunk
        chunk_size: Configured chunk size, used for the read-count span
        rendered: Rendered hex and text columns
        widths: Field widths for the dump
        origin: Added to every displayed offset and count

    Returns:
        Row text
    """
    count_start = chunk_index * chunk_size + origin
    count_end = count_start + chunk_size - 1

    actual = f"{zero_pad(start_offset + origin, widths.offset_digits)} -> " \
             f"{zero_pad(end_offset + origin, widths.offset_digits)}"
    counts = f"{zero_pad(count_start, widths.count_digits)} -> " \
             f"{zero_pad(count_end, widths.count_digits)}"

    return f"* {rendered.hex_column} *   | {rendered.text_column} | {actual}  | {counts}"
