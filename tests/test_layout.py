#!/usr/bin/env python3
"""
Unit tests for column widths, header and row formatting.
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexprint.layout import ColumnWidths, compute_widths, format_header, format_row
from hexprint.ranges import IndexOrigin, plan_chunks, resolve_range
from hexprint.render import render_chunk


def _bar_positions(line: str):
    return [i for i, c in enumerate(line) if c == '|']


class TestComputeWidths:
    """Tests for field width derivation."""

    def test_minimum_five_digits(self):
        byte_range = resolve_range(100)
        widths = compute_widths(byte_range, plan_chunks(byte_range, 16))
        assert widths == ColumnWidths(offset_digits=5, count_digits=5)

    def test_large_file_widens(self):
        byte_range = resolve_range(2_000_000)
        widths = compute_widths(byte_range, plan_chunks(byte_range, 16))
        assert widths.offset_digits == 7
        assert widths.count_digits == 7

    def test_offset_width_uses_display_end(self):
        """Under ONE the largest displayed offset is one higher."""
        byte_range = resolve_range(100_000, start=1, end=100_000, origin=IndexOrigin.ONE)
        widths = compute_widths(byte_range, plan_chunks(byte_range, 16))
        assert widths.offset_digits == 6

        byte_range = resolve_range(100_000, start=0, end=99_999)
        widths = compute_widths(byte_range, plan_chunks(byte_range, 16))
        assert widths.offset_digits == 5


class TestFormatHeader:
    """Tests for the table header."""

    def test_header_layout(self):
        separator, header = format_header(16, ColumnWidths())
        assert header == (
            "*" + " HEX DATA ".ljust(49) + "*   |" + " RAW DATA ".ljust(18)
            + "| " + "ACTUAL BYTES".ljust(15) + " | " + "READ COUNT".ljust(14) + " "
        )
        assert len(header) == 108

    def test_separator_matches_width(self):
        for chunk_size in (4, 16, 64):
            separator, header = format_header(chunk_size, ColumnWidths(7, 9))
            assert set(separator) == {'='}
            assert len(separator) == len(header)

    def test_wide_fields(self):
        _, header = format_header(4, ColumnWidths(offset_digits=8, count_digits=6))
        assert "ACTUAL BYTES".ljust(21) + " | " in header
        assert header.endswith("READ COUNT".ljust(16) + " ")


class TestFormatRow:
    """Tests for table rows."""

    def test_first_row_zero_origin(self):
        rendered = render_chunk(b'ABCDEFGHIJKLMNOP', 16, 16)
        row = format_row(0, 0, 15, 16, rendered, ColumnWidths())
        assert row == ("* 41 42 43 44 45 46 47 48 49 4A 4B 4C 4D 4E 4F 50 *   | ABCDEFGHIJKLMNOP | "
                       "00000 -> 00015  | 00000 -> 00015")

    def test_one_origin_shifts_offsets_and_counts(self):
        rendered = render_chunk(b'ABCD', 4, 4)
        row = format_row(0, 0, 3, 4, rendered, ColumnWidths(), IndexOrigin.ONE)
        assert row.endswith("00001 -> 00004  | 00001 -> 00004")

    def test_later_row(self):
        rendered = render_chunk(bytes(16), 16, 16)
        row = format_row(2, 132, 147, 16, rendered, ColumnWidths())
        assert row.endswith("00132 -> 00147  | 00032 -> 00047")

    def test_short_row_keeps_full_chunk_offsets(self):
        """A short block still spans a full chunk of offsets."""
        rendered = render_chunk(b'AB', 2, 8)
        row = format_row(1, 8, 15, 8, rendered, ColumnWidths(6, 5))
        assert row.endswith("000008 -> 000015  | 00008 -> 00015")

    def test_row_aligns_with_header(self):
        """Column delimiters in rows line up with the header once RAW DATA fits."""
        for chunk_size in (8, 9, 16, 33, 64):
            widths = ColumnWidths(offset_digits=6, count_digits=5)
            _, header = format_header(chunk_size, widths)
            full = render_chunk(bytes(chunk_size), chunk_size, chunk_size)
            short = render_chunk(b'\x01', 1, chunk_size)
            for rendered in (full, short):
                row = format_row(0, 0, chunk_size - 1, chunk_size, rendered, widths)
                assert _bar_positions(row) == _bar_positions(header)
                assert row.index('*', 1) == header.index('*', 1)

    def test_narrow_chunk_header_wider_than_row(self):
        """Below 8 bytes the RAW DATA heading is wider than the text column."""
        widths = ColumnWidths()
        for chunk_size in range(4, 8):
            _, header = format_header(chunk_size, widths)
            rendered = render_chunk(bytes(chunk_size), chunk_size, chunk_size)
            row = format_row(0, 0, chunk_size - 1, chunk_size, rendered, widths)

            assert "| RAW DATA |" in header
            header_bars = _bar_positions(header)
            row_bars = _bar_positions(row)
            assert header_bars[0] == row_bars[0]
            assert header_bars[1] - row_bars[1] == 8 - chunk_size
            assert header_bars[2] - row_bars[2] == 8 - chunk_size

    def test_read_count_uses_chunk_size(self):
        """The read-count span comes from chunk_size, not the offset span."""
        rendered = render_chunk(b'AB', 2, 8)
        row = format_row(1, 8, 9, 8, rendered, ColumnWidths())
        assert row.endswith("00008 -> 00009  | 00008 -> 00015")
