"""
HexPrintFile - Dump Engine

Resolves the range, prints the summary and the bordered table, and drives the
read/render/format loop.

Usage:
    dumper = HexDumper("firmware.bin", DisplayConfig(chunk_size=32), start=0x100, count=64)
    dumper.run()
"""
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from hexprint.errors import (
    ChunkSizeTooLarge,
    ChunkSizeTooSmall,
    FileNotFound,
    HexPrintError,
    IoFailure,
)
from hexprint.layout import ColumnWidths, compute_widths, format_header, format_row
from hexprint.ranges import ByteRange, ChunkPlan, IndexOrigin, plan_chunks, resolve_range
from hexprint.reader import iter_chunks
from hexprint.render import render_chunk
from hexprint.utils import zero_pad

console = Console()

MIN_CHUNK_SIZE = 4
MAX_CHUNK_SIZE = 64
DEFAULT_CHUNK_SIZE = 16


# =============================================================================
# Configuration and State
# =============================================================================

@dataclass(frozen=True)
class DisplayConfig:
    """How the dump is laid out."""
    chunk_size: int = DEFAULT_CHUNK_SIZE
    origin: IndexOrigin = IndexOrigin.ZERO
    extended: bool = False

    def __post_init__(self):
        if self.chunk_size < MIN_CHUNK_SIZE:
            raise ChunkSizeTooSmall("Read block size cannot be less than 4 bytes.")
        if self.chunk_size > MAX_CHUNK_SIZE:
            raise ChunkSizeTooLarge("Read block size cannot be greater than 64 bytes.")


class DumpState(Enum):
    """Lifecycle of a single dump."""
    IDLE = auto()
    RANGE_RESOLVED = auto()
    READING = auto()
    DONE = auto()
    FAILED = auto()


# =============================================================================
# Engine
# =============================================================================

def summary_lines(path: str, byte_range: ByteRange, plan: ChunkPlan, widths: ColumnWidths) -> List[str]:
    """Text block printed above the table."""
    if byte_range.origin == IndexOrigin.ONE:
        note = "Note: Strings are all INDEXED FROM ONE"
    else:
        note = "Note: Strings are all ZERO INDEXED"

    return [
        "HexPrintFile",
        "============",
        "",
        f"Opening file:      {path}",
        f"File size:         {byte_range.file_size} bytes",
        "",
        f"Start At Byte:     {zero_pad(byte_range.display_start, widths.offset_digits)}",
        f"End At Byte:       {zero_pad(byte_range.display_end, widths.offset_digits)}",
        f"Bytes to read:     {plan.total_bytes_to_read}",
        f"Chunk size:        {plan.chunk_size} bytes",
        f"Actual total read: {plan.rounded_read_length} bytes",
        f"Chunks:            {plan.chunk_count}",
        "",
        note,
        "",
    ]


class HexDumper:
    """
    One dump of one file.

    Errors are raised as HexPrintError subclasses; rows already printed when a
    read fails stay printed.
    """

    def __init__(
        self,
        path: str,
        config: Optional[DisplayConfig] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
        count: Optional[int] = None,
        out: Optional[Console] = None,
    ):
        self.path = path
        self.config = config or DisplayConfig()
        self.start = start
        self.end = end
        self.count = count
        self.out = out or console

        self.state = DumpState.IDLE
        self.byte_range: Optional[ByteRange] = None
        self.plan: Optional[ChunkPlan] = None
        self.widths: Optional[ColumnWidths] = None
        self.rows_written = 0

    def _emit(self, line: str) -> None:
        # Byte text must never be read as markup or highlighted
        try:
            self.out.out(line, highlight=False)
        except UnicodeEncodeError as e:
            self.state = DumpState.FAILED
            raise IoFailure(f"Output cannot encode dump text: {e}") from e

    def _emit_header(self) -> None:
        separator, header = format_header(self.config.chunk_size, self.widths)
        self._emit(separator)
        self._emit(header)
        self._emit(separator)

    def resolve(self) -> ByteRange:
        """Validate the request; moves IDLE -> RANGE_RESOLVED."""
        try:
            file_path = Path(self.path)
            if not file_path.is_file():
                raise FileNotFound("File not found.")
            self.byte_range = resolve_range(
                file_path.stat().st_size,
                start=self.start,
                end=self.end,
                count=self.count,
                origin=self.config.origin,
            )
        except HexPrintError:
            self.state = DumpState.FAILED
            raise

        self.plan = plan_chunks(self.byte_range, self.config.chunk_size)
        self.widths = compute_widths(self.byte_range, self.plan)
        self.state = DumpState.RANGE_RESOLVED
        return self.byte_range

    def run(self) -> int:
        """
        Print the whole dump.

        Returns:
            Number of table rows printed
        """
        if self.state == DumpState.IDLE:
            self.resolve()

        for line in summary_lines(self.path, self.byte_range, self.plan, self.widths):
            self._emit(line)
        self._emit_header()

        self.state = DumpState.READING
        chunk_size = self.config.chunk_size
        offset = self.byte_range.first_offset
        try:
            with open(self.path, 'rb') as stream:
                for index, (block, bytes_read) in enumerate(iter_chunks(stream, self.byte_range, self.plan)):
                    rendered = render_chunk(block, bytes_read, chunk_size, self.config.extended)
                    # Offsets always advance by a full chunk, even for a short block
                    self._emit(format_row(index, offset, offset + chunk_size - 1, chunk_size,
                                          rendered, self.widths, self.config.origin))
                    offset += chunk_size
                    self.rows_written += 1
        except OSError as e:
            self.state = DumpState.FAILED
            raise IoFailure(str(e)) from e
        except HexPrintError:
            self.state = DumpState.FAILED
            raise

        self._emit_header()
        self.state = DumpState.DONE
        return self.rows_written
