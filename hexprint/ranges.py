"""
HexPrintFile - Byte Range Resolution

Turns the raw start/end/count options into a validated byte range and works
out how many fixed-size chunks cover it.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from hexprint.errors import (
    ConflictingRangeOptions,
    EndBeforeStart,
    EndBeyondFile,
    StartBelowOriginFloor,
    StartBeyondFile,
    StartNegative,
)
from hexprint.utils import align_up, ceil_div


class IndexOrigin(IntEnum):
    """Where displayed offsets start counting. The value is added to file positions."""
    ZERO = 0
    ONE = 1


@dataclass(frozen=True)
class ByteRange:
    """
    Resolved byte window.

    start and end are expressed in the active origin; a start that was not
    supplied is 0 under both origins and means "from the beginning".
    """
    start: int
    end: int
    file_size: int
    origin: IndexOrigin = IndexOrigin.ZERO

    @property
    def first_offset(self) -> int:
        """Zero-based file position of the first byte."""
        return max(self.start - self.origin, 0)

    @property
    def last_offset(self) -> int:
        """Zero-based file position of the last byte."""
        return max(self.end - self.origin, self.first_offset)

    @property
    def display_start(self) -> int:
        return self.first_offset + self.origin

    @property
    def display_end(self) -> int:
        return self.last_offset + self.origin

    @property
    def length(self) -> int:
        """Number of bytes between first_offset and last_offset inclusive."""
        return self.last_offset - self.first_offset + 1


@dataclass(frozen=True)
class ChunkPlan:
    """How the range is split into chunks."""
    total_bytes_to_read: int
    rounded_read_length: int
    chunk_size: int
    chunk_count: int


def resolve_range(
    file_size: int,
    start: Optional[int] = None,
    end: Optional[int] = None,
    count: Optional[int] = None,
    origin: IndexOrigin = IndexOrigin.ZERO,
) -> ByteRange:
    """
    Validate start/end/count against the file size.

    Args:
        file_size: Size of the target file in bytes
        start: First byte to show (None = beginning of file)
        end: Last byte to show, inclusive (None = EOF unless count is given)
        count: Number of bytes to show from start
        origin: Indexing origin the values are expressed in

    Returns:
        Resolved ByteRange

    Raises:
        ConflictingRangeOptions: end and count both given
        StartNegative: start < 0
        StartBelowOriginFloor: start < 1 with origin ONE
        StartBeyondFile: start at or past the end of the file
        EndBeyondFile: end past the last readable byte
        EndBeforeStart: end < start
    """
    if end is not None and count is not None:
        raise ConflictingRangeOptions("Cannot use -c and -e together.")

    start_at = 0
    if start is not None:
        if start < 0:
            raise StartNegative("Start byte cannot be less than zero.")
        if origin == IndexOrigin.ONE and start < 1:
            raise StartBelowOriginFloor(
                "Start byte cannot be less than one (when indexed from one).")
        start_at = start

    if start_at >= file_size:
        raise StartBeyondFile("Start byte cannot be greater than the length of the file.")

    if count is not None:
        # Under ONE the inclusive end may sit on file_size itself
        limit = file_size if origin == IndexOrigin.ONE else file_size - 1
        end_at = min(start_at + count, limit)
        if end_at < start_at:
            raise EndBeforeStart("End byte must be greater than or equal to the start byte.")
    elif end is not None:
        if origin == IndexOrigin.ONE:
            beyond = end > file_size
        else:
            beyond = end >= file_size
        if beyond:
            raise EndBeyondFile("End byte cannot be greater than the length of the file.")
        if end < start_at:
            raise EndBeforeStart("End byte must be greater than or equal to the start byte.")
        end_at = end
    else:
        end_at = file_size - 1

    return ByteRange(start=start_at, end=end_at, file_size=file_size, origin=origin)


def plan_chunks(byte_range: ByteRange, chunk_size: int) -> ChunkPlan:
    """
    Work out how many chunks cover the range.

    Bytes to read (end - start) is rounded up to a whole chunk and capped at
    the file size. A single-byte range (start == end) still gets one chunk.
    """
    total = byte_range.end - byte_range.start
    rounded = min(align_up(total, chunk_size), byte_range.file_size)
    return ChunkPlan(
        total_bytes_to_read=total,
        rounded_read_length=rounded,
        chunk_size=chunk_size,
        chunk_count=max(ceil_div(rounded, chunk_size), 1),
    )
