"""
HexPrintFile - Chunk Reader

Sequential fixed-size reads over the target region of an open file.
"""
from typing import BinaryIO, Iterator, Tuple

from hexprint.errors import IoFailure
from hexprint.ranges import ByteRange, ChunkPlan


def iter_chunks(stream: BinaryIO, byte_range: ByteRange, plan: ChunkPlan) -> Iterator[Tuple[bytes, int]]:
    """
    Yield (block, bytes_read) pairs starting at the range's first byte.

    Stops after plan.chunk_count blocks, on an empty read, or after a short
    read (which is the final block). Create a new iterator to start over.

    Raises:
        IoFailure: Seek or read failed
    """
    try:
        stream.seek(byte_range.first_offset)
        for _ in range(plan.chunk_count):
            block = stream.read(plan.chunk_size)
            if not block:
                return
            yield block, len(block)
            if len(block) < plan.chunk_size:
                return
    except OSError as e:
        raise IoFailure(str(e)) from e
