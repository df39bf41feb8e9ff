"""
HexPrintFile - Byte Rendering

Converts a block of bytes into the hex column and the raw text column.
"""
from dataclasses import dataclass
from typing import Tuple

# Shown in place of any unprintable byte in the default mode
PLACEHOLDER = "\N{BLACK SQUARE}"

# ASCII control mnemonics, indexed by byte value 0x00-0x1F
CONTROL_CHAR_NAMES: Tuple[str, ...] = (
    "<NUL>", "<SOH>", "<STX>", "<ETX>",
    "<EOT>", "<ENQ>", "<ACK>", "<BEL>",
    "<BS>",  "<HT>",  "<LF>",  "<VT>",
    "<FF>",  "<CR>",  "<SO>",  "<SI>",
    "<DLE>", "<DC1>", "<DC2>", "<DC3>",
    "<DC4>", "<NAK>", "<SYN>", "<ETB>",
    "<CAN>", "<EM>",  "<SUB>", "<ESC>",
    "<FS>",  "<GS>",  "<RS>",  "<US>",
)

DELETE_NAME = "<DEL>"

SOFT_HYPHEN = 0xAD


@dataclass(frozen=True)
class RenderedChunk:
    """Both display columns for one chunk."""
    hex_column: str
    text_column: str
    raw_byte_count: int


def is_unprintable(value: int) -> bool:
    """
    True for byte values whose Latin-1 character is a control or format character.

    Covers C0 controls, DEL, C1 controls and the soft hyphen, which are the only
    single-byte code points in the Unicode "Other" categories.
    """
    return value < 0x20 or 0x7F <= value <= 0x9F or value == SOFT_HYPHEN


def extended_name(value: int) -> str:
    """Spell out a byte for extended mode."""
    if value < 0x20:
        return CONTROL_CHAR_NAMES[value]
    if value == 0x7F:
        return DELETE_NAME
    if value > 0x7F:
        # Signed byte widened to a 16-bit code unit: 0x80 -> FF80, 0xFF -> FFFF
        return "\\u%04X" % ((value - 0x100) & 0xFFFF)
    return chr(value)


def render_hex(block: bytes, chunk_size: int) -> str:
    """Space separated uppercase hex, padded to the width of a full chunk."""
    hex_string = " ".join(f"{b:02X}" for b in block)
    return hex_string.ljust(chunk_size * 3 - 1)


def render_text(block: bytes, extended: bool = False) -> str:
    """
    Render bytes as display characters.

    Default mode produces exactly one character per byte. Extended mode spells
    out control and high bytes, so its width varies with content.
    """
    if extended:
        return "".join(extended_name(b) for b in block)
    return "".join(PLACEHOLDER if is_unprintable(b) else chr(b) for b in block)


def render_chunk(block: bytes, bytes_valid: int, chunk_size: int, extended: bool = False) -> RenderedChunk:
    """
    Render the valid part of a block into a RenderedChunk.

    A short block keeps the columns aligned: hex is padded to the full chunk
    width, and text is cut to bytes_valid characters then padded to
    chunk_size. In extended mode the cut can land inside a mnemonic.
    """
    valid = bytes(block[:bytes_valid])
    text = render_text(valid, extended)
    if bytes_valid < chunk_size:
        text = text[:bytes_valid].ljust(chunk_size)
    return RenderedChunk(
        hex_column=render_hex(valid, chunk_size),
        text_column=text,
        raw_byte_count=bytes_valid,
    )
