"""
HexPrintFile - Return Codes and Errors

Every failure the tool can report maps to exactly one stable exit code.
"""
from enum import IntEnum
from typing import Tuple


class ExitCode(IntEnum):
    """Process exit codes."""
    OK = 0
    FILE_NOT_FOUND = 1
    START_LARGER_THAN_LENGTH = 2
    END_BYTE_BEYOND_LENGTH = 3
    GENERAL_ERROR = 4
    OPTION_C_AND_E = 5
    START_LESS_ZERO = 6
    END_LESS_THAN_START = 7
    COMMAND_EXCEPTION = 8
    START_LESS_ONE = 9
    CHUNK_LESS_THAN_MINIMUM = 10
    CHUNK_MORE_THAN_MAXIMUM = 11


# Ordered for the help epilog
RETURN_CODES: Tuple[Tuple[ExitCode, str], ...] = (
    (ExitCode.OK, "Success"),
    (ExitCode.FILE_NOT_FOUND, "File not found"),
    (ExitCode.START_LARGER_THAN_LENGTH, "Start byte greater than the length of the file"),
    (ExitCode.END_BYTE_BEYOND_LENGTH, "End byte greater than or equal to the length of the file"),
    (ExitCode.GENERAL_ERROR, "General error displaying the data"),
    (ExitCode.OPTION_C_AND_E, "Cannot use options -c and -e together"),
    (ExitCode.START_LESS_ZERO, "Start byte is less than zero"),
    (ExitCode.END_LESS_THAN_START, "End byte less than start byte"),
    (ExitCode.COMMAND_EXCEPTION, "Command line parsing exception"),
    (ExitCode.START_LESS_ONE, "Start byte is less than one and index from one mode enabled"),
    (ExitCode.CHUNK_LESS_THAN_MINIMUM, "Read block size cannot be less than 4 bytes"),
    (ExitCode.CHUNK_MORE_THAN_MAXIMUM, "Read block size cannot be more than 64 bytes"),
)


def describe_return_codes(line_start: str = "") -> str:
    """
    Format the return code table, one "code: description" per line.

    Args:
        line_start: Prefix added to every line

    Returns:
        Multi-line string
    """
    return "\n".join(f"{line_start}{int(code)}: {desc}" for code, desc in RETURN_CODES)


# =============================================================================
# Exceptions
# =============================================================================

class HexPrintError(Exception):
    """Base error; carries the exit code the CLI reports."""
    exit_code = ExitCode.GENERAL_ERROR


class InputValidationError(HexPrintError):
    """Bad file argument or option combination."""


class RangeArithmeticError(HexPrintError):
    """Start/end inconsistent with the file size or with each other."""


class IoFailure(HexPrintError):
    """Read failed while dumping."""
    exit_code = ExitCode.GENERAL_ERROR


class CommandSyntaxError(HexPrintError):
    """Malformed command line or configuration."""
    exit_code = ExitCode.COMMAND_EXCEPTION


class FileNotFound(InputValidationError):
    exit_code = ExitCode.FILE_NOT_FOUND


class ConflictingRangeOptions(InputValidationError):
    exit_code = ExitCode.OPTION_C_AND_E


class ChunkSizeTooSmall(InputValidationError):
    exit_code = ExitCode.CHUNK_LESS_THAN_MINIMUM


class ChunkSizeTooLarge(InputValidationError):
    exit_code = ExitCode.CHUNK_MORE_THAN_MAXIMUM


class StartNegative(RangeArithmeticError):
    exit_code = ExitCode.START_LESS_ZERO


class StartBelowOriginFloor(RangeArithmeticError):
    exit_code = ExitCode.START_LESS_ONE


class StartBeyondFile(RangeArithmeticError):
    exit_code = ExitCode.START_LARGER_THAN_LENGTH


class EndBeyondFile(RangeArithmeticError):
    exit_code = ExitCode.END_BYTE_BEYOND_LENGTH


class EndBeforeStart(RangeArithmeticError):
    exit_code = ExitCode.END_LESS_THAN_START
