#!/usr/bin/env python3
"""
HexPrintFile

Print the hex representation of a file, or a portion of a file.

Usage:
    python hex_print_file.py firmware.bin
    python hex_print_file.py firmware.bin -s 256 -c 64 -r 32
    python hex_print_file.py firmware.bin -e 1023 --extended --index-from-one
"""
import sys
from pathlib import Path
from typing import Optional

# Add parent dir to path for hexprint package
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
from click.core import ParameterSource
from rich.console import Console
from rich.markup import escape

from hexprint.dump import DEFAULT_CHUNK_SIZE, DisplayConfig, HexDumper
from hexprint.errors import (
    ConflictingRangeOptions,
    ExitCode,
    FileNotFound,
    HexPrintError,
    IoFailure,
    describe_return_codes,
)
from hexprint.ranges import IndexOrigin
from hexprint.settings import load_settings

VERSION = "1.0.0"

console = Console()
err_console = Console(stderr=True)

EPILOG = f"""\b
> ----------------------------------------------------
> Return Codes
{describe_return_codes("> ")}
> ----------------------------------------------------
> Version:   {VERSION}
> ----------------------------------------------------
"""


class HexPrintCommand(click.Command):
    """Command that reports every command line parsing problem with its own exit code."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = int(ExitCode.COMMAND_EXCEPTION)
            raise


def _error(message: str) -> None:
    console.print(f"[red]ERROR: {escape(message)}[/]")


def _from_config(ctx: click.Context, name: str, value, settings: dict, key: str):
    """Use the config file value when the option was left at its default."""
    if key in settings and ctx.get_parameter_source(name) == ParameterSource.DEFAULT:
        return settings[key]
    return value


# =============================================================================
# CLI Entry Point
# =============================================================================

@click.command(cls=HexPrintCommand, epilog=EPILOG, context_settings={'help_option_names': ['-h', '--help']})
@click.argument('file', type=click.Path())
@click.option('-s', '--start-byte', 'start_byte', type=int, default=None, metavar='<BYTE>',
              help='Byte to start reading from. 0 if excluded.')
@click.option('-e', '--end-byte', 'end_byte', type=int, default=None, metavar='<BYTE>',
              help='Byte to read to (inclusive). Reads to EOF if excluded. Cannot be used with -c.')
@click.option('-c', '--count-bytes', 'count_bytes', type=int, default=None, metavar='<COUNT>',
              help='Returns COUNT bytes from start byte (if provided). Cannot be used with -e.')
@click.option('-r', '--read-chunk-size', 'chunk_size', type=int, default=DEFAULT_CHUNK_SIZE, metavar='<BYTES>',
              help='Sets the chunk size. Minimum 4, Maximum 64. Default is 16.')
@click.option('-x', '--extended', is_flag=True, help='Spell out control and high-range bytes in the raw column.')
@click.option('-o', '--index-from-one', 'index_from_one', is_flag=True, help='Index the bytes from 1 rather than 0.')
@click.option('--config', 'config_path', type=click.Path(), envvar='HEXPRINTFILE_CONFIG', default=None,
              help='JSON file with default chunk_size, extended and index_from_one.')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.version_option(VERSION, prog_name='HexPrintFile')
@click.pass_context
def cli(ctx: click.Context, file: str, start_byte: Optional[int], end_byte: Optional[int],
        count_bytes: Optional[int], chunk_size: int, extended: bool, index_from_one: bool,
        config_path: Optional[str], verbose: bool):
    """A tool to print the hex representation of a file, or portion of a file."""
    try:
        settings = load_settings(config_path) if config_path else {}
        chunk_size = _from_config(ctx, 'chunk_size', chunk_size, settings, 'chunk_size')
        extended = _from_config(ctx, 'extended', extended, settings, 'extended')
        index_from_one = _from_config(ctx, 'index_from_one', index_from_one, settings, 'index_from_one')
        if verbose and config_path:
            err_console.print(f"[dim]Loaded settings from {escape(config_path)}: {settings}[/]")

        if not Path(file).is_file():
            raise FileNotFound("File not found.")
        if end_byte is not None and count_bytes is not None:
            raise ConflictingRangeOptions("Cannot use -c and -e together.")

        config = DisplayConfig(
            chunk_size=chunk_size,
            origin=IndexOrigin.ONE if index_from_one else IndexOrigin.ZERO,
            extended=extended,
        )
        dumper = HexDumper(file, config, start=start_byte, end=end_byte, count=count_bytes, out=console)
        byte_range = dumper.resolve()

        if verbose:
            plan = dumper.plan
            err_console.print(f"[dim]File offsets: 0x{byte_range.first_offset:X}-0x{byte_range.last_offset:X} "
                              f"({byte_range.length:,} bytes)[/]")
            err_console.print(f"[dim]Plan: {plan.chunk_count} chunks of {plan.chunk_size} bytes, "
                              f"{plan.rounded_read_length:,} bytes read[/]")

        dumper.run()
    except IoFailure as e:
        console.print(f"[red]EXCEPTION: {escape(str(e))}[/]")
        _error("Cannot display data.")
        ctx.exit(int(e.exit_code))
    except HexPrintError as e:
        _error(str(e))
        ctx.exit(int(e.exit_code))


if __name__ == '__main__':
    cli()
