#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: cli.py
Version: 1.0

Description:
------------
Command-line interface for the base_conversion package, powered by Typer.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from loguru import logger

from . import __version__
from .converter import Converter
from .exceptions import BaseConversionError
from .options import ConversionOptions
from .utils import LOG_FORMAT

app = typer.Typer(
    name="base-conversion",
    help="Convert digit strings between binary, octal, decimal and hexadecimal.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

_BASE_HELP = "Base: bin, oct, dec, hex (or 2, 8, 10, 16)."


def version_callback(value: bool):
    if value:
        console.print(f"base-conversion version: {__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
):
    """Manage global options."""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level,
               format=LOG_FORMAT)


def _get_options_from_args(config_file: Optional[Path], **kwargs) -> ConversionOptions:
    """
    Create ConversionOptions from environment, config file and CLI arguments.

    Later sources win: defaults, then BASE_CONVERSION_UPPERCASE, then keys
    present in the config file, then explicit command-line flags.
    """
    options = ConversionOptions.from_env()
    if config_file and config_file.exists():
        logger.info(f"Loading options from config file: {config_file}")
        if config_file.suffix.lower() in ('.yml', '.yaml'):
            options = ConversionOptions.from_yaml(config_file, base=options)
        else:
            options = ConversionOptions.from_json(config_file, base=options)

    for key, value in kwargs.items():
        if value is not None and hasattr(options, key):
            setattr(options, key, value)
    # Re-run field checks after overrides
    options.__post_init__()
    return options


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(code=1)


@app.command("convert")
def convert_command(
    value: str = typer.Argument(..., help="Digit string to convert."),
    from_base: str = typer.Option(..., "--from", "-f", help=_BASE_HELP),
    to_base: str = typer.Option(..., "--to", "-t", help=_BASE_HELP),
    lowercase: bool = typer.Option(
        False, "--lowercase", "-l", help="Emit lowercase hexadecimal digits."),
    group: Optional[int] = typer.Option(
        None, "--group", "-g", help="Separate output digits into groups of this size."),
    lenient: bool = typer.Option(
        False, "--lenient", help="Accept surrounding whitespace and a 0b/0o/0x prefix."),
    config: Optional[Path] = typer.Option(
        None, help="Path to JSON/YAML configuration file.", exists=True),
):
    """Convert a digit string from one base to another."""
    try:
        options = _get_options_from_args(
            config,
            uppercase=False if lowercase else None,
            group_output=group,
            strict=False if lenient else None,
        )
        result = Converter(options).convert(value, from_base, to_base)
        console.print(result, highlight=False, soft_wrap=True)
    except (BaseConversionError, OSError) as e:
        _fail(e)


@app.command("all")
def all_command(
    value: str = typer.Argument(..., help="Digit string to convert."),
    from_base: str = typer.Option(..., "--from", "-f", help=_BASE_HELP),
    lowercase: bool = typer.Option(
        False, "--lowercase", "-l", help="Emit lowercase hexadecimal digits."),
):
    """Show a digit string in all four bases."""
    try:
        options = _get_options_from_args(
            None, uppercase=False if lowercase else None)
        results = Converter(options).convert_all(value, from_base)
    except BaseConversionError as e:
        _fail(e)
        return

    table = Table(title=f"{escape(value)} ({from_base})")
    table.add_column("Base", style="bold cyan")
    table.add_column("Value", overflow="fold")
    for label, digits in results.items():
        table.add_row(label, digits)
    console.print(table)


def main():
    app()


if __name__ == "__main__":
    main()
