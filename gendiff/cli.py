#!/usr/bin/env python3
"""
gendiff CLI - compare two configuration files and show the difference.

    gendiff file1.json file2.yml
    gendiff --format plain file1.json file2.json
"""
import sys

import click
from rich.console import Console
from rich.markup import escape

from gendiff import __version__
from gendiff.api import generate_diff
from gendiff.config import Settings
from gendiff.errors import DiffError
from gendiff.log import setup_logger

err_console = Console(stderr=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="gendiff")
@click.argument("filepath1", type=click.Path(dir_okay=False))
@click.argument("filepath2", type=click.Path(dir_okay=False))
@click.option(
    "--format", "-f", "format_name", default=None,
    help="Output format: stylish, plain or json (default: stylish, env: GENDIFF_FORMAT)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
def main(filepath1, filepath2, format_name, verbose):
    """Compares two configuration files and shows a difference."""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise click.UsageError(f"GENDIFF_LOG_LEVEL: {e}") from e

    setup_logger(verbose=verbose, level=settings.log_level)

    try:
        result = generate_diff(filepath1, filepath2, format_name or settings.default_format)
    except DiffError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    click.echo(result)


if __name__ == "__main__":
    main()
