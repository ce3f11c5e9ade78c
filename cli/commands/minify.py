"""Minify command."""

import click
from pathlib import Path

from gobundle import ParseError, minify_source
from cli.config import configure_logging


@click.command()
@click.argument("source_file", type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option(
    "--level",
    type=click.IntRange(1, 3),
    default=1,
    envvar="GOBUNDLE_MINIFY_LEVEL",
    show_default=True,
    help="Minification level (1-3)",
)
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def minify(source_file: Path, level: int, verbose: bool):
    """Print the minified form of one Go file."""
    configure_logging(verbose)
    try:
        text = minify_source(source_file.read_bytes(), level=level, path=str(source_file))
    except ParseError as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()
    click.echo(text)
