"""CLI entrypoint."""

import click

from gobundle import __version__

from .commands.bundle import bundle
from .commands.minify import minify


@click.group()
@click.version_option(version=__version__, prog_name="gobundle")
def cli():
    """gobundle - Pack a Go project into one minified, self-describing text file."""
    pass


cli.add_command(bundle)
cli.add_command(minify)


if __name__ == "__main__":
    cli()
