"""Bundle command."""

import click
from pathlib import Path

from gobundle import BundleConfig, GoBundleError, bundle_project
from gobundle.bundle import write_bundle
from cli.config import DEFAULT_EXCLUDES, configure_logging, default_output_file, split_excludes


@click.command()
@click.argument(
    "project_dir", default=".", type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path)
)
@click.option("--out", "output", type=click.Path(dir_okay=False, path_type=Path), help="Output file")
@click.option("--meta/--no-meta", default=False, help="Include package structure in the metadata line")
@click.option(
    "--minify",
    "level",
    type=click.IntRange(1, 3),
    default=1,
    envvar="GOBUNDLE_MINIFY_LEVEL",
    show_default=True,
    help="Minification level (1-3)",
)
@click.option(
    "--exclude",
    default=DEFAULT_EXCLUDES,
    envvar="GOBUNDLE_EXCLUDE",
    show_default=True,
    help="Comma-separated list of path prefixes to skip",
)
@click.option("--keep-going", is_flag=True, help="Skip files that fail to parse instead of aborting")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def bundle(
    project_dir: Path,
    output: Path,
    meta: bool,
    level: int,
    exclude: str,
    keep_going: bool,
    verbose: bool,
):
    """Minify every Go file under PROJECT_DIR and write a single bundle."""
    configure_logging(verbose)
    output = output or default_output_file(project_dir)
    click.echo(f"📦 Bundling Go project: {project_dir}")

    config = BundleConfig(
        project_dir=project_dir,
        output_file=output,
        exclude_dirs=split_excludes(exclude),
        include_meta=meta,
        minify_level=level,
        strict=not keep_going,
    )

    try:
        result = bundle_project(config)
    except GoBundleError as e:
        click.echo(f"❌ Bundling failed: {e}", err=True)
        raise click.Abort()

    write_bundle(result.text, config.output_file)

    click.echo(f"  Files: {len(result.files)}")
    click.echo(f"  Imports: {len(result.metadata.imports)}")
    click.echo(f"  Dependencies: {len(result.metadata.dependencies)}")
    click.echo(f"  Size: {result.source_bytes} -> {len(result.text.encode('utf-8'))} bytes")
    if result.failed:
        click.echo(f"  ⚠️  Skipped {len(result.failed)} file(s) that did not parse:", err=True)
        for path in result.failed:
            click.echo(f"     {path}", err=True)
    click.echo(f"✅ AI-friendly Go project bundle created: {config.output_file}")
