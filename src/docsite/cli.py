"""CLI interface for Docsite.

Command-line tool for generating a static documentation site.
"""

import logging
import sys
import traceback
from pathlib import Path

import click

from docsite.config import Config


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
def cli() -> None:
    """Docsite - Generate a static documentation site from markdown."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docsite.toml)",
)
@click.option(
    "--input-dir",
    "-i",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation input directory (overrides config)",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Site output directory (overrides config)",
)
@click.option(
    "--manifest",
    "-m",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Package manifest JSON file (overrides config)",
)
@click.option(
    "--exclude",
    "-e",
    "excludes",
    multiple=True,
    help="Glob of input paths to skip (repeatable, added to config excludes)",
)
@click.option(
    "--html-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Theme directory with template.html, css/, img/ and favicons/ (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def build(
    config_path: Path | None,
    input_dir: Path | None,
    output_dir: Path | None,
    manifest: Path | None,
    excludes: tuple[str, ...],
    html_dir: Path | None,
    verbose: bool,
) -> None:
    """Generate the documentation site."""
    from docsite.processor import process_files

    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            input_dir=input_dir,
            output_dir=output_dir,
            manifest=manifest,
            excludes=list(excludes),
            html_dir=html_dir,
        )

        click.echo(f"Input directory: {config.docs.input_dir}")
        click.echo(f"Output directory: {config.docs.output_dir}")
        if config.docs.manifest:
            click.echo(f"Package manifest: {config.docs.manifest}")

        result = process_files(config)

        click.echo(
            click.style("\nSite generated successfully!", fg="green", bold=True),
        )
        click.echo(f"Pages: {result.pages_written}")
        click.echo(f"Files copied: {result.files_copied}")

    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        traceback.print_exc()
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docsite.toml)",
)
@click.option(
    "--input-dir",
    "-i",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation input directory (overrides config)",
)
def tree(config_path: Path | None, input_dir: Path | None) -> None:
    """Print the navigation tree without writing anything."""
    from docsite.processor import build_nav_tree

    try:
        config = Config.load(config_path).with_overrides(input_dir=input_dir)
        root_folder, _ = build_nav_tree(
            config.docs.input_dir,
            config.docs.excludes,
            config.navigation.top_level_order,
        )
        click.echo(root_folder.format_tree())

    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    cli()
