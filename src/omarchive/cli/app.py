"""
Typer application for ``omarchive-build``.

Runs one build and writes one archive file.  With no options the built-in
core content pack is compiled into the configured output directory
(``OMARCHIVE_OUTPUT_DIR``, default the working directory).

Exit codes:
    0  archive written
    1  the build failed with an ``ArchiveError``
    2  unexpected error
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from omarchive import __version__
from omarchive.core.errors import ArchiveError, categorize_error
from omarchive.core.logging import configure_logging
from omarchive.core.settings import BuilderSettings
from omarchive.writer import ArchiveWriter

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="omarchive-build",
    help="Compile open metadata definitions into a content-pack archive.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"omarchive {__version__}")
        raise typer.Exit()


def _summary_table(writer: ArchiveWriter, path: Path) -> Table:
    archive = writer.archive
    table = Table(title=f"Archive: {writer.catalogue.archive.name}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("File", str(path))
    if archive is not None:
        table.add_row("GUID", archive.header.guid)
        table.add_row("Entities", str(len(archive.nodes)))
        table.add_row("Relationships", str(len(archive.edges)))
        table.add_row("Fingerprint", archive.fingerprint()[:16])
    for category, count in writer.catalogue.summary().items():
        table.add_row(category.replace("_", " "), str(count))
    return table


@app.command()
def build(
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory the archive is written to."
    ),
    catalogue: Path | None = typer.Option(
        None, "--catalogue", "-c", exists=True, dir_okay=False, help="YAML catalogue to compile instead of the built-in pack."
    ),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR."),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Build the archive and write it to the output directory."""
    overrides: dict[str, object] = {}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if catalogue is not None:
        overrides["catalogue_file"] = catalogue
    if log_level is not None:
        overrides["log_level"] = log_level

    try:
        settings = BuilderSettings(**overrides)
        configure_logging(level=settings.log_level, json_format=settings.json_logs)
        writer = ArchiveWriter.from_settings(settings)
        path = writer.write()
    except ArchiveError as e:
        err_console.print(f"[bold red]Error[/bold red] ({e.category.value}): {e.message}")
        raise typer.Exit(code=1) from e
    except Exception as e:
        err_console.print(f"[bold red]Unexpected error[/bold red] ({categorize_error(e).value}): {e}")
        raise typer.Exit(code=2) from e

    console.print(_summary_table(writer, path))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
