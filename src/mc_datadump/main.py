"""CLI entrypoint for mc-datadump."""

from __future__ import annotations

import logging
import sys

import typer
from rich import print
from rich.console import Console

from mc_datadump.adapters import DataDumpError, JsonSnapshotDataSource
from mc_datadump.config import settings
from mc_datadump.dump import DataTableDumper

app = typer.Typer(help="Dump Minecraft biome and block-state registries as Rust tables")
_console = Console()
_stderr = Console(stderr=True)


@app.callback()
def _configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _build_dumper(snapshot: str | None) -> DataTableDumper:
    path = snapshot or settings.snapshot_path
    if not path:
        raise typer.BadParameter("Provide a SNAPSHOT path or set MC_DATADUMP_SNAPSHOT_PATH")
    return DataTableDumper(JsonSnapshotDataSource.from_path(path))


@app.command()
def dump(
    snapshot: str = typer.Argument(None, help="JSON registry export from an initialized client"),
    output: str = typer.Option(None, "--output", "-o", help="Write tables to this file instead of stdout"),
) -> None:
    """Write the BIOMES and BLOCK_STATES tables."""
    target = output or settings.output_path
    try:
        dumper = _build_dumper(snapshot)
        if target:
            result = dumper.write_file(target)
        else:
            result = dumper.write(sys.stdout)
    except DataDumpError as exc:
        _stderr.print({"error": f"{type(exc).__name__}: {exc}"})
        raise typer.Exit(code=1)

    if result.diagnostics:
        _stderr.print(f"{len(result.diagnostics)} block(s) left out of BLOCK_STATES; see comment lines")


@app.command()
def summary(
    snapshot: str = typer.Argument(None, help="JSON registry export from an initialized client"),
) -> None:
    """Show table counts and every block left out of the literal table."""
    try:
        result = _build_dumper(snapshot).render()
    except DataDumpError as exc:
        _stderr.print({"error": f"{type(exc).__name__}: {exc}"})
        raise typer.Exit(code=1)

    print(result.stats)
    for diagnostic in result.diagnostics:
        _console.print(diagnostic.render().strip(), markup=False, highlight=False, soft_wrap=True)


@app.command("show-config")
def show_config() -> None:
    """Show effective configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "snapshot_path": settings.snapshot_path,
            "output_path": settings.output_path,
        }
    )


if __name__ == "__main__":
    app()
