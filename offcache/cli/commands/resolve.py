"""CLI: resolve a build output directory into cache buckets."""

from __future__ import annotations

import json

import typer

from ...config.settings import get_settings
from ...core.errors import OfflineError
from ...services.resolve import resolve_dist

app = typer.Typer(add_completion=False)


@app.command()
def resolve(
    dist: str | None = typer.Argument(None, help="Build output directory"),
    config: str | None = typer.Option(None, "--config", "-c", help="JSON options file"),
    out: str | None = typer.Option(None, "--out", help="Write one <Tool>.json report per cache tool here"),
    build_hash: str | None = typer.Option(None, "--hash", help="Build hash passed on to the tools"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 2 when warnings were emitted"),
):
    """
    Print the bucket -> manifest entries mapping as JSON.
    Examples:
      offcache resolve dist
      offcache resolve dist --config offline.json --out build/offline
    """
    s = get_settings()
    try:
        emission = resolve_dist(
            dist=dist or s.dist,
            config_file=config or s.config_file,
            out_dir=out,
            build_hash=build_hash,
        )
    except (OfflineError, FileNotFoundError) as e:
        typer.secho(f"Error: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    for warning in emission.warnings:
        typer.secho(f"Warning: {warning}", err=True, fg=typer.colors.YELLOW)
    typer.echo(json.dumps(emission.caches, indent=2))
    if strict and emission.warnings:
        raise typer.Exit(code=2)
