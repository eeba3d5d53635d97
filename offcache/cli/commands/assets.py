"""CLI: list the build output files the engine would see."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...services.assets import collect_assets

app = typer.Typer(add_completion=False)


@app.command()
def assets(
    dist: str | None = typer.Argument(None, help="Build output directory"),
):
    """Print one asset path per line."""
    s = get_settings()
    try:
        found = collect_assets(dist or s.dist)
    except FileNotFoundError as e:
        typer.secho(str(e), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)
    for name in found:
        typer.echo(name)
