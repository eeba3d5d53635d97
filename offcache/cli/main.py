"""CLI entrypoint that wires subcommands into a Typer app."""

import typer

from .commands.assets import app as assets_app
from .commands.resolve import app as resolve_app

app = typer.Typer(add_completion=False, help="Partition build output into offline cache buckets.")


app.add_typer(assets_app, help="List build output assets")
app.add_typer(resolve_app, help="Resolve assets into cache buckets")
