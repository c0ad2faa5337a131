"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import search_cmd, show_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="Query an in-memory document store seeded from YAML")

app.command(name="search")(search_cmd)
app.command(name="show")(show_cmd)
