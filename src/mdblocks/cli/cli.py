"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblocks.cli.commands import extract_cmd, init_cmd, parse_cmd


app = typer.Typer(name="mdblocks", no_args_is_help=True, help="Markdown heading-hierarchy block extraction")

app.command(name="parse")(parse_cmd)
app.command(name="extract")(extract_cmd)
app.command(name="init")(init_cmd)
