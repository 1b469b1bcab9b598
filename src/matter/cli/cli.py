"""CLI entrypoint: Typer app definition and command registration"""

import typer

from matter.cli.commands import detect_cmd, extract_cmd


app = typer.Typer(name="matter", no_args_is_help=True, help="Split frontmatter from document content")

app.command(name="extract")(extract_cmd)
app.command(name="detect")(detect_cmd)
