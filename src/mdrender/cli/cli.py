"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdrender.cli.commands import build_cmd, main_callback, render_cmd


app = typer.Typer(name="mdrender", no_args_is_help=True, help="Render markdown books to HTML")

app.callback()(main_callback)
app.command(name="render")(render_cmd)
app.command(name="build")(build_cmd)
