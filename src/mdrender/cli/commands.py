"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdrender.config import Settings, load_config
from mdrender.core.pipeline import run_build, run_render
from mdrender.log import log_backtrace, setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr, log the cause chain, and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        log_backtrace(cause)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress at INFO level")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log every rewrite at DEBUG level")] = False,
    ):
    """Render markdown books to HTML."""
    setup_logging(verbose, debug, _settings().log_level)


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to render")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write HTML here instead of stdout")] = None,
    curly: Annotated[Optional[bool], typer.Option("--curly-quotes/--straight-quotes", help="Convert quotes in prose")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Render a single markdown file to HTML."""
    settings = _settings(overrides={"curly_quotes": curly, "parser_config": parser})
    if not path.is_file():
        _fail(f"Not a file: {path}")

    try:
        html = run_render(
            path, settings.curly_quotes, settings.parser_config, settings.footnotes,
            settings.source_ext, settings.output_ext,
        )
    except (OSError, ValueError) as e:
        _fail(f"Failed to render {path}", e)

    if out is None:
        typer.echo(html, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding='utf-8')
    typer.echo(f"  {path} -> {out}")


def build_cmd(
    src: Annotated[Path, typer.Argument(help="Source directory (or file) to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    curly: Annotated[Optional[bool], typer.Option("--curly-quotes/--straight-quotes", help="Convert quotes in prose")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Render every markdown file under SRC, mirroring the tree into the output directory."""
    settings = _settings(overrides={"output_dir": out, "curly_quotes": curly, "parser_config": parser})
    if not src.exists():
        _fail(f"No such file or directory: {src}")
    output_dir = Path(settings.output_dir)

    try:
        results = run_build(
            src, output_dir, settings.curly_quotes, settings.parser_config, settings.footnotes,
            settings.source_ext, settings.output_ext,
        )
    except (RuntimeError, ValueError) as e:
        _fail(str(e), e.__cause__)

    for source, out_file in results:
        typer.echo(f"  {source} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")
