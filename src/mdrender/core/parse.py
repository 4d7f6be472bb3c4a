"""File discovery and markdown-it tokenization"""

from pathlib import Path
from typing import Any

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin

from mdrender.core.models import ParsedDoc


def make_parser(preset: str = 'gfm-like', footnotes: bool = True) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name, with tables and footnotes."""
    try:
        md = MarkdownIt(preset, options_update={"linkify": False}).enable('table')
    except KeyError as e:
        raise ValueError(f"Unknown parser preset: {preset!r}") from e
    if footnotes:
        md.use(footnote_plugin)
    return md


def parse_text(text: str, md: MarkdownIt) -> tuple[list, dict[str, Any]]:
    """Return (tokens, env) for text; env must be passed on to the renderer."""
    env: dict[str, Any] = {}
    return md.parse(text, env), env


def discover_files(path: Path, ext: str = 'md') -> list[Path]:
    """Return sorted .{ext} files under path, or [path] if a single matching file."""
    suffix = f".{ext}"
    if path.is_file():
        return [path] if path.suffix == suffix else []
    return sorted(p for p in path.rglob('*') if p.suffix == suffix and p.is_file())


def parse_file(path: Path, md: MarkdownIt) -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc with token stream."""
    markdown = path.read_text(encoding='utf-8')
    tokens, env = parse_text(markdown, md)
    return ParsedDoc(path=path, markdown=markdown, tokens=tokens, env=env)
