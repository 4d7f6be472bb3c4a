"""Markdown to HTML rendering with code-fence, quote and relative-link rewrites"""

from pathlib import Path
from typing import Any, Callable, Optional

from markdown_it import MarkdownIt

from mdrender.core.events import collect_tokens, iter_events
from mdrender.core.parse import make_parser, parse_text
from mdrender.core.transform.codeblock import clean_codeblock_headers
from mdrender.core.transform.links import RelativeLinkConverter
from mdrender.core.transform.quotes import QuoteConverter


def render_tokens(
    tokens: list,
    path: Optional[Path] = None,
    is_file: Callable[[Path], bool] = Path.is_file,
    curly_quotes: bool = False,
    md: Optional[MarkdownIt] = None,
    env: Optional[dict[str, Any]] = None,
    source_ext: str = 'md',
    output_ext: str = 'html',
    ) -> str:
    """Run the rewrite chain over tokens in one pass and render them to HTML.

    `path` is the location of the document being rendered; relative links are
    only rewritten when it is given, and resolve against its parent directory.
    """
    if md is None:
        md = make_parser()
    converter = QuoteConverter(curly_quotes)

    events = map(clean_codeblock_headers, iter_events(tokens))
    events = map(converter.convert, events)
    if path is not None:
        link_converter = RelativeLinkConverter(path.parent, is_file, source_ext, output_ext)
        events = map(link_converter.convert, events)

    return md.renderer.render(collect_tokens(events), md.options, env if env is not None else {})


def render_markdown(
    text: str,
    path: Optional[Path] = None,
    is_file: Callable[[Path], bool] = Path.is_file,
    curly_quotes: bool = False,
    md: Optional[MarkdownIt] = None,
    ) -> str:
    """Parse markdown text and render it to HTML (see render_tokens)."""
    if md is None:
        md = make_parser()
    tokens, env = parse_text(text, md)
    return render_tokens(tokens, path, is_file, curly_quotes, md, env)
