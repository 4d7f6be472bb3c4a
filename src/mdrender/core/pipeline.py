"""Pipeline step functions: single-file render and whole-tree build"""

import logging
from pathlib import Path

from mdrender.core.parse import discover_files, make_parser, parse_file
from mdrender.core.render import render_tokens


logger = logging.getLogger(__name__)


def output_path(src: Path, src_root: Path, out_root: Path, ext: str = 'html') -> Path:
    """Mirror src (a file under src_root) into out_root with its suffix swapped to .{ext}."""
    return (out_root / src.relative_to(src_root)).with_suffix(f".{ext}")


def run_render(
    path: Path,
    curly_quotes: bool = False,
    parser_config: str = 'gfm-like',
    footnotes: bool = True,
    source_ext: str = 'md',
    output_ext: str = 'html',
    ) -> str:
    """Render one markdown file to HTML, rewriting links to sibling sources that exist on disk."""
    md = make_parser(parser_config, footnotes)
    parsed = parse_file(path, md)
    return render_tokens(
        parsed.tokens, parsed.path, Path.is_file, curly_quotes, md, parsed.env,
        source_ext, output_ext,
    )


def run_build(
    src: Path,
    out_dir: Path,
    curly_quotes: bool = False,
    parser_config: str = 'gfm-like',
    footnotes: bool = True,
    source_ext: str = 'md',
    output_ext: str = 'html',
    ) -> list[tuple[Path, Path]]:
    """Render every .{source_ext} file under src into out_dir. Returns (source, output) pairs."""
    src_root = src if src.is_dir() else src.parent
    md = make_parser(parser_config, footnotes)
    results = []
    for p in discover_files(src, source_ext):
        try:
            parsed = parse_file(p, md)
            html = render_tokens(
                parsed.tokens, parsed.path, Path.is_file, curly_quotes, md, parsed.env,
                source_ext, output_ext,
            )
            out_file = output_path(p, src_root, out_dir, output_ext)
            out_file.parent.mkdir(parents=True, exist_ok=True)
            out_file.write_text(html, encoding='utf-8')
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.debug("Rendered %s -> %s", p, out_file)
        results.append((p, out_file))
    logger.info("Rendered %d document(s) into %s", len(results), out_dir)
    return results
