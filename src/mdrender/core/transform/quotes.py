"""Straight-to-curly quote conversion for prose text tokens"""

from markdown_it.token import Token

from mdrender.core.events import is_verbatim_end, is_verbatim_start


QUOTE_GLYPHS: dict[str, tuple[str, str]] = {
    "'": ('\u2018', '\u2019'),
    '"': ('\u201c', '\u201d'),
}


def convert_quotes_to_curly(text: str) -> str:
    """Replace ' and " with opening glyphs after whitespace (or at start), closing otherwise."""
    preceded_by_whitespace = True
    converted = []
    for ch in text:
        glyphs = QUOTE_GLYPHS.get(ch)
        if glyphs:
            converted.append(glyphs[0] if preceded_by_whitespace else glyphs[1])
        else:
            converted.append(ch)
        preceded_by_whitespace = ch.isspace()
    return ''.join(converted)


class QuoteConverter:
    """Per-document quote conversion that skips text inside code spans and blocks.

    Holds mutable state; build one instance per render call.
    """

    def __init__(self, enabled: bool):
        self.enabled = enabled
        self.convert_text = True

    def convert(self, token: Token) -> Token:
        if not self.enabled:
            return token
        if is_verbatim_start(token):
            self.convert_text = False
            return token
        if is_verbatim_end(token):
            self.convert_text = True
            return token
        if token.type == 'text' and self.convert_text:
            return token.copy(content=convert_quotes_to_curly(token.content))
        return token
