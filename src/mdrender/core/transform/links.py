"""Relative link rewriting: point links at sibling .md sources to their rendered .html"""

import logging
import re
from pathlib import Path, PurePosixPath
from typing import Callable, Optional, Protocol
from urllib.parse import unquote, urlsplit

from markdown_it.token import Token


logger = logging.getLogger(__name__)

# Path part of a destination: everything before the query or fragment.
PATH_RE = re.compile(r'^[^?#]*')


def is_relative_url(dest: str) -> bool:
    """True if dest parses as a URL with neither scheme nor authority."""
    try:
        parts = urlsplit(dest)
    except ValueError:
        return False
    return not parts.scheme and not parts.netloc


class LinkFilter(Protocol):
    """A filter to optionally apply to link destinations."""

    def apply(self, dest: str) -> Optional[str]:
        """Return the translated destination, or None to leave it unchanged."""
        ...


class ChangeExtLinkFilter:
    """Swap the extension of relative destinations that pass an eligibility check.

    `is_dest` receives the decoded relative path (no empty or `.` segments) and
    decides whether it names a real document. Only the last dot-token of the
    final path segment is replaced; every other character, including any query
    or fragment, is kept verbatim.
    """

    def __init__(
        self,
        is_dest: Callable[[PurePosixPath], bool],
        expected: str = 'md',
        ext: str = 'html',
        ):
        self.is_dest = is_dest
        self.expected = expected
        self.ext = ext

    def apply(self, dest: str) -> Optional[str]:
        if not is_relative_url(dest):
            return None

        path = PATH_RE.match(dest).group(0)
        segments = [s for s in unquote(path).split('/') if s]
        if not segments or not self.is_dest(PurePosixPath(*segments)):
            return None

        head, sep, last = path.rpartition('/')
        stem, dot, ext = last.rpartition('.')
        if not dot or ext != self.expected:
            return None
        return f"{head}{sep}{stem}.{self.ext}{dest[len(path):]}"


class RelativeLinkConverter:
    """Rewrite link_open hrefs that name an existing source document under `path`."""

    def __init__(
        self,
        path: Path,
        is_file: Callable[[Path], bool],
        expected: str = 'md',
        ext: str = 'html',
        ):
        self.path = path
        self.is_file = is_file
        self.link_filter: LinkFilter = ChangeExtLinkFilter(
            lambda rel: is_file(path.joinpath(*rel.parts)), expected, ext,
        )

    def convert(self, token: Token) -> Token:
        if token.type != 'link_open':
            return token
        dest = token.attrGet('href')
        if not isinstance(dest, str):
            return token
        translated = self.link_filter.apply(dest)
        if translated is None:
            return token
        logger.debug("Rewrote link %s -> %s (relative to %s)", dest, translated, self.path)
        return token.copy(attrs={**token.attrs, 'href': translated})
