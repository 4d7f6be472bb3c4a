"""Flatten markdown-it token trees into a single event stream and back"""

from typing import Iterable, Iterator

from markdown_it.token import Token


VERBATIM_TAGS = {'code'}


def is_verbatim_start(token: Token) -> bool:
    """True for an opening code span/block token (plugin or hand-built streams)."""
    return token.nesting == 1 and token.tag in VERBATIM_TAGS


def is_verbatim_end(token: Token) -> bool:
    """True for a closing code span/block token."""
    return token.nesting == -1 and token.tag in VERBATIM_TAGS


def iter_events(tokens: Iterable[Token]) -> Iterator[Token]:
    """Yield tokens in document order; each token is followed by its children."""
    for token in tokens:
        yield token
        if token.children:
            yield from iter_events(token.children)


def _collect(events: Iterator[Token], count: int) -> list[Token]:
    """Consume exactly count sibling events (and their descendants) from events."""
    collected: list[Token] = []
    for _ in range(count):
        token = next(events, None)
        if token is None:
            raise ValueError(f"Event stream ended with {count - len(collected)} child token(s) missing")
        if token.children:
            token = token.copy(children=_collect(events, len(token.children)))
        collected.append(token)
    return collected


def collect_tokens(events: Iterable[Token]) -> list[Token]:
    """Rebuild the nested token list from a stream produced by iter_events.

    Transforms applied between the two calls must map one event to one event
    and leave `children` untouched, so child counts still match.
    """
    stream = iter(events)
    tokens: list[Token] = []
    for token in stream:
        if token.children:
            token = token.copy(children=_collect(stream, len(token.children)))
        tokens.append(token)
    return tokens
