"""Code fence info-string cleanup"""

from markdown_it.token import Token


def clean_codeblock_headers(token: Token) -> Token:
    """Strip all whitespace from a fence info string so it renders as one class token.

    `rust, no_run , should_panic` -> `rust,no_run,should_panic`; commas are kept as-is.
    """
    if token.type != 'fence' or not token.info:
        return token
    info = ''.join(ch for ch in token.info if not ch.isspace())
    return token.copy(info=info)
