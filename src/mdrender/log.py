"""Logging setup and error chain reporting"""

import logging


LOG = logging.getLogger("mdrender")
LOG_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(verbose: bool, debug: bool, default: str = "WARNING") -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.getLevelName(default.upper())


def setup_logging(verbose: bool = False, debug: bool = False, default: str = "WARNING") -> None:
    """Route mdrender.* loggers to stderr at the level picked by the CLI flags."""
    level = resolve_log_level(verbose, debug, default)
    LOG.setLevel(level)
    LOG.propagate = False
    if not LOG.handlers:
        LOG.addHandler(logging.StreamHandler())
    for handler in LOG.handlers:
        handler.setLevel(level)
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))


def log_backtrace(exc: BaseException) -> None:
    """Log exc and every exception in its cause/context chain."""
    LOG.error("Error: %s", exc)
    seen = {id(exc)}
    cause = exc.__cause__ or exc.__context__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        LOG.error("\tCaused by: %s", cause)
        cause = cause.__cause__ or cause.__context__
