import logging
import os
import sys
from argparse import ArgumentParser

PROG = "tree-to-text"
LOG_LEVEL_ENV = "TREE_TO_TEXT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def get_parser():
    # No options: the record always comes from stdin.
    parser = ArgumentParser(
        prog=PROG,
        usage="%(prog)s < TREE_FILE",
        description="Convert a binary tree record on stdin to colon-delimited text.",
        add_help=False,
    )
    return parser


def get_log_level(environ=None) -> int:
    environ = os.environ if environ is None else environ
    name = environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LOG_LEVEL
    if not isinstance(level, int):
        return DEFAULT_LOG_LEVEL
    return level


def configure_logging(prog: str = PROG, *, stream=None, level: int | None = None):
    """Send the package's log records to stderr as ``<prog>: LEVEL: message``."""
    logger = logging.getLogger("tree_to_text")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(f"{prog}: %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    level = get_log_level() if level is None else level
    # Errors are the diagnostics; they must always reach stderr.
    logger.setLevel(min(level, logging.ERROR))
    logger.propagate = False
    return logger
