import logging
import sys
from typing import Optional, TextIO


logger = logging.getLogger("versionkit")

_cli_handler: Optional[logging.Handler] = None


def configure_logging(debug: bool, stream: Optional[TextIO] = None):
    """
    Route package log records to stderr for one CLI invocation.

    Command results go to stdout, so diagnostics never mix with them. Without
    ``debug`` only warnings and errors are shown. A handler installed by an
    earlier call is replaced, so the current ``sys.stderr`` is always used.
    """
    global _cli_handler

    if _cli_handler is not None:
        logger.removeHandler(_cli_handler)

    _cli_handler = logging.StreamHandler(stream or sys.stderr)
    _cli_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(_cli_handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
