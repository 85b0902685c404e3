"""Diagnostic logging setup.

Operator-facing narration goes through the rich console; loguru carries the
diagnostic trail (external invocations, exit codes, parse fallbacks).
"""

import sys

from loguru import logger


def _stderr_sink(message: str) -> None:
    # Resolve sys.stderr per write so redirected streams are honoured
    sys.stderr.write(message)


def configure_logging(debug: bool = False) -> None:
    """Route loguru records to stderr at the requested verbosity."""
    logger.remove()
    logger.add(
        _stderr_sink,
        level="DEBUG" if debug else "WARNING",
        format="<dim>{time:HH:mm:ss}</dim> <level>{level: <7}</level> {message}",
        colorize=sys.stderr.isatty(),
    )
