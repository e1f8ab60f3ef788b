"""
Logging setup shared by the server components.

Everything goes to stderr: stdout belongs to the stdio transport.
"""

import logging
import sys


def setup_logging(name: str, level: str = "INFO") -> logging.Logger:
    """
    Configure logging for a server component.

    Args:
        name: Logger name (used as prefix in every line).
        level: Log level string (e.g. 'INFO', 'DEBUG').

    Returns:
        Configured logger instance.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
        stream=sys.stderr,
    )
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Change the root log level after startup (e.g. from --log-level)."""
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
