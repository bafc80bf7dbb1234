"""Logging configuration using loguru."""

import sys

from loguru import logger


def format_record(_record: dict) -> str:
    """Format log record for terminal output."""
    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>\n"
        "{exception}"
    )


def setup_logging(json_logs: bool = False, log_level: str = "WARNING") -> None:
    """Configure loguru for the command line.

    Args:
        json_logs: If True, output logs as JSON
        log_level: Minimum log level to output
    """
    # Remove default handler
    logger.remove()
    logger.enable("smarttable")

    if json_logs:
        logger.add(
            sys.stderr,
            format="{message}",
            level=log_level.upper(),
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format=format_record,
            level=log_level.upper(),
            colorize=True,
        )

