"""Structlog configuration for ghfollowers."""

import logging
import sys

import structlog

from ghfollowers.config import AppConfig, LogFormat


def configure_logging(config: AppConfig | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Args:
        config: AppConfig instance, uses defaults if None
    """
    if config is None:
        config = AppConfig()

    # Logs go to stderr so command output on stdout stays clean
    log_level = getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    # Common processors
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    # Add format-specific processors
    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    """Create a PrintLogger bound to whatever sys.stderr is right now."""
    return structlog.PrintLogger(file=sys.stderr)


def get_logger(name: str | None = None):
    """
    Get a structlog logger that follows the current configuration.

    The returned proxy is never bound eagerly, so services created before
    configure_logging runs (AppContext, GitHubClient) still log at the
    configured level and to stderr.

    Args:
        name: Optional logger name for context

    Returns:
        Lazy structlog logger proxy
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
