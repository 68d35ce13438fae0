"""
Structured Logging Setup
Configures structlog on top of the standard library logging module.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import LoggerFactory

from proofed_scaling.config import EngineConfig


def _processors(log_format: str) -> list:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def _configure_structlog(log_format: str):
    structlog.configure(
        processors=_processors(log_format),
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None):
    """
    Configure structured logging for an application using the engine.

    Args:
        level: Log level name, defaults to the environment configuration
        log_format: 'json' or 'text', defaults to the environment configuration
    """
    env_config = EngineConfig.from_env()
    level = (level or env_config.log_level).upper()
    log_format = log_format or env_config.log_format

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO)
    )

    _configure_structlog(log_format)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger routed through stdlib logging.

    Installs the structlog processor chain on first use when the host
    application has not configured logging; stdlib handlers are left alone.
    """
    if not structlog.is_configured():
        _configure_structlog(EngineConfig.from_env().log_format)
    return structlog.get_logger(name)
