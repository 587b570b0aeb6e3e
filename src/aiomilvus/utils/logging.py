"""Logging setup for aiomilvus.

Records go to loguru sinks on stderr and, optionally, a rotating file.
Every record carries the address of the Milvus service in
``extra["address"]`` so that output from several clients or CLI runs
can be told apart.
"""

import logging
import sys

from loguru import logger

from aiomilvus.config.models import LoggingConfig

NO_ADDRESS = "-"

# httpx logs one INFO line per request and httpcore traces every
# connection step; the transport already logs requests at DEBUG.
HTTP_LOGGERS = ("httpx", "httpcore")

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[address]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward stdlib records (httpx, httpcore) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(config: LoggingConfig, address: str = NO_ADDRESS) -> None:
    """
    Replace loguru's sinks according to ``config``.

    Args:
        config: Level, format and optional file sink.
        address: Service address bound to every record.
    """
    logger.remove()
    logger.configure(extra={"address": address})

    serialize = config.format == "json"
    fmt = "{message}" if serialize else CONSOLE_FORMAT

    logger.add(
        sys.stderr,
        format=fmt,
        level=config.level,
        serialize=serialize,
        colorize=not serialize,
    )

    if config.file:
        logger.add(
            config.file,
            format=fmt,
            level=config.level,
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    _intercept_stdlib(config.level)

    logger.debug("Logging configured for {}: level={}", address, config.level)


def _intercept_stdlib(level: str) -> None:
    """Route stdlib logging into loguru, keeping HTTP libraries quiet below DEBUG."""
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    http_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
