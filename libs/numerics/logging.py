from __future__ import annotations

import logging
from typing import Any, Dict

import structlog


def _install_processors() -> None:
    # Events always route through stdlib logging; its handlers write to stderr.
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def configure_logging(service_name: str, level: str = "INFO") -> None:
    logging.basicConfig(level=_resolve_level(level))
    _install_processors()
    logger = structlog.get_logger(service=service_name)
    logger.debug("logging_configured")


def log_event(logger: structlog.BoundLogger, event_type: str, payload: Dict[str, Any]) -> None:
    logger.info(event_type, **payload)


def get_logger(service_name: str) -> structlog.BoundLogger:
    return structlog.get_logger(service=service_name)


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName((level or "").strip().upper())
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


# structlog's own default prints to stdout, which carries program output.
if not structlog.is_configured():
    _install_processors()
