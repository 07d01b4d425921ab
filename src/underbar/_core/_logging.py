from __future__ import annotations

import logging

import structlog

_ROOT = "underbar"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["event"]),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structured logger forwarding to the standard library logger **name**.

    Nothing is printed until the application configures `logging`.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(*, verbose: bool = False) -> None:
    """Attach a console handler to the `underbar` logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    if not any(getattr(h, "_underbar", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
        handler._underbar = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
