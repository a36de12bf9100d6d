# logging_config.py
# structlog setup for the schedule creator: console lines while developing, JSON lines in production.

import logging

import structlog

__all__ = ["setup_logging", "get_logger"]


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    # Called by create_app(), so every way of serving the app honours the configured format and level.
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        # Not cached: a reconfigured app (or test) must not keep writing through stale loggers.
        cache_logger_on_first_use=False,
    )

    # The dev server's access log is the only stdlib logger in play.
    logging.getLogger("werkzeug").setLevel(level)


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)
