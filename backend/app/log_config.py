import logging
import sys

import structlog

COMPONENT = "dashboard-summarization-logs"


def _add_severity(logger, method_name: str, event_dict: dict) -> dict:
    """Cloud Logging reads the level from `severity`."""
    event_dict["severity"] = event_dict.pop("level", method_name).upper()
    event_dict.setdefault("component", COMPONENT)
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            _add_severity,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )
