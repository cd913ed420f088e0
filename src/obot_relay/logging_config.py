"""Structured JSON logging for the relay.

Every record goes to stdout as one JSON line with GCP-style field names, so
container log collectors pick up ``severity`` and ``message``. Extra fields
passed via ``extra=`` (e.g. the task API ``status_code``) become JSON keys.

Usage:
    from obot_relay.logging_config import configure_logging
    configure_logging(settings.log_level)
"""

import logging
import logging.config

SERVICE_NAME = "obot-relay"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s"

# httpx logs every request at INFO; the forwarder already logs the response.
QUIET_LOGGERS = ("httpx", "httpcore")


def build_logging_config(level: str = "INFO") -> dict:
    """Return a dictConfig mapping with the root logger at ``level``.

    uvicorn is started with ``log_config=None``, so its loggers propagate to
    the root JSON handler configured here.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": LOG_FORMAT,
                "rename_fields": {
                    "levelname": "severity",
                    "asctime": "timestamp",
                    "name": "logger",
                },
                "static_fields": {"service": SERVICE_NAME},
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        "root": {
            "level": level.upper(),
            "handlers": ["stdout"],
        },
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the JSON logging configuration. Call once at startup."""
    logging.config.dictConfig(build_logging_config(level))
