"""
Structured logging for FactoryFlow.

Every record carries the service name, environment and the id of the HTTP
request that produced it. Domain-event fields (see ``utils/events.py``) are
grouped under ``"event"`` so stock, batch and inspection changes can be
filtered on one key.
"""
import json
import logging
import logging.config
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

EVENT_FIELDS = ("event", "entity_type", "entity_id", "old_status", "new_status", "changed_fields")

_STANDARD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class RequestContextFilter(logging.Filter):
    """Stamps the current request id and the service identity on each record."""

    def __init__(self, service: str = "factoryflow", environment: str = "development"):
        super().__init__()
        self.service = service
        self.environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_var.get()
        record.service = self.service
        record.environment = self.environment
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        event = {}
        for key, value in vars(record).items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            if key in EVENT_FIELDS:
                event[key] = value
            elif value is not None:
                payload[key] = value
        if event:
            payload["event"] = event

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    service: str = "factoryflow",
    environment: str = "development",
) -> None:
    level = log_level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "request_context": {
                    "()": "app.utils.logging.RequestContextFilter",
                    "service": service,
                    "environment": environment,
                },
            },
            "formatters": {
                "standard": {
                    "format": "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s",
                },
                "json": {"()": "app.utils.logging.JsonFormatter"},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if log_format.lower() == "json" else "standard",
                    "filters": ["request_context"],
                    "level": level,
                }
            },
            # Request lines come from the middleware; uvicorn's own access log would duplicate them.
            "loggers": {"uvicorn.access": {"level": "WARNING"}},
            "root": {"handlers": ["default"], "level": level},
        }
    )
