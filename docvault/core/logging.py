import json
import logging
from logging.config import dictConfig
from traceback import format_exception

from docvault.core.config import settings

MAX_STACK = 4000


class JsonFormatter(logging.Formatter):
    """JSON-формат для продакшн логов"""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        http_ctx = {
            k: v for k, v in {
                "method": getattr(record, "http_method", None),
                "path": getattr(record, "path", None),
                "status": getattr(record, "status_code", None),
                "user_id": getattr(record, "user_id", None),
            }.items() if v is not None
        }
        if http_ctx:
            payload["http"] = http_ctx

        if record.exc_info and record.exc_info[0]:
            stack = "".join(format_exception(*record.exc_info))
            payload["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stack": stack[:MAX_STACK] + ("...(truncated)" if len(stack) > MAX_STACK else ""),
            }

        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = None, fmt: str = None) -> None:
    """Настройка корневого логгера"""
    level = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-5s %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "stream": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "json" if fmt == "json" else "plain",
                }
            },
            "root": {
                "level": level,
                "handlers": ["stream"],
            },
            # uvicorn пишет через корневой обработчик
            "loggers": {
                "uvicorn": {"level": "INFO", "handlers": [], "propagate": True},
                "uvicorn.error": {"level": "INFO", "handlers": [], "propagate": True},
                "uvicorn.access": {"level": "INFO", "handlers": [], "propagate": True},
                "sqlalchemy.engine": {"level": "WARNING", "propagate": True},
            },
        }
    )
