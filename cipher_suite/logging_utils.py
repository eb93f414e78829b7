import json, logging, sys, time
from typing import Optional

from .config import CONFIG

_RESERVED = (
    "msg", "args", "exc_info", "exc_text", "stack_info", "stack_level", "created",
    "msecs", "relativeCreated", "levelno", "levelname", "pathname", "filename",
    "module", "lineno", "funcName", "thread", "threadName", "processName", "process",
    "name", "taskName",
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # Allow extra fields via record.__dict__ (filtered)
        for k, v in record.__dict__.items():
            if k not in _RESERVED:
                try:
                    json.dumps({k: v})
                    payload[k] = v
                except (TypeError, ValueError):
                    payload[k] = str(v)
        return json.dumps(payload)


def get_logger(name: str = "cipher_suite", level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel((level or CONFIG["LOG_LEVEL"]).upper())
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(JsonFormatter())
    logger.addHandler(h)
    logger.propagate = False
    return logger
