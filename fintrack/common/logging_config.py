import logging
import json
import os
import uuid
import datetime
import traceback
from contextvars import ContextVar
from typing import Any, Optional

# Context-local request id, visible to threadpool workers spawned by the request
_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs JSON records.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "request_id": _request_id.get() or "GLOBAL",
        }

        # Add extra fields if they exist
        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            log_data.update(record.extra_fields)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["stack_trace"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(log_data, ensure_ascii=False, default=str)

def setup_logging(log_level: int | str = logging.INFO, log_file: Optional[str] = "logs/app.log"):
    """
    Configure global logging settings.
    """
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())

    # Create logs directory if it doesn't exist
    if log_file and os.path.dirname(log_file):
        os.makedirs(os.path.dirname(log_file), exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers
    if root_logger.handlers:
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    # File Handler (JSON)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    logging.info("Logging infrastructure initialized.", extra={"extra_fields": {"status": "ready"}})

def set_request_id(request_id: Optional[str]):
    """Set the current request ID in context."""
    _request_id.set(request_id)

def get_request_id() -> str:
    """Get the current request ID from context."""
    return _request_id.get() or str(uuid.uuid4())

class FinanceLoggerAdapter(logging.LoggerAdapter):
    """
    Adapter that allows passing extra context easily.
    """
    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = kwargs.get("extra", {})
        if "extra_fields" not in extra:
            extra["extra_fields"] = {}

        # Merge keyword args into extra_fields if they aren't part of Logger.log
        standard_args = {'exc_info', 'stack_info', 'stacklevel', 'extra'}
        new_kwargs = {}
        for key, value in kwargs.items():
            if key in standard_args:
                new_kwargs[key] = value
            elif key == "extra_fields" and isinstance(value, dict):
                extra["extra_fields"].update(value)
            else:
                extra["extra_fields"][key] = value

        new_kwargs["extra"] = extra
        return msg, new_kwargs

def get_logger(name: str) -> FinanceLoggerAdapter:
    """
    Return a structured logger for the given name.
    """
    return FinanceLoggerAdapter(logging.getLogger(name), {})
