"""
Structured logging for catalog operations.

Features:
- JSON formatted entries
- Correlation ID tracking per operation
- Timing of async calls
- Emitted through loguru so sink configuration stays in one place
"""
import json
import socket
import traceback
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from contextvars import ContextVar
from functools import wraps

from loguru import logger as loguru_logger
from jokoui_mcp.config import settings

# Context variables for correlation tracking
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)
operation_var: ContextVar[Optional[str]] = ContextVar('operation', default=None)


class StructuredLogger:
    """
    Structured logger with correlation tracking.

    Every entry is a JSON object with:
    - Timestamp (ISO 8601)
    - Event name in dot notation
    - Correlation ID and operation name
    - Service metadata
    """

    def __init__(self, name: str):
        self.name = name
        self.hostname = socket.gethostname()
        self.service_name = settings.app_name
        self.service_version = settings.app_version
        self.environment = settings.environment

    def _get_base_context(self) -> Dict[str, Any]:
        """Get base logging context"""
        return {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "service": {
                "name": self.service_name,
                "version": self.service_version,
                "environment": self.environment,
                "hostname": self.hostname
            },
            "logger": {
                "name": self.name
            },
            "correlation": {
                "correlation_id": correlation_id_var.get(),
                "operation": operation_var.get()
            }
        }

    def _format_log(
        self,
        level: str,
        event: str,
        message: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> Dict[str, Any]:
        """Format log entry as JSON"""

        log_entry = self._get_base_context()

        log_entry.update({
            "level": level,
            "event": event,
            "message": message or event
        })

        if extra:
            log_entry["data"] = extra

        if exc_info:
            log_entry["error"] = {
                "type": type(exc_info).__name__,
                "message": str(exc_info),
                "stacktrace": "".join(
                    traceback.format_exception(type(exc_info), exc_info, exc_info.__traceback__)
                )
            }

        return log_entry

    def _emit(self, level: str, entry: Dict[str, Any]) -> None:
        loguru_logger.opt(depth=2).log(level, json.dumps(entry, default=str))

    def debug(self, event: str, message: str = None, extra: Dict = None):
        """Log debug message"""
        self._emit("DEBUG", self._format_log("DEBUG", event, message, extra))

    def info(self, event: str, message: str = None, extra: Dict = None):
        """Log info message"""
        self._emit("INFO", self._format_log("INFO", event, message, extra))

    def warning(self, event: str, message: str = None, extra: Dict = None, exc_info: BaseException = None):
        """Log warning message"""
        self._emit("WARNING", self._format_log("WARNING", event, message, extra, exc_info))

    def error(self, event: str, message: str = None, extra: Dict = None, exc_info: BaseException = None):
        """Log error message"""
        self._emit("ERROR", self._format_log("ERROR", event, message, extra, exc_info))

    def critical(self, event: str, message: str = None, extra: Dict = None, exc_info: BaseException = None):
        """Log critical message"""
        self._emit("CRITICAL", self._format_log("CRITICAL", event, message, extra, exc_info))

    def performance(self, event: str, duration_ms: float, extra: Dict = None):
        """Log performance metric"""
        perf_data = {"performance": {"duration_ms": round(duration_ms, 2)}}

        if extra:
            perf_data.update(extra)

        self._emit("INFO", self._format_log("INFO", event, f"Performance: {duration_ms:.2f}ms", perf_data))


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger for module.

    Usage:
        logger = get_logger(__name__)
        logger.info("catalog.load.started", extra={"categories": 2})
    """
    return StructuredLogger(name)


class log_context:
    """
    Context manager for correlation tracking.

    Usage:
        with log_context(correlation_id="abc", operation="search_components"):
            logger.info("operation.started")
    """

    def __init__(self, correlation_id: str = None, operation: str = None):
        self.correlation_id = correlation_id
        self.operation = operation
        self._tokens = []

    def __enter__(self):
        """Set context variables"""
        if self.correlation_id:
            self._tokens.append((correlation_id_var, correlation_id_var.set(self.correlation_id)))
        if self.operation:
            self._tokens.append((operation_var, operation_var.set(self.operation)))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore previous context"""
        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens.clear()


def trace_async(event_prefix: str):
    """
    Decorator for tracing async functions.

    Usage:
        @trace_async("catalog.load")
        async def load(self):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)

            start_time = datetime.now(timezone.utc)

            logger.debug(f"{event_prefix}.started", extra={"function": func.__name__})

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
                logger.error(
                    f"{event_prefix}.failed",
                    extra={
                        "function": func.__name__,
                        "duration_ms": duration_ms,
                        "error_type": type(e).__name__
                    },
                    exc_info=e
                )
                raise

            duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
            logger.performance(
                f"{event_prefix}.completed",
                duration_ms=duration_ms,
                extra={"function": func.__name__}
            )
            return result

        return wrapper
    return decorator


"""
LOG EVENT NAMING CONVENTIONS:

Use dot notation: <domain>.<action>.<result>

Examples:
- catalog.load.started
- catalog.load.completed
- catalog.load.failed
- resolver.catalog.hit
- resolver.catalog.miss
- fallback.probe.hit
- fallback.probe.miss
- fetcher.request.failed
- writer.file.written
- operation.failed
"""
