"""Structured logging for function calls, with a process-wide replaceable logger."""
import json
import logging
import sys
from typing import Any, Protocol

import structlog
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from pydantic_functions.config import OUTPUT_LOG_LIMIT


class FunctionLogger(Protocol):
    """What the pipeline needs from a logger. structlog loggers satisfy it."""

    def info(self, event: str, *args: Any, **kwargs: Any) -> Any: ...

    def error(self, event: str, *args: Any, **kwargs: Any) -> Any: ...

    def log(self, level: int, event: str, *args: Any, **kwargs: Any) -> Any: ...


# Replaced by set_logger(); None means the default structlog logger
_current_logger: FunctionLogger | None = None


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog and stdlib logging. Call once at startup."""
    level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=True)
            if log_level == "DEBUG"
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def set_logger(logger: FunctionLogger | None) -> None:
    """Replace the process-wide logger (e.g. to send events to a logging service).
    The last call wins; pass None to go back to the default structlog logger.
    """
    global _current_logger
    _current_logger = logger


def current_logger() -> FunctionLogger:
    if _current_logger is not None:
        return _current_logger
    return get_logger("pydantic_functions")


def resolve_logger(logger: FunctionLogger | None) -> FunctionLogger:
    """Pick the explicitly passed logger, falling back to the process-wide one."""
    return logger if logger is not None else current_logger()


def summarize(value: Any, limit: int = OUTPUT_LOG_LIMIT) -> str:
    """Short printable form of a handler output or reducer state for the log."""
    if isinstance(value, str):
        text = value
    else:
        try:
            if isinstance(value, BaseModel):
                text = value.model_dump_json()
            else:
                text = json.dumps(value, default=str)
        except (TypeError, ValueError, PydanticSerializationError):
            text = repr(value)
    return text[:limit] + "..." if len(text) > limit else text


# Convenience: log function call events with consistent event names
def log_function_call_start(logger: FunctionLogger, function_name: str) -> None:
    logger.info("function_call_start", function_name=function_name)


def log_function_call_end(
    logger: FunctionLogger,
    function_name: str,
    success: bool,
    output: Any = None,
    error: str | None = None,
) -> None:
    logger.info(
        "function_call_end",
        function_name=function_name,
        success=success,
        output_summary=summarize(output) if success else None,
        error=error,
    )


def log_reducer_call_start(logger: FunctionLogger, function_name: str) -> None:
    logger.info("reducer_call_start", function_name=function_name)


def log_reducer_call_end(
    logger: FunctionLogger,
    function_name: str,
    success: bool,
    state: Any = None,
    error: str | None = None,
) -> None:
    logger.info(
        "reducer_call_end",
        function_name=function_name,
        success=success,
        state_summary=summarize(state) if success else None,
        error=error,
    )


def log_invalid_arguments(
    logger: FunctionLogger,
    function_name: str,
    message: str,
    arguments: str,
) -> None:
    """Raw arguments are logged in full so that bad model output can be diagnosed."""
    logger.error(
        "invalid_arguments",
        function_name=function_name,
        message=message,
        arguments=arguments,
    )


def log_unexpected_tool_calls(
    logger: FunctionLogger,
    message: str,
    tool_calls: list[dict[str, Any]],
) -> None:
    logger.error("unexpected_tool_calls", message=message, tool_calls=tool_calls)
