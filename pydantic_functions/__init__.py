"""OpenAI function calling with pydantic models as parameter schemas."""
from pydantic_functions.assertions import assert_single_tool_call
from pydantic_functions.errors import (
    FunctionHandlerError,
    FunctionReducerError,
    HttpError,
    InvalidArgumentsError,
    UnexpectedCompletionError,
    UnknownFunctionError,
)
from pydantic_functions.function import FunctionDef, describe_schema, to_json_schema, to_tool, to_tools
from pydantic_functions.handler import (
    FunctionHandler,
    create_function_handler,
    handle_tool_calls,
    tool_messages,
)
from pydantic_functions.logging_utils import configure_logging, set_logger
from pydantic_functions.parse import parse_arguments, render_validation_error
from pydantic_functions.reducer import FunctionReducer, reduce_tool_calls
from pydantic_functions.registry import find_function

__all__ = [
    "FunctionDef",
    "FunctionHandler",
    "FunctionHandlerError",
    "FunctionReducer",
    "FunctionReducerError",
    "HttpError",
    "InvalidArgumentsError",
    "UnexpectedCompletionError",
    "UnknownFunctionError",
    "assert_single_tool_call",
    "configure_logging",
    "create_function_handler",
    "describe_schema",
    "find_function",
    "handle_tool_calls",
    "parse_arguments",
    "reduce_tool_calls",
    "render_validation_error",
    "set_logger",
    "to_json_schema",
    "to_tool",
    "to_tools",
    "tool_messages",
]
