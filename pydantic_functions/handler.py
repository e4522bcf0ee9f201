"""Dispatch tool calls to per-function handlers."""
import asyncio
import inspect
import json
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from pydantic_functions.errors import FunctionHandlerError
from pydantic_functions.function import FunctionDef, P
from pydantic_functions.logging_utils import (
    FunctionLogger,
    log_function_call_end,
    log_function_call_start,
    resolve_logger,
)
from pydantic_functions.parse import parse_arguments
from pydantic_functions.registry import find_function, tool_call_id, tool_call_parts

R = TypeVar("R")


@dataclass(frozen=True)
class FunctionHandler(FunctionDef[P], Generic[P, R]):
    """A function definition plus the logic that runs when the model calls it.

    The handler takes the parsed/typed parameters and can perform any (async)
    computation and/or return an arbitrary output.
    """

    handler: Callable[[P], Awaitable[R] | R]


def create_function_handler(
    name: str,
    description: str,
    schema: type[P],
    handler: Callable[[P], Awaitable[R] | R],
) -> FunctionHandler[P, R]:
    """Create a FunctionHandler. You can also construct one directly."""
    return FunctionHandler(name=name, description=description, schema=schema, handler=handler)


async def _handle_single_tool_call(
    handlers: Sequence[FunctionHandler[Any, R]],
    tool_call: Any,
    logger: FunctionLogger,
) -> R:
    name, arguments = tool_call_parts(tool_call)
    function_handler = find_function(name, handlers)
    parameters = parse_arguments(name, arguments, function_handler.schema, logger=logger)

    log_function_call_start(logger, name)
    try:
        output = function_handler.handler(parameters)
        if inspect.isawaitable(output):
            output = await output
    except Exception as e:
        log_function_call_end(logger, name, success=False, error=str(e))
        raise FunctionHandlerError(name, e) from e
    log_function_call_end(logger, name, success=True, output=output)
    return output


async def handle_tool_calls(
    handlers: Sequence[FunctionHandler[Any, R]],
    tool_calls: Sequence[Any] | None,
    *,
    logger: FunctionLogger | None = None,
) -> list[R]:
    """Handle zero or more tool calls using the matching handlers.

    Handlers run concurrently. Returns their outputs in the order of tool_calls.
    Once every call has finished, raises the error of the first failing call (in
    input order) if any name isn't found, any arguments are invalid, or any
    handler raises. There are no partial results.
    """
    if not tool_calls:
        return []
    logger = resolve_logger(logger)

    results = await asyncio.gather(
        *(_handle_single_tool_call(handlers, tc, logger) for tc in tool_calls),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


def _tool_content(output: Any) -> str:
    if isinstance(output, str):
        return output
    if isinstance(output, BaseModel):
        return output.model_dump_json()
    return json.dumps(output, default=str)


def tool_messages(tool_calls: Sequence[Any], outputs: Sequence[Any]) -> list[dict[str, Any]]:
    """Tool result messages to append to the conversation for the model's next turn."""
    if len(tool_calls) != len(outputs):
        raise ValueError(f"Got {len(outputs)} outputs for {len(tool_calls)} tool calls")
    return [
        {
            "role": "tool",
            "tool_call_id": tool_call_id(tc),
            "content": _tool_content(output),
        }
        for tc, output in zip(tool_calls, outputs)
    ]
