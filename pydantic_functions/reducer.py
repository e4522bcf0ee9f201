"""Fold tool calls into application state with a single reducer function.

An alternative to function handlers, useful when:
- function calls modify an object's state (e.g. the state of a chart), outside a chat context
- there are many functions and state updates belong in one place

The pattern follows reducers in Elm/Redux/React, with model function calls in
place of actions.
"""
import inspect
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic_functions.errors import FunctionReducerError
from pydantic_functions.function import FunctionDef
from pydantic_functions.logging_utils import (
    FunctionLogger,
    log_reducer_call_end,
    log_reducer_call_start,
    resolve_logger,
)
from pydantic_functions.parse import parse_arguments
from pydantic_functions.registry import find_function, tool_call_parts

S = TypeVar("S")

# (prev_state, function_name, parameters) -> new_state
Reducer = Callable[[S, str, Any], S | Awaitable[S]]


@dataclass(frozen=True)
class FunctionReducer(Generic[S]):
    """Function definitions plus the one reducer that applies any of them to state.
    The reducer must return a new state rather than mutate the one it is given.
    """

    functions: list[FunctionDef]
    reducer: Reducer


async def reduce_tool_calls(
    state: S,
    function_reducer: FunctionReducer[S],
    tool_calls: Sequence[Any] | None,
    *,
    logger: FunctionLogger | None = None,
) -> S:
    """Apply tool calls to state one at a time, in order. Returns the new state.

    Raises if a tool name isn't found, arguments are invalid, or the reducer
    raises; the state built by earlier calls in the batch is then dropped.
    """
    if not tool_calls:
        return state
    logger = resolve_logger(logger)

    for tool_call in tool_calls:
        name, arguments = tool_call_parts(tool_call)
        function_def = find_function(name, function_reducer.functions)
        parameters = parse_arguments(name, arguments, function_def.schema, logger=logger)

        log_reducer_call_start(logger, name)
        try:
            next_state = function_reducer.reducer(state, name, parameters)
            if inspect.isawaitable(next_state):
                next_state = await next_state
        except Exception as e:
            log_reducer_call_end(logger, name, success=False, error=str(e))
            raise FunctionReducerError(name, e) from e
        log_reducer_call_end(logger, name, success=True, state=next_state)
        state = next_state

    return state
