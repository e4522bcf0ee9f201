"""Resolve a tool call's function name against a list of definitions."""
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic_functions.errors import UnknownFunctionError
from pydantic_functions.function import FunctionDef

F = TypeVar("F", bound=FunctionDef)


def find_function(name: str, functions: Sequence[F]) -> F:
    """Return the first definition whose name matches (list order wins on duplicates).
    Raises UnknownFunctionError if no function with that name is found.
    Works for handler lists too, since a FunctionHandler is a FunctionDef.
    """
    for function_def in functions:
        if function_def.name == name:
            return function_def
    raise UnknownFunctionError(name)


def tool_call_parts(tool_call: Any) -> tuple[str, str]:
    """(name, arguments) of a tool call, given an openai SDK object or a plain dict."""
    if isinstance(tool_call, Mapping):
        function = tool_call["function"]
        return function["name"], function["arguments"]
    return tool_call.function.name, tool_call.function.arguments


def tool_call_id(tool_call: Any) -> str | None:
    if isinstance(tool_call, Mapping):
        return tool_call.get("id")
    return getattr(tool_call, "id", None)
