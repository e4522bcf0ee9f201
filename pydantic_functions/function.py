"""Function definitions: name, description, pydantic schema for parameters."""
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

P = TypeVar("P", bound=BaseModel)

# OpenAI tool definition shape: "function" type with name, description, parameters (JSON Schema)
ToolDefinition = dict[str, Any]  # {"type": "function", "function": {"name", "description", "parameters"}}


@dataclass(frozen=True)
class FunctionDef(Generic[P]):
    """A function the model may call. schema validates and types its arguments."""

    name: str
    description: str
    schema: type[P]


def describe_schema(function_def: FunctionDef) -> dict[str, Any]:
    """JSON Schema for the function's parameters: {"type", "properties", "required"}.
    required is None when every field has a default. Nested models and enums are
    emitted by pydantic as $refs, so "$defs" is kept whenever pydantic produces it.
    """
    json_schema = function_def.schema.model_json_schema()
    parameters: dict[str, Any] = {
        "type": json_schema.get("type", "object"),
        "properties": json_schema.get("properties", {}),
        "required": json_schema.get("required"),
    }
    if "$defs" in json_schema:
        parameters["$defs"] = json_schema["$defs"]
    return parameters


def to_json_schema(function_def: FunctionDef) -> dict[str, Any]:
    """Legacy "functions" format: {"name", "description", "parameters"}."""
    return {
        "name": function_def.name,
        "description": function_def.description,
        "parameters": describe_schema(function_def),
    }


def to_tool(function_def: FunctionDef) -> ToolDefinition:
    """Tool format passed as `tools=[...]` to chat.completions.create."""
    return {
        "type": "function",
        "function": to_json_schema(function_def),
    }


def to_tools(function_defs: list[FunctionDef]) -> list[ToolDefinition]:
    return [to_tool(f) for f in function_defs]
