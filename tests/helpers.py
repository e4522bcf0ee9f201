"""Test doubles for tool calls, completions and loggers."""
import json
import types
from typing import Any

from openai.types.chat import ChatCompletion


def make_tool_call(name: str, arguments: Any, call_id: str = "call_1") -> types.SimpleNamespace:
    """Minimal stand-in for an openai tool call: .id, .function.name, .function.arguments."""
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return types.SimpleNamespace(
        id=call_id,
        type="function",
        function=types.SimpleNamespace(name=name, arguments=arguments),
    )


def make_completion(*tool_calls_per_choice: list[tuple[str, str]] | None) -> ChatCompletion:
    """Build a ChatCompletion with one choice per argument; each is a list of (name, arguments) or None."""
    choices = []
    for index, calls in enumerate(tool_calls_per_choice):
        message: dict[str, Any] = {"role": "assistant", "content": None}
        if calls is not None:
            message["tool_calls"] = [
                {"id": f"call_{i}", "type": "function", "function": {"name": n, "arguments": a}}
                for i, (n, a) in enumerate(calls)
            ]
        choices.append({"index": index, "finish_reason": "tool_calls", "message": message})
    return ChatCompletion.model_validate(
        {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "gpt-4o-mini",
            "choices": choices,
        }
    )


class RecordingLogger:
    """Logger capturing (level, event, kwargs) tuples."""

    def __init__(self):
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def info(self, event: str, *args: Any, **kwargs: Any) -> None:
        self.events.append(("info", event, kwargs))

    def error(self, event: str, *args: Any, **kwargs: Any) -> None:
        self.events.append(("error", event, kwargs))

    def log(self, level: int, event: str, *args: Any, **kwargs: Any) -> None:
        self.events.append((str(level), event, kwargs))

    def named(self, event: str) -> list[dict[str, Any]]:
        return [kwargs for _, e, kwargs in self.events if e == event]
