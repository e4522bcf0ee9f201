"""Check that a completion contains exactly one tool call."""
from typing import Any

from openai.types.chat import ChatCompletion

from pydantic_functions.errors import UnexpectedCompletionError
from pydantic_functions.logging_utils import FunctionLogger, log_unexpected_tool_calls, resolve_logger


def assert_single_tool_call(
    completion: ChatCompletion,
    label: str | None = None,
    *,
    logger: FunctionLogger | None = None,
) -> Any:
    """Return the only tool call of a completion.
    Raises UnexpectedCompletionError unless there is one choice with one tool call.
    """
    prefix = f"Unexpected ({label})" if label else "Unexpected"

    if len(completion.choices) != 1:
        raise UnexpectedCompletionError(f"{prefix}: got {len(completion.choices)} choices")

    tool_calls = completion.choices[0].message.tool_calls
    if not tool_calls:
        raise UnexpectedCompletionError(f"{prefix}: no tool_calls")

    if len(tool_calls) != 1:
        message = f"{prefix}: got {len(tool_calls)} tool_calls"
        log_unexpected_tool_calls(
            resolve_logger(logger),
            message,
            [tc.model_dump() for tc in tool_calls],
        )
        raise UnexpectedCompletionError(message)

    return tool_calls[0]
