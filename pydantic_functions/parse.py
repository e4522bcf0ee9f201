"""Decode and validate the arguments string of a function call."""
import json
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from pydantic_functions.errors import InvalidArgumentsError
from pydantic_functions.logging_utils import FunctionLogger, log_invalid_arguments, resolve_logger

P = TypeVar("P", bound=BaseModel)


def _format_loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) if loc else "(root)"


def render_validation_error(error: ValidationError) -> str:
    """One line listing every violation as "path: reason"."""
    details = "; ".join(f"{_format_loc(e['loc'])}: {e['msg']}" for e in error.errors())
    return f"Validation error: {details}"


def _reject_constant(constant: str) -> None:
    raise ValueError(f"{constant} is not valid JSON")


def parse_arguments(
    name: str,
    arguments: str,
    schema: type[P],
    *,
    logger: FunctionLogger | None = None,
) -> P:
    """Parse a function call's arguments string using a pydantic model.

    Returns the validated model instance (defaults applied), never the raw decoded
    JSON. Validation is strict: "5" is not accepted for a number, nor "true" for a bool.
    Raises InvalidArgumentsError if the string is not JSON or does not match the schema.
    """
    logger = resolve_logger(logger)

    # Should be guaranteed by the API, but bad JSON is not worth retrying here
    try:
        json.loads(arguments, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        detail = f"Invalid JSON: {e}"
        log_invalid_arguments(logger, name, detail, str(arguments))
        raise InvalidArgumentsError(name, arguments, detail) from e

    # Not guaranteed: the model can hallucinate arguments
    try:
        return schema.model_validate_json(arguments, strict=True)
    except ValidationError as e:
        detail = render_validation_error(e)
        log_invalid_arguments(logger, name, detail, arguments)
        raise InvalidArgumentsError(name, arguments, detail) from e
