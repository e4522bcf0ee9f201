"""Errors raised while resolving, parsing, and running function calls.

Every error carries an HTTP status so a web host can surface it directly.
The status defaults to 500: from the library's point of view each of these is
unexpected. InvalidArgumentsError is additionally tagged with an external
source, so callers can tell a model hallucination (retry the model call) from
a bug in their own code.
"""


class HttpError(Exception):
    """An exception with an HTTP status code and optional source info."""

    def __init__(self, message: str, status: int = 500, source: str | None = None):
        super().__init__(message)
        self.message = message
        self.status = status
        # External origin of the error, such as "OpenAI"
        self.source = source

    @property
    def model_sourced(self) -> bool:
        return False


class UnknownFunctionError(HttpError):
    """A function call used a name that is not in the list of definitions."""

    def __init__(self, name: str):
        super().__init__(f"Function not found: {name}", 500)
        self.name = name


class InvalidArgumentsError(HttpError):
    """A function call's arguments string did not decode, or did not match the schema."""

    def __init__(self, name: str, arguments: str, detail: str):
        super().__init__(f"Invalid {name} function args: {detail}", 500, source="OpenAI")
        self.name = name
        self.arguments = arguments
        self.detail = detail

    @property
    def model_sourced(self) -> bool:
        return True


def _describe_cause(cause: BaseException) -> str:
    return str(cause) or type(cause).__name__


class FunctionHandlerError(HttpError):
    """A function handler raised."""

    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"Error calling function {name}: {_describe_cause(cause)}", 500)
        self.name = name
        self.cause = cause


class FunctionReducerError(HttpError):
    """A reducer raised."""

    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"Error calling reducer {name}: {_describe_cause(cause)}", 500)
        self.name = name
        self.cause = cause


class UnexpectedCompletionError(HttpError):
    """A completion did not have the shape the caller asked the model for."""
