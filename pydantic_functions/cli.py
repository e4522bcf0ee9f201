"""CLI: print tool definitions for a list of functions, or check an arguments string against one."""
import importlib
import json
import sys

from pydantic_functions.errors import HttpError
from pydantic_functions.function import FunctionDef, to_tools
from pydantic_functions.parse import parse_arguments
from pydantic_functions.registry import find_function

USAGE = (
    "Usage: python main.py tools <module>:<attr>  |  "
    "python main.py parse <module>:<attr> <function_name> '<arguments json>'"
)


def load_functions(target: str) -> list[FunctionDef]:
    """Import `module:attr` and return the list of function definitions it names."""
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Expected <module>:<attr>, got {target!r}")
    functions = getattr(importlib.import_module(module_name), attr)
    if not isinstance(functions, (list, tuple)) or not all(
        isinstance(f, FunctionDef) for f in functions
    ):
        raise ValueError(f"{target} is not a list of function definitions")
    return list(functions)


def run_tools(target: str) -> None:
    print(json.dumps(to_tools(load_functions(target)), indent=2))


def run_parse(target: str, name: str, arguments: str) -> None:
    function_def = find_function(name, load_functions(target))
    parameters = parse_arguments(name, arguments, function_def.schema)
    print(parameters.model_dump_json(indent=2, by_alias=True))


def run_cli(argv: list[str]) -> int:
    """Entry for the CLI; argv excludes the program name. Returns the exit code."""
    if not argv:
        print(USAGE, file=sys.stderr)
        return 1
    cmd, args = argv[0].lower(), argv[1:]
    try:
        if cmd == "tools" and len(args) == 1:
            run_tools(args[0])
        elif cmd == "parse" and len(args) == 3:
            run_parse(*args)
        else:
            print(USAGE, file=sys.stderr)
            return 1
    except (HttpError, ValueError, ImportError, AttributeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
