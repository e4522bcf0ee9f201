"""Entry: export tool definitions or validate function arguments from the command line."""
import sys

from dotenv import load_dotenv

load_dotenv()

from pydantic_functions.config import LOG_LEVEL  # noqa: E402
from pydantic_functions.logging_utils import configure_logging  # noqa: E402


def main() -> None:
    configure_logging(LOG_LEVEL)
    from pydantic_functions.cli import run_cli
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
