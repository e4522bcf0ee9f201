import pytest
from helpers import RecordingLogger

from pydantic_functions.logging_utils import set_logger


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(autouse=True)
def reset_logger():
    """Each test starts and ends with the default process-wide logger."""
    set_logger(None)
    yield
    set_logger(None)
