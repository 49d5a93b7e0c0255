import pytest
from loguru import logger


# The CLI installs sinks bound to the streams of one test run; drop them afterwards.
@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
