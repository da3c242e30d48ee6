import matplotlib

matplotlib.use("Agg")

import pytest

import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.set_sink(None)
    logger.set_time_manager(None)


@pytest.fixture
def notices():
    """Every diagnostic notice emitted during the test, as (level, message) pairs."""
    captured = []
    logger.set_sink(lambda level, message: captured.append((level, message)))
    return captured


def errors_in(notices):
    return [message for level, message in notices if level == logger.LEVEL_ERROR]
