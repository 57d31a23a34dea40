import logging

import pytest

from compsim._pytest_plugin import sim_config  # noqa: F401


@pytest.fixture(autouse=True)
def _reset_compsim_logger():
    """Drop handlers the CLI binds to captured streams."""
    yield
    logger = logging.getLogger("compsim")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
