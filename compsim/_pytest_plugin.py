"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["compsim._pytest_plugin"]

This makes the ``sim_config`` fixture available::

    def test_something(sim_config):
        result = run_benchmark(sim_config)
"""

import pytest

from ._config import RunConfig


@pytest.fixture
def sim_config(tmp_path) -> RunConfig:
    """A small seeded :class:`RunConfig` rooted in the test's ``tmp_path``.

    Two subfolders of three 100-byte files each.
    """
    return RunConfig(
        root_path=str(tmp_path),
        file_size=100,
        num_subfolders=2,
        files_per_subfolder=3,
        seed=42,
    )
