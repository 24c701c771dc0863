"""Root conftest -- gates tests that wait on real timeouts or sockets.

Slow tests run when ``--run-slow`` is passed or ``PSYRELAY_RUN_SLOW=1`` is
set in the environment (handy in CI where the command line is fixed).
"""

from __future__ import annotations

import os

import pytest


def pytest_addoption(parser):
    parser.addoption("--run-slow", action="store_true", help="Run @pytest.mark.slow tests.")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: waits on a real timeout or socket")


def _slow_enabled(config) -> bool:
    if config.getoption("--run-slow"):
        return True
    return os.getenv("PSYRELAY_RUN_SLOW", "").lower() in ("1", "true", "yes")


def pytest_runtest_setup(item):
    if item.get_closest_marker("slow") and not _slow_enabled(item.config):
        pytest.skip("slow; pass --run-slow or set PSYRELAY_RUN_SLOW=1")
