"""Pytest configuration and fixtures for core engine tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
from pathlib import Path

import pytest

from depgraph_core import CommandInterpreter, InstallationTracker, TrackerSettings


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/core)
    - The project root
    - Or after pip install
    """
    package_root_str = str(Path(__file__).parent.parent)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def tracker():
    """A fresh tracker with no declarations."""
    return InstallationTracker()


@pytest.fixture
def guarded_tracker():
    """A tracker with cycle detection enabled."""
    return InstallationTracker(settings=TrackerSettings(detect_cycles=True))


@pytest.fixture
def interpreter():
    """A fresh interpreter session."""
    return CommandInterpreter()


@pytest.fixture
def sample_script():
    """The classic network stack session, one command per line."""
    return """DEPEND TELNET TCPIP NETCARD
DEPEND TCPIP NETCARD
DEPEND DNS TCPIP NETCARD
DEPEND BROWSER TCPIP HTML
INSTALL NETCARD
INSTALL TELNET
INSTALL foo
REMOVE NETCARD
INSTALL BROWSER
INSTALL DNS
LIST
REMOVE TELNET
REMOVE NETCARD
REMOVE DNS
REMOVE NETCARD
INSTALL NETCARD
REMOVE TCPIP
REMOVE BROWSER
REMOVE TCPIP
LIST
END
"""
