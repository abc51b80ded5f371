"""Pytest configuration and fixtures for CLI tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import os
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path."""
    package_root_str = str(Path(__file__).parent.parent)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env():
    """Drop DEPGRAPH_* variables so settings use their defaults."""
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("DEPGRAPH_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def script_file(tmp_path):
    """A small command script."""
    path = tmp_path / "commands.txt"
    path.write_text(
        "DEPEND A B C\n"
        "INSTALL A\n"
        "INSTALL A\n"
        "\n"
        "LIST\n"
        "REMOVE A\n"
        "LIST\n"
        "END\n"
    )
    return str(path)


@pytest.fixture
def cyclic_script(tmp_path):
    path = tmp_path / "cyclic.txt"
    path.write_text("DEPEND A B\nDEPEND B A\nINSTALL A\nLIST\n")
    return str(path)


@pytest.fixture
def manifest_file(tmp_path):
    path = tmp_path / "deps.yaml"
    path.write_text('version: "1"\ndependencies:\n  APP: [LIB]\n  LIB: [CORE]\n')
    return str(path)
