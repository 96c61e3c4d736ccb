"""
Pytest configuration for the flagscanner test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Isolated HOME and working directory so user config files never leak in
- Common scanner fixtures
"""

import os

import pytest

from flagscanner.cli.config import CLIConfig
from flagscanner.logging_config import setup_logging
from flagscanner.scanner import Scanner
from flagscanner.user_config import reset_user_config


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    os.environ.setdefault("FLAGSCANNER_MACHINE_MODE", "1")


# ============================================================================
# LOGGING / ISOLATION FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Point HOME and CWD at a temp directory and reset cached CLI state.
    """
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("FLAGSCANNER_HUMAN_MODE", raising=False)
    monkeypatch.chdir(project)
    reset_user_config()
    CLIConfig.set_machine_mode(None)
    yield project
    reset_user_config()
    CLIConfig.set_machine_mode(None)


# ============================================================================
# SCANNER FIXTURES
# ============================================================================

@pytest.fixture
def gnu_scanner():
    """Scanner with '-' and '--' prefixes and the '--' separator."""
    return Scanner(prefixes=["-", "--"], separator="--")


@pytest.fixture
def dig_scanner():
    """Scanner with '-', '--' and '+' prefixes and the '--' separator."""
    return Scanner(prefixes=["-", "--", "+"], separator="--")
