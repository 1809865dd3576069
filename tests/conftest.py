"""Pytest configuration and shared fixtures for the csv2xlsx test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import logging
from pathlib import Path
from typing import Callable, Generator, Union

import pytest

WriteCsv = Callable[..., Path]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level after CLI tests reconfigure logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user configuration files and environment out of tests."""
    monkeypatch.delenv("CSV2XLSX_CONFIG", raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))


@pytest.fixture
def write_csv(tmp_path: Path) -> WriteCsv:
    """Return a helper that writes CSV content into the test directory.

    ``content`` may be ``str`` (encoded with ``encoding``) or raw ``bytes``.
    """

    def _write(name: str, content: Union[str, bytes], encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode(encoding))
        return path

    return _write


@pytest.fixture
def people_csv(write_csv: WriteCsv) -> Path:
    """A small comma-separated file with a header and two records."""
    return write_csv("people.csv", "Name,Age,Active\nAlice,30,true\nBob,25,false\n")
