"""Shared fixtures for CLI tests."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from cli.cli import app


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reset loguru after each test; the CLI points its sink at the runner's stderr."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def invoke(runner: CliRunner, data_file: Path):
    """Invoke the CLI against the test data file."""

    def _invoke(*args: str, input: str | None = None):
        return runner.invoke(app, ["--data-file", str(data_file), *args], input=input)

    return _invoke
