"""Shared pytest fixtures for the consoletext test suite."""

from __future__ import annotations

import io

import pytest

from consoletext.telemetry.logger import PanelLogger


@pytest.fixture
def log_sink() -> io.StringIO:
    """Provide an in-memory sink for panel log lines."""

    return io.StringIO()


@pytest.fixture
def panel_logger(log_sink: io.StringIO) -> PanelLogger:
    """Provide a panel logger writing into `log_sink`."""

    return PanelLogger(sink=log_sink)
