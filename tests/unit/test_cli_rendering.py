"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from consoletext.cli_rendering import (
    echo_entity,
    echo_normalized_text,
    exit_with_command_error,
)
from consoletext.errors import PanelStageError


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = PanelStageError(
        stage="content",
        detail="Content file not found: `licence.html`.",
        hint="Pass an existing licence or info file.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("render", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "render failed at stage `content`" in captured.err
    assert "Hint: Pass an existing licence or info file." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("strip", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "strip failed: unexpected failure" in captured.err


def test_echo_helpers_render_entities_and_breaks(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Entity rows show code points; `\\r` breaks print as newlines."""

    echo_entity("eacute", 0xE9)
    echo_normalized_text("\r\rHello\rWorld")

    assert capsys.readouterr().out == "&eacute; U+00E9 é\n\n\nHello\nWorld\n"
