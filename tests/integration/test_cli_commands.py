"""CLI integration tests for render, strip, entity and finish commands."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from consoletext.cli import app


runner = CliRunner()


def test_strip_prints_normalized_text(tmp_path: Path) -> None:
    """`strip` prints paragraph breaks as blank lines."""

    content = tmp_path / "licence.html"
    content.write_text("<p>Hello</p><p>World &amp; more</p>", encoding="utf-8")

    result = runner.invoke(app, ["strip", str(content)])

    assert result.exit_code == 0
    assert "Hello\n\nWorld & more" in result.output


def test_strip_writes_raw_breaks_to_output_file(tmp_path: Path) -> None:
    """`--output` keeps `\\r` break markers untouched."""

    content = tmp_path / "licence.html"
    content.write_text("<p>Hello</p><p>World</p>", encoding="utf-8")
    output = tmp_path / "licence.txt"

    result = runner.invoke(app, ["strip", str(content), "--output", str(output)])

    assert result.exit_code == 0
    assert output.read_bytes() == b"\r\rHello\r\rWorld"
    assert f"Normalized text: {output}" in result.output


def test_strip_reports_missing_content(tmp_path: Path) -> None:
    """A missing input file fails with a stage diagnostic."""

    result = runner.invoke(app, ["strip", str(tmp_path / "missing.html")])

    assert result.exit_code == 1
    assert "strip failed at stage `content`" in result.output


def test_entity_prints_code_points() -> None:
    """`entity` accepts bare or `&name;` references."""

    result = runner.invoke(app, ["entity", "eacute", "&hellip;"])

    assert result.exit_code == 0
    assert "&eacute; U+00E9 é" in result.output
    assert "&hellip; U+2026 …" in result.output


def test_entity_rejects_unknown_names() -> None:
    """Unknown names fail with a case-sensitivity hint."""

    result = runner.invoke(app, ["entity", "EACUTE"])

    assert result.exit_code == 1
    assert "entity failed at stage `lookup`" in result.output
    assert "case-sensitive" in result.output


def test_render_html_with_variables_without_prompt(tmp_path: Path) -> None:
    """`render --html` substitutes variables and prints console text."""

    content = tmp_path / "info.html"
    content.write_text("<p>Welcome to ${APP}</p><ul><li>fast</li></ul>", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "render",
            str(content),
            "--html",
            "--var",
            "APP=Demo",
            "--platform",
            "linux",
            "--headline",
            "Read me",
            "--no-prompt",
        ],
    )

    assert result.exit_code == 0
    assert "Read me\n\n\n\nWelcome to Demo\nfast\n" in result.output


def test_render_plain_keeps_markup(tmp_path: Path) -> None:
    """Plain mode displays the file as is."""

    content = tmp_path / "licence.txt"
    content.write_text("Use <b>freely</b>.", encoding="utf-8")

    result = runner.invoke(
        app, ["render", str(content), "--plain", "--platform", "linux", "--no-prompt"]
    )

    assert result.exit_code == 0
    assert "Use <b>freely</b>." in result.output


def test_render_quit_answer_exits_with_code_two(tmp_path: Path) -> None:
    """Answering `2` at the end prompt quits."""

    content = tmp_path / "licence.txt"
    content.write_text("Terms", encoding="utf-8")

    result = runner.invoke(
        app, ["render", str(content), "--platform", "linux"], input="2\n"
    )

    assert result.exit_code == 2
    assert "Press 1 to continue, 2 to quit, 3 to redisplay" in result.output


def test_render_redisplay_then_continue(tmp_path: Path) -> None:
    """Answering `3` shows the text again before continuing."""

    content = tmp_path / "licence.txt"
    content.write_text("Terms", encoding="utf-8")

    result = runner.invoke(
        app, ["render", str(content), "--platform", "linux"], input="3\n1\n"
    )

    assert result.exit_code == 0
    assert result.output.count("Terms") == 2


def test_render_missing_content_warns_and_continues(tmp_path: Path) -> None:
    """Missing content is logged as a warning, not an error."""

    result = runner.invoke(
        app,
        ["render", str(tmp_path / "missing.txt"), "--platform", "linux", "--no-prompt"],
    )

    assert result.exit_code == 0
    assert "event=no_text" in result.output


def test_render_uses_yaml_config_and_cli_overrides(tmp_path: Path) -> None:
    """Config supplies content and options; CLI flags override them."""

    (tmp_path / "licence.html").write_text("<p>${APP} licence</p>", encoding="utf-8")
    config_path = tmp_path / "panel.yml"
    config_path.write_text(
        """
panel_id: licence
content: licence.html
strip_html: true
platform: linux
variables:
  APP: Demo
options:
  console-text-paging: "false"
""".strip(),
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        ["render", "--config", str(config_path), "--var", "APP=Override", "--no-prompt"],
    )

    assert result.exit_code == 0
    assert "Override licence" in result.output


def test_render_requires_content(tmp_path: Path) -> None:
    """Without content argument or config value the command fails."""

    result = runner.invoke(app, ["render", "--no-prompt"])

    assert result.exit_code == 1
    assert "render failed at stage `config`" in result.output


def test_render_reports_invalid_config(tmp_path: Path) -> None:
    """Unsupported config keys are reported with a hint."""

    config_path = tmp_path / "panel.yml"
    config_path.write_text("colour: red\n", encoding="utf-8")

    result = runner.invoke(app, ["render", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "render failed at stage `config`" in result.output
    assert "unsupported key(s): colour" in result.output


def test_render_rejects_malformed_variables(tmp_path: Path) -> None:
    """`--var` values must be `NAME=VALUE`."""

    content = tmp_path / "licence.txt"
    content.write_text("Terms", encoding="utf-8")

    result = runner.invoke(app, ["render", str(content), "--var", "APP", "--no-prompt"])

    assert result.exit_code == 1
    assert "Pass variables as `--var NAME=VALUE`." in result.output


def test_finish_reports_failed_build(tmp_path: Path) -> None:
    """`finish` fails when the install log contains a build failure."""

    log_file = tmp_path / "install.log"
    log_file.write_text("BUILD FAILED\n", encoding="utf-8")

    result = runner.invoke(app, ["finish", "--log-file", str(log_file)])

    assert result.exit_code == 1
    assert "Installation failed!" in result.output
    assert str(log_file) in result.output


def test_finish_reports_success_with_uninstaller(tmp_path: Path) -> None:
    """`finish` prints the success message and uninstaller path."""

    uninstaller = tmp_path / "uninstaller.jar"

    result = runner.invoke(app, ["finish", "--uninstaller", str(uninstaller)])

    assert result.exit_code == 0
    assert "Installation has completed successfully." in result.output
    assert str(uninstaller) in result.output
