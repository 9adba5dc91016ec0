"""Command-line interface for consoletext.

Responsibilities:
- Expose user-facing commands for console panel rendering.
- Convert CLI arguments and optional YAML config into panel settings.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_entity, echo_normalized_text, exit_with_command_error
from .config import (
    PAGING_OPTION,
    WORDWRAP_OPTION,
    ConfigLoader,
    ConfigurationOption,
    ConsoleTextConfig,
)
from .console import TerminalConsole
from .errors import PanelStageError
from .panels.finish import FinishConsolePanel
from .panels.text import panel_class_for
from .parsing import parse_assignment
from .telemetry.logger import PanelLogger
from .text.entities import ENTITY_TABLE
from .text.normalizer import MarkupNormalizer

app = typer.Typer(
    name="consoletext",
    no_args_is_help=True,
    help="Render installer licence and info markup as console text.",
)


def _load_yaml_config(config_path: Path | None) -> ConsoleTextConfig:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return ConsoleTextConfig()

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PanelStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PanelStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _read_content(path: Path, encoding: str) -> str:
    """Read a content file, mapping I/O and decoding failures to stage errors."""

    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise PanelStageError(
            stage="content",
            detail=f"Content file not found: `{path}`.",
            hint="Pass an existing licence or info file.",
        ) from exc
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise PanelStageError(
            stage="content",
            detail=f"Failed to read content file `{path}`: {exc}",
            hint="Check file permissions and `--encoding`.",
        ) from exc


def _resolve_render_config(
    config_file: Path | None,
    content: Path | None,
    html: bool | None,
    wordwrap: bool | None,
    paging: bool | None,
    platform: str | None,
    variables: list[str],
    headline: str | None,
) -> ConsoleTextConfig:
    """Resolve effective render config from YAML defaults and explicit CLI overrides."""

    config = _load_yaml_config(config_file)
    panel = config.panel
    install = config.install

    if content is not None:
        panel.content_path = content
    if panel.content_path is None:
        raise PanelStageError(
            stage="config",
            detail="Content path is required when the config file does not set `content`.",
            hint="Pass `<content>` or use `--config <path.yaml>` with `content`.",
        )
    if html is not None:
        panel.strip_html = html
    if wordwrap is not None:
        panel.options[WORDWRAP_OPTION] = ConfigurationOption("true" if wordwrap else "false")
    if paging is not None:
        panel.options[PAGING_OPTION] = ConfigurationOption("true" if paging else "false")
    if headline is not None:
        panel.headline = headline
    if platform is not None:
        install.platform = platform
    for token in variables:
        try:
            key, value = parse_assignment(token)
        except ValueError as exc:
            raise PanelStageError(
                stage="config",
                detail=str(exc),
                hint="Pass variables as `--var NAME=VALUE`.",
            ) from exc
        install.variables[key] = value
    return config


@app.command("render")
def render_command(
    content: Annotated[
        Path | None,
        typer.Argument(help="Licence or info file (overrides config file value)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML panel config."),
    ] = None,
    html: Annotated[
        bool | None,
        typer.Option("--html/--plain", help="Strip HTML markup before display."),
    ] = None,
    wordwrap: Annotated[
        bool | None,
        typer.Option("--wordwrap/--no-wordwrap", help="Soft-wrap long lines."),
    ] = None,
    paging: Annotated[
        bool | None,
        typer.Option("--paging/--no-paging", help="Pause after each screenful."),
    ] = None,
    platform: Annotated[
        str | None,
        typer.Option("--platform", help="Install platform (`windows`, `linux`, `mac`)."),
    ] = None,
    variables: Annotated[
        list[str] | None,
        typer.Option("--var", help="Installer variable as `NAME=VALUE` (repeatable)."),
    ] = None,
    headline: Annotated[
        str | None,
        typer.Option("--headline", help="Headline printed above the text."),
    ] = None,
    prompt: Annotated[
        bool,
        typer.Option("--prompt/--no-prompt", help="Ask to continue at the end of the panel."),
    ] = True,
) -> None:
    """Display a licence or info file the way the console installer does."""

    try:
        config = _resolve_render_config(
            config_file,
            content,
            html,
            wordwrap,
            paging,
            platform,
            variables or [],
            headline,
        )
        panel_type = panel_class_for(config.panel.strip_html)
        panel = panel_type(config.panel, config.install, logger=PanelLogger())
        proceed = panel.run(TerminalConsole(), prompt=prompt)
    except Exception as exc:
        exit_with_command_error("render", exc)

    if not proceed:
        raise typer.Exit(code=2)


@app.command("strip")
def strip_command(
    content: Annotated[Path, typer.Argument(help="Markup file to normalize.")],
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write raw normalized text (`\\r` breaks) here."),
    ] = None,
    encoding: Annotated[
        str, typer.Option("--encoding", help="Encoding of the markup file.")
    ] = "utf-8",
) -> None:
    """Print markup converted to plain text."""

    try:
        normalized = MarkupNormalizer().normalize(_read_content(content, encoding))
        if output is not None:
            with output.open("w", encoding="utf-8", newline="") as handle:
                handle.write(normalized)
    except Exception as exc:
        exit_with_command_error("strip", exc)

    if output is None:
        echo_normalized_text(normalized)
    else:
        typer.echo(f"Normalized text: {output}")


@app.command("entity")
def entity_command(
    names: Annotated[list[str], typer.Argument(help="Entity names without `&` and `;`.")],
) -> None:
    """Look up named character references."""

    for raw_name in names:
        name = raw_name.strip().removeprefix("&").removesuffix(";")
        code_point = ENTITY_TABLE.decode(name)
        if code_point is None:
            exit_with_command_error(
                "entity",
                PanelStageError(
                    stage="lookup",
                    detail=f"Unknown entity `{raw_name}`.",
                    hint="Entity names are case-sensitive (`Eacute` and `eacute` differ).",
                ),
            )
        echo_entity(name, code_point)


@app.command("finish")
def finish_command(
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Install log scanned for `BUILD FAILED`."),
    ] = None,
    uninstaller: Annotated[
        Path | None,
        typer.Option("--uninstaller", help="Path of the generated uninstaller."),
    ] = None,
    failed: Annotated[
        bool,
        typer.Option("--failed", help="Report a failed install regardless of the log."),
    ] = False,
) -> None:
    """Print the final install outcome."""

    try:
        panel = FinishConsolePanel(
            install_success=not failed,
            log_file=log_file,
            uninstaller_path=uninstaller,
        )
        succeeded = panel.run(TerminalConsole(), PanelLogger())
    except Exception as exc:
        exit_with_command_error("finish", exc)

    if not succeeded:
        raise typer.Exit(code=1)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
