"""Unit tests for YAML configuration loading and option resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from consoletext.config import (
    PAGING_OPTION,
    WORDWRAP_OPTION,
    ConfigLoader,
    ConfigurationOption,
    PanelConfig,
    StaticRules,
    detect_platform,
)


def test_config_loader_from_yaml_loads_valid_config(tmp_path: Path) -> None:
    """YAML loader should parse every supported key and normalize values."""

    config_path = tmp_path / "panel.yml"
    config_path.write_text(
        """
panel_id: " licence "
headline: "Licence agreement"
content: licence.html
content_encoding: latin-1
strip_html: yes
options:
  console-text-paging: true
  console-text-wordwrap:
    value: "true"
    condition: wide_terminal
conditions:
  wide_terminal: "on"
  never: false
variables:
  APP_NAME: Demo
  APP_VER: 2.1
platform: windows
legacy_codepage: cp437
host_charset: cp1252
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    panel = config.panel
    install = config.install
    assert panel.panel_id == "licence"
    assert panel.headline == "Licence agreement"
    assert panel.content_path == tmp_path / "licence.html"
    assert panel.content_encoding == "latin-1"
    assert panel.strip_html is True
    assert panel.options[PAGING_OPTION] == ConfigurationOption("true")
    assert panel.options[WORDWRAP_OPTION] == ConfigurationOption("true", "wide_terminal")
    assert install.variables == {"APP_NAME": "Demo", "APP_VER": "2.1"}
    assert install.platform == "windows"
    assert install.rules.is_condition_true("wide_terminal") is True
    assert install.rules.is_condition_true("never") is False
    assert install.legacy_codepage == "cp437"
    assert install.host_charset == "cp1252"
    assert panel.paging(install.rules) is True
    assert panel.wordwrap(install.rules) is True


def test_config_loader_keeps_absolute_content_paths(tmp_path: Path) -> None:
    """Absolute content paths are used as given."""

    content = tmp_path / "elsewhere" / "info.txt"
    config = ConfigLoader.from_mapping({"content": str(content)}, base_dir=tmp_path / "cfg")

    assert config.panel.content_path == content


def test_config_loader_applies_defaults_for_empty_file(tmp_path: Path) -> None:
    """An empty YAML file yields default panel and install settings."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    config = ConfigLoader.from_yaml(config_path)

    assert config.panel.panel_id == "text"
    assert config.panel.content_path is None
    assert config.panel.strip_html is False
    assert config.panel.options == {}
    assert config.install.platform == detect_platform()
    assert config.install.legacy_codepage == "cp850"


def test_config_loader_rejects_unknown_keys() -> None:
    """Unsupported top-level keys fail clearly."""

    with pytest.raises(ValueError, match=r"unsupported key\(s\): colour, size"):
        ConfigLoader.from_mapping({"size": 1, "colour": "red"})


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"strip_html": "sometimes"}, r"field `strip_html` must be a boolean value"),
        ({"legacy_codepage": "no-such-codec"}, r"Unknown character encoding"),
        ({"options": ["paging"]}, r"field `options` must be a mapping"),
        ({"options": {"x": {"condition": "c"}}}, r"option `x` requires `value`"),
        ({"options": {"x": {"value": "1", "when": "c"}}}, r"unsupported key\(s\): when"),
        ({"conditions": {"c": "maybe"}}, r"condition `c` must be a boolean value"),
        ({"variables": "APP=1"}, r"field `variables` must be a mapping"),
    ],
)
def test_config_loader_rejects_invalid_values(payload: dict, message: str) -> None:
    """Invalid field values raise `ValueError` naming the field."""

    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_mapping(payload)


def test_config_loader_rejects_non_mapping_yaml(tmp_path: Path) -> None:
    """A YAML list at top level is rejected."""

    config_path = tmp_path / "list.yml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a mapping"):
        ConfigLoader.from_yaml(config_path)


def test_conditional_option_is_ignored_while_condition_is_false() -> None:
    """Options guarded by a false condition resolve to nothing."""

    panel = PanelConfig(
        options={
            WORDWRAP_OPTION: ConfigurationOption("true", condition="wide_terminal"),
            PAGING_OPTION: ConfigurationOption("TRUE"),
        }
    )

    assert panel.option_value(WORDWRAP_OPTION, StaticRules()) is None
    assert panel.wordwrap(StaticRules()) is False
    assert panel.wordwrap(StaticRules(frozenset({"wide_terminal"}))) is True
    assert panel.paging(StaticRules()) is True


def test_missing_options_disable_display_flags() -> None:
    """A panel without options neither wraps nor pages."""

    panel = PanelConfig()

    assert panel.option_value(PAGING_OPTION, StaticRules()) is None
    assert panel.paging(StaticRules()) is False
    assert panel.wordwrap(StaticRules()) is False


@pytest.mark.parametrize(
    ("system", "expected"),
    [
        ("win32", "windows"),
        ("cygwin", "windows"),
        ("darwin", "mac"),
        ("linux", "linux"),
        ("freebsd14", "unix"),
    ],
)
def test_detect_platform_maps_sys_platform(system: str, expected: str) -> None:
    """`sys.platform` values map to install platform identifiers."""

    assert detect_platform(system) == expected
