"""Configuration model and loaders for console text panels.

Responsibilities:
- Define panel and install settings as typed dataclasses.
- Resolve conditional panel options against install rules.
- Load settings from YAML files with strict key validation.

Key types:
- `ConfigurationOption`: panel option value, optionally guarded by a condition.
- `StaticRules`: condition evaluation backed by a fixed set of true conditions.
- `PanelConfig`: per-panel content and display options.
- `InstallContext`: installer variables, platform and rules.
- `ConsoleTextConfig`: one panel plus its install context.
- `ConfigLoader`: static construction helpers for `ConsoleTextConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import sys
from typing import Any, Mapping, Protocol

import yaml

from .parsing import normalize_optional_string, parse_option_flag, parse_permissive_boolean
from .text.codepage import DEFAULT_HOST_CHARSET, DEFAULT_LEGACY_CODEPAGE, validate_codec
from .variables import VariableSubstitutor


PAGING_OPTION = "console-text-paging"
WORDWRAP_OPTION = "console-text-wordwrap"


def detect_platform(system: str | None = None) -> str:
    """Map a `sys.platform` value onto an install platform identifier."""

    system = system if system is not None else sys.platform
    if system.startswith(("win", "cygwin")):
        return "windows"
    if system == "darwin":
        return "mac"
    if system.startswith("linux"):
        return "linux"
    return "unix"


class RulesEngine(Protocol):
    """Protocol for evaluating install conditions by identifier."""

    def is_condition_true(self, condition_id: str) -> bool:
        """Return whether the condition currently holds."""


@dataclass(frozen=True, slots=True)
class StaticRules:
    """Rules engine whose true conditions are fixed up front."""

    true_conditions: frozenset[str] = frozenset()

    def is_condition_true(self, condition_id: str) -> bool:
        return condition_id in self.true_conditions


@dataclass(frozen=True, slots=True)
class ConfigurationOption:
    """Panel option value, applied only while its condition holds."""

    value: str
    condition: str | None = None

    def resolve(self, rules: RulesEngine) -> str | None:
        """Return the value when unconditioned or when the condition is true."""

        if self.condition is None or rules.is_condition_true(self.condition):
            return self.value
        return None


@dataclass(slots=True)
class PanelConfig:
    """Settings for one console text panel.

    Attributes:
        panel_id: Identifier used in log lines.
        headline: Optional headline printed before the text.
        content_path: Path of the text resource to display.
        content_encoding: Encoding of the text resource.
        strip_html: Whether content is markup to normalize before display.
        options: Named panel options such as `console-text-paging`.
    """

    panel_id: str = "text"
    headline: str | None = None
    content_path: Path | None = None
    content_encoding: str = "utf-8"
    strip_html: bool = False
    options: dict[str, ConfigurationOption] = field(default_factory=dict)

    def option_value(self, name: str, rules: RulesEngine) -> str | None:
        """Resolve option `name` against `rules`; missing options give `None`."""

        option = self.options.get(name)
        if option is None:
            return None
        return option.resolve(rules)

    def paging(self, rules: RulesEngine) -> bool:
        return parse_option_flag(self.option_value(PAGING_OPTION, rules))

    def wordwrap(self, rules: RulesEngine) -> bool:
        return parse_option_flag(self.option_value(WORDWRAP_OPTION, rules))


@dataclass(slots=True)
class InstallContext:
    """Install-wide state consulted by console panels.

    Attributes:
        variables: Installer variables available for text substitution.
        platform: Install platform identifier (`windows`, `linux`, `mac`, `unix`).
        rules: Condition evaluation used for conditional panel options.
        legacy_codepage: Code page text is re-encoded into on Windows.
        host_charset: Charset the re-encoded bytes are read back with.
    """

    variables: dict[str, str] = field(default_factory=dict)
    platform: str = field(default_factory=detect_platform)
    rules: RulesEngine = field(default_factory=StaticRules)
    legacy_codepage: str = DEFAULT_LEGACY_CODEPAGE
    host_charset: str = DEFAULT_HOST_CHARSET

    def substitutor(self) -> VariableSubstitutor:
        return VariableSubstitutor(self.variables)


@dataclass(slots=True)
class ConsoleTextConfig:
    """One panel configuration together with its install context."""

    panel: PanelConfig = field(default_factory=PanelConfig)
    install: InstallContext = field(default_factory=InstallContext)


class ConfigLoader:
    """Factory helpers for building `ConsoleTextConfig` objects."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "panel_id",
            "headline",
            "content",
            "content_encoding",
            "strip_html",
            "options",
            "conditions",
            "variables",
            "platform",
            "legacy_codepage",
            "host_charset",
        }
    )
    _SUPPORTED_OPTION_KEYS = frozenset({"value", "condition"})

    @staticmethod
    def from_yaml(path: Path) -> ConsoleTextConfig:
        """Load configuration from a YAML file.

        Relative `content` paths are resolved against the file's directory.
        """

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a mapping at top level.")
        return ConfigLoader.from_mapping(
            payload, source_label=f"YAML config `{path}`", base_dir=path.parent
        )

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any],
        source_label: str = "config",
        base_dir: Path | None = None,
    ) -> ConsoleTextConfig:
        """Build and validate configuration from a parsed mapping."""

        ConfigLoader._validate_keys(payload, source_label)

        content = ConfigLoader._optional_non_empty_string(payload, "content")
        content_path: Path | None = None
        if content is not None:
            content_path = Path(content)
            if base_dir is not None and not content_path.is_absolute():
                content_path = base_dir / content_path

        content_encoding = ConfigLoader._optional_codec(
            payload, "content_encoding", source_label, "utf-8"
        )
        panel = PanelConfig(
            panel_id=ConfigLoader._optional_non_empty_string(payload, "panel_id") or "text",
            headline=ConfigLoader._optional_non_empty_string(payload, "headline"),
            content_path=content_path,
            content_encoding=content_encoding,
            strip_html=ConfigLoader._optional_boolean(
                payload, "strip_html", source_label, False
            ),
            options=ConfigLoader._options(payload, source_label),
        )
        install = InstallContext(
            variables=ConfigLoader._optional_string_map(payload, "variables", source_label),
            platform=ConfigLoader._optional_non_empty_string(payload, "platform")
            or detect_platform(),
            rules=StaticRules(ConfigLoader._true_conditions(payload, source_label)),
            legacy_codepage=ConfigLoader._optional_codec(
                payload, "legacy_codepage", source_label, DEFAULT_LEGACY_CODEPAGE
            ),
            host_charset=ConfigLoader._optional_codec(
                payload, "host_charset", source_label, DEFAULT_HOST_CHARSET
            ),
        )
        return ConsoleTextConfig(panel=panel, install=install)

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys outside the supported schema."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_codec(
        payload: Mapping[str, Any], key: str, source_label: str, default: str
    ) -> str:
        """Read an optional encoding name and check that Python knows it."""

        value = ConfigLoader._optional_non_empty_string(payload, key)
        if value is None:
            return default
        try:
            validate_codec(value)
        except ValueError as exc:
            raise ValueError(f"{source_label} field `{key}`: {exc}") from exc
        return value

    @staticmethod
    def _optional_string_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Read an optional mapping with non-empty keys and string-coerced values."""

        raw = payload.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            key_value = normalize_optional_string(raw_key)
            if key_value is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            normalized[key_value] = ConfigLoader._scalar_text(raw_value)
        return normalized

    @staticmethod
    def _options(
        payload: Mapping[str, Any], source_label: str
    ) -> dict[str, ConfigurationOption]:
        """Read panel options given as scalars or `{value, condition}` mappings."""

        raw = payload.get("options")
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `options` must be a mapping/object.")

        options: dict[str, ConfigurationOption] = {}
        for raw_name, raw_option in raw.items():
            name = normalize_optional_string(raw_name)
            if name is None:
                raise ValueError(f"{source_label} field `options` contains a blank key.")
            if not isinstance(raw_option, Mapping):
                options[name] = ConfigurationOption(ConfigLoader._scalar_text(raw_option))
                continue
            unknown = sorted(
                str(key)
                for key in set(raw_option).difference(ConfigLoader._SUPPORTED_OPTION_KEYS)
            )
            if unknown:
                raise ValueError(
                    f"{source_label} option `{name}` includes unsupported key(s): "
                    f"{', '.join(unknown)}."
                )
            if "value" not in raw_option:
                raise ValueError(f"{source_label} option `{name}` requires `value`.")
            options[name] = ConfigurationOption(
                value=ConfigLoader._scalar_text(raw_option["value"]),
                condition=normalize_optional_string(raw_option.get("condition")),
            )
        return options

    @staticmethod
    def _true_conditions(payload: Mapping[str, Any], source_label: str) -> frozenset[str]:
        """Read `conditions` as a mapping of condition id to boolean."""

        raw = payload.get("conditions")
        if raw is None:
            return frozenset()
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `conditions` must be a mapping/object.")

        true_conditions: set[str] = set()
        for raw_id, raw_value in raw.items():
            condition_id = normalize_optional_string(raw_id)
            if condition_id is None:
                raise ValueError(f"{source_label} field `conditions` contains a blank key.")
            parsed = parse_permissive_boolean(raw_value)
            if parsed is None:
                raise ValueError(
                    f"{source_label} condition `{condition_id}` must be a boolean value."
                )
            if parsed:
                true_conditions.add(condition_id)
        return frozenset(true_conditions)

    @staticmethod
    def _scalar_text(value: object) -> str:
        """Render a YAML scalar the way option and variable lookups expect it."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return ""
        return str(value)
