"""Shared parsing helpers for configuration and panel option values."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_option_flag(value: str | None) -> bool:
    """Parse a resolved panel option value as a display flag.

    Only `"true"` (any letter case) enables a flag; missing values and every
    other token leave it disabled.
    """

    return value is not None and value.lower() == "true"


def parse_assignment(token: str) -> tuple[str, str]:
    """Split a `KEY=VALUE` token into a stripped key and a raw value.

    Raises:
        ValueError: If the token has no `=` or the key is blank.
    """

    key, separator, value = token.partition("=")
    normalized_key = normalize_optional_string(key)
    if not separator or normalized_key is None:
        raise ValueError(f"Expected `KEY=VALUE`, got `{token}`.")
    return normalized_key, value
