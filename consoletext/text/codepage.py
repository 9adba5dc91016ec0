"""Legacy code page re-encoding for Windows consoles."""

from __future__ import annotations

import codecs


DEFAULT_LEGACY_CODEPAGE = "cp850"
DEFAULT_HOST_CHARSET = "cp1252"


def is_windows_platform(platform: str | None) -> bool:
    """Return whether an install platform identifier names Windows."""

    return platform is not None and platform.lower() == "windows"


def validate_codec(name: str) -> str:
    """Return the canonical codec name, raising `ValueError` for unknown codecs."""

    try:
        return codecs.lookup(name).name
    except LookupError as exc:
        raise ValueError(f"Unknown character encoding `{name}`.") from exc


def reencode_for_console(
    text: str,
    codepage: str = DEFAULT_LEGACY_CODEPAGE,
    host_charset: str = DEFAULT_HOST_CHARSET,
) -> str:
    """Encode `text` into `codepage` bytes and read them back as `host_charset`.

    Characters missing from `codepage` become `?`; bytes undefined in
    `host_charset` become U+FFFD.
    """

    raw = text.encode(codepage, errors="replace")
    return raw.decode(host_charset, errors="replace")
