"""Unit tests for legacy console code page handling."""

import pytest

from consoletext.text.codepage import is_windows_platform, reencode_for_console, validate_codec


@pytest.mark.parametrize(
    ("platform", "expected"),
    [("windows", True), ("Windows", True), ("WINDOWS", True), ("linux", False), (None, False)],
)
def test_is_windows_platform(platform: str | None, expected: bool) -> None:
    """Only the `windows` identifier (any case) selects re-encoding."""

    assert is_windows_platform(platform) is expected


def test_reencode_maps_cp850_bytes_through_host_charset() -> None:
    """Characters are written as cp850 bytes and read back as cp1252."""

    assert reencode_for_console("plain ascii") == "plain ascii"
    # cp850 encodes U+00E9 as 0x82, which cp1252 reads as U+201A.
    assert reencode_for_console("café") == "caf‚"


def test_reencode_replaces_characters_missing_from_codepage() -> None:
    """Unmappable characters become question marks."""

    assert reencode_for_console("€ 5") == "? 5"


def test_reencode_round_trips_with_matching_charsets() -> None:
    """Using the same code page on both sides keeps representable text."""

    assert reencode_for_console("café", "cp850", "cp850") == "café"


def test_validate_codec_rejects_unknown_names() -> None:
    """Unknown encodings fail with a readable message."""

    assert validate_codec("CP850") == "cp850"
    with pytest.raises(ValueError, match="Unknown character encoding `no-such-codec`"):
        validate_codec("no-such-codec")
