"""Tests for features.color_contrast.colors — HEX validation and spoken colors."""

from __future__ import annotations

import pytest

from features.color_contrast.colors import is_valid_hex_color, resolve_color


class TestIsValidHexColor:
    @pytest.mark.parametrize("color", ["#000", "#fff", "#FFF", "#000000", "#ffffff", "#AbC123", "#a1B"])
    def test_accepts_short_and_long_forms(self, color: str) -> None:
        assert is_valid_hex_color(color)

    @pytest.mark.parametrize(
        "color",
        ["#12", "123456", "#12345Z", "#1234", "#12345", "#1234567", "", "#", "#GGG", " #000000"],
    )
    def test_rejects_everything_else(self, color: str) -> None:
        assert not is_valid_hex_color(color)


class TestResolveColor:
    def test_named_color(self) -> None:
        assert resolve_color("black") == "#000000"
        assert resolve_color(" White ") == "#FFFFFF"

    def test_hex_literal_is_uppercased(self) -> None:
        assert resolve_color("check contrast #abc") == "#ABC"
        assert resolve_color("#1a2b3c") == "#1A2B3C"

    def test_noise_and_filler_removed(self) -> None:
        assert resolve_color("check contrast black", noise=("check contrast",)) == "#000000"
        assert resolve_color(" to red") == "#FF0000"
        assert resolve_color("white background") == "#FFFFFF"

    def test_unknown_name(self) -> None:
        assert resolve_color("purple") is None
        assert resolve_color("") is None

    def test_invalid_hex_length(self) -> None:
        assert resolve_color("#1234") is None
