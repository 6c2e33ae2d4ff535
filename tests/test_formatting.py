"""Tests for display formatting helpers."""

import pytest

from soundboard.utils import format_clip_name, format_duration


@pytest.mark.unit
class TestFormatClipName:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("IchKannFliegen", "Ich Kann Fliegen"),
            ("Miau_Song", "Miau Song"),
            ("AUA", "AUA"),
            ("Zero", "Zero"),
            ("WürdMirStinken", "Würd Mir Stinken"),
            ("BösesImBusch", "Böses Im Busch"),
            ("DerGerät", "Der Gerät"),
        ],
    )
    def test_formats_names(self, raw, expected):
        assert format_clip_name(raw) == expected

    def test_empty_name(self):
        assert format_clip_name("") == ""

    def test_underscore_and_camel_case_combined(self):
        assert format_clip_name("Nein_DochOh") == "Nein Doch Oh"


@pytest.mark.unit
class TestFormatDuration:

    def test_seconds_only(self):
        assert format_duration(7.9) == "00:07"

    def test_minutes_and_seconds(self):
        assert format_duration(75.4) == "01:15"

    def test_minutes_wrap_at_an_hour(self):
        assert format_duration(3661) == "01:01"

    def test_negative_is_zero(self):
        assert format_duration(-3) == "00:00"
