"""Tests for condition code to icon mapping."""

import pytest

from weatherwidget.view.icons import IconId, classify, icon_src


class TestClassify:
    @pytest.mark.parametrize(
        "code,expected",
        [
            (-1000, IconId.THUNDERSTORM),
            (0, IconId.THUNDERSTORM),
            (200, IconId.THUNDERSTORM),
            (232, IconId.THUNDERSTORM),
            (233, IconId.DRIZZLE),
            (300, IconId.DRIZZLE),
            (321, IconId.DRIZZLE),
            (322, IconId.RAIN),
            (500, IconId.RAIN),
            (531, IconId.RAIN),
            (532, IconId.SNOW),
            (600, IconId.SNOW),
            (622, IconId.SNOW),
            (623, IconId.ATMOSPHERE),
            (701, IconId.ATMOSPHERE),
            (781, IconId.ATMOSPHERE),
            (782, IconId.CLOUDS),
            (799, IconId.CLOUDS),
            (800, IconId.CLEAR),
            (801, IconId.CLOUDS),
            (804, IconId.CLOUDS),
            (10_000, IconId.CLOUDS),
        ],
    )
    def test_ranges(self, code: int, expected: IconId):
        assert classify(code) == expected

    def test_total_and_repeatable(self):
        for code in range(-50, 1000):
            first = classify(code)
            assert isinstance(first, IconId)
            assert classify(code) == first


class TestIconSrc:
    def test_default_base(self):
        assert icon_src(800) == "assets/weather/clear.svg"

    def test_trailing_slash_base(self):
        assert icon_src(501, "static/icons/") == "static/icons/rain.svg"
