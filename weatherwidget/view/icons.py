"""Weather condition code to icon asset mapping."""

from enum import StrEnum


class IconId(StrEnum):
    THUNDERSTORM = "thunderstorm"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    ATMOSPHERE = "atmosphere"
    CLEAR = "clear"
    CLOUDS = "clouds"


# Inclusive upper bounds of the OpenWeatherMap condition groups, checked in order.
_UPPER_BOUNDS: tuple[tuple[int, IconId], ...] = (
    (232, IconId.THUNDERSTORM),
    (321, IconId.DRIZZLE),
    (531, IconId.RAIN),
    (622, IconId.SNOW),
    (781, IconId.ATMOSPHERE),
)

CLEAR_SKY_CODE = 800


def classify(code: int) -> IconId:
    """Map a condition code to its icon. Every integer maps to some icon."""
    for upper, icon in _UPPER_BOUNDS:
        if code <= upper:
            return icon
    if code == CLEAR_SKY_CODE:
        return IconId.CLEAR
    return IconId.CLOUDS


def icon_src(code: int, asset_base: str = "assets/weather") -> str:
    return f"{asset_base.rstrip('/')}/{classify(code)}.svg"
