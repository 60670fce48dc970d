"""Declarative rendering of weather models into structured view nodes."""

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from weatherwidget.config.defaults import UNIT_SUFFIXES
from weatherwidget.models.common import Units
from weatherwidget.models.weather import CurrentConditions, ForecastEntry
from weatherwidget.view.icons import IconId, classify, icon_src


@dataclass(frozen=True)
class CurrentView:
    city_name: str
    temperature: str
    condition: str
    humidity: str
    wind_speed: str
    date: str
    icon: IconId
    icon_src: str


@dataclass(frozen=True)
class ForecastCard:
    date: str
    icon: IconId
    icon_src: str
    temperature: str


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (15.5 -> 16, -0.5 -> 0)."""
    whole = math.floor(value)
    return whole + (1 if value - whole >= 0.5 else 0)


def _plain_number(value: float | int) -> str:
    # 5.0 -> "5", 3.6 -> "3.6"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(value: float, units: Units = Units.METRIC) -> str:
    return f"{round_half_up(value)} {UNIT_SUFFIXES[units].temperature}"


def format_wind_speed(value: float, units: Units = Units.METRIC) -> str:
    return f"{_plain_number(value)} {UNIT_SUFFIXES[units].wind_speed}"


def format_humidity(value: float) -> str:
    return f"{_plain_number(value)}%"


def format_current_date(day: date) -> str:
    """Short weekday, two-digit day, short month: 'Mon 19 Oct'."""
    return day.strftime("%a %d %b")


def format_forecast_date(day: date) -> str:
    """Short month and two-digit day: 'Oct 20'."""
    return day.strftime("%b %d")


def render_current(
    conditions: CurrentConditions,
    today: date,
    units: Units = Units.METRIC,
    asset_base: str = "assets/weather",
) -> CurrentView:
    return CurrentView(
        city_name=conditions.city_name,
        temperature=format_temperature(conditions.temperature, units),
        condition=conditions.condition_label,
        humidity=format_humidity(conditions.humidity_percent),
        wind_speed=format_wind_speed(conditions.wind_speed, units),
        date=format_current_date(today),
        icon=classify(conditions.condition_code),
        icon_src=icon_src(conditions.condition_code, asset_base),
    )


def render_forecast(
    entries: Iterable[ForecastEntry],
    units: Units = Units.METRIC,
    asset_base: str = "assets/weather",
) -> list[ForecastCard]:
    return [
        ForecastCard(
            date=format_forecast_date(entry.date),
            icon=classify(entry.condition_code),
            icon_src=icon_src(entry.condition_code, asset_base),
            temperature=format_temperature(entry.temperature, units),
        )
        for entry in entries
    ]
