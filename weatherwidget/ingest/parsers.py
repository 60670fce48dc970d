"""Parsers turning raw OpenWeatherMap JSON into weather models."""

import logging
from datetime import date, datetime

from weatherwidget.models.weather import CurrentConditions, ForecastEntry

logger = logging.getLogger(__name__)

DT_TXT_FORMAT = "%Y-%m-%d %H:%M:%S"


class ResponseFormatError(ValueError):
    """Raised when a provider payload lacks the fields the widget needs."""


def is_found(raw: dict) -> bool:
    """True when the current-conditions payload reports ``cod`` 200.

    The provider sends the code as an int on success and as a string
    (e.g. "404") on failure.
    """
    if not isinstance(raw, dict):
        raise ResponseFormatError(f"Expected JSON object, got {type(raw).__name__}")
    try:
        return int(raw.get("cod")) == 200
    except (TypeError, ValueError):
        return False


def parse_current_conditions(raw: dict) -> CurrentConditions:
    try:
        main = raw["main"]
        primary = raw["weather"][0]
        return CurrentConditions(
            city_name=str(raw["name"]),
            temperature=float(main["temp"]),
            condition_label=str(primary["main"]),
            condition_code=int(primary["id"]),
            humidity_percent=float(main["humidity"]),
            wind_speed=float(raw["wind"]["speed"]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise ResponseFormatError(f"Malformed current-conditions payload: {e!r}") from e


def parse_forecast(
    raw: dict, today: date, midday_slot: str = "12:00:00"
) -> list[ForecastEntry]:
    """Select one midday sample per future day from a 3-hourly forecast list.

    Samples keep the order the provider sent them in. Samples dated ``today``
    are skipped.
    """
    try:
        samples = raw["list"]
    except (KeyError, TypeError) as e:
        raise ResponseFormatError(f"Forecast payload has no sample list: {e!r}") from e

    entries: list[ForecastEntry] = []
    for sample in samples:
        try:
            stamp = datetime.strptime(sample["dt_txt"], DT_TXT_FORMAT)
            if stamp.strftime("%H:%M:%S") != midday_slot or stamp.date() == today:
                continue
            entries.append(
                ForecastEntry(
                    date=stamp.date(),
                    condition_code=int(sample["weather"][0]["id"]),
                    temperature=float(sample["main"]["temp"]),
                )
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ResponseFormatError(f"Malformed forecast sample: {e!r}") from e

    logger.debug(
        "Selected %d midday samples from %d forecast entries",
        len(entries), len(samples),
    )
    return entries
