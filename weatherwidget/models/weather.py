"""Weather data models built from OpenWeatherMap responses."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LookupQuery:
    city: str

    @classmethod
    def parse(cls, text: str | None) -> "LookupQuery | None":
        """Trim user input; blank input yields None."""
        city = (text or "").strip()
        if not city:
            return None
        return cls(city=city)


@dataclass(frozen=True)
class CurrentConditions:
    city_name: str
    temperature: float
    condition_label: str
    condition_code: int
    humidity_percent: float
    wind_speed: float


@dataclass(frozen=True)
class ForecastEntry:
    date: date
    condition_code: int
    temperature: float
