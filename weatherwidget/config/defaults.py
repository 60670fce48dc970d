"""Display unit suffixes per OpenWeatherMap unit system."""

from dataclasses import dataclass

from weatherwidget.models.common import Units


@dataclass(frozen=True)
class UnitSuffixes:
    temperature: str
    wind_speed: str


UNIT_SUFFIXES: dict[Units, UnitSuffixes] = {
    Units.METRIC: UnitSuffixes(temperature="°C", wind_speed="M/s"),
    Units.IMPERIAL: UnitSuffixes(temperature="°F", wind_speed="mph"),
    Units.STANDARD: UnitSuffixes(temperature="K", wind_speed="M/s"),
}
