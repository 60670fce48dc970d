"""Weather lookup session: fetch current conditions, then the forecast, and update the view."""

import logging
from collections.abc import Callable
from datetime import date, datetime

from weatherwidget.config.schema import WidgetConfig
from weatherwidget.ingest.openweather_client import OpenWeatherClient
from weatherwidget.ingest.parsers import (
    is_found,
    parse_current_conditions,
    parse_forecast,
)
from weatherwidget.models.common import LookupOutcome, Units, utc_now
from weatherwidget.models.weather import LookupQuery
from weatherwidget.view.render import render_current, render_forecast
from weatherwidget.view.state import ViewState, WidgetView

logger = logging.getLogger(__name__)


class WeatherSession:
    """Runs user-initiated lookups against one view.

    Each accepted lookup takes a new generation number. Only the newest
    generation may change the view, so a slow earlier lookup cannot overwrite
    the result of a later one.
    """

    def __init__(
        self,
        client: OpenWeatherClient,
        view: WidgetView,
        units: Units = Units.METRIC,
        asset_base: str = "assets/weather",
        midday_slot: str = "12:00:00",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.client = client
        self.view = view
        self.units = units
        self.asset_base = asset_base
        self.midday_slot = midday_slot
        self.clock = clock
        self._generation = 0

    @classmethod
    def from_config(
        cls,
        config: WidgetConfig,
        client: OpenWeatherClient,
        view: WidgetView,
        clock: Callable[[], datetime] = utc_now,
    ) -> "WeatherSession":
        return cls(
            client,
            view,
            units=config.api.units,
            asset_base=config.display.asset_base,
            midday_slot=config.display.midday_slot,
            clock=clock,
        )

    async def lookup(self, text: str | None) -> LookupOutcome:
        query = LookupQuery.parse(text)
        if query is None:
            logger.debug("Ignoring empty lookup")
            return LookupOutcome.REJECTED

        self.view.clear_input()
        self._generation += 1
        generation = self._generation
        self.view.show_loader()
        try:
            return await self._run(query, generation)
        except Exception:
            logger.exception("Error fetching weather data for %s", query.city)
            return LookupOutcome.FAILED
        finally:
            if self._is_current(generation):
                self.view.hide_loader()

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _run(self, query: LookupQuery, generation: int) -> LookupOutcome:
        raw = await self.client.get_current(query.city)
        if not self._is_current(generation):
            return LookupOutcome.SUPERSEDED

        if not is_found(raw):
            logger.warning(
                "City %r not found (cod=%s): %s",
                query.city, raw.get("cod"), raw.get("message", ""),
            )
            self.view.show(ViewState.NOT_FOUND)
            return LookupOutcome.NOT_FOUND

        conditions = parse_current_conditions(raw)
        now = self.clock()
        self.view.update_current(
            render_current(
                conditions,
                today=now.astimezone().date(),
                units=self.units,
                asset_base=self.asset_base,
            )
        )
        logger.info(
            "Current conditions for %s: %.1f, %s",
            conditions.city_name, conditions.temperature, conditions.condition_label,
        )

        await self._load_forecast(query, generation, today=now.date())
        if not self._is_current(generation):
            return LookupOutcome.SUPERSEDED

        self.view.show(ViewState.RESULTS)
        return LookupOutcome.FOUND

    async def _load_forecast(
        self, query: LookupQuery, generation: int, today: date
    ) -> None:
        """Fill the forecast region. Failures leave it empty and are not raised."""
        self.view.clear_forecast()
        try:
            raw = await self.client.get_forecast(query.city)
            entries = parse_forecast(raw, today=today, midday_slot=self.midday_slot)
        except Exception:
            logger.exception("Error fetching forecast data for %s", query.city)
            return

        if not self._is_current(generation):
            return
        self.view.replace_forecast(
            render_forecast(entries, units=self.units, asset_base=self.asset_base)
        )
