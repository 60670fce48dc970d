"""OpenWeatherMap API client for current conditions and 5-day forecasts."""

import logging

import httpx

from weatherwidget.config.schema import OPENWEATHER_BASE_URL, ApiConfig
from weatherwidget.models.common import Units

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Async client for the two city-keyed OpenWeatherMap endpoints.

    4xx replies are returned as parsed JSON because the provider reports an
    unknown city through the body's ``cod`` field. 5xx replies and transport
    problems raise ``httpx.HTTPError``.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        units: Units = Units.METRIC,
        timeout: float = 10.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout
        self._http = http

    @classmethod
    def from_config(
        cls, api: ApiConfig, http: httpx.AsyncClient | None = None
    ) -> "OpenWeatherClient":
        return cls(
            api_key=api.api_key,
            base_url=api.base_url,
            units=api.units,
            timeout=api.timeout_seconds,
            http=http,
        )

    async def get_current(self, city: str) -> dict:
        return await self._get("weather", city)

    async def get_forecast(self, city: str) -> dict:
        return await self._get("forecast", city)

    async def _get(self, endpoint: str, city: str) -> dict:
        url = f"{self.base_url}/{endpoint}"
        params = {"q": city, "appid": self.api_key, "units": str(self.units)}
        if self._http is not None:
            resp = await self._http.get(url, params=params, timeout=self.timeout)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)

        if resp.status_code >= 500:
            logger.error(
                "OpenWeatherMap %s returned %d for q=%s",
                endpoint, resp.status_code, city,
            )
            resp.raise_for_status()
        logger.debug(
            "OpenWeatherMap %s q=%s -> HTTP %d", endpoint, city, resp.status_code
        )
        return resp.json()
