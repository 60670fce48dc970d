"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherwidget.models.common import Units

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
API_KEY_PLACEHOLDER = "YOUR_API_KEY"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    api_key: str = API_KEY_PLACEHOLDER
    units: Units = Units.METRIC
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    asset_base: str = "assets/weather"
    midday_slot: str = Field(default="12:00:00", pattern=r"^\d{2}:\d{2}:\d{2}$")


class WebConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    web: WebConfig = WebConfig()
