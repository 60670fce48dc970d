"""Weather widget web app — FastAPI serving the widget page and a JSON lookup API."""

import logging
from collections.abc import Callable
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from weatherwidget import __version__
from weatherwidget.config.schema import WidgetConfig
from weatherwidget.ingest.openweather_client import OpenWeatherClient
from weatherwidget.models.common import LookupOutcome
from weatherwidget.session import WeatherSession
from weatherwidget.view.html import render_page
from weatherwidget.view.state import WidgetView

logger = logging.getLogger(__name__)

BUNDLED_ICONS = Path(__file__).parent / "static" / "weather"

ClientFactory = Callable[[WidgetConfig], OpenWeatherClient]


def _default_client(config: WidgetConfig) -> OpenWeatherClient:
    return OpenWeatherClient.from_config(config.api)


def create_app(
    config: WidgetConfig, client_factory: ClientFactory = _default_client
) -> FastAPI:
    app = FastAPI(title="Weather Widget", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.config = config

    async def _lookup(city: str | None) -> tuple[LookupOutcome | None, WidgetView]:
        view = WidgetView()
        if city is None:
            return None, view
        session = WeatherSession.from_config(config, client_factory(config), view)
        outcome = await session.lookup(city)
        logger.info("Lookup %r -> %s", city, outcome)
        return outcome, view

    # ── Page ────────────────────────────────────────────────────────

    @app.get("/", response_class=HTMLResponse)
    async def serve_widget(city: str | None = None):
        _, view = await _lookup(city)
        return HTMLResponse(render_page(view))

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/lookup")
    async def lookup(city: str):
        outcome, view = await _lookup(city)
        if outcome == LookupOutcome.REJECTED:
            raise HTTPException(400, "City name must not be empty")
        return {"outcome": str(outcome), "view": view.to_dict()}

    @app.get("/api/health")
    def get_health():
        return {"status": "ok", "version": __version__}

    asset_base = config.display.asset_base
    if "://" not in asset_base:
        # A local icon directory overrides the bundled set
        asset_dir = Path(asset_base)
        if not asset_dir.is_dir():
            asset_dir = BUNDLED_ICONS
        app.mount(
            "/" + asset_base.strip("/"),
            StaticFiles(directory=asset_dir),
            name="assets",
        )

    return app
