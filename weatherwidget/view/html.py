"""HTML page for the widget, built from the view model."""

from html import escape

from weatherwidget.view.formatters import NOT_FOUND_MESSAGE, PROMPT_MESSAGE
from weatherwidget.view.render import CurrentView, ForecastCard
from weatherwidget.view.state import ViewState, WidgetView

_STYLE = """
body { font-family: sans-serif; background: #0b1a2e; color: #fff; }
.app-container { max-width: 420px; margin: 2rem auto; }
.app-container__search { display: flex; gap: .5rem; }
.app-container__search-input { flex: 1; padding: .5rem; }
.app-container__message, .weather-section { flex-direction: column; align-items: center; }
.weather-section__forecast { display: flex; gap: .75rem; overflow-x: auto; }
.weather-section__forecast-item { text-align: center; }
.app-container__loader { position: fixed; inset: 0; background: rgba(0,0,0,.4); }
"""


def _panel_style(view: WidgetView, panel: ViewState) -> str:
    return "display: flex" if view.state == panel else "display: none"


def render_forecast_item(card: ForecastCard) -> str:
    return (
        '<article class="weather-section__forecast-item">'
        f'<h5 class="weather-section__forecast-date regular-txt">{escape(card.date)}</h5>'
        f'<img src="{escape(card.icon_src)}" class="weather-section__forecast-icon" alt="Weather Icon">'
        f'<h5 class="weather-section__forecast-temp">{escape(card.temperature)}</h5>'
        "</article>"
    )


def _render_current(cur: CurrentView | None) -> str:
    if cur is None:
        return ""
    return (
        f'<h4 class="weather-section__city-name">{escape(cur.city_name)}</h4>'
        f'<h6 class="weather-section__current-date regular-txt">{escape(cur.date)}</h6>'
        f'<img src="{escape(cur.icon_src)}" class="weather-section__icon" alt="{escape(cur.icon)}">'
        f'<h1 class="weather-section__temperature">{escape(cur.temperature)}</h1>'
        f'<h3 class="weather-section__condition regular-txt">{escape(cur.condition)}</h3>'
        f'<p>Humidity <span class="weather-section__humidity-value">{escape(cur.humidity)}</span></p>'
        f'<p>Wind Speed <span class="weather-section__wind-speed">{escape(cur.wind_speed)}</span></p>'
    )


def render_page(view: WidgetView, title: str = "Weather") -> str:
    forecast = "".join(render_forecast_item(card) for card in view.forecast)
    loader = '<div class="app-container__loader"></div>' if view.loading else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{escape(title)}</title>
<style>{_STYLE}</style>
</head>
<body>
<main class="app-container">
<form class="app-container__search" method="get" action="/">
<input class="app-container__search-input" type="text" name="city" placeholder="Search City" value="{escape(view.search_input)}">
<button class="app-container__search-btn" type="submit">Search</button>
</form>
<section class="weather-section" style="{_panel_style(view, ViewState.RESULTS)}">
{_render_current(view.current)}
<div class="weather-section__forecast">{forecast}</div>
</section>
<section class="app-container__message app-container__message--search" style="{_panel_style(view, ViewState.PROMPT)}">
<p>{escape(PROMPT_MESSAGE)}</p>
</section>
<section class="app-container__message app-container__message--not-found" style="{_panel_style(view, ViewState.NOT_FOUND)}">
<p>{escape(NOT_FOUND_MESSAGE)}</p>
</section>
</main>
{loader}
</body>
</html>
"""
