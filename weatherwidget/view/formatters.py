"""Plain text and JSON output of the widget view model."""

import json

from weatherwidget.view.state import ViewState, WidgetView

PROMPT_MESSAGE = "Search City: find out the weather conditions of the city."
NOT_FOUND_MESSAGE = "City Not Found: please try again with a different city name."


def format_view_text(view: WidgetView) -> str:
    """Plain text rendering of whichever panel is active."""
    if view.state == ViewState.PROMPT:
        return PROMPT_MESSAGE
    if view.state == ViewState.NOT_FOUND:
        return NOT_FOUND_MESSAGE

    cur = view.current
    if cur is None:
        return PROMPT_MESSAGE
    lines = [
        f"=== {cur.city_name} | {cur.date} ===",
        f"{cur.temperature}  {cur.condition} [{cur.icon}]",
        f"Humidity: {cur.humidity} | Wind: {cur.wind_speed}",
    ]
    if view.forecast:
        lines.append("Forecast:")
        for card in view.forecast:
            lines.append(f"  {card.date}  {card.temperature:>7}  [{card.icon}]")
    return "\n".join(lines)


def format_view_json(view: WidgetView) -> str:
    return json.dumps(view.to_dict(), indent=2, ensure_ascii=False)
