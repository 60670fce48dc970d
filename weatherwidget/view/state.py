"""Widget view model: active panel, loading overlay and rendered nodes."""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any

from weatherwidget.view.render import CurrentView, ForecastCard


class ViewState(StrEnum):
    PROMPT = "prompt"
    RESULTS = "results"
    NOT_FOUND = "not_found"


@dataclass
class WidgetView:
    """Everything a page needs to draw the widget.

    Exactly one panel is active at a time. ``loading`` is independent of the
    panel and only flips while a lookup is in flight.
    """

    state: ViewState = ViewState.PROMPT
    loading: bool = False
    search_input: str = ""
    current: CurrentView | None = None
    forecast: list[ForecastCard] = field(default_factory=list)

    def show(self, state: ViewState) -> None:
        self.state = state

    def show_loader(self) -> None:
        self.loading = True

    def hide_loader(self) -> None:
        self.loading = False

    def clear_input(self) -> None:
        self.search_input = ""

    def update_current(self, node: CurrentView) -> None:
        self.current = node

    def clear_forecast(self) -> None:
        self.forecast = []

    def replace_forecast(self, cards: list[ForecastCard]) -> None:
        self.clear_forecast()
        self.forecast.extend(cards)

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": str(self.state),
            "loading": self.loading,
            "current": asdict(self.current) if self.current is not None else None,
            "forecast": [asdict(card) for card in self.forecast],
        }
