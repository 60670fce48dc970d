"""Shared test fixtures."""

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from weatherwidget.config.schema import WidgetConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"

# Noon UTC, so the local calendar date matches in any usual timezone.
FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


def build_forecast(
    start: datetime = FIXED_NOW, count: int = 40, step_hours: int = 3
) -> dict:
    """A forecast payload of ``count`` samples every ``step_hours`` from ``start``."""
    samples = []
    for i in range(count):
        stamp = start + timedelta(hours=step_hours * i)
        samples.append(
            {
                "dt": int(stamp.timestamp()),
                "main": {"temp": 10.0 + i * 0.5, "humidity": 70},
                "weather": [{"id": 500 if i % 2 else 800, "main": "Rain"}],
                "dt_txt": stamp.strftime("%Y-%m-%d %H:%M:%S"),
            }
        )
    return {"cod": "200", "message": 0, "cnt": count, "list": samples}


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def london_current() -> dict:
    with open(FIXTURE_DIR / "current_london.json") as f:
        return json.load(f)


@pytest.fixture
def not_found_current() -> dict:
    with open(FIXTURE_DIR / "not_found.json") as f:
        return json.load(f)


@pytest.fixture
def five_day_forecast() -> dict:
    return build_forecast()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def default_config() -> WidgetConfig:
    return WidgetConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"api_key": "test-key", "units": "metric"},
        "display": {"asset_base": "static/icons"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
