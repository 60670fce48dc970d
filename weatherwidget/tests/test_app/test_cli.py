"""Tests for CLI commands."""

import json
import logging
from pathlib import Path

import httpx
import respx

from weatherwidget.cli import main
from weatherwidget.config.loader import load_config

OWM = "https://api.openweathermap.org/data/2.5"


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "metric" in captured.out

    def test_config_set_persists(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        result = main([
            "--config", str(config_path), "config", "set", "web.port=9001",
        ])
        assert result == 0
        assert "9001" in capsys.readouterr().out
        assert load_config(config_path).web.port == 9001

    def test_config_set_requires_equals(self, tmp_path: Path, capsys):
        result = main([
            "--config", str(tmp_path / "t.yaml"), "config", "set", "web.port",
        ])
        assert result == 1
        assert "key=value" in capsys.readouterr().out

    def test_invalid_config_file(self, tmp_path: Path, capsys):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("api:\n  units: furlongs\n")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 1
        assert "Error" in capsys.readouterr().out

    @respx.mock
    def test_lookup_found(self, tmp_path: Path, london_current: dict, capsys):
        current = respx.get(f"{OWM}/weather").mock(
            return_value=httpx.Response(200, json=london_current)
        )
        respx.get(f"{OWM}/forecast").mock(
            return_value=httpx.Response(200, json={"cod": "200", "list": []})
        )

        result = main([
            "--config", str(tmp_path / "none.yaml"), "--api-key", "secret",
            "lookup", "London",
        ])

        assert result == 0
        out = capsys.readouterr().out
        assert "London" in out
        assert "16 °C" in out
        assert current.calls.last.request.url.params["appid"] == "secret"

    @respx.mock
    def test_lookup_multi_word_city_json(self, tmp_path: Path, london_current: dict, capsys):
        current = respx.get(f"{OWM}/weather").mock(
            return_value=httpx.Response(200, json={**london_current, "name": "New York"})
        )
        respx.get(f"{OWM}/forecast").mock(
            return_value=httpx.Response(200, json={"list": []})
        )

        result = main([
            "--config", str(tmp_path / "none.yaml"), "lookup", "New", "York", "--json",
        ])

        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["state"] == "results"
        assert data["current"]["city_name"] == "New York"
        assert current.calls.last.request.url.params["q"] == "New York"

    @respx.mock(assert_all_called=False)
    def test_lookup_not_found(
        self, tmp_path: Path, not_found_current: dict, capsys, respx_mock
    ):
        respx_mock.get(f"{OWM}/weather").mock(
            return_value=httpx.Response(404, json=not_found_current)
        )
        forecast = respx_mock.get(f"{OWM}/forecast")

        result = main(["--config", str(tmp_path / "none.yaml"), "lookup", "Atlantis"])

        assert result == 1
        assert "City Not Found" in capsys.readouterr().out
        assert not forecast.called

    def test_lookup_blank_city(self, tmp_path: Path, capsys):
        result = main(["--config", str(tmp_path / "none.yaml"), "lookup", " "])
        assert result == 1
        assert "must not be empty" in capsys.readouterr().out

    @respx.mock
    def test_lookup_does_not_log_api_key(
        self, tmp_path: Path, london_current: dict, five_day_forecast: dict, caplog
    ):
        respx.get(f"{OWM}/weather").mock(
            return_value=httpx.Response(200, json=london_current)
        )
        respx.get(f"{OWM}/forecast").mock(
            return_value=httpx.Response(200, json=five_day_forecast)
        )
        caplog.set_level(logging.INFO)

        result = main([
            "--config", str(tmp_path / "none.yaml"), "--api-key", "TOPSECRET",
            "lookup", "London",
        ])

        assert result == 0
        assert caplog.records
        assert not any("TOPSECRET" in r.getMessage() for r in caplog.records)
