"""CLI entry point for the weather widget."""

import argparse
import asyncio
import logging

from weatherwidget.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherwidget.config.schema import API_KEY_PLACEHOLDER
from weatherwidget.ingest.openweather_client import OpenWeatherClient
from weatherwidget.models.common import LookupOutcome
from weatherwidget.session import WeatherSession
from weatherwidget.view.formatters import format_view_json, format_view_text
from weatherwidget.view.state import WidgetView

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "weatherwidget.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherwidget",
        description="City weather lookup widget",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--api-key", help="OpenWeatherMap API key override")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Look up weather for a city")
    lookup_p.add_argument("city", nargs="+", help="City name")
    lookup_p.add_argument(
        "--json", action="store_true", help="Print the view model as JSON"
    )

    # serve
    serve_p = sub.add_parser("serve", help="Run the widget web app")
    serve_p.add_argument("--host", help="Bind host (default from config)")
    serve_p.add_argument("--port", type=int, help="Bind port (default from config)")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not args.verbose:
        # httpx logs full request URLs, which carry the appid key
        logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error: {e}")
        return 1
    if args.api_key:
        config = config.model_copy(
            update={"api": config.api.model_copy(update={"api_key": args.api_key})}
        )

    if args.command == "lookup":
        return _cmd_lookup(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_lookup(config, args) -> int:
    if config.api.api_key == API_KEY_PLACEHOLDER:
        logger.warning("No API key configured; set api.api_key or pass --api-key")
    view = WidgetView()
    session = WeatherSession.from_config(
        config, OpenWeatherClient.from_config(config.api), view
    )
    outcome = asyncio.run(session.lookup(" ".join(args.city)))
    if outcome == LookupOutcome.REJECTED:
        print("Error: city name must not be empty")
        return 1
    print(format_view_json(view) if args.json else format_view_text(view))
    return 0 if outcome == LookupOutcome.FOUND else 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherwidget.web import create_app

    host = args.host or config.web.host
    port = args.port or config.web.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
            print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
