"""CLI entry point for the weather lookup app."""

import argparse
import asyncio
import logging

from skycast.config.loader import (
    REDACTED,
    get_config_value,
    load_config,
    redacted_dump,
)
from skycast.config.schema import AppConfig
from skycast.controller import WeatherController
from skycast.ingest.openweather_client import OpenWeatherClient
from skycast.ingest.weather_fetcher import WeatherFetcher
from skycast.models.session import SearchStatus, SessionState
from skycast.reporting.formatters import (
    format_favorites_text,
    format_snapshot_json,
    format_snapshot_text,
)
from skycast.storage.database import open_database
from skycast.storage.favorites_repo import FavoritesStore

DEFAULT_CONFIG = "skycast.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="City weather lookup with saved favorites",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # search
    search_p = sub.add_parser("search", help="Show current weather and forecast")
    search_p.add_argument("city", help="City name")
    search_p.add_argument("--json", action="store_true", help="Print JSON")

    # favorites list / toggle / show
    fav_p = sub.add_parser("favorites", help="Favorite locations")
    fav_sub = fav_p.add_subparsers(dest="favorites_command")
    fav_sub.add_parser("list", help="List favorites")
    toggle_p = fav_sub.add_parser("toggle", help="Add or remove a favorite")
    toggle_p.add_argument("name", help="City name")
    show_p = fav_sub.add_parser("show", help="Show weather for a favorite")
    show_p.add_argument("name", help="City name")
    show_p.add_argument("--json", action="store_true", help="Print JSON")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. provider.timeout_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db})}
        )

    if args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "favorites":
        return _cmd_favorites(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def build_controller(config: AppConfig) -> WeatherController:
    conn = open_database(config.storage.db_path)
    store = FavoritesStore(conn, key=config.storage.favorites_key)
    client = OpenWeatherClient.from_config(config.provider)
    fetcher = WeatherFetcher(client, max_days=config.forecast.max_days)
    return WeatherController(fetcher, store)


def _cmd_search(config, args) -> int:
    controller = build_controller(config)
    controller.set_query(args.city)
    try:
        state = asyncio.run(controller.search(args.city))
        return _render(controller, state, args.json)
    finally:
        controller.store.conn.close()


def _cmd_favorites(config, args) -> int:
    controller = build_controller(config)
    try:
        if args.favorites_command == "list":
            print(format_favorites_text(controller.favorites))
            return 0
        elif args.favorites_command == "toggle":
            controller.toggle_favorite(args.name)
            verb = "Added" if controller.is_favorite(args.name) else "Removed"
            print(f"{verb} favorite: {args.name}")
            return 0
        elif args.favorites_command == "show":
            state = asyncio.run(controller.select_favorite(args.name))
            return _render(controller, state, args.json)
        else:
            print("Use: favorites list | favorites toggle NAME | favorites show NAME")
            return 1
    finally:
        controller.store.conn.close()


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        if args.key == "provider.api_key" and value:
            value = REDACTED
        print(f"{args.key} = {value}")
        return 0
    print("Use: config show | config get KEY")
    return 1


def _render(controller: WeatherController, state: SessionState, as_json: bool) -> int:
    if state.status != SearchStatus.SUCCESS or state.snapshot is None:
        print(state.error)
        return 1
    if as_json:
        print(format_snapshot_json(state.snapshot))
    else:
        favorite = controller.is_favorite(state.snapshot.city)
        print(format_snapshot_text(state.snapshot, favorite=favorite))
    return 0
