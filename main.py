#!/usr/bin/env python3

import argparse
from typing import Any, Dict, List, Optional

from mywx_pusher import WeatherUploader, load_settings
from mywx_pusher.errors import ConfigurationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Push current conditions from a local weather station to mywx.live"
    )
    parser.add_argument("--config", help="path to a JSON settings file")
    parser.add_argument("--host", dest="station_host", help="weather station controller host")
    parser.add_argument("--outdoor-host", dest="outdoor_airlink_host", help="outdoor air quality sensor host")
    parser.add_argument("--indoor-host", dest="indoor_airlink_host", help="indoor air quality sensor host")
    parser.add_argument("--base-uri", dest="base_uri", help="remote base URI (default https://www.mywx.live/)")
    parser.add_argument("--slug", dest="station_slug", help="station slug on the remote site")
    parser.add_argument("--secret-key", dest="secret_key", help="station secret key")
    parser.add_argument("--interval", type=float, help="seconds between pushes (default 10)")
    parser.add_argument("--debug", action="store_true", default=None, help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides: Dict[str, Any] = vars(args)
    config_path: Optional[str] = overrides.pop("config")

    try:
        settings = load_settings(config_path, overrides)
    except ConfigurationError as e:
        parser.error(str(e))

    uploader = WeatherUploader(settings)
    uploader.run_scheduler()


if __name__ == "__main__":
    main()
