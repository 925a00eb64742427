#!/usr/bin/env python3
"""Serve the weekly timetable page.

Loads schedule.json once, then serves the page and its JSON views on a
single-threaded HTTP server.

Run with: python scripts/serve_timetable.py
Port:     python scripts/serve_timetable.py --port 8080
Remote:   python scripts/serve_timetable.py --source https://example.org/schedule.json

Settings not given on the command line come from the environment / .env
(SCHEDULE_SOURCE, HOST, PORT, SCHOOL_NAME, LOG_JSON, LOG_LEVEL, ...).
"""

import argparse
import os
import sys

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.timetable.config import get_config  # noqa: E402
from src.timetable.logging import get_logger, setup_logging  # noqa: E402
from src.timetable.server import create_server  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Serve the weekly class timetable.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--host", type=str, default=None, help="Bind address.")
    parser.add_argument("--port", type=int, default=None, help="Listen port.")
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Path or URL of schedule.json (default: SCHEDULE_SOURCE).",
    )
    return parser.parse_args()


def main(args: argparse.Namespace) -> None:
    config = get_config()
    overrides = {
        "host": args.host,
        "port": args.port,
        "schedule_source": args.source,
    }
    config = config.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    setup_logging(json_output=config.log_json, log_level=config.log_level)
    log = get_logger("serve_timetable")

    server = create_server(config)
    host, port = server.server_address[:2]
    log.info("timetable_server_listening", url=f"http://{host}:{port}/")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log.info("timetable_server_stopping")
    finally:
        server.server_close()


if __name__ == "__main__":
    main(_parse_args())
