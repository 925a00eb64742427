"""HTTP server for the timetable page.

Single-threaded stdlib HTTPServer. The dataset is loaded once before the
server starts; each request builds its own TimetableState over the shared
(immutable) entries.

Routes:
  GET /                     HTML page (?level=1&room=1/2)
  GET /schedule.json        loaded dataset
  GET /api/rooms?level=L    room options + default room for a level
  GET /api/schedule?room=R  entries and program for a room
  GET /health               "ok"
"""

import json
from collections.abc import Sequence
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any
from urllib.parse import parse_qs, urlsplit

from src.timetable.config import ViewerConfig
from src.timetable.filtering import filter_by_room, program_name
from src.timetable.loader import fetch_schedule
from src.timetable.logging import get_logger
from src.timetable.models import ScheduleEntry
from src.timetable.pages.timetable import render_page
from src.timetable.rooms import default_room, derive_room_options
from src.timetable.state import TimetableState

log = get_logger(__name__)


class TimetableHTTPServer(HTTPServer):
    """HTTPServer carrying the loaded dataset and config for its handlers."""

    def __init__(
        self,
        server_address: tuple[str, int],
        entries: Sequence[ScheduleEntry],
        config: ViewerConfig,
    ) -> None:
        self.entries: tuple[ScheduleEntry, ...] = tuple(entries)
        self.config = config
        super().__init__(server_address, TimetableRequestHandler)


class TimetableRequestHandler(BaseHTTPRequestHandler):
    server: TimetableHTTPServer

    def do_GET(self):
        url = urlsplit(self.path)
        query = {key: values[0] for key, values in parse_qs(url.query).items()}

        if url.path == "/":
            self._send_page(query)
        elif url.path == "/schedule.json":
            self._send_json([e.model_dump(mode="json") for e in self.server.entries])
        elif url.path == "/api/rooms":
            self._send_rooms(query.get("level", self.server.config.default_class_level))
        elif url.path == "/api/schedule":
            self._send_schedule(query.get("room", ""))
        elif url.path == "/health":
            self._send(200, "text/plain; charset=utf-8", b"ok")
        else:
            self._send(404, "text/plain; charset=utf-8", b"Not Found")

    def _send_page(self, query: dict[str, str]) -> None:
        config = self.server.config
        state = TimetableState.from_entries(
            self.server.entries, default_level=config.default_class_level
        )
        state.select(level=query.get("level"), room=query.get("room"))
        html = render_page(
            state, school_name=config.school_name, app_title=config.app_title
        )
        self._send(200, "text/html; charset=utf-8", html.encode("utf-8"))

    def _send_rooms(self, level: str) -> None:
        options = derive_room_options(self.server.entries, level)
        self._send_json(
            {
                "level": level,
                "rooms": [option.model_dump() for option in options],
                "selected": default_room(options).model_dump(),
            }
        )

    def _send_schedule(self, room: str) -> None:
        entries = filter_by_room(self.server.entries, room)
        self._send_json(
            {
                "room": room,
                "program": program_name(entries),
                "entries": [entry.model_dump(mode="json") for entry in entries],
            }
        )

    def _send_json(self, payload: Any) -> None:
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        self._send(200, "application/json; charset=utf-8", body)

    def _send(self, code: int, content_type: str, body: bytes) -> None:
        self.send_response(code)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        log.info("http_request", client=self.client_address[0], message=format % args)


def create_server(
    config: ViewerConfig, entries: Sequence[ScheduleEntry] | None = None
) -> TimetableHTTPServer:
    """Create the server, loading the dataset first unless ``entries`` is given.

    A failed load is logged and the server starts with an empty dataset.
    """
    if entries is None:
        entries = fetch_schedule(config.schedule_source, timeout=config.fetch_timeout)

    server = TimetableHTTPServer((config.host, config.port), entries, config)
    log.info(
        "timetable_server_created",
        host=config.host,
        port=server.server_address[1],
        entries=len(server.entries),
    )
    return server
