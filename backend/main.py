"""
Minimal backend HTTP server for chat triage.

Exposes a triage endpoint and a gateway webhook endpoint. Each request is
served on its own thread, so a slow backend call never delays other messages.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv
from pydantic import ValidationError

from chatops.core.config import load_config
from chatops.core.exceptions import ConfigurationError, DecodeError, TransportError
from chatops.core.logging_config import setup_logging

from .gateway import InboundMessage, TriageHandler
from .triage_service import TriageService, create_triage_service

logger = logging.getLogger("backend")


class TriageHTTPServer(ThreadingHTTPServer):
    """Threading HTTP server carrying the shared, read-only triage service."""

    daemon_threads = True

    def __init__(self, address: Tuple[str, int], service: TriageService):
        super().__init__(address, BackendHandler)
        self.service = service
        self.message_handler = TriageHandler(service=service)


class BackendHandler(BaseHTTPRequestHandler):
    server_version = "ChatTriage/1.0"
    server: TriageHTTPServer

    def _send_json(self, status: int, payload: Dict[str, object]) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _read_json(self) -> Optional[Dict[str, object]]:
        length = int(self.headers.get("Content-Length", "0"))
        if length <= 0:
            return None
        data = self.rfile.read(length)
        try:
            payload = json.loads(data.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        return payload if isinstance(payload, dict) else None

    def log_message(self, format: str, *args: object) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._send_json(200, {"status": "ok"})
            return

        self._send_json(404, {"detail": "Not found"})

    def do_POST(self) -> None:
        if self.path == "/triage":
            self._handle_triage()
            return

        if self.path == "/messages":
            self._handle_message()
            return

        self._send_json(404, {"detail": "Not found"})

    def _handle_triage(self) -> None:
        payload = self._read_json() or {}
        text = payload.get("text")
        if not isinstance(text, str) or not text:
            self._send_json(400, {"detail": "Expected JSON body with a 'text' string"})
            return

        try:
            result = self.server.service.triage(text)
        except TransportError as exc:
            logger.error("cannot triage message: %s", exc)
            self._send_json(502, {"detail": str(exc), "status_code": exc.status_code})
            return
        except DecodeError as exc:
            logger.error("cannot triage message: %s", exc)
            self._send_json(422, {"detail": "Unparseable classifier output", "raw_output": exc.raw_output})
            return

        self._send_json(200, result.model_dump(mode="json"))

    def _handle_message(self) -> None:
        try:
            message = InboundMessage.model_validate(self._read_json() or {})
        except ValidationError as exc:
            self._send_json(400, {"detail": f"Invalid message event: {exc.error_count()} error(s)"})
            return

        reply = asyncio.run(self.server.message_handler.handle(message))
        self._send_json(200, {"reply": reply.model_dump() if reply else None})


def run(host: str, port: int) -> None:
    load_dotenv()
    try:
        config = load_config()
        setup_logging(config)
        service = create_triage_service(config)
    except ConfigurationError as exc:
        raise SystemExit(f"startup failed: {exc}") from exc

    logger.info("Starting triage server on %s:%s", host, port)
    server = TriageHTTPServer((host, port), service)
    try:
        server.serve_forever()
    finally:
        server.server_close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Chat incident triage backend server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    run(args.host, args.port)


if __name__ == "__main__":
    main()
