"""
Health check HTTP server for Render and other platforms.
Runs in a background thread when HEALTH_CHECK_PORT is set.
"""
import json
import logging
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Optional

from utils.metrics import get_metrics

logger = logging.getLogger(__name__)


def _make_handler():
    class HealthHandler(BaseHTTPRequestHandler):
        def log_message(self, format, *args):
            logger.debug("Health check: %s", args[0] if args else "")

        def do_GET(self):
            if self.path == "/health":
                body = {"status": "OK", "metrics": get_metrics().snapshot()}
                payload = json.dumps(body).encode()
                self.send_response(200)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)
            else:
                self.send_response(404)
                self.end_headers()

    return HealthHandler


def start_health_server(port: int, host: str = "0.0.0.0") -> HTTPServer:
    """Start health check HTTP server in a daemon thread."""
    server = HTTPServer((host, port), _make_handler())
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    logger.info("Health check server listening on port %d", server.server_port)
    return server


def maybe_start_health_server(port: Optional[int]) -> Optional[HTTPServer]:
    """Start health server if a port is configured."""
    if not port:
        return None
    return start_health_server(port)
