"""
Live-reload HTTP server

Serves the latest rendered document and pushes a one-shot reload event to
browsers waiting on /reload.

Every inbound connection is handled on its own thread (ThreadingHTTPServer).
Handlers share a single ReloadSignal with the file watcher:

    watcher:  convert → write output → signal.set()
    /reload:  poll signal → clear → send "data: reload" → end request

Several changes before a client polls collapse into one event. Two clients
polling in the same interval may both see the signal before either clears
it, and each gets an event.
"""

import selectors
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from ..config import appsettings
from .loader import text_read
from .log import LOG, state_connectToLogger

RELOAD_PATH = "/reload"
RELOAD_EVENT = "data: reload\n\n"


class ReloadSignal:
    """
    Coalescing "something changed" flag

    Carries no count and no ordering: set() on an already-set signal is a
    no-op.
    """

    def __init__(self) -> None:
        self._flag = threading.Event()

    def set(self) -> None:
        self._flag.set()

    def clear(self) -> None:
        self._flag.clear()

    def is_set(self) -> bool:
        return self._flag.is_set()

    def wait(self, timeout: float) -> bool:
        """Block up to ``timeout`` seconds for the signal; True if it is set"""
        return self._flag.wait(timeout)


class LiveServer(ThreadingHTTPServer):
    """
    ThreadingHTTPServer carrying the shared live-reload state

    Attributes:
        output_path: Rendered document served on every non-reload path
        signal: ReloadSignal shared with the file watcher
        state: ProgramState bound to the logger in each handler thread
        poll_interval: Seconds between signal checks in a /reload request
    """

    def __init__(
        self,
        server_address: Tuple[str, int],
        output_path: Union[str, Path],
        signal: ReloadSignal,
        state: Any = None,
        poll_interval: Optional[float] = None,
    ) -> None:
        self.output_path = Path(output_path)
        self.signal = signal
        self.state = state
        self.poll_interval = poll_interval or appsettings.reload_poll_interval
        super().__init__(server_address, LiveRequestHandler)

    def handle_error(self, request: Any, client_address: Any) -> None:
        # Request/response failures only close the connection
        LOG(f"Connection error from {client_address[0]}", level=3)


class LiveRequestHandler(BaseHTTPRequestHandler):
    """Answers /reload with an event stream and everything else with the document"""

    server: LiveServer

    def do_GET(self) -> None:
        state_connectToLogger(self.server.state)
        try:
            if self.path == RELOAD_PATH:
                self.reload_await()
            else:
                self.document_send()
        except (BrokenPipeError, ConnectionResetError) as e:
            LOG(f"Client {self.client_address[0]} went away: {e}", level=3)

    def client_isGone(self) -> bool:
        """
        True once the peer has closed its end of the connection

        A readable socket with no pending bytes means EOF. Uses the platform
        selector, so descriptors past FD_SETSIZE are handled.
        """
        try:
            with selectors.DefaultSelector() as selector:
                selector.register(self.connection, selectors.EVENT_READ)
                if not selector.select(timeout=0):
                    return False
            return self.connection.recv(1, socket.MSG_PEEK) == b""
        except (OSError, ValueError):
            return True

    def reload_await(self) -> None:
        """
        Hold the request open until a reload is pending, then send one event

        No timeout: the loop ends when the signal is seen or the client
        disconnects.
        """
        signal = self.server.signal
        while True:
            if signal.is_set():
                signal.clear()
                self.reloadEvent_send()
                return
            if self.client_isGone():
                LOG(f"Reload listener {self.client_address[0]} disconnected", level=3)
                return
            signal.wait(self.server.poll_interval)

    def reloadEvent_send(self) -> None:
        payload = RELOAD_EVENT.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/event-stream")
        self.send_header("Cache-Control", "no-cache")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)
        LOG(f"Sent reload to {self.client_address[0]}", level=2)

    def document_send(self) -> None:
        try:
            html = text_read(self.server.output_path)
        except (OSError, UnicodeDecodeError):
            html = appsettings.not_found_html

        payload = html.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format: str, *args: Any) -> None:
        LOG(f"{self.client_address[0]} {format % args}", level=3)


def server_start(
    output_path: Union[str, Path],
    signal: ReloadSignal,
    state: Any = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    poll_interval: Optional[float] = None,
) -> LiveServer:
    """
    Bind the live server and serve it from a daemon thread

    Args:
        output_path: Rendered document to serve
        signal: ReloadSignal shared with the watcher
        state: ProgramState for handler logging
        host: Interface to bind (default: settings server_host)
        port: Port to bind, 0 for any free port (default: settings server_port)
        poll_interval: Reload polling interval (default: settings value)

    Returns:
        The running LiveServer; call shutdown() and server_close() to stop it

    Raises:
        OSError: If the address cannot be bound
    """
    address = (
        appsettings.server_host if host is None else host,
        appsettings.server_port if port is None else port,
    )
    httpd = LiveServer(address, output_path, signal, state=state, poll_interval=poll_interval)
    threading.Thread(target=httpd.serve_forever, name="mdlive-server", daemon=True).start()
    LOG(f"Live server bound to {httpd.server_address[0]}:{httpd.server_address[1]}", level=2)
    return httpd
