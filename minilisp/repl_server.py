from __future__ import annotations

"""
Simple TCP REPL server for minilisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(+ 1 2)"} or {"cmd": "reset"}
- Response: {"ok": true, "result": <int>} or
            {"ok": false, "error": <message>, "kind": <error class name>}

Each connection gets its own Interpreter, so definitions persist across
requests on one connection and are never visible to another.
"""

import json
import logging
import socket
import threading
from typing import Optional, Tuple

from minilisp.config import configure_logging, get_repl_address
from minilisp.errors import MiniLispError
from minilisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


def handle_request(interp: Interpreter, line: bytes | str) -> dict:
    """Decode one request line, run it against `interp` and build the response."""
    try:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        req = json.loads(line)
        if not isinstance(req, dict):
            raise ValueError("request must be a JSON object")
    except ValueError as ex:
        return {"ok": False, "error": f"Invalid request: {ex}"}

    cmd = req.get("cmd")
    if cmd == "eval":
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "code must be a string"}
        try:
            return {"ok": True, "result": interp.eval(code)}
        except MiniLispError as ex:
            return {"ok": False, "error": str(ex), "kind": type(ex).__name__}
    if cmd == "reset":
        interp.reset()
        return {"ok": True, "result": 0}
    return {"ok": False, "error": f"Unknown cmd: {cmd}"}


class ReplServer:
    def __init__(self, host: Optional[str] = None, port: Optional[int] = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = default_port if port is None else port

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s:%d", *addr[:2])
        # One session per connection
        interp = Interpreter()
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = handle_request(interp, line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client disconnected: %s:%d", *addr[:2])


def main() -> None:
    configure_logging()
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
