from __future__ import annotations

"""
Simple TCP REPL server for Minima.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(car (quote a b))"}
- Response: {"ok": true, "result": <printed form>} or {"ok": false, "error": <message>}

Every request is evaluated against the same base environment; nothing one
request does is visible to another.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from minima import config
from minima.errors import MinimaError
from minima.interpreter import Interpreter
from minima.debug_utils.pprint import to_canonical, to_sugar

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None, sugar: bool | None = None):
        self.host = host if host is not None else config.get_repl_host()
        self.port = port if port is not None else config.get_repl_port()
        self.interp = Interpreter(sugar=config.use_sugar() if sugar is None else sugar)

    def render(self, value) -> str:
        return to_sugar(value) if self.interp.sugar else to_canonical(value)

    def evaluate_code(self, code: str) -> dict:
        try:
            result = self.interp.eval(code)
        except MinimaError as ex:
            return {"ok": False, "error": str(ex)}
        except RecursionError:
            return {"ok": False, "error": "recursion too deep"}
        if isinstance(result, list):
            return {"ok": True, "result": [self.render(r) for r in result]}
        return {"ok": True, "result": self.render(result)}

    def handle_line(self, line: bytes) -> dict:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        return self.evaluate_code(code)

    def serve_forever(self) -> None:
        listener = socket.create_server((self.host, self.port))
        logger.info("listening on %s:%d", self.host, self.port)
        with listener:
            while True:
                conn, addr = listener.accept()
                worker = threading.Thread(target=self.serve_client, args=(conn, addr), daemon=True)
                worker.start()

    def serve_client(self, conn: socket.socket, addr: Tuple[str, int] | str) -> None:
        """Answer one JSON line per request until the client hangs up."""
        logger.debug("client connected: %s", addr)
        with conn, conn.makefile("rwb") as stream:
            for raw in stream:
                line = raw.strip()
                if not line:
                    continue
                reply = json.dumps(self.handle_line(line)) + "\n"
                stream.write(reply.encode("utf-8"))
                stream.flush()
        logger.debug("client disconnected: %s", addr)


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
