"""HTTP and WebSocket server that tokenizes text sent by the browser."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from aiohttp import WSMsgType, web

from rustlexer.token import Token
from rustlexer.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8081
DEFAULT_HTML_PATH = "views/index.html"

_HTML_PATH = "html_path"

# Match the HTML-safe JSON the page expects.
_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _marshal(tokens: list[Token]) -> str:
    payload = json.dumps(
        [token.to_dict() for token in tokens],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return payload.translate(_JSON_ESCAPES)


async def serve_html(request: web.Request) -> web.StreamResponse:
    """Serve the configured HTML page."""
    path = Path(request.app[_HTML_PATH])
    if not path.is_file():
        raise web.HTTPNotFound()
    return web.FileResponse(path)


async def handle_websocket(request: web.Request) -> web.WebSocketResponse:
    """Answer every valid text message with its tokens as a JSON array."""
    ws = web.WebSocketResponse()
    await ws.prepare(request)
    async for msg in ws:
        if msg.type == WSMsgType.TEXT:
            text = msg.data
        elif msg.type == WSMsgType.BINARY:
            text = msg.data.decode("utf-8", errors="replace")
        else:
            logger.error("error reading message: %s", ws.exception())
            break
        try:
            tokenizer = Tokenizer(text)
        except ValueError:
            logger.warning("invalid tokenizer input: %r", text)
            continue
        try:
            await ws.send_str(_marshal(tokenizer.tokens()))
        except ConnectionError as exc:
            logger.error("error sending message: %s", exc)
            break
    return ws


def create_app(html_path: str | Path = DEFAULT_HTML_PATH) -> web.Application:
    """Build the application serving the page at ``/`` and the lexer at ``/ws``."""
    app = web.Application()
    app[_HTML_PATH] = str(html_path)
    app.router.add_get("/", serve_html)
    app.router.add_get("/ws", handle_websocket)
    return app


def main(argv: list[str] | None = None) -> None:
    """Start the server."""
    parser = argparse.ArgumentParser(description="Serve the lexer over WebSocket.")
    parser.add_argument("--host", default=None, help="interface to bind (default: all)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--html", default=DEFAULT_HTML_PATH, help="page served at /")
    args = parser.parse_args(argv)

    app = create_app(args.html)
    print(f"Servidor iniciado en http://localhost:{args.port}")
    web.run_app(app, host=args.host, port=args.port, print=None)