import os

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

STATIC_DIR = os.getenv("CULTURE_STATIC_DIR", "static")
MAX_BODY_BYTES = int(os.getenv("CULTURE_MAX_BODY_MB", "50")) * 1024 * 1024
HTML_PAGES = {
    "/": "index.html",
    "/levels.html": "levels.html",
    "/admin.html": "admin.html",
}
BODY_TOO_LARGE = "Request entity too large"

def ensure_storage(static_dir: str = STATIC_DIR) -> None:
    os.makedirs(static_dir, exist_ok=True)


def page_path(static_dir: str, route: str) -> str | None:
    filename = HTML_PAGES.get(route)
    if filename is None:
        return None
    path = os.path.join(static_dir, filename)
    if not os.path.isfile(path):
        return None
    return path


def body_too_large(content_length: str | None, limit: int = MAX_BODY_BYTES) -> bool:
    if not content_length:
        return False
    try:
        declared = int(content_length)
    except ValueError:
        return False
    return declared > limit


class BodyLimitMiddleware:
    """Reject request bodies larger than ``max_body_bytes`` with a 413.

    A declared ``Content-Length`` over the cap is refused before the handler
    runs. Bodies without one (chunked uploads) are counted as they are
    received and aborted as soon as the running total passes the cap.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = MAX_BODY_BYTES) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers") or [])
        content_length = headers.get(b"content-length", b"").decode("latin-1")
        if body_too_large(content_length, self.max_body_bytes):
            response = JSONResponse({"error": BODY_TOO_LARGE}, status_code=413)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    # surfaces through the app's HTTPException handler
                    raise HTTPException(status_code=413, detail=BODY_TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)
