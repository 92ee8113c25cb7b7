"""Custom response classes."""

import os

from loguru import logger
from starlette.responses import FileResponse
from starlette.types import Receive, Scope, Send

ZERO_COPY_SEND = "http.response.zerocopysend"


def _is_range_request(scope: Scope) -> bool:
    return any(name.lower() == b"range" for name, _ in scope.get("headers", []))


class ZeroCopyFileResponse(FileResponse):
    """
    File response that lets the server transmit the file itself.

    When the ASGI server advertises the ``http.response.zerocopysend``
    extension, the open file is handed over in a single message covering the
    whole file (offset 0, count = file size). Otherwise, and for range
    requests, the file is streamed like a regular ``FileResponse``.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if ZERO_COPY_SEND not in scope.get("extensions", {}) or _is_range_request(scope):
            await super().__call__(scope, receive, send)
            return

        if self.stat_result is None:
            self.stat_result = os.stat(self.path)
            self.set_stat_headers(self.stat_result)
        size = self.stat_result.st_size

        logger.debug(f"Zero-copy send of {self.path} ({size} bytes)")
        await send(
            {
                "type": "http.response.start",
                "status": self.status_code,
                "headers": self.raw_headers,
            }
        )
        if scope["method"].upper() != "HEAD":
            with open(self.path, "rb") as file:
                await send(
                    {
                        "type": ZERO_COPY_SEND,
                        "file": file,
                        "offset": 0,
                        "count": size,
                        "more_body": False,
                    }
                )
        if self.background is not None:
            await self.background()
