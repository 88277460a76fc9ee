# core/middleware.py
import os

from starlette.datastructures import Headers
from fastapi import HTTPException
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

# 画像を base64 文字列のまま送ってくるので大きめ（50MB）
DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024


class MaxBodySizeMiddleware:
    """
    MAX_REQUEST_BODY_BYTES を超えるボディのリクエストを 413 で弾く
    - content-length があればボディを読む前に判定
    - chunked などはルートが読み進める途中で数え、超えた時点で止める
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = None):
        self.app = app
        if max_body_bytes is None:
            max_body_bytes = int(os.getenv("MAX_REQUEST_BODY_BYTES", DEFAULT_MAX_BODY_BYTES))
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit():
            if int(content_length) > self.max_body_bytes:
                await self._too_large(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    # ルート内で投げれば例外ハンドラが 413 を返す
                    raise HTTPException(status_code=413, detail="Payload too large.")
            return message

        await self.app(scope, limited_receive, send)

    async def _too_large(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = JSONResponse({"detail": "Payload too large."}, status_code=413)
        await response(scope, receive, send)
