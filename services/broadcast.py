"""
リアルタイム配信（WebSocket）

接続中のクライアント全員にイベントを流すだけのハブ。
- ルーム / プレゼンス / 再送 はなし
- 接続ごとに上限付きの送信キューを持ち、詰まったクライアントの分だけ捨てる
- フレームは {"event": <名前>, "data": <ペイロード>} の JSON
"""
from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Dict, Optional

from fastapi import WebSocket, WebSocketDisconnect
from fastapi.encoders import jsonable_encoder

logger = logging.getLogger(__name__)

# サーバー側から流すイベント名
NEW_POST = "new_post"
POST_UPDATED = "post_updated"
COMMENTS_UPDATED = "comments_updated"
RECEIVE_MESSAGE = "receive_message"

# クライアントから受け付けるイベント名
SEND_MESSAGE = "send_message"


class _Connection:
    def __init__(self, websocket: WebSocket, queue_size: int):
        self.websocket = websocket
        self.queue: asyncio.Queue = asyncio.Queue(maxsize=queue_size)
        self.loop = asyncio.get_running_loop()
        self.sender: Optional[asyncio.Task] = None


class BroadcastHub:
    def __init__(self, queue_size: int = 100):
        self.queue_size = queue_size
        self._connections: Dict[WebSocket, _Connection] = {}

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        # accept 前に登録しておく（accept 直後の publish を取りこぼさない）
        conn = _Connection(websocket, self.queue_size)
        self._connections[websocket] = conn
        await websocket.accept()
        conn.sender = asyncio.create_task(self._drain(conn))
        logger.info("realtime client connected (clients=%d)", self.connection_count)

    def disconnect(self, websocket: WebSocket) -> None:
        conn = self._connections.pop(websocket, None)
        if conn is None:
            return
        if conn.sender is not None:
            conn.sender.cancel()
        logger.info("realtime client disconnected (clients=%d)", self.connection_count)

    def publish(self, event: str, data: Any) -> None:
        """
        全接続にイベントを積む。ブロックしない。
        同期ルート（スレッドプール）からもイベントループ上からも呼べる。
        """
        frame = {"event": event, "data": jsonable_encoder(data)}
        for websocket, conn in list(self._connections.items()):
            try:
                conn.loop.call_soon_threadsafe(self._enqueue, conn, frame)
            except RuntimeError:
                # ループが閉じている = 接続はもう生きていない
                self._connections.pop(websocket, None)

    def _enqueue(self, conn: _Connection, frame: dict) -> None:
        try:
            conn.queue.put_nowait(frame)
        except asyncio.QueueFull:
            logger.warning(
                "outbound queue full, dropping %s frame for one client", frame["event"]
            )

    async def _drain(self, conn: _Connection) -> None:
        while True:
            frame = await conn.queue.get()
            try:
                await conn.websocket.send_json(frame)
            except (WebSocketDisconnect, RuntimeError, OSError):
                # 切断済み。受信ループ側の disconnect で登録が消える
                logger.debug("send failed, client already gone")
                return


hub = BroadcastHub(queue_size=int(os.getenv("WS_QUEUE_SIZE", "100")))


def get_hub() -> BroadcastHub:
    return hub
