# routers/realtime.py
import json
import logging

from fastapi import APIRouter, Depends, WebSocket

from services.broadcast import BroadcastHub, get_hub, SEND_MESSAGE, RECEIVE_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Realtime"])


@router.websocket("/ws")
async def realtime(websocket: WebSocket, hub: BroadcastHub = Depends(get_hub)):
    """
    コミュニティ用のリアルタイムチャネル
    - send_message を受けたら receive_message として全員に中継
    - 投稿 / いいね / コメントの更新はサーバー側から push される
    """
    await hub.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break

            raw = message.get("text")
            if raw is None:
                logger.warning("ignoring binary realtime frame")
                continue

            try:
                frame = json.loads(raw)
            except ValueError:
                logger.warning("ignoring non-JSON realtime frame")
                continue

            if not isinstance(frame, dict) or "event" not in frame:
                logger.warning("ignoring realtime frame without event name")
                continue

            if frame["event"] == SEND_MESSAGE:
                hub.publish(RECEIVE_MESSAGE, frame.get("data"))
            else:
                logger.debug("unknown realtime event: %s", frame["event"])
    finally:
        hub.disconnect(websocket)
