from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from datetime import datetime, timezone
import logging
import os
import time

from db.database import init_db
from core.middleware import MaxBodySizeMiddleware
from routers import plants, supplies, news, diary, community, expenses, reminders, realtime
from services.broadcast import hub

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("nongtritue")


app = FastAPI(title="Nong Tri Tue API")

# 起動時間の記録（任意）
STARTED_AT = time.time()

# --- CORS設定（開発用：本番は allow_origins を絞るの推奨）---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 画像を JSON に埋め込むので 50MB まで
app.add_middleware(MaxBodySizeMiddleware)

# --- ルーター ---
app.include_router(plants.router)
app.include_router(supplies.router)
app.include_router(news.router)
app.include_router(diary.router)
app.include_router(community.router)
app.include_router(expenses.router)
app.include_router(reminders.router)
app.include_router(realtime.router)


@app.exception_handler(SQLAlchemyError)
@app.exception_handler(RequestValidationError)
def _request_failed(request: Request, exc: Exception):
    # DBエラーも不正なボディも区別せず、中身はクライアントに返さない
    logger.error(
        "request failed on %s %s", request.method, request.url.path, exc_info=exc
    )
    return PlainTextResponse("Internal Server Error", status_code=500)


@app.on_event("startup")
def _startup():
    """
    起動時に1回だけ実行される処理
    - DBテーブル作成（既存なら何もしない）
    """
    init_db()
    logger.info("database ready")


# --- コールドスタート対策：超軽量エンドポイント（DBに触らない） ---
@app.get("/ping", include_in_schema=False)
def ping():
    return {
        "ok": True,
        "service": "nongtritue-backend",
        "ts": datetime.now(timezone.utc).isoformat(),
        "uptime_sec": round(time.time() - STARTED_AT, 2),
        "realtime_clients": hub.connection_count,
    }


# --- 本番ではビルド済みフロントを配信（開発時は Vite 側で動かす） ---
FRONTEND_DIST = os.getenv("FRONTEND_DIST", "dist")

if os.getenv("APP_ENV", "development") == "production" and os.path.isdir(FRONTEND_DIST):
    assets_dir = os.path.join(FRONTEND_DIST, "assets")
    if os.path.isdir(assets_dir):
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    @app.get("/{full_path:path}", include_in_schema=False)
    def spa(full_path: str):
        root = os.path.realpath(FRONTEND_DIST)
        candidate = os.path.realpath(os.path.join(root, full_path))
        if full_path and candidate.startswith(root + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)
        # クライアント側ルーティング用に index.html を返す
        return FileResponse(os.path.join(FRONTEND_DIST, "index.html"))
