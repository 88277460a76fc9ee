# db/database.py
import os
from dotenv import load_dotenv

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

load_dotenv()

# 未設定ならローカルの SQLite ファイルを使う
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///nongtritue.db")

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # リクエストはスレッドプールで処理されるので同一スレッド制約を外す
    connect_args["check_same_thread"] = False

engine = create_engine(
    DATABASE_URL,
    echo=os.getenv("SQL_ECHO", "false").lower() == "true",
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    起動時にテーブルを作成する（既にあれば何もしない）
    """
    # models を import しておく（create_all がテーブルを認識するため）
    from models.plant import Plant
    from models.growth_log import GrowthLog
    from models.supply import Supply
    from models.news import SavedNews, NewsBookmark
    from models.diary import DiaryEntry
    from models.community import CommunityPost, Comment, CommentReply
    from models.expense import Expense
    from models.reminder import Reminder

    Base.metadata.create_all(
        bind=engine,
        tables=[
            Plant.__table__,
            GrowthLog.__table__,
            Supply.__table__,
            SavedNews.__table__,
            DiaryEntry.__table__,
            CommunityPost.__table__,
            Comment.__table__,
            CommentReply.__table__,
            Expense.__table__,
            Reminder.__table__,
            NewsBookmark.__table__,
        ],
    )
