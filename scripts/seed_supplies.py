"""
資材カタログ（supplies）の初期データ投入スクリプト

supplies には登録APIがないので、このスクリプトで入れる。
テーブルが空のときだけ投入する（何度実行しても重複しない）。

    python scripts/seed_supplies.py
"""

import logging
import os
import sys

# プロジェクト直下を import できるようにする
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from db.database import SessionLocal, init_db
from models.supply import Supply

logger = logging.getLogger(__name__)

SUPPLIES = [
    {
        "name": "Phân bón NPK 20-20-15",
        "category": "fertilizer",
        "description": "Phân bón tổng hợp cho rau màu và cây ăn trái",
        "price": 45000,
        "usage_guide": "Hòa 1 muỗng canh với 10 lít nước, tưới gốc 7-10 ngày một lần",
        "side_effects": "Bón quá liều có thể gây cháy rễ",
        "store_url": None,
        "image_url": None,
    },
    {
        "name": "Phân trùn quế",
        "category": "fertilizer",
        "description": "Phân hữu cơ giúp tơi xốp đất",
        "price": 30000,
        "usage_guide": "Trộn 20-30% vào đất trồng hoặc rải quanh gốc",
        "side_effects": None,
        "store_url": None,
        "image_url": None,
    },
    {
        "name": "Dầu neem",
        "category": "pesticide",
        "description": "Thuốc trừ sâu sinh học",
        "price": 65000,
        "usage_guide": "Pha 5ml với 1 lít nước, phun vào chiều mát",
        "side_effects": "Có thể gây vàng lá non nếu phun dưới nắng gắt",
        "store_url": None,
        "image_url": None,
    },
    {
        "name": "Giá thể xơ dừa",
        "category": "soil",
        "description": "Giá thể giữ ẩm cho cây trồng chậu",
        "price": 25000,
        "usage_guide": "Ngâm xả chát trước khi dùng, trộn với đất theo tỉ lệ 1:1",
        "side_effects": None,
        "store_url": None,
        "image_url": None,
    },
]


def seed_supplies(db) -> int:
    """
    supplies が空なら初期データを入れて件数を返す（空でなければ 0）
    """
    if db.query(Supply).count() > 0:
        return 0

    for item in SUPPLIES:
        db.add(Supply(**item))
    db.commit()
    return len(SUPPLIES)


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()

    db = SessionLocal()
    try:
        inserted = seed_supplies(db)
    finally:
        db.close()

    if inserted:
        logger.info("inserted %d supplies", inserted)
    else:
        logger.info("supplies already present, nothing to do")


if __name__ == "__main__":
    main()
