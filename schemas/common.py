# schemas/common.py
from pydantic import BaseModel


class RequestBody(BaseModel):
    """
    リクエストボディ共通
    TEXT カラムに数値が来ても文字列として保存する（SQLite と同じ扱い）
    """

    class Config:
        coerce_numbers_to_str = True


class CreatedResponse(BaseModel):
    """INSERT 後に採番された id"""
    id: int


class SuccessResponse(BaseModel):
    success: bool = True
