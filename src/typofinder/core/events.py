"""
事件模型（Event Model）

搜尋器預設不直接輸出到 stdout。
若需要取得「找到了哪些錯字」「哪個單詞查詢失敗」等資訊，請使用事件回呼（event handler）。
"""

from __future__ import annotations

from typing import Callable, List, Literal, TypedDict


class TypoEvent(TypedDict, total=False):
    type: Literal["typo", "backend_failure", "cancelled"]

    # typo / backend_failure
    word: str

    # typo
    suggestions: List[str]
    count: int

    # backend_failure
    exception_type: str
    exception_message: str


TypoEventHandler = Callable[[TypoEvent], None]
