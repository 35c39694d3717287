"""
資料模型

- Occurrence: 單詞在原文中的一次出現 (word, start, end)
- Verdict: backend 對單一單詞的判定結果
- Position: 錯字在原文中的一個位置
- Typo: 一個相異的錯字，連同建議與所有出現位置

所有位置皆為純整數 offset（以 str 的索引單位計算），不引用原文字串。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class Occurrence:
    """
    單詞的一次出現

    保證 `text[start:end] == word`，且 `end - start == len(word)`。
    """

    word: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Position:
    """錯字的一個位置，`to_dict()` 輸出 {"from", "to", "length"}"""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @classmethod
    def from_occurrence(cls, occurrence: Occurrence) -> "Position":
        return cls(start=occurrence.start, end=occurrence.end)

    def to_dict(self) -> Dict[str, int]:
        return {"from": self.start, "to": self.end, "length": self.length}


@dataclass(frozen=True)
class Verdict:
    """
    backend 對單一單詞的判定

    使用 `Verdict.correct(word)` 或 `Verdict.misspelled(word, suggestions)` 建立。
    建議清單的順序由 backend 決定，這裡原樣保留。
    """

    word: str
    is_correct: bool
    suggestions: Tuple[str, ...] = ()

    @classmethod
    def correct(cls, word: str) -> "Verdict":
        return cls(word=word, is_correct=True)

    @classmethod
    def misspelled(cls, word: str, suggestions: Iterable[str] = ()) -> "Verdict":
        return cls(word=word, is_correct=False, suggestions=tuple(suggestions))

    @property
    def is_misspelled(self) -> bool:
        return not self.is_correct


@dataclass
class Typo:
    """
    一個相異的錯字

    屬性:
        word: 錯字本身（與原文完全相同的字串）
        suggestions: backend 回傳的建議清單
        positions: 每次出現各一筆；順序不保證
    """

    word: str
    suggestions: List[str] = field(default_factory=list)
    positions: List[Position] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "suggestions": list(self.suggestions),
            "positions": [pos.to_dict() for pos in self.positions],
        }
