"""
單詞掃描器 (Word Scanner)

把文本切成候選單詞，並記錄每個單詞在原文中的精確 offset。

分詞規則:
- 單詞是由「構詞字元」(Unicode 字母與數字) 組成的最長連續片段
- 組合記號 (Unicode 類別 M*，如 NFD 的重音符號、天城文母音符號) 可接在單詞內，但不能作為單詞開頭
- 撇號與連字號只有夾在兩個構詞字元之間時才算在單詞內 ("don't", "well-known")
- 句點只在縮寫形狀內算在單詞內: 「字母串 . 字母串 . ...」
  - "e.g." / "i.e." / "x.y.z." -> 一個 token，含結尾句點
  - "e.g.c" -> 一個 token
  - "twice." -> "twice"（單段單詞後的句點是句尾標點）
- 逗號、引號、分號等一律是邊界
- 不含任何字母的 token（純數字如 "2024"、"3.14"）會被捨棄

實作為顯式狀態機，而非單一正規表示式，方便逐一測試邊界情況。
"""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Iterator, List, Optional

from .models import Occurrence

APOSTROPHES = frozenset("'’")
HYPHENS = frozenset("-‐")
DOT = "."


class ScanState(Enum):
    OUTSIDE = "outside"
    IN_WORD = "in_word"
    SEEN_JOINER = "seen_joiner"  # 剛讀到撇號或連字號
    SEEN_DOT = "seen_dot"  # 剛讀到單詞後的句點


def is_word_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdigit()


def is_word_continuation(ch: str) -> bool:
    return is_word_char(ch) or unicodedata.category(ch).startswith("M")


class WordScanner:
    """
    分詞狀態機

    狀態轉移:
        OUTSIDE     --構詞字元-->  IN_WORD
        IN_WORD     --構詞字元或組合記號-->  IN_WORD
        IN_WORD     --撇號/連字號-> SEEN_JOINER
        IN_WORD     --句點-->      SEEN_DOT
        SEEN_JOINER --構詞字元或組合記號-->  IN_WORD
        SEEN_DOT    --構詞字元或組合記號-->  IN_WORD (標記為縮寫形狀)
        其他                       -> 結束目前單詞，回到 OUTSIDE

    結束單詞時:
        SEEN_JOINER: 不含結尾的撇號/連字號
        SEEN_DOT:    只有縮寫形狀（已出現過內部句點）才含結尾句點
    """

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise TypeError(f"text 必須是 str，收到 {type(text).__name__}")
        self.text = text
        self.state = ScanState.OUTSIDE
        self._start = 0
        self._pending = 0  # 最後一個尚未確定是否屬於單詞的字元位置
        self._dotted = False

    def __iter__(self) -> Iterator[Occurrence]:
        text = self.text
        for i, ch in enumerate(text):
            occurrence = self._step(i, ch)
            if occurrence is not None:
                yield occurrence

        occurrence = self._finish(len(text))
        if occurrence is not None:
            yield occurrence

    def _step(self, i: int, ch: str) -> Optional[Occurrence]:
        state = self.state

        if state is ScanState.OUTSIDE:
            if is_word_char(ch):
                self._start = i
                self._dotted = False
                self.state = ScanState.IN_WORD
            return None

        if state is ScanState.IN_WORD:
            if is_word_continuation(ch):
                return None
            if ch in APOSTROPHES or ch in HYPHENS:
                self._pending = i
                self.state = ScanState.SEEN_JOINER
                return None
            if ch == DOT:
                self._pending = i
                self.state = ScanState.SEEN_DOT
                return None
            return self._emit(i)

        if state is ScanState.SEEN_JOINER:
            if is_word_continuation(ch):
                self.state = ScanState.IN_WORD
                return None
            return self._emit(self._pending)

        # SEEN_DOT
        if is_word_continuation(ch):
            self._dotted = True
            self.state = ScanState.IN_WORD
            return None
        return self._emit(self._pending + 1 if self._dotted else self._pending)

    def _finish(self, length: int) -> Optional[Occurrence]:
        state = self.state
        if state is ScanState.OUTSIDE:
            return None
        if state is ScanState.IN_WORD:
            return self._emit(length)
        if state is ScanState.SEEN_JOINER:
            return self._emit(self._pending)
        return self._emit(self._pending + 1 if self._dotted else self._pending)

    def _emit(self, end: int) -> Optional[Occurrence]:
        self.state = ScanState.OUTSIDE
        word = self.text[self._start:end]
        if not any(ch.isalpha() for ch in word):
            return None
        return Occurrence(word=word, start=self._start, end=end)


def iter_occurrences(text: str) -> Iterator[Occurrence]:
    """逐一產生 text 中的單詞出現 (依出現順序)"""
    return iter(WordScanner(text))


def scan(text: str) -> List[Occurrence]:
    """
    將文本掃描為單詞出現序列

    Args:
        text: 輸入文本

    Returns:
        List[Occurrence]: 依出現順序排列，且 text[o.start:o.end] == o.word
    """
    return list(WordScanner(text))
