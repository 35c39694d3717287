"""
字表 backend (WordListBackend)

以記憶體中的字表判定單詞，並以 Levenshtein 編輯距離產生建議。

判定規則（比照 Hunspell 的大小寫處理）:
- 與字表完全相同 -> 正確
- 字表中的全小寫詞條接受任何大小寫形式 ("this" 接受 "This"、"THIS")
- 其餘大小寫不同的情況視為拼錯 ("London" 不接受 "london")

建議排序: 編輯距離由小到大，同距離依字母順序；最多 max_suggestions 筆。
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

import Levenshtein

from typofinder.core.models import Verdict
from typofinder.utils.logger import get_logger, log_timing

_logger = get_logger("backends.wordlist")


class WordListBackend:
    """
    字表拼字檢查 backend

    範例:
        >>> backend = WordListBackend(["contain", "example"])
        >>> backend.suggest("contani")
        ['contain']
    """

    def __init__(
        self,
        words: Iterable[str],
        *,
        max_distance: int = 2,
        max_suggestions: int = 10,
    ):
        if max_distance < 0:
            raise ValueError(f"max_distance 不可為負數，收到 {max_distance}")
        if max_suggestions < 0:
            raise ValueError(f"max_suggestions 不可為負數，收到 {max_suggestions}")

        self._words = frozenset(w for w in words if w)
        self._lowercase_entries = frozenset(w for w in self._words if w == w.lower())
        self.max_distance = max_distance
        self.max_suggestions = max_suggestions

    @classmethod
    @log_timing("WordListBackend.from_file")
    def from_file(
        cls,
        path: Union[str, Path],
        *,
        encoding: str = "utf-8",
        **kwargs,
    ) -> "WordListBackend":
        """
        從純字表或 Hunspell .dic 檔載入

        - 第一行若為純數字（.dic 的詞條數）則略過
        - 去除 "/FLAGS" 後綴與後面的形態欄位
        - 略過空行與 # 開頭的註解
        """
        words: List[str] = []
        with open(path, "r", encoding=encoding) as f:
            for lineno, line in enumerate(f):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if lineno == 0 and line.isdigit():
                    continue
                entry = line.split()[0].split("/", 1)[0]
                if entry:
                    words.append(entry)

        _logger.debug(f"Loaded {len(words)} entries from {path}")
        return cls(words, **kwargs)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_known(word)

    def is_known(self, word: str) -> bool:
        if word in self._words:
            return True
        return word.lower() in self._lowercase_entries

    def suggest(self, word: str) -> List[str]:
        """依編輯距離列出建議"""
        if self.max_suggestions == 0:
            return []

        target = word.lower()
        scored = []
        for entry in self._words:
            if abs(len(entry) - len(target)) > self.max_distance:
                continue
            dist = Levenshtein.distance(target, entry.lower(), score_cutoff=self.max_distance)
            if dist <= self.max_distance:
                scored.append((dist, entry))

        scored.sort()
        suggestions: List[str] = []
        for _, entry in scored:
            suggestion = _match_case(word, entry) if entry in self._lowercase_entries else entry
            if suggestion not in suggestions:
                suggestions.append(suggestion)
            if len(suggestions) >= self.max_suggestions:
                break
        return suggestions

    async def check_word(self, word: str) -> Verdict:
        if self.is_known(word):
            return Verdict.correct(word)
        return Verdict.misspelled(word, self.suggest(word))


def _match_case(word: str, suggestion: str) -> str:
    if len(word) > 1 and word.isupper():
        return suggestion.upper()
    if word[:1].isupper():
        return suggestion[:1].upper() + suggestion[1:]
    return suggestion
