"""
pyspellchecker backend

包裝 `spellchecker.SpellChecker`（Norvig 編輯距離 + 詞頻）。

安裝:
    pip install "typofinder[pyspellchecker]"
"""

from __future__ import annotations

from typing import Any, List, Optional

from typofinder.core.models import Verdict
from typofinder.utils.lazy_imports import get_spellchecker_class
from typofinder.utils.logger import get_logger

_logger = get_logger("backends.pyspell")


class PySpellCheckerBackend:
    """
    以 pyspellchecker 判定單詞

    建議依詞頻由高到低排序，同詞頻依字母順序。

    Args:
        language: pyspellchecker 內建字典語言代碼
        distance: 產生候選時的最大編輯距離
        case_sensitive: 是否區分大小寫
        checker: 已建立的 SpellChecker 實例（指定時忽略其他參數）
    """

    def __init__(
        self,
        language: str = "en",
        *,
        distance: int = 2,
        case_sensitive: bool = False,
        checker: Optional[Any] = None,
    ):
        if checker is None:
            SpellChecker = get_spellchecker_class()
            checker = SpellChecker(
                language=language,
                distance=distance,
                case_sensitive=case_sensitive,
            )
            _logger.debug(f"SpellChecker loaded (language={language}, distance={distance})")
        self._checker = checker

    @property
    def checker(self) -> Any:
        return self._checker

    def suggest(self, word: str) -> List[str]:
        candidates = set(self._checker.candidates(word) or ())
        candidates.discard(word)
        return sorted(
            candidates,
            key=lambda c: (-self._checker.word_usage_frequency(c), c),
        )

    async def check_word(self, word: str) -> Verdict:
        if self._checker.known([word]):
            return Verdict.correct(word)
        return Verdict.misspelled(word, self.suggest(word))
