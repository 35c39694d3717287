"""
內建 backend

核心只依賴 `check_word` 能力；此處提供兩個現成實作，供不需要自行接 backend 的使用者使用。

主要類別:
- WordListBackend: 字表 + Levenshtein 建議（可讀 Hunspell .dic）
- PySpellCheckerBackend: 包裝 pyspellchecker（需安裝 "typofinder[pyspellchecker]"）
"""

from __future__ import annotations

import importlib
from typing import Any

_LAZY_IMPORTS = {
    "WordListBackend": (".wordlist", "WordListBackend"),
    "PySpellCheckerBackend": (".pyspell", "PySpellCheckerBackend"),
}

__all__ = [
    "WordListBackend",
    "PySpellCheckerBackend",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
