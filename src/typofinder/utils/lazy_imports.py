"""
延遲導入與依賴檢查

可選 backend 所需的第三方套件只在實際使用時才載入，
缺少時拋出帶有安裝提示的 ImportError。
"""

from __future__ import annotations

import importlib
import importlib.util

PYSPELLCHECKER_INSTALL_HINT = (
    "缺少 pyspellchecker 依賴。請執行:\n"
    "  pip install \"typofinder[pyspellchecker]\"\n"
    "或安裝完整版本:\n"
    "  pip install \"typofinder[all]\""
)


def is_pyspellchecker_available() -> bool:
    """檢查 pyspellchecker 是否已安裝"""
    return importlib.util.find_spec("spellchecker") is not None


def check_pyspellchecker_dependencies() -> None:
    """確認 pyspellchecker 可用，否則拋出 ImportError（附安裝提示）"""
    if not is_pyspellchecker_available():
        raise ImportError(PYSPELLCHECKER_INSTALL_HINT)


def get_spellchecker_class():
    """延遲載入 `spellchecker.SpellChecker`"""
    check_pyspellchecker_dependencies()
    module = importlib.import_module("spellchecker")
    return module.SpellChecker
