"""
typofinder - 錯字定位器 (Occurrence-indexed Typo Finder)

核心概念：
- 把文本切成候選單詞（正確處理 "e.g."、"i.e." 這類含句點的縮寫）
- 對每個相異單詞並行查詢外部拼字檢查 backend
- 把判定結果與單詞在原文中的每一次出現合併，輸出結構化的錯字資料

官方入口（穩定 API）：
- `typofinder.TypoFinder`
- `typofinder.find_typos`（coroutine）
- `typofinder.check_typos`（callback 風格）
"""

# =============================================================================
# 入口
# =============================================================================
from typofinder.finder import TypoFinder, check_typos, find_typos

# =============================================================================
# 資料模型與核心元件
# =============================================================================
from typofinder.core import (
    Occurrence,
    Position,
    SpellBackendProtocol,
    Typo,
    TypoEvent,
    Verdict,
    aggregate,
    dispatch,
    scan,
    validate_backend,
)

# =============================================================================
# 配置與例外
# =============================================================================
from typofinder.config import DEFAULT_CONFIG, FinderConfig
from typofinder.exceptions import InvalidBackendError, TypoFinderError

# =============================================================================
# 日誌工具
# =============================================================================
from typofinder.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Entry points
    "TypoFinder",
    "find_typos",
    "check_typos",
    # Models
    "Occurrence",
    "Position",
    "Typo",
    "Verdict",
    "TypoEvent",
    # Core (advanced)
    "scan",
    "dispatch",
    "aggregate",
    "validate_backend",
    "SpellBackendProtocol",
    # Config / errors
    "FinderConfig",
    "DEFAULT_CONFIG",
    "TypoFinderError",
    "InvalidBackendError",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
