"""
工具模組

提供日誌、計時、延遲導入等通用工具。
"""

from .lazy_imports import (
    PYSPELLCHECKER_INSTALL_HINT,
    check_pyspellchecker_dependencies,
    is_pyspellchecker_available,
)
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)

__all__ = [
    # 日誌工具
    "get_logger",
    "setup_logger",
    "log_timing",
    "TimingContext",
    "enable_debug_logging",
    "enable_timing_logging",

    # 依賴檢查
    "is_pyspellchecker_available",
    "check_pyspellchecker_dependencies",
    "PYSPELLCHECKER_INSTALL_HINT",
]
