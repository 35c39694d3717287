"""
全域配置模組

提供統一的配置類別，控制日誌、計時、事件回呼與並行上限。

使用方式:
    from typofinder import TypoFinder

    # 簡單開啟 verbose 模式
    finder = TypoFinder(backend, verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("typofinder").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .core.events import TypoEventHandler
from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class FinderConfig:
    """
    搜尋器配置類別 (進階用途)

    一般使用者只需要使用 verbose=True 即可。

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        on_event: 事件回呼函數，接收 TypoEvent
        max_concurrency: 同時進行中的 backend 查詢上限；None 表示不限制
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    on_event: Optional[TypoEventHandler] = None
    max_concurrency: Optional[int] = None

    def __post_init__(self):
        if self.max_concurrency is not None:
            if isinstance(self.max_concurrency, bool) or not isinstance(self.max_concurrency, int):
                raise ValueError(f"max_concurrency 必須是正整數或 None，收到 {self.max_concurrency!r}")
            if self.max_concurrency < 1:
                raise ValueError(f"max_concurrency 必須是正整數或 None，收到 {self.max_concurrency!r}")
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式、不限並行)
DEFAULT_CONFIG = FinderConfig(verbose=False)
