"""
日誌與計時工具

所有 logger 皆掛在 `typofinder` 命名空間之下，預設只安裝 NullHandler，
不主動輸出任何內容；需要時由使用者以 `setup_logger()` 或標準 logging 開啟。

使用方式:
    from typofinder.utils.logger import get_logger, TimingContext

    logger = get_logger("finder")
    with TimingContext("find_typos", logger=logger):
        ...
"""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "typofinder"
DEFAULT_FORMAT = "[%(asctime)s] %(name)s %(levelname)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

# 由 setup_logger 安裝的 handler，避免重複安裝
_installed_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 typofinder 命名空間下的 logger

    Args:
        name: 子模組名稱，例如 "finder" -> "typofinder.finder"

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為套件 logger 安裝一個 StreamHandler 並設定等級

    重複呼叫只會調整等級，不會重複安裝 handler。
    """
    global _installed_handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if _installed_handler is None:
        _installed_handler = logging.StreamHandler()
        _installed_handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_installed_handler)
    _installed_handler.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌（含計時資訊）"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌；計時資訊以 DEBUG 輸出，故等同 enable_debug_logging"""
    return enable_debug_logging()


class TimingContext:
    """
    計時上下文管理器

    離開區塊時以指定等級記錄耗時，並呼叫 callback(operation, elapsed)。
    區塊內拋出的例外不會被吞掉。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger()
        self.level = level
        self.callback = callback
        self.elapsed: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"{self.operation} took {self.elapsed:.3f}s")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    函數計時裝飾器，同時支援一般函數與 coroutine function

    範例:
        >>> @log_timing("scan")
        ... def scan(text): ...
    """

    def decorator(func: Callable) -> Callable:
        op = operation or func.__qualname__
        logger = get_logger(func.__module__)

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                with TimingContext(op, logger=logger, level=level):
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(op, logger=logger, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
