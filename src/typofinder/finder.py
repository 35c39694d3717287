"""
錯字搜尋器 (TypoFinder)

唯一入口：驗證 backend，依序執行 Scanner -> Dispatcher -> Aggregator。

使用方式:
    from typofinder import TypoFinder, find_typos, check_typos

    finder = TypoFinder(backend, verbose=True)
    typos = await finder.find(text)

    # 或一次性呼叫
    typos = await find_typos(backend, text)

    # callback 風格：callback(error, typos) 只會被呼叫一次
    check_typos(backend, text, lambda err, typos: ...)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from typofinder.config import DEFAULT_CONFIG, FinderConfig
from typofinder.core.aggregator import aggregate
from typofinder.core.backend_interface import SpellBackendProtocol, validate_backend
from typofinder.core.dispatcher import dispatch, distinct_words
from typofinder.core.events import TypoEventHandler
from typofinder.core.models import Typo
from typofinder.core.scanner import scan
from typofinder.utils.logger import TimingContext, get_logger

TypoCallback = Callable[[Optional[BaseException], Optional[List[Typo]]], None]


class TypoFinder:
    """
    錯字搜尋器

    職責:
    - 持有 backend 與配置（日誌、計時、事件、並行上限）
    - 每次呼叫 find() 都從頭掃描文本並查詢 backend，不保留跨呼叫狀態

    backend 在建構時驗證；不合規時拋出 InvalidBackendError。
    """

    def __init__(
        self,
        backend: SpellBackendProtocol,
        *,
        config: Optional[FinderConfig] = None,
        verbose: Optional[bool] = None,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[TypoEventHandler] = None,
        max_concurrency: Optional[int] = None,
    ):
        self._backend = validate_backend(backend)

        base = config or DEFAULT_CONFIG
        self._config = FinderConfig(
            verbose=base.verbose if verbose is None else verbose,
            on_timing=on_timing or base.on_timing,
            on_event=on_event or base.on_event,
            max_concurrency=base.max_concurrency if max_concurrency is None else max_concurrency,
        )
        self._logger = get_logger("finder")
        self._logger.info(f"TypoFinder initialized with backend {type(backend).__name__}")

    @property
    def backend(self) -> SpellBackendProtocol:
        return self._backend

    @property
    def config(self) -> FinderConfig:
        return self._config

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._config.on_timing,
        )

    async def find(self, text: str) -> List[Typo]:
        """
        找出 text 中所有錯字

        Args:
            text: 輸入文本

        Returns:
            List[Typo]: 每個相異錯字一筆；清單與 positions 的順序皆不保證

        Raises:
            TypeError: text 不是 str
            backend 拋出的第一個例外（原樣，不包裝）
        """
        with self._log_timing("TypoFinder.find"):
            occurrences = scan(text)
            words = distinct_words(occurrences)
            self._logger.debug(
                f"Scanned {len(occurrences)} occurrences, {len(words)} distinct words"
            )

            verdicts = await dispatch(
                words,
                self._backend,
                max_concurrency=self._config.max_concurrency,
                on_event=self._config.on_event,
            )

            typos = aggregate(occurrences, verdicts)
            self._logger.debug(f"Found {len(typos)} typos")

        on_event = self._config.on_event
        if on_event is not None:
            for typo in typos:
                on_event({
                    "type": "typo",
                    "word": typo.word,
                    "suggestions": list(typo.suggestions),
                    "count": len(typo.positions),
                })
        return typos


async def find_typos(backend: SpellBackendProtocol, text: str, **options) -> List[Typo]:
    """
    一次性找出 text 中的錯字

    backend 不合規時在任何掃描或查詢之前拋出 InvalidBackendError。
    options 會傳給 TypoFinder（verbose、on_timing、on_event、max_concurrency、config）。
    """
    finder = TypoFinder(backend, **options)
    return await finder.find(text)


def check_typos(
    backend: SpellBackendProtocol,
    text: str,
    callback: TypoCallback,
    **options,
) -> Optional["asyncio.Task[None]"]:
    """
    callback 風格入口

    callback 恰好被呼叫一次：成功時 `callback(None, typos)`，失敗時 `callback(error, None)`。
    - 沒有執行中的 event loop: 同步跑完並回傳 None
    - 在執行中的 event loop 內呼叫: 排程一個 task 並回傳，完成時呼叫 callback
    InvalidBackendError 會在任何工作開始前立即交給 callback。
    callback 本身拋出的例外會以 ERROR 記錄後往外傳；在 event loop 內時它會留在回傳的 task 上，
    呼叫端應 await 該 task 或檢查 `task.exception()`。
    """
    try:
        finder = TypoFinder(backend, **options)
    except Exception as e:
        callback(e, None)
        return None

    def deliver(error: Optional[BaseException], typos: Optional[List[Typo]]) -> None:
        try:
            callback(error, typos)
        except Exception:
            finder._logger.exception("check_typos callback raised")
            raise

    async def run() -> None:
        try:
            typos = await finder.find(text)
        except Exception as e:
            deliver(e, None)
            return
        deliver(None, typos)

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(run())
        return None
    return asyncio.create_task(run())
