"""
查詢分派器 (Dispatcher)

對每個相異單詞各發出一次 backend 查詢，全部同時進行（fan-out），
再以單一完成屏障收回結果（fan-in）。

失敗策略:
- 一旦觀察到第一個失敗，取消所有尚未完成的查詢並等待取消完成，接著原樣拋出該例外
- 屏障返回時若已有多個查詢失敗，取掃描順序中最先出現之單詞的例外
- 成功時回傳完整的 word -> Verdict 映射；不會有部分結果
"""

from __future__ import annotations

import asyncio
from typing import Dict, Iterable, List, Optional

from typofinder.utils.logger import get_logger

from .backend_interface import SpellBackendProtocol, query_backend
from .events import TypoEventHandler
from .models import Occurrence, Verdict

_logger = get_logger("dispatcher")


def distinct_words(occurrences: Iterable[Occurrence]) -> List[str]:
    """
    依首次出現順序列出相異單詞

    以字串完全相等比對，不做大小寫或 Unicode 正規化。
    """
    return list(dict.fromkeys(occ.word for occ in occurrences))


async def dispatch(
    words: Iterable[str],
    backend: SpellBackendProtocol,
    *,
    max_concurrency: Optional[int] = None,
    on_event: Optional[TypoEventHandler] = None,
) -> Dict[str, Verdict]:
    """
    並行查詢所有相異單詞

    Args:
        words: 相異單詞（重複的單詞只會查詢一次）
        backend: 拼字檢查 backend
        max_concurrency: 同時進行中的查詢上限；None 表示不限制
        on_event: 事件回呼

    Returns:
        Dict[str, Verdict]: 每個單詞的判定

    Raises:
        backend 拋出的第一個例外（原樣）
    """
    ordered = list(dict.fromkeys(words))
    if not ordered:
        return {}

    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def check(word: str) -> Verdict:
        if semaphore is None:
            return await query_backend(backend, word)
        async with semaphore:
            return await query_backend(backend, word)

    tasks: Dict[str, asyncio.Task] = {
        word: asyncio.create_task(check(word)) for word in ordered
    }
    _logger.debug(f"Dispatched {len(tasks)} backend queries")

    try:
        done, pending = await asyncio.wait(
            tasks.values(), return_when=asyncio.FIRST_EXCEPTION
        )
    except asyncio.CancelledError:
        await _cancel_all(tasks.values())
        raise

    failed_word = _first_failure(ordered, tasks, done)
    if failed_word is None:
        return {word: task.result() for word, task in tasks.items()}

    error = tasks[failed_word].exception()

    # 先完成取消與清理，再通知事件回呼；回呼拋出例外時查詢也不會留在背景執行
    try:
        if pending:
            await _cancel_all(pending)
    finally:
        # 其餘已失敗的 task 也要取出例外，避免 "exception was never retrieved" 警告
        for task in done:
            if not task.cancelled():
                task.exception()

    _logger.warning(
        f"Backend query for {failed_word!r} failed: {type(error).__name__}: {error}"
    )
    if pending:
        _logger.debug(f"Cancelled {len(pending)} outstanding backend queries")

    if on_event is not None:
        on_event({
            "type": "backend_failure",
            "word": failed_word,
            "exception_type": type(error).__name__,
            "exception_message": str(error),
        })
        if pending:
            on_event({"type": "cancelled", "count": len(pending)})

    raise error


def _first_failure(
    ordered: List[str],
    tasks: Dict[str, asyncio.Task],
    done: set,
) -> Optional[str]:
    for word in ordered:
        task = tasks[word]
        if task in done and not task.cancelled() and task.exception() is not None:
            return word
    return None


async def _cancel_all(tasks: Iterable[asyncio.Task]) -> None:
    tasks = list(tasks)
    for task in tasks:
        task.cancel()
    # 已取消的查詢結果一律丟棄
    await asyncio.gather(*tasks, return_exceptions=True)
