"""
拼字檢查 backend 介面

核心只依賴「給一個單詞，非同步回傳 Verdict 或拋出例外」這個能力，
不依賴任何具體的拼字檢查實作（字典載入、詞綴規則、建議排序都屬於 backend）。

實作方式:
    >>> class MyBackend:
    ...     async def check_word(self, word: str) -> Verdict:
    ...         if word in KNOWN:
    ...             return Verdict.correct(word)
    ...         return Verdict.misspelled(word, ["..."])

同步的 `check_word`（直接回傳 Verdict）也可接受。
"""

from __future__ import annotations

import inspect
from typing import Awaitable, Protocol, Union, runtime_checkable

from typofinder.exceptions import InvalidBackendError

from .models import Verdict


@runtime_checkable
class SpellBackendProtocol(Protocol):
    def check_word(self, word: str) -> Union[Verdict, Awaitable[Verdict]]:
        """檢查單一單詞，回傳 Verdict；失敗時拋出例外"""
        ...


def validate_backend(backend: object) -> SpellBackendProtocol:
    """
    確認 backend 具備 check_word 能力

    Raises:
        InvalidBackendError: backend 為 None、是類別而非實例、或沒有可呼叫的 check_word
    """
    if backend is None or inspect.isclass(backend):
        raise InvalidBackendError(backend=backend)
    if not isinstance(backend, SpellBackendProtocol):
        raise InvalidBackendError(backend=backend)
    if not callable(getattr(backend, "check_word", None)):
        raise InvalidBackendError(backend=backend)
    return backend


async def query_backend(backend: SpellBackendProtocol, word: str) -> Verdict:
    """
    對 backend 發出一次查詢

    backend 拋出的例外原樣往外傳；回傳值不是 Verdict 時視為 backend 不合規。
    """
    result = backend.check_word(word)
    if inspect.isawaitable(result):
        result = await result
    if not isinstance(result, Verdict):
        raise InvalidBackendError(
            f"A valid spell-checking backend instance is required: "
            f"check_word({word!r}) returned {type(result).__name__}, expected Verdict",
            backend=backend,
        )
    return result
