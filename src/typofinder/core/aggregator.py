"""
結果彙整器 (Aggregator)

把 Dispatcher 的判定與 Scanner 的出現位置合併成最終的 Typo 清單。
內部以 word 為 key 的映射保存，只在邊界才轉成 list；
呼叫端應以 word 查找錯字，而非依賴清單順序。
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from .models import Occurrence, Position, Typo, Verdict


def group_positions(occurrences: Iterable[Occurrence]) -> Dict[str, List[Position]]:
    """依單詞分組所有出現位置"""
    grouped: Dict[str, List[Position]] = {}
    for occ in occurrences:
        grouped.setdefault(occ.word, []).append(Position.from_occurrence(occ))
    return grouped


def aggregate(
    occurrences: Iterable[Occurrence],
    verdicts: Mapping[str, Verdict],
) -> List[Typo]:
    """
    建立 Typo 清單

    Args:
        occurrences: Scanner 產生的所有單詞出現
        verdicts: 每個相異單詞的判定

    Returns:
        List[Typo]: 每個判定為拼錯的單詞各一筆，positions 含該單詞的每一次出現
    """
    positions_by_word = group_positions(occurrences)

    typos: Dict[str, Typo] = {}
    for word, positions in positions_by_word.items():
        verdict = verdicts.get(word)
        if verdict is None or verdict.is_correct:
            continue
        typos[word] = Typo(
            word=word,
            suggestions=list(verdict.suggestions),
            positions=positions,
        )

    return list(typos.values())
