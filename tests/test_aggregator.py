"""
結果彙整器測試
"""
from typofinder.core.aggregator import aggregate, group_positions
from typofinder.core.models import Occurrence, Position, Typo, Verdict


def find_typo(word, typos):
    """Typo 清單順序不保證，以 word 查找"""
    for typo in typos:
        if typo.word == word:
            return typo
    return None


OCCURRENCES = [
    Occurrence("teh", 0, 3),
    Occurrence("cat", 4, 7),
    Occurrence("teh", 8, 11),
    Occurrence("dgo", 12, 15),
    Occurrence("teh", 16, 19),
]

VERDICTS = {
    "teh": Verdict.misspelled("teh", ["the", "tea"]),
    "cat": Verdict.correct("cat"),
    "dgo": Verdict.misspelled("dgo", []),
}


class TestGroupPositions:
    def test_groups_by_word(self):
        grouped = group_positions(OCCURRENCES)

        assert set(grouped) == {"teh", "cat", "dgo"}
        assert grouped["teh"] == [Position(0, 3), Position(8, 11), Position(16, 19)]


class TestAggregate:
    def test_only_misspelled_words_produce_typos(self):
        typos = aggregate(OCCURRENCES, VERDICTS)

        assert {typo.word for typo in typos} == {"teh", "dgo"}
        assert find_typo("cat", typos) is None

    def test_every_occurrence_becomes_a_position(self):
        typo = find_typo("teh", aggregate(OCCURRENCES, VERDICTS))

        assert len(typo.positions) == 3
        assert {(p.start, p.end) for p in typo.positions} == {(0, 3), (8, 11), (16, 19)}
        assert all(p.length == 3 for p in typo.positions)

    def test_suggestions_preserved_in_backend_order(self):
        typo = find_typo("teh", aggregate(OCCURRENCES, VERDICTS))
        assert typo.suggestions == ["the", "tea"]

    def test_misspelled_without_suggestions(self):
        typo = find_typo("dgo", aggregate(OCCURRENCES, VERDICTS))
        assert typo.suggestions == []
        assert len(typo.positions) == 1

    def test_all_correct(self):
        verdicts = {word: Verdict.correct(word) for word in VERDICTS}
        assert aggregate(OCCURRENCES, verdicts) == []

    def test_empty(self):
        assert aggregate([], {}) == []


class TestTypoSerialization:
    def test_to_dict(self):
        typo = Typo(word="teh", suggestions=["the"], positions=[Position(4, 7)])

        assert typo.to_dict() == {
            "word": "teh",
            "suggestions": ["the"],
            "positions": [{"from": 4, "to": 7, "length": 3}],
        }

    def test_positions_do_not_reference_text(self):
        """位置只是整數 offset"""
        typo = find_typo("teh", aggregate(OCCURRENCES, VERDICTS))
        for pos in typo.positions:
            assert isinstance(pos.start, int)
            assert isinstance(pos.end, int)
