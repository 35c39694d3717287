"""
單詞掃描器測試
"""
import unicodedata

import pytest

from typofinder.core.scanner import ScanState, WordScanner, iter_occurrences, scan


SAMPLE_TEXT = (
    'This chunk of text should contani exactly two distinct errors. \n'
    'It contains the same words more than once; for exemple, \n'
    'the word "exemple" is referenced twice. It should also work with popular abbreviations, '
    'such as "e.g." and "i.e.".'
)


def words_of(text):
    return [occ.word for occ in scan(text)]


class TestOffsets:
    """offset 必須與原文完全對應"""

    @pytest.mark.parametrize("text", [
        SAMPLE_TEXT,
        "Some abbreviations, such as e.g.c is not known to the dictionary",
        "  leading and trailing  ",
        "don't stop-believing 'quoted' words-",
        "Ünïcödé wörds and ñandú, 東京 too.",
        "U.S.A. and x.y.z. end.",
        "",
    ])
    def test_substring_matches_word(self, text):
        """每個 occurrence 都滿足 text[start:end] == word"""
        for occ in scan(text):
            assert text[occ.start:occ.end] == occ.word
            assert occ.end - occ.start == len(occ.word)
            assert occ.length == len(occ.word)

    def test_repeated_words_keep_separate_offsets(self):
        """同一個單詞多次出現，各自保留正確 offset"""
        occurrences = [occ for occ in scan(SAMPLE_TEXT) if occ.word == "exemple"]

        assert len(occurrences) == 2
        assert occurrences[0].start != occurrences[1].start
        for occ in occurrences:
            assert SAMPLE_TEXT[occ.start:occ.end] == "exemple"

    def test_occurrences_in_text_order(self):
        """結果依出現順序排列"""
        starts = [occ.start for occ in scan(SAMPLE_TEXT)]
        assert starts == sorted(starts)


class TestAbbreviations:
    """縮寫形狀（字母串 . 字母串 . ...）"""

    def test_common_abbreviations(self):
        """e.g. 與 i.e. 各為一個 token，含結尾句點"""
        words = words_of(SAMPLE_TEXT)
        assert "e.g." in words
        assert "i.e." in words
        assert "e" not in words
        assert "g" not in words

    def test_uncommon_abbreviation(self):
        """e.g.c 視為一個單詞"""
        text = "Some abbreviations, such as e.g.c is not known to the dictionary"
        occurrences = [occ for occ in scan(text) if occ.word == "e.g.c"]

        assert len(occurrences) == 1
        occ = occurrences[0]
        assert text[occ.start:occ.end] == "e.g.c"

    def test_multi_segment_abbreviation(self):
        assert words_of("see x.y.z. here") == ["see", "x.y.z.", "here"]

    def test_sentence_period_is_not_part_of_word(self):
        """單段單詞後的句點是句尾標點"""
        assert words_of("It is referenced twice. Next") == ["It", "is", "referenced", "twice", "Next"]

    def test_abbreviation_at_end_of_text(self):
        assert words_of("such as i.e.") == ["such", "as", "i.e."]

    def test_abbreviation_followed_by_extra_period(self):
        assert words_of("etc e.g..") == ["etc", "e.g."]

    def test_abbreviation_keeps_sentence_final_period(self):
        """縮寫形狀在句尾時，句點算在 token 內"""
        text = "not known, such as e.g.c."
        occurrences = scan(text)

        assert occurrences[-1].word == "e.g.c."
        assert text[occurrences[-1].start:occurrences[-1].end] == "e.g.c."


class TestBoundaries:
    """邊界字元與內部連接字元"""

    def test_sentence_punctuation_splits(self):
        assert words_of('one,two;three "four" (five)') == ["one", "two", "three", "four", "five"]

    def test_internal_apostrophe_and_hyphen(self):
        assert words_of("don't be well-known") == ["don't", "be", "well-known"]

    def test_typographic_apostrophe(self):
        assert words_of("it’s fine") == ["it’s", "fine"]

    def test_trailing_apostrophe_excluded(self):
        """結尾的撇號/連字號不屬於單詞"""
        assert words_of("the students' work-") == ["the", "students", "work"]

    def test_leading_apostrophe_excluded(self):
        assert words_of("'tis") == ["tis"]

    def test_double_hyphen_splits(self):
        assert words_of("word--another") == ["word", "another"]

    def test_unicode_letters(self):
        assert words_of("naïve café") == ["naïve", "café"]

    def test_combining_marks_stay_in_word(self):
        """NFD 分解後的重音符號不會切斷單詞"""
        text = unicodedata.normalize("NFD", "naïve café")
        occurrences = scan(text)

        assert [occ.word for occ in occurrences] == text.split(" ")
        for occ in occurrences:
            assert text[occ.start:occ.end] == occ.word

    def test_devanagari_vowel_signs(self):
        assert words_of("हिन्दी भाषा") == ["हिन्दी", "भाषा"]

    def test_combining_mark_does_not_start_word(self):
        assert words_of("\u0301abc") == ["abc"]


class TestDiscarded:
    """純數字與空白不產生 occurrence"""

    def test_numbers_are_discarded(self):
        assert words_of("in 2024 there were 3.14 pies and 1,000 cakes") == [
            "in", "there", "were", "pies", "and", "cakes",
        ]

    def test_alphanumeric_is_kept(self):
        assert words_of("mp3 files") == ["mp3", "files"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "... ,,, ;;", "42 7"])
    def test_no_words(self, text):
        assert scan(text) == []


class TestScannerApi:
    def test_iter_occurrences_matches_scan(self):
        assert list(iter_occurrences(SAMPLE_TEXT)) == scan(SAMPLE_TEXT)

    def test_scanner_returns_to_outside(self):
        scanner = WordScanner("a.b")
        list(scanner)
        assert scanner.state is ScanState.OUTSIDE

    def test_scan_is_deterministic(self):
        assert scan(SAMPLE_TEXT) == scan(SAMPLE_TEXT)

    def test_rejects_non_str(self):
        with pytest.raises(TypeError):
            scan(b"bytes")
