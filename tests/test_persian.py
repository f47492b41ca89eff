"""
波斯文測試

驗證：
1. 預設字典載入
2. 缺字建議
3. 自動偵測（英文 / 波斯文混合）
4. 正規化（空白與數字）
"""

import pytest

from didyoumean import Language, SpellChecker, get_language_info


class TestPersianDictionary:
    """測試波斯文字典"""

    def setup_method(self):
        self.checker = SpellChecker(10000, 7)
        self.checker.load_default_dictionary(Language.PERSIAN)

    @pytest.mark.parametrize("word", ["سلام", "دنیا", "برنامه", "نویسی", "کامپیوتر"])
    def test_default_words_are_correct(self, word):
        assert self.checker.is_correct_for_language(word, Language.PERSIAN)

    @pytest.mark.parametrize("word", ["hello", "world", "test", "xyz"])
    def test_latin_words_are_not_persian(self, word):
        assert not self.checker.is_correct_for_language(word, Language.PERSIAN)

    @pytest.mark.parametrize(
        "misspelled, expected",
        [
            ("برنام", "برنامه"),  # 少了 'ه'
            ("دنی", "دنیا"),      # 少了 'ا'
            ("سلا", "سلام"),      # 少了 'م'
        ],
    )
    def test_missing_letter_suggestions(self, misspelled, expected):
        suggestions = self.checker.get_suggestions_for_language(misspelled, Language.PERSIAN, 3, 2)

        assert suggestions[0].word == expected
        assert suggestions[0].similarity == pytest.approx(1 - 1 / len(expected))

    def test_whitespace_is_trimmed(self):
        assert self.checker.is_correct_for_language("  سلام  ", Language.PERSIAN)

    def test_keyboard_typos_do_not_apply(self):
        """QWERTY 表只涵蓋拉丁字母"""
        assert self.checker.get_suggestions_for_language("سلا", Language.PERSIAN, 5, 0) == []


class TestPersianAutoDetection:
    """測試自動偵測"""

    def setup_method(self):
        self.checker = SpellChecker(10000, 7)
        self.checker.load_default_dictionary(Language.ENGLISH)
        self.checker.load_default_dictionary(Language.PERSIAN)

    @pytest.mark.parametrize(
        "word, expected_lang, should_be_correct",
        [
            ("سلام", Language.PERSIAN, True),
            ("دنیا", Language.PERSIAN, True),
            ("برنامه", Language.PERSIAN, True),
            ("hello", Language.ENGLISH, True),
            ("world", Language.ENGLISH, True),
            ("test", Language.ENGLISH, True),
            ("تست", Language.PERSIAN, True),
            ("برنام", Language.PERSIAN, False),
            ("helo", Language.ENGLISH, False),
        ],
    )
    def test_auto_detect(self, word, expected_lang, should_be_correct):
        detected, is_correct, suggestions = self.checker.auto_detect_and_suggest(word)

        assert detected == expected_lang
        assert is_correct == should_be_correct
        if is_correct:
            assert suggestions == []
        else:
            assert suggestions

    def test_arabic_word_is_checked_against_persian(self):
        """阿拉伯文字被偵測為波斯文，因此查的是波斯文字典"""
        self.checker.load_default_dictionary(Language.ARABIC)

        detected, is_correct, _ = self.checker.auto_detect_and_suggest("مرحبا")

        assert detected == Language.PERSIAN
        assert not is_correct
        assert self.checker.is_correct_for_language("مرحبا", Language.ARABIC)


class TestPersianNormalization:
    """測試波斯文正規化"""

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("سلام", "سلام"),
            ("  سلام  ", "سلام"),
            ("سلام دنیا", "سلام دنیا"),
            ("1404", "۱۴۰۴"),
        ],
    )
    def test_normalizer(self, word, expected):
        assert get_language_info(Language.PERSIAN).normalize(word) == expected

    def test_phrase_with_space_is_accepted(self):
        checker = SpellChecker(1000, 5)
        assert checker.add_words_for_language(["سلام دنیا"], Language.PERSIAN) == 1
        assert checker.is_correct_for_language("سلام دنیا", Language.PERSIAN)
