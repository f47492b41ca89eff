"""
語言註冊表與語言偵測測試

驗證：
1. 語言資訊與未知代碼回退
2. 正規化規則
3. 字元驗證（字母表 / 文字系統）
4. 偵測順序（混合文字的確定性）
"""

import pytest

from didyoumean import (
    Direction,
    Language,
    LanguageRouter,
    detect_language,
    get_language_info,
    get_supported_languages,
    is_valid_word_for_language,
    normalize_word,
)
from didyoumean.languages import NORMALIZERS, NormalizationRule, resolve_language


class TestLanguageInfo:
    """測試語言資訊"""

    def test_persian_profile(self):
        info = get_language_info(Language.PERSIAN)

        assert info.code == Language.PERSIAN
        assert info.name == "Persian"
        assert info.direction == Direction.RTL
        assert info.is_rtl
        assert info.normalize("سلام") == "سلام"

    def test_string_codes(self):
        assert get_language_info("ru").name == "Russian"
        assert get_language_info("DE").name == "German"

    @pytest.mark.parametrize("code", ["xx", "", "english", "klingon"])
    def test_unknown_code_falls_back_to_english(self, code):
        info = get_language_info(code)
        assert info.code == Language.ENGLISH
        assert resolve_language(code) == Language.ENGLISH

    def test_supported_languages(self):
        langs = get_supported_languages()
        assert [l.value for l in langs] == ["en", "fa", "ar", "fr", "es", "de", "it", "ru", "zh", "ja", "ko"]

    def test_profiles_are_immutable(self):
        info = get_language_info("en")
        with pytest.raises(Exception):
            info.name = "Other"

    def test_every_rule_has_normalizer(self):
        assert set(NORMALIZERS) == set(NormalizationRule)

    def test_only_arabic_script_is_rtl(self):
        rtl = {l for l in get_supported_languages() if get_language_info(l).is_rtl}
        assert rtl == {Language.PERSIAN, Language.ARABIC}


class TestNormalization:
    """測試正規化"""

    @pytest.mark.parametrize(
        "word, code, expected",
        [
            ("  Hello ", "en", "hello"),
            ("ÉCOLE", "fr", "école"),
            ("ПРИВЕТ", "ru", "привет"),
            ("  سلام  ", "fa", "سلام"),
            ("سلام دنیا", "fa", "سلام دنیا"),
            ("سلام123", "fa", "سلام۱۲۳"),
            (" مرحبا ", "ar", "مرحبا"),
            (" 你好 ", "zh", "你好"),
        ],
    )
    def test_rules(self, word, code, expected):
        assert normalize_word(word, code) == expected


class TestWordValidation:
    """測試字元驗證"""

    @pytest.mark.parametrize(
        "word",
        ["سلام", "دنیا", "برنامه", "نویسی", "کامپیوتر", "علم", "الگوریتم", "داده", "ساختار", "فیلتر", "املا", "بررسی"],
    )
    def test_valid_persian(self, word):
        assert is_valid_word_for_language(word, Language.PERSIAN)

    @pytest.mark.parametrize(
        "word",
        ["hello123", "سلام123", "test@test", "سلام world", "", "123", "!@#$%"],
    )
    def test_invalid_persian(self, word):
        assert not is_valid_word_for_language(word, Language.PERSIAN)

    def test_alphabet_allows_whitespace(self):
        assert is_valid_word_for_language("hello world", "en")

    def test_alphabet_is_case_sensitive(self):
        """驗證在正規化之後進行，大寫不在字母表中"""
        assert not is_valid_word_for_language("Hello", "en")
        assert is_valid_word_for_language("straße", "de")
        assert not is_valid_word_for_language("straße", "en")

    def test_chinese(self):
        assert is_valid_word_for_language("你好", "zh")
        assert not is_valid_word_for_language("你好!", "zh")
        assert not is_valid_word_for_language("你 好", "zh")

    def test_japanese(self):
        assert is_valid_word_for_language("ひらがな", "ja")
        assert is_valid_word_for_language("カタカナ", "ja")
        assert is_valid_word_for_language("ラーメン", "ja")
        assert is_valid_word_for_language("日本語", "ja")
        assert not is_valid_word_for_language("日本語。", "ja")

    def test_korean(self):
        assert is_valid_word_for_language("안녕", "ko")
        assert not is_valid_word_for_language("안녕1", "ko")

    def test_empty_is_always_invalid(self):
        for lang in get_supported_languages():
            assert not is_valid_word_for_language("", lang)


class TestLanguageDetection:
    """測試語言偵測"""

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("hello", Language.ENGLISH),
            ("سلام", Language.PERSIAN),
            ("привет", Language.RUSSIAN),
            ("你好", Language.CHINESE),
            ("こんにちは", Language.JAPANESE),
            ("안녕하세요", Language.KOREAN),
            ("", Language.ENGLISH),
            ("123", Language.ENGLISH),
            ("école", Language.ENGLISH),
        ],
    )
    def test_single_script(self, word, expected):
        assert detect_language(word) == expected

    @pytest.mark.parametrize(
        "word", ["سلام", "دنیا", "برنامه", "کامپیوتر", "تست", "مثال", "نمایش"]
    )
    def test_persian_words(self, word):
        assert detect_language(word) == Language.PERSIAN

    def test_arabic_reported_as_persian(self):
        """阿拉伯文與波斯文共用文字系統，一律回報波斯文"""
        assert detect_language("مرحبا") == Language.PERSIAN
        assert detect_language("ﻼ") == Language.PERSIAN  # Presentation Forms-B

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("你好привет", Language.RUSSIAN),
            ("приветسلام", Language.PERSIAN),
            ("こんにちは你好", Language.CHINESE),
            ("日本語です", Language.CHINESE),
            ("안녕こんにちは", Language.JAPANESE),
            ("hello안녕", Language.KOREAN),
        ],
    )
    def test_mixed_script_follows_check_order(self, word, expected):
        assert detect_language(word) == expected

    def test_katakana_only_is_not_detected(self):
        """偵測只看平假名範圍"""
        assert detect_language("カタカナ") == Language.ENGLISH

    def test_router_instance(self):
        assert LanguageRouter().detect_language("привет") == Language.RUSSIAN
