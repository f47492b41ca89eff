"""
語言註冊表

提供語言資訊查詢、正規化與字元驗證。
未知的語言代碼一律靜默回退到預設語言（英文），不會拋出例外。
"""

import unicodedata
from typing import List, Tuple, Union

from .config import DEFAULT_LANGUAGE, LANGUAGE_PROFILES, Language, LanguageProfile

LanguageCode = Union[Language, str]

# =============================================================================
# 無字母表語言的文字系統範圍
# =============================================================================
_HAN_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3400, 0x4DBF),    # CJK Extension A
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0xF900, 0xFAFF),    # CJK Compatibility Ideographs
    (0x20000, 0x2FA1F),  # CJK Extension B 之後
)
_HIRAGANA_RANGES = ((0x3040, 0x309F),)
_KATAKANA_RANGES = ((0x30A0, 0x30FF), (0x31F0, 0x31FF), (0xFF66, 0xFF9F))
_HANGUL_RANGES = (
    (0x1100, 0x11FF),    # Hangul Jamo
    (0x3130, 0x318F),    # Hangul Compatibility Jamo
    (0xAC00, 0xD7AF),    # Hangul Syllables
)

_SCRIPT_RANGES = {
    Language.CHINESE: _HAN_RANGES,
    Language.JAPANESE: _HIRAGANA_RANGES + _KATAKANA_RANGES + _HAN_RANGES,
    Language.KOREAN: _HANGUL_RANGES,
}


def resolve_language(code: LanguageCode) -> Language:
    """
    將語言代碼解析為 Language

    接受 Language 或字串（不分大小寫）；未知代碼回傳預設語言。

    範例:
        >>> resolve_language("FA")
        <Language.PERSIAN: 'fa'>
        >>> resolve_language("xx")
        <Language.ENGLISH: 'en'>
    """
    if isinstance(code, Language):
        return code
    try:
        return Language(str(code).strip().lower())
    except ValueError:
        return DEFAULT_LANGUAGE


def get_language_info(code: LanguageCode) -> LanguageProfile:
    """取得語言資訊；未知代碼回傳英文 profile"""
    return LANGUAGE_PROFILES[resolve_language(code)]


def get_supported_languages() -> List[Language]:
    """列出所有支援的語言"""
    return list(LANGUAGE_PROFILES)


def normalize_word(word: str, code: LanguageCode) -> str:
    """以指定語言的規則正規化"""
    return get_language_info(code).normalize(word)


def _in_ranges(cp: int, ranges) -> bool:
    return any(lo <= cp <= hi for lo, hi in ranges)


def _is_script_char(char: str, lang: Language) -> bool:
    if _in_ranges(ord(char), _SCRIPT_RANGES.get(lang, ())):
        return True
    return unicodedata.category(char).startswith("L")


def is_valid_word_for_language(word: str, code: LanguageCode) -> bool:
    """
    檢查字是否只包含該語言的合法字元

    規則:
    - 空字串一律不合法
    - 中日韓：每個字元須屬於該語言的文字系統（漢字、平假名、片假名、諺文）
      或任一 Unicode 字母類別
    - 其他語言：每個非空白字元都必須在字母表中

    範例:
        >>> is_valid_word_for_language("سلام", "fa")
        True
        >>> is_valid_word_for_language("سلام123", "fa")
        False
    """
    if not word:
        return False

    profile = get_language_info(code)

    if profile.script_validated:
        return all(_is_script_char(char, profile.code) for char in word)

    alphabet = profile.alphabet
    return all(char in alphabet or char.isspace() for char in word)
