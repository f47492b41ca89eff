"""
語言模組

每個支援的語言都有一個不可變的 LanguageProfile：
代碼、名稱、書寫方向、字母表與正規化規則。

主要介面:
- Language: 語言代碼列舉
- LanguageProfile: 語言資訊
- get_language_info / get_supported_languages / resolve_language
- normalize_word / is_valid_word_for_language
"""

from .config import DEFAULT_LANGUAGE, LANGUAGE_PROFILES, Direction, Language, LanguageProfile
from .normalization import NORMALIZERS, NormalizationRule
from .registry import (
    LanguageCode,
    get_language_info,
    get_supported_languages,
    is_valid_word_for_language,
    normalize_word,
    resolve_language,
)

__all__ = [
    "Language",
    "LanguageCode",
    "LanguageProfile",
    "Direction",
    "NormalizationRule",
    "NORMALIZERS",
    "LANGUAGE_PROFILES",
    "DEFAULT_LANGUAGE",
    "get_language_info",
    "get_supported_languages",
    "resolve_language",
    "normalize_word",
    "is_valid_word_for_language",
]
