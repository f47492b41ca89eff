"""
didyoumean - 多語言拼字建議引擎 (Multi-Language Spelling Suggestions)

核心概念：
- 每個語言一組 (Bloom filter, 精確字典)；filter 負責快速排除，字典負責最終確認
- 未知字以編輯距離列舉與鍵盤相鄰鍵誤觸產生候選
- 候選只保留字典中的字，依 Levenshtein 相似度排序

官方入口（穩定 API）：
- `didyoumean.SpellChecker`
- 獨立工具：`edit_distance`, `similarity`, `detect_language`,
  `get_language_info`, `get_supported_languages`, `is_valid_word_for_language`
"""

# =============================================================================
# 拼字檢查器（官方入口）
# =============================================================================
from didyoumean.checker import LanguageDictionary, SpellChecker
from didyoumean.config import DEFAULT_CONFIG, CheckerConfig

# =============================================================================
# 核心資料結構與演算法
# =============================================================================
from didyoumean.core import (
    BloomFilter,
    CandidateSource,
    Suggestion,
    SuggestionEvent,
    convert_to_word_list,
    edit_distance,
    similarity,
)
from didyoumean.candidates import CandidateGenerator, is_valid_word

# =============================================================================
# 語言
# =============================================================================
from didyoumean.languages import (
    Direction,
    Language,
    LanguageProfile,
    get_language_info,
    get_supported_languages,
    is_valid_word_for_language,
    normalize_word,
)
from didyoumean.router import LanguageRouter, detect_language
from didyoumean.dictionary import get_words_for_language

# =============================================================================
# 日誌工具
# =============================================================================
from didyoumean.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Checker
    "SpellChecker",
    "LanguageDictionary",
    "CheckerConfig",
    "DEFAULT_CONFIG",
    # Core
    "BloomFilter",
    "Suggestion",
    "SuggestionEvent",
    "CandidateSource",
    "CandidateGenerator",
    "convert_to_word_list",
    "edit_distance",
    "similarity",
    "is_valid_word",
    # Languages
    "Language",
    "LanguageProfile",
    "Direction",
    "LanguageRouter",
    "detect_language",
    "get_language_info",
    "get_supported_languages",
    "is_valid_word_for_language",
    "normalize_word",
    "get_words_for_language",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
