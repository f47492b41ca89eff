"""
語言正規化規則

正規化規則是封閉集合：每個語言在 LanguageProfile 中指定一個 NormalizationRule，
由 NORMALIZERS 分派表對應到實際函式。不提供外掛式註冊。
"""

from enum import Enum
from typing import Callable, Dict

_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


class NormalizationRule(Enum):
    """正規化規則類型"""
    LOWERCASE = "lowercase"  # 去除前後空白 + 小寫（拉丁、西里爾字母）
    PERSIAN = "persian"      # 去除前後空白 + 阿拉伯數字轉波斯數字
    TRIM = "trim"            # 只去除前後空白（阿拉伯文、中日韓）


def normalize_lowercase(word: str) -> str:
    return word.strip().lower()


def normalize_persian(word: str) -> str:
    """
    波斯文正規化

    範例:
        >>> normalize_persian("  سلام  ")
        'سلام'
        >>> normalize_persian("2024")
        '۲۰۲۴'
    """
    return word.strip().translate(_PERSIAN_DIGITS)


def normalize_trim(word: str) -> str:
    return word.strip()


NORMALIZERS: Dict[NormalizationRule, Callable[[str], str]] = {
    NormalizationRule.LOWERCASE: normalize_lowercase,
    NormalizationRule.PERSIAN: normalize_persian,
    NormalizationRule.TRIM: normalize_trim,
}


def apply_rule(rule: NormalizationRule, word: str) -> str:
    return NORMALIZERS[rule](word)
