"""
語言路由模組

依字元的 Unicode 範圍判斷一個字屬於哪個語言，以便分派給對應的字典。
"""

from typing import Tuple

from didyoumean.languages import DEFAULT_LANGUAGE, Language

# 阿拉伯文字系統：Arabic, Supplement, Extended-A, Presentation Forms-A/B
ARABIC_SCRIPT_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x0600, 0x06FF),
    (0x0750, 0x077F),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
)
CYRILLIC_RANGES = ((0x0400, 0x04FF),)
CJK_UNIFIED_RANGES = ((0x4E00, 0x9FFF),)
HIRAGANA_RANGES = ((0x3040, 0x309F),)
HANGUL_SYLLABLE_RANGES = ((0xAC00, 0xD7AF),)

# 檢查順序會影響混合文字的結果，不可調換
DETECTION_ORDER: Tuple[Tuple[Language, Tuple[Tuple[int, int], ...]], ...] = (
    # 阿拉伯文字一律視為波斯文（阿拉伯文與波斯文無法僅憑字元區分）
    (Language.PERSIAN, ARABIC_SCRIPT_RANGES),
    (Language.RUSSIAN, CYRILLIC_RANGES),
    (Language.CHINESE, CJK_UNIFIED_RANGES),
    (Language.JAPANESE, HIRAGANA_RANGES),
    (Language.KOREAN, HANGUL_SYLLABLE_RANGES),
)


class LanguageRouter:
    """
    語言路由器

    策略:
    - 依 DETECTION_ORDER 逐一檢查，每一項都掃描整個字
    - 第一個有字元落在範圍內的語言即為結果
    - 都沒有命中（含空字串）時回傳英文

    注意：混合文字時以檢查順序優先，例如 "привет你好" 判為俄文，
    即使漢字出現在前面的字也一樣。
    """

    def detect_language(self, word: str) -> Language:
        """
        偵測一個字的語言

        Args:
            word: 輸入字

        Returns:
            Language: 偵測到的語言

        範例:
            >>> LanguageRouter().detect_language("привет")
            <Language.RUSSIAN: 'ru'>
        """
        if not word:
            return DEFAULT_LANGUAGE

        code_points = [ord(char) for char in word]
        for lang, ranges in DETECTION_ORDER:
            for cp in code_points:
                if any(lo <= cp <= hi for lo, hi in ranges):
                    return lang

        return DEFAULT_LANGUAGE


_default_router = LanguageRouter()


def detect_language(word: str) -> Language:
    """以預設路由器偵測語言"""
    return _default_router.detect_language(word)
