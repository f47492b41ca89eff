"""
語言配置模組

定義支援的語言代碼與每個語言不可變的 LanguageProfile。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .normalization import NormalizationRule, apply_rule


class Language(str, Enum):
    """支援的語言代碼 (ISO 639-1)"""
    ENGLISH = "en"
    PERSIAN = "fa"
    ARABIC = "ar"
    FRENCH = "fr"
    SPANISH = "es"
    GERMAN = "de"
    ITALIAN = "it"
    RUSSIAN = "ru"
    CHINESE = "zh"
    JAPANESE = "ja"
    KOREAN = "ko"

    def __str__(self) -> str:
        return self.value


class Direction(str, Enum):
    """書寫方向"""
    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class LanguageProfile:
    """
    語言資訊

    Attributes:
        code: 語言代碼
        name: 顯示名稱
        direction: 書寫方向 (ltr / rtl)
        alphabet: 字母表。用於字元驗證與候選生成（插入、替換）
        normalization: 正規化規則
        script_validated: True 時改以 Unicode 文字系統驗證字元（中日韓），
                          alphabet 僅用於候選生成
    """
    code: Language
    name: str
    direction: Direction
    alphabet: str
    normalization: NormalizationRule
    script_validated: bool = False

    @property
    def is_rtl(self) -> bool:
        return self.direction == Direction.RTL

    def normalize(self, word: str) -> str:
        """依此語言的規則正規化"""
        return apply_rule(self.normalization, word)


_LATIN = "abcdefghijklmnopqrstuvwxyz"

# =============================================================================
# 語言表（順序即 get_supported_languages 的順序）
# =============================================================================
LANGUAGE_PROFILES: Dict[Language, LanguageProfile] = {
    Language.ENGLISH: LanguageProfile(
        code=Language.ENGLISH,
        name="English",
        direction=Direction.LTR,
        alphabet=_LATIN,
        normalization=NormalizationRule.LOWERCASE,
    ),
    Language.PERSIAN: LanguageProfile(
        code=Language.PERSIAN,
        name="Persian",
        direction=Direction.RTL,
        alphabet="ابپتثجچحخدذرزژسشصضطظعغفقکگلمنوهی",
        normalization=NormalizationRule.PERSIAN,
    ),
    Language.ARABIC: LanguageProfile(
        code=Language.ARABIC,
        name="Arabic",
        direction=Direction.RTL,
        alphabet="ابتثجحخدذرزسشصضطظعغفقكلمنهوي",
        normalization=NormalizationRule.TRIM,
    ),
    Language.FRENCH: LanguageProfile(
        code=Language.FRENCH,
        name="French",
        direction=Direction.LTR,
        alphabet=_LATIN + "àâäéèêëïîôöùûüÿç",
        normalization=NormalizationRule.LOWERCASE,
    ),
    Language.SPANISH: LanguageProfile(
        code=Language.SPANISH,
        name="Spanish",
        direction=Direction.LTR,
        alphabet=_LATIN + "ñáéíóúü",
        normalization=NormalizationRule.LOWERCASE,
    ),
    Language.GERMAN: LanguageProfile(
        code=Language.GERMAN,
        name="German",
        direction=Direction.LTR,
        alphabet=_LATIN + "äöüß",
        normalization=NormalizationRule.LOWERCASE,
    ),
    Language.ITALIAN: LanguageProfile(
        code=Language.ITALIAN,
        name="Italian",
        direction=Direction.LTR,
        alphabet=_LATIN + "àèéìíîòóùú",
        normalization=NormalizationRule.LOWERCASE,
    ),
    Language.RUSSIAN: LanguageProfile(
        code=Language.RUSSIAN,
        name="Russian",
        direction=Direction.LTR,
        alphabet="абвгдеёжзийклмнопрстуфхцчшщъыьэюя",
        normalization=NormalizationRule.LOWERCASE,
    ),
    Language.CHINESE: LanguageProfile(
        code=Language.CHINESE,
        name="Chinese",
        direction=Direction.LTR,
        alphabet="",
        normalization=NormalizationRule.TRIM,
        script_validated=True,
    ),
    Language.JAPANESE: LanguageProfile(
        code=Language.JAPANESE,
        name="Japanese",
        direction=Direction.LTR,
        alphabet="あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみむめもやゆよらりるれろわをん",
        normalization=NormalizationRule.TRIM,
        script_validated=True,
    ),
    Language.KOREAN: LanguageProfile(
        code=Language.KOREAN,
        name="Korean",
        direction=Direction.LTR,
        alphabet="ㄱㄴㄷㄹㅁㅂㅅㅇㅈㅊㅋㅌㅍㅎㅏㅑㅓㅕㅗㅛㅜㅠㅡㅣ",
        normalization=NormalizationRule.TRIM,
        script_validated=True,
    ),
}

DEFAULT_LANGUAGE = Language.ENGLISH
