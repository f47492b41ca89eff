"""
內建預設字表

每個語言一份小型常用字表，作為 SpellChecker.load_default_dictionary 的資料來源。
正式環境應由宿主程式提供完整字典（add_words_for_language）。
"""

from typing import Dict, List, Tuple

from didyoumean.languages import DEFAULT_LANGUAGE, Language, LanguageCode, resolve_language

_ENGLISH = (
    "the be to of and a in that have i it for not on with he as you do at "
    "this but his by from they she or an will my one all would there their what "
    "so up out if about who get which go me when make can like time no just him "
    "know take people into year your good some could them see other than then now "
    "look only come its over think also back after use two how our work first well "
    "way even new want because any these give day most us is was are been has had "
    "were said each many her more call find long down did made may part "
    "hello world test help hell word golang programming computer science algorithm "
    "data structure bloom filter spell checker dictionary suggestion similarity "
    "distance edit levenshtein candidate generation typo keyboard language python "
    "example sample correct error message number letter right wrong simple"
)

_PERSIAN = (
    "سلام دنیا برنامه نویسی کامپیوتر علم الگوریتم داده ساختار فیلتر املا بررسی "
    "فرهنگ لغت پیشنهاد شباهت فاصله ویرایش لوونشتاین نامزد تولید غلط کیبورد کمک "
    "کار کلمه کد تست مثال نمایش خانه کتاب زبان فارسی مدرسه دوست"
)

_ARABIC = (
    "مرحبا عالم كتاب درس بيت قلم نور عربي برنامج حاسوب علم قمر"
)

_FRENCH = (
    "bonjour monde maison livre école langue français ordinateur programme "
    "été être très merci voiture garçon"
)

_SPANISH = (
    "hola mundo casa libro escuela idioma español computadora programa "
    "niño año gracias mañana"
)

_GERMAN = (
    "hallo welt haus buch schule sprache deutsch computer programm "
    "straße mädchen über schön"
)

_ITALIAN = (
    "ciao mondo casa libro scuola lingua italiano computer programma "
    "città perché grazie"
)

_RUSSIAN = (
    "привет мир дом книга школа язык русский компьютер программа "
    "слово ёлка спасибо"
)

_CHINESE = "你好 世界 電腦 程式 語言 中文 學校 書本 朋友"

_JAPANESE = "こんにちは せかい ありがとう にほんご がっこう ほん ともだち"

_KOREAN = "안녕하세요 세계 컴퓨터 한국어 학교 책 친구"

DEFAULT_WORD_LISTS: Dict[Language, Tuple[str, ...]] = {
    Language.ENGLISH: tuple(dict.fromkeys(_ENGLISH.split())),
    Language.PERSIAN: tuple(dict.fromkeys(_PERSIAN.split())),
    Language.ARABIC: tuple(_ARABIC.split()),
    Language.FRENCH: tuple(_FRENCH.split()),
    Language.SPANISH: tuple(_SPANISH.split()),
    Language.GERMAN: tuple(_GERMAN.split()),
    Language.ITALIAN: tuple(_ITALIAN.split()),
    Language.RUSSIAN: tuple(_RUSSIAN.split()),
    Language.CHINESE: tuple(_CHINESE.split()),
    Language.JAPANESE: tuple(_JAPANESE.split()),
    Language.KOREAN: tuple(_KOREAN.split()),
}


def get_words_for_language(code: LanguageCode) -> List[str]:
    """
    取得語言的預設字表（新的 list，可自由修改）

    未知語言代碼回傳預設語言（英文）的字表。
    """
    lang = resolve_language(code)
    return list(DEFAULT_WORD_LISTS.get(lang, DEFAULT_WORD_LISTS[DEFAULT_LANGUAGE]))
