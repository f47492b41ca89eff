"""
拼字檢查器 (SpellChecker)

這是拼字建議系統的主要入口點。
負責持有每個語言的 (BloomFilter, 精確字典)，並串接正規化、驗證、
候選生成與相似度排序。

流程（每次查詢固定且確定）:
1. 以語言 profile 正規化輸入
2. 驗證字元；不合法 -> 不正確 / 無建議
3. filter 與精確字典都命中才算正確（消除 filter 的 false positive）
4. 正確 -> 建議即為輸入本身 (similarity 1.0)
5. 不正確 -> 編輯距離 + 鍵盤誤觸候選 -> 只保留字典中的字 -> 相似度排序 -> 截斷

使用方式:
    from didyoumean import SpellChecker

    checker = SpellChecker(10000, 7)
    checker.add_words(["hello", "help", "world"])
    checker.get_suggestions("helo")
    # [Suggestion(word='hello', similarity=0.8, ...), ...]

並行：內部沒有鎖。同一語言的寫入 (add_words*) 與讀取必須由宿主序列化；
字典載入完成後的純讀取可以並行。
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from didyoumean.candidates import CandidateGenerator
from didyoumean.config import CheckerConfig
from didyoumean.core.events import SuggestionEvent, SuggestionEventHandler
from didyoumean.core.similarity import similarity
from didyoumean.core.suggestion import CandidateSource, Suggestion
from didyoumean.dictionary import get_words_for_language
from didyoumean.languages import (
    DEFAULT_LANGUAGE,
    Language,
    LanguageCode,
    get_language_info,
    is_valid_word_for_language,
    resolve_language,
)
from didyoumean.router import LanguageRouter
from didyoumean.utils.logger import TimingContext, get_logger, setup_logger

from .language_store import LanguageDictionary


class SpellChecker:
    """
    多語言拼字檢查器

    職責:
    - 依語言延遲建立 (BloomFilter, 精確字典)
    - 語言無關 API 使用「目前語言」；_for_language API 使用指定語言且不影響目前語言
    - 所有查詢失敗都降級為中性結果，並送出事件

    Args:
        dictionary_size: 每個語言 bloom filter 的位元數（預設取自 config）
        hash_count: bloom filter 探測次數（預設取自 config）
        config: CheckerConfig
        verbose: 開啟 DEBUG 日誌
        on_timing: 計時回呼 (operation, seconds)
        on_event: 事件回呼，接收 SuggestionEvent
        router: 語言路由器（auto_detect_and_suggest 使用）
    """

    _engine_name = "checker"

    def __init__(
        self,
        dictionary_size: Optional[int] = None,
        hash_count: Optional[int] = None,
        *,
        config: Optional[CheckerConfig] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[SuggestionEventHandler] = None,
        router: Optional[LanguageRouter] = None,
    ):
        self.config = config or CheckerConfig()
        self._init_logger(
            verbose=verbose or self.config.verbose,
            on_timing=on_timing or self.config.on_timing,
        )

        self.dictionary_size = self.config.dictionary_size if dictionary_size is None else dictionary_size
        self.hash_count = self.config.hash_count if hash_count is None else hash_count
        self.router = router or LanguageRouter()
        self._on_event = on_event

        self._stores: Dict[Language, LanguageDictionary] = {}
        self._generators: Dict[Language, CandidateGenerator] = {}
        self._current_language: Language = DEFAULT_LANGUAGE

        self._logger.debug(
            f"SpellChecker initialized (size={self.dictionary_size}, hash_count={self.hash_count})"
        )

    # ========== 日誌 / 事件 ==========

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(self._engine_name)

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def _emit(self, event: SuggestionEvent) -> None:
        try:
            if self._on_event is not None:
                self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")

    # ========== 語言狀態 ==========

    def set_language(self, lang: LanguageCode) -> None:
        """設定目前語言（未知代碼回退為英文）"""
        self._current_language = resolve_language(lang)
        self._logger.debug(f"Active language set to {self._current_language.value}")

    def get_current_language(self) -> Language:
        return self._current_language

    @property
    def current_language(self) -> Language:
        return self._current_language

    @property
    def languages(self) -> List[Language]:
        """已建立字典的語言"""
        return list(self._stores)

    def word_count(self, lang: LanguageCode) -> int:
        """語言精確字典的字數；未初始化為 0"""
        store = self._stores.get(resolve_language(lang))
        return len(store) if store is not None else 0

    def _get_store(self, lang: Language) -> Optional[LanguageDictionary]:
        store = self._stores.get(lang)
        if store is None:
            self._emit({"type": "uninitialized_language", "language": lang.value})
        return store

    def _get_generator(self, lang: Language) -> CandidateGenerator:
        generator = self._generators.get(lang)
        if generator is None:
            generator = CandidateGenerator(get_language_info(lang).alphabet)
            self._generators[lang] = generator
        return generator

    # ========== 字典建立 ==========

    def add_words(self, words: Iterable[str]) -> int:
        """加入字到目前語言"""
        return self.add_words_for_language(words, self._current_language)

    def add_words_for_language(self, words: Iterable[str], lang: LanguageCode) -> int:
        """
        加入字到指定語言

        每個字先正規化再驗證，不合法的字會被略過。

        Returns:
            int: 實際新增的字數
        """
        language = resolve_language(lang)
        profile = get_language_info(language)

        with self._log_timing(f"SpellChecker.add_words({language.value})"):
            store = self._stores.get(language)
            if store is None:
                store = LanguageDictionary(language, self.dictionary_size, self.hash_count)
                self._stores[language] = store
                self._logger.debug(f"Created dictionary for {language.value}")

            added = 0
            skipped = 0
            for word in words:
                normalized = profile.normalize(word)
                if not is_valid_word_for_language(normalized, language):
                    skipped += 1
                    continue
                if store.add(normalized):
                    added += 1

        if skipped:
            self._logger.debug(f"Skipped {skipped} invalid words for {language.value}")
        self._emit({"type": "words_added", "language": language.value, "count": added, "skipped": skipped})
        return added

    def load_default_dictionary(self, lang: LanguageCode) -> int:
        """載入內建字表"""
        language = resolve_language(lang)
        added = self.add_words_for_language(get_words_for_language(language), language)
        self._logger.info(f"Loaded default dictionary for {language.value}: {added} words")
        return added

    # ========== 正確性 ==========

    def is_correct(self, word: str) -> bool:
        return self.is_correct_for_language(word, self._current_language)

    def is_correct_for_language(self, word: str, lang: LanguageCode) -> bool:
        """filter 與精確字典都命中才回傳 True"""
        language = resolve_language(lang)
        store = self._get_store(language)
        if store is None:
            return False

        normalized = get_language_info(language).normalize(word)
        if not is_valid_word_for_language(normalized, language):
            self._emit({"type": "invalid_word", "language": language.value, "word": word})
            return False

        return store.contains(normalized)

    # ========== 建議 ==========

    def get_suggestions(
        self,
        word: str,
        max_suggestions: Optional[int] = None,
        max_edit_distance: Optional[int] = None,
    ) -> List[Suggestion]:
        return self.get_suggestions_for_language(
            word, self._current_language, max_suggestions, max_edit_distance
        )

    def get_suggestions_for_language(
        self,
        word: str,
        lang: LanguageCode,
        max_suggestions: Optional[int] = None,
        max_edit_distance: Optional[int] = None,
    ) -> List[Suggestion]:
        """
        取得指定語言的拼字建議

        Args:
            word: 輸入字
            lang: 語言代碼
            max_suggestions: 最多回傳幾個（預設 config.default_max_suggestions）
            max_edit_distance: 候選最大編輯距離（預設 config.default_max_edit_distance，
                               超過 config.max_edit_distance 會被截到上限）

        Returns:
            List[Suggestion]: 依相似度遞減排序；未初始化語言或不合法字回傳空列表
        """
        if max_suggestions is None:
            max_suggestions = self.config.default_max_suggestions
        if max_edit_distance is None:
            max_edit_distance = self.config.default_max_edit_distance

        language = resolve_language(lang)
        store = self._get_store(language)
        if store is None or max_suggestions <= 0:
            return []

        normalized = get_language_info(language).normalize(word)
        if not is_valid_word_for_language(normalized, language):
            self._emit({"type": "invalid_word", "language": language.value, "word": word})
            return []

        if store.contains(normalized):
            return [Suggestion(normalized, 1.0, CandidateSource.EXACT)]

        distance = self._clamp_distance(max_edit_distance, language)

        with self._log_timing(f"SpellChecker.get_suggestions({normalized})"):
            pool = self._get_generator(language).generate_all(normalized, distance)

            suggestions = [
                Suggestion(candidate, similarity(normalized, candidate), source)
                for candidate, source in pool.items()
                if store.contains(candidate)
            ]
            suggestions.sort(key=lambda s: (-s.similarity, s.word))

        self._logger.debug(
            f"[{language.value}] '{normalized}': {len(pool)} candidates, {len(suggestions)} in dictionary"
        )
        return suggestions[:max_suggestions]

    def _clamp_distance(self, requested: int, language: Language) -> int:
        cap = self.config.max_edit_distance
        if requested > cap:
            self._logger.warning(f"max_edit_distance {requested} exceeds cap {cap}, using {cap}")
            self._emit(
                {
                    "type": "distance_clamped",
                    "language": language.value,
                    "requested": requested,
                    "applied": cap,
                }
            )
            return cap
        return max(0, requested)

    def suggest(self, word: str) -> str:
        return self.suggest_for_language(word, self._current_language)

    def suggest_for_language(self, word: str, lang: LanguageCode) -> str:
        """
        最佳單一建議

        沒有任何建議時回傳正規化後的輸入（代表「找不到更好的字」）。
        """
        suggestions = self.get_suggestions_for_language(word, lang, 1, 2)
        if suggestions:
            return suggestions[0].word
        return get_language_info(lang).normalize(word)

    def get_suggestions_with_threshold(
        self,
        word: str,
        threshold: float,
        max_suggestions: int = 5,
    ) -> List[Suggestion]:
        return self.get_suggestions_with_threshold_for_language(
            word, self._current_language, threshold, max_suggestions
        )

    def get_suggestions_with_threshold_for_language(
        self,
        word: str,
        lang: LanguageCode,
        threshold: float,
        max_suggestions: int = 5,
    ) -> List[Suggestion]:
        """只保留相似度 >= threshold 的建議（先多取一倍再過濾）"""
        candidates = self.get_suggestions_for_language(word, lang, max_suggestions * 2, 2)
        filtered = [s for s in candidates if s.similarity >= threshold]
        return filtered[:max_suggestions]

    def check_and_suggest(self, word: str) -> Tuple[bool, List[Suggestion]]:
        return self.check_and_suggest_for_language(word, self._current_language)

    def check_and_suggest_for_language(self, word: str, lang: LanguageCode) -> Tuple[bool, List[Suggestion]]:
        """
        檢查並建議

        Returns:
            (True, []) 若字正確；否則 (False, 最多 5 個距離 2 以內的建議)
        """
        if self.is_correct_for_language(word, lang):
            return True, []
        return False, self.get_suggestions_for_language(word, lang, 5, 2)

    def auto_detect_and_suggest(self, word: str) -> Tuple[Language, bool, List[Suggestion]]:
        """
        自動偵測語言後檢查並建議（不讀取也不修改目前語言）

        Returns:
            (偵測到的語言, 是否正確, 建議列表)
        """
        detected = self.router.detect_language(word)
        is_correct, suggestions = self.check_and_suggest_for_language(word, detected)
        return detected, is_correct, suggestions

    def __repr__(self) -> str:
        langs = ", ".join(f"{lang.value}={len(store)}" for lang, store in self._stores.items())
        return f"SpellChecker(current={self._current_language.value}, dictionaries=[{langs}])"
