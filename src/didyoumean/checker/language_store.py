"""
單一語言的字典儲存

每個語言一組 (BloomFilter, 精確字典)：
- BloomFilter 先做便宜的排除
- 精確字典（set）才是唯一的正確來源，用來消除 false positive

兩者只會增長，不支援刪除。
"""

from typing import FrozenSet, Iterable

from didyoumean.core.bloom_filter import BloomFilter
from didyoumean.languages import Language


class LanguageDictionary:
    """
    語言字典（filter + 精確字典）

    不變量：精確字典中的每個字都已加入 filter。

    範例:
        >>> store = LanguageDictionary(Language.ENGLISH, 1000, 5)
        >>> store.add("hello")
        True
        >>> store.contains("hello")
        True
    """

    def __init__(self, language: Language, size: int, hash_count: int):
        self.language = language
        self.filter = BloomFilter(size, hash_count)
        self._words: set[str] = set()

    def add(self, normalized: str) -> bool:
        """
        加入已正規化且驗證過的字

        Returns:
            bool: 是否為新字
        """
        self.filter.add(normalized)
        if normalized in self._words:
            return False
        self._words.add(normalized)
        return True

    def add_many(self, normalized_words: Iterable[str]) -> int:
        return sum(1 for word in normalized_words if self.add(word))

    def might_contain(self, word: str) -> bool:
        """只查 filter（可能有 false positive）"""
        return self.filter.contains(word)

    def contains(self, word: str) -> bool:
        """filter 與精確字典都命中才算存在"""
        return self.filter.contains(word) and word in self._words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> FrozenSet[str]:
        return frozenset(self._words)

    def __repr__(self) -> str:
        return f"LanguageDictionary(language={self.language.value!r}, words={len(self._words)}, filter={self.filter!r})"
