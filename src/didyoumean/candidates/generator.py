"""
候選生成器（組合兩種策略）

- 編輯距離列舉（EditCandidateGenerator）
- 鍵盤相鄰鍵誤觸（KeyboardTypoGenerator）

候選本身不帶分數，評分在 SpellChecker 中進行。
"""

from typing import Dict, List

from didyoumean.core.suggestion import CandidateSource

from .edit_generator import EditCandidateGenerator
from .keyboard import KeyboardTypoGenerator


class CandidateGenerator:
    """
    候選生成器

    Args:
        alphabet: 插入與替換使用的字母表（依語言而定）

    範例:
        >>> gen = CandidateGenerator("abcdefghijklmnopqrstuvwxyz")
        >>> pool = gen.generate_all("helo", max_distance=1)
        >>> pool["hello"]
        <CandidateSource.EDIT_DISTANCE: 'edit_distance'>
    """

    def __init__(self, alphabet: str):
        self.alphabet = alphabet
        self._edits = EditCandidateGenerator(alphabet)
        self._typos = KeyboardTypoGenerator()

    def generate_candidates(self, word: str, max_distance: int) -> List[str]:
        """編輯距離 1..max_distance 的候選"""
        return list(self._edits.generate(word, max_distance))

    def generate_common_typos(self, word: str) -> List[str]:
        """鍵盤相鄰鍵誤觸候選"""
        return list(self._typos.generate(word))

    def generate_all(self, word: str, max_distance: int) -> Dict[str, CandidateSource]:
        """
        合併兩種策略的候選

        Returns:
            Dict[str, CandidateSource]: 候選 -> 來源；兩者重疊時記為編輯距離
        """
        pool: Dict[str, CandidateSource] = {}
        for candidate in self._typos.generate(word):
            pool[candidate] = CandidateSource.KEYBOARD_TYPO
        for candidate in self._edits.generate(word, max_distance):
            pool[candidate] = CandidateSource.EDIT_DISTANCE
        pool.pop(word, None)
        return pool


def is_valid_word(word: str) -> bool:
    """
    語言無關的字元檢查：非空且每個字元都是 Unicode 字母

    範例:
        >>> is_valid_word("hello")
        True
        >>> is_valid_word("hello1")
        False
    """
    if not word:
        return False
    return all(char.isalpha() for char in word)
