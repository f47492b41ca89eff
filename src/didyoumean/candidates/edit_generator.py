"""
編輯距離候選生成器

列舉與輸入字相距 1..max_distance 次編輯的所有字串。
編輯操作：刪除、插入、替換、相鄰字元交換。

複雜度：每一層約 O(len(alphabet) * len(word)) 個候選，且逐層相乘。
max_distance 必須是由呼叫端限制的小數字（建議 1-3）。
"""

from typing import Set

from didyoumean.core.protocols.candidates import CandidateGeneratorProtocol


class EditCandidateGenerator(CandidateGeneratorProtocol):
    """
    編輯距離候選生成器

    字母表是建構參數，不同語言可以使用各自的字母表。
    沒有字母表時（例如中文）只會產生刪除與交換候選。

    範例:
        >>> gen = EditCandidateGenerator("abcdefghijklmnopqrstuvwxyz")
        >>> "hello" in gen.generate("helo", max_distance=1)
        True
    """

    def __init__(self, alphabet: str):
        # 去重但保留順序
        self.alphabet = "".join(dict.fromkeys(alphabet))

    def edits1(self, word: str) -> Set[str]:
        """與 word 相距一次編輯的所有字串"""
        letters = self.alphabet
        splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]

        deletes = [left + right[1:] for left, right in splits if right]
        inserts = [left + c + right for left, right in splits for c in letters]
        replaces = [
            left + c + right[1:]
            for left, right in splits
            if right
            for c in letters
            if c != right[0]
        ]
        transposes = [
            left + right[1] + right[0] + right[2:]
            for left, right in splits
            if len(right) > 1
        ]
        return set(deletes + inserts + replaces + transposes)

    def generate(self, word: str, max_distance: int = 1) -> Set[str]:
        """
        逐層（廣度優先）展開候選

        第 d 層為第 d-1 層「新出現」字串的一次編輯結果；
        之前已展開過的字串不再重複展開，最終聯集與逐一遞迴展開相同。

        Args:
            word: 已正規化的輸入字
            max_distance: 最大編輯距離；<= 0 時回傳空集合

        Returns:
            Set[str]: 候選字集合（不含輸入字本身）
        """
        if max_distance <= 0:
            return set()

        seen: Set[str] = {word}
        frontier: Set[str] = {word}

        for _ in range(max_distance):
            next_frontier: Set[str] = set()
            for current in frontier:
                next_frontier.update(self.edits1(current))
            next_frontier -= seen
            if not next_frontier:
                break
            seen |= next_frontier
            frontier = next_frontier

        seen.discard(word)
        return seen
