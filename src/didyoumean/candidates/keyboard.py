"""
鍵盤相鄰鍵誤觸候選

只模擬 QWERTY 配置的拉丁字母；其他文字系統不會產生任何候選。
"""

from typing import Dict, Mapping, Optional, Set, Tuple

from didyoumean.core.protocols.candidates import CandidateGeneratorProtocol

QWERTY_ADJACENCY: Dict[str, Tuple[str, ...]] = {
    "q": ("w", "a"),
    "w": ("q", "e", "a", "s"),
    "e": ("w", "r", "s", "d"),
    "r": ("e", "t", "d", "f"),
    "t": ("r", "y", "f", "g"),
    "y": ("t", "u", "g", "h"),
    "u": ("y", "i", "h", "j"),
    "i": ("u", "o", "j", "k"),
    "o": ("i", "p", "k", "l"),
    "p": ("o", "l"),
    "a": ("q", "w", "s", "z"),
    "s": ("a", "w", "e", "d", "x", "z"),
    "d": ("s", "e", "r", "f", "c", "x"),
    "f": ("d", "r", "t", "g", "v", "c"),
    "g": ("f", "t", "y", "h", "b", "v"),
    "h": ("g", "y", "u", "j", "n", "b"),
    "j": ("h", "u", "i", "k", "m", "n"),
    "k": ("j", "i", "o", "l", "m"),
    "l": ("k", "o", "p"),
    "z": ("a", "s", "x"),
    "x": ("z", "s", "d", "c"),
    "c": ("x", "d", "f", "v"),
    "v": ("c", "f", "g", "b"),
    "b": ("v", "g", "h", "n"),
    "n": ("b", "h", "j", "m"),
    "m": ("n", "j", "k"),
}


class KeyboardTypoGenerator(CandidateGeneratorProtocol):
    """
    相鄰鍵替換候選生成器

    每個位置若字元有相鄰鍵，就把它替換成每個相鄰鍵各產生一個候選。
    只做單一替換，不會疊加（距離固定為 1）。

    範例:
        >>> sorted(KeyboardTypoGenerator().generate("q"))
        ['a', 'w']
    """

    def __init__(self, layout: Optional[Mapping[str, Tuple[str, ...]]] = None):
        self.layout = layout if layout is not None else QWERTY_ADJACENCY

    def generate(self, word: str, max_distance: int = 1) -> Set[str]:
        """max_distance 僅為符合介面，誤觸候選固定為一次替換"""
        candidates: Set[str] = set()
        for i, char in enumerate(word):
            for neighbor in self.layout.get(char, ()):
                candidates.add(word[:i] + neighbor + word[i + 1:])
        return candidates
