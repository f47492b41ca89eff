"""
Candidate Generator Protocol

定義候選生成器的最小介面（word -> candidates）。
"""

from typing import Protocol, Set, runtime_checkable


@runtime_checkable
class CandidateGeneratorProtocol(Protocol):
    def generate(self, word: str, max_distance: int = 1) -> Set[str]:
        """為輸入字生成候選字集合"""
        ...
