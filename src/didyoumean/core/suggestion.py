"""
建議結果資料結構

定義拼字建議的統一格式與候選來源類型。
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class CandidateSource(Enum):
    """候選來源類型"""
    EXACT = "exact"                  # 輸入本身即為正確字
    EDIT_DISTANCE = "edit_distance"  # 編輯距離列舉
    KEYBOARD_TYPO = "keyboard_typo"  # 鍵盤相鄰鍵誤觸


@dataclass(frozen=True)
class Suggestion:
    """
    拼字建議（統一格式）

    Attributes:
        word: 建議字（已正規化，且必定存在於精確字典）
        similarity: 與正規化輸入的相似度 (0.0-1.0)；1.0 代表完全相同
        source: 候選來源

    範例：
        >>> s = Suggestion("hello", 0.8, CandidateSource.EDIT_DISTANCE)
        >>> print(f"{s.word} ({s.similarity:.2f})")
        hello (0.80)
    """
    word: str
    similarity: float
    source: CandidateSource = CandidateSource.EDIT_DISTANCE

    def __post_init__(self):
        """驗證數據有效性"""
        if not 0.0 <= self.similarity <= 1.0:
            raise ValueError(f"Similarity must be between 0.0 and 1.0, got {self.similarity}")
        if not self.word:
            raise ValueError("Word cannot be empty")


def convert_to_word_list(suggestions: List[Suggestion]) -> List[str]:
    """
    將 Suggestion 列表轉換為簡單的字串列表

    範例：
        >>> convert_to_word_list([Suggestion("hello", 0.8), Suggestion("help", 0.75)])
        ['hello', 'help']
    """
    return [s.word for s in suggestions]
