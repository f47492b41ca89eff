"""
候選生成模組

主要類別:
- CandidateGenerator: 組合編輯距離與鍵盤誤觸兩種策略
- EditCandidateGenerator: 編輯距離列舉
- KeyboardTypoGenerator: QWERTY 相鄰鍵誤觸
"""

from .edit_generator import EditCandidateGenerator
from .generator import CandidateGenerator, is_valid_word
from .keyboard import QWERTY_ADJACENCY, KeyboardTypoGenerator

__all__ = [
    "CandidateGenerator",
    "EditCandidateGenerator",
    "KeyboardTypoGenerator",
    "QWERTY_ADJACENCY",
    "is_valid_word",
]
