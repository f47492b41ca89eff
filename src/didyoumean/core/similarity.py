"""
字串相似度

以 Levenshtein 編輯距離（插入、刪除、替換，成本皆為 1）衡量兩字串差異。

長度單位：Unicode code point（Python str 的一個元素）。
例如 "سلام" 長度為 4，而非 UTF-8 的 8 bytes。
"""

import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """
    計算 Levenshtein 編輯距離

    Args:
        a: 字串一
        b: 字串二

    Returns:
        int: 最少編輯次數；任一為空字串時等於另一字串長度

    範例:
        >>> edit_distance("kitten", "sitting")
        3
    """
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    計算正規化相似度 (0.0-1.0)

    1.0 表示完全相同；否則為 1 - distance / max(len(a), len(b))。

    範例:
        >>> similarity("hello", "helo")
        0.8
    """
    if a == b:
        return 1.0

    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0

    score = 1.0 - edit_distance(a, b) / max_len
    return max(0.0, min(1.0, score))
