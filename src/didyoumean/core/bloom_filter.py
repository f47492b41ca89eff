"""
Bloom Filter（機率式成員集合）

特性：
- 只會設定位元，不會清除（不支援刪除）
- 保證沒有 false negative：加入過的字一定回報存在
- 可能有 false positive，下游必須再以精確字典確認

雜湊策略：
    以 blake2b 對 UTF-8 字串取 128-bit digest，拆成 h1 / h2 兩個 64-bit 值，
    第 i 個探測位置為 (h1 + i * h2) mod size（double hashing）。
    h2 強制為奇數，避免所有探測落在同一位置。
"""

import hashlib
import math
from typing import Iterable

_DIGEST_KEY = b"didyoumean.bloom"


class BloomFilter:
    """
    固定大小的 Bloom Filter

    範例:
        >>> bf = BloomFilter(1000, 5)
        >>> bf.add("hello")
        >>> "hello" in bf
        True
    """

    def __init__(self, size: int, hash_count: int):
        """
        Args:
            size: 位元陣列大小；<= 0 時退化為「全部可能存在」
            hash_count: 探測次數；<= 0 時 contains 恆為 True
        """
        self._size = max(0, int(size))
        self._hash_count = max(0, int(hash_count))
        self._bits = bytearray((self._size + 7) // 8)

    @property
    def size(self) -> int:
        return self._size

    @property
    def hash_count(self) -> int:
        return self._hash_count

    @property
    def bits_set(self) -> int:
        """目前被設定的位元數"""
        return sum(bin(byte).count("1") for byte in self._bits)

    def _positions(self, word: str):
        digest = hashlib.blake2b(word.encode("utf-8"), digest_size=16, key=_DIGEST_KEY).digest()
        h1 = int.from_bytes(digest[:8], "little")
        h2 = int.from_bytes(digest[8:], "little") | 1
        for i in range(self._hash_count):
            yield (h1 + i * h2) % self._size

    def add(self, word: str) -> None:
        """加入一個字（設定 hash_count 個位元）"""
        if self._size == 0:
            return
        for pos in self._positions(word):
            self._bits[pos >> 3] |= 1 << (pos & 7)

    def add_words(self, words: Iterable[str]) -> None:
        """批次加入"""
        for word in words:
            self.add(word)

    def contains(self, word: str) -> bool:
        """
        檢查字是否「可能」存在

        Returns:
            bool: False 表示一定不存在；True 表示可能存在
        """
        if self._size == 0:
            return True
        for pos in self._positions(word):
            if not self._bits[pos >> 3] & (1 << (pos & 7)):
                return False
        return True

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def estimated_false_positive_rate(self, item_count: int) -> float:
        """
        理論 false positive 機率 (1 - e^(-k*n/m))^k

        Args:
            item_count: 已加入的項目數
        """
        if self._size == 0 or self._hash_count == 0:
            return 1.0
        if item_count <= 0:
            return 0.0
        exponent = -self._hash_count * item_count / self._size
        return (1.0 - math.exp(exponent)) ** self._hash_count

    def __repr__(self) -> str:
        return f"BloomFilter(size={self._size}, hash_count={self._hash_count})"
