"""
Bloom filter 測試

驗證：
1. 沒有 false negative（大量隨機字）
2. false positive 率在合理範圍
3. 退化參數不會拋出例外
"""

import random
import string

import pytest

from didyoumean import BloomFilter


def _random_words(rng, count, length=10):
    return ["".join(rng.choice(string.ascii_lowercase) for _ in range(length)) for _ in range(count)]


class TestBloomFilter:
    """測試基本功能"""

    def test_added_words_are_found(self):
        bf = BloomFilter(1000, 5)
        words = ["hello", "world", "test", "go"]
        bf.add_words(words)

        for word in words:
            assert bf.contains(word)
            assert word in bf

    def test_empty_filter_contains_nothing(self):
        bf = BloomFilter(1000, 5)
        assert not bf.contains("hello")
        assert bf.bits_set == 0

    def test_add_sets_at_most_hash_count_bits(self):
        bf = BloomFilter(10000, 7)
        bf.add("hello")
        assert 0 < bf.bits_set <= 7

    def test_unicode_words(self):
        bf = BloomFilter(1000, 5)
        words = ["سلام", "привет", "你好", "こんにちは", "안녕"]
        bf.add_words(words)
        assert all(w in bf for w in words)

    def test_properties(self):
        bf = BloomFilter(128, 3)
        assert bf.size == 128
        assert bf.hash_count == 3
        assert "BloomFilter" in repr(bf)


class TestNoFalseNegatives:
    """隨機大量字的 no-false-negative 性質"""

    @pytest.mark.parametrize("size, hash_count", [(100, 3), (10000, 7), (50000, 5), (7, 11)])
    def test_every_added_word_is_member(self, size, hash_count):
        rng = random.Random(size * 31 + hash_count)
        words = _random_words(rng, 3000)
        bf = BloomFilter(size, hash_count)
        bf.add_words(words)

        assert all(bf.contains(word) for word in words)

    def test_false_positive_rate_is_reasonable(self):
        """1000 字 / 10000 bits / 7 probes，理論 FPR 約 0.8%"""
        rng = random.Random(42)
        added = set(_random_words(rng, 1000, length=12))
        bf = BloomFilter(10000, 7)
        bf.add_words(added)

        probes = [w for w in _random_words(rng, 10000, length=12) if w not in added]
        false_positives = sum(1 for w in probes if bf.contains(w))

        assert false_positives / len(probes) < 0.05
        assert bf.estimated_false_positive_rate(1000) < 0.02


class TestDegenerateParameters:
    """退化參數測試"""

    def test_zero_size_never_raises(self):
        bf = BloomFilter(0, 7)
        bf.add("hello")
        # 無位元可用時一律視為「可能存在」，由精確字典判斷
        assert bf.contains("hello")
        assert bf.contains("anything")

    def test_negative_size(self):
        bf = BloomFilter(-10, 3)
        bf.add("hello")
        assert bf.size == 0
        assert bf.contains("hello")

    def test_zero_hash_count(self):
        bf = BloomFilter(100, 0)
        bf.add("hello")
        assert bf.bits_set == 0
        assert bf.contains("hello")
        assert bf.estimated_false_positive_rate(10) == 1.0

    def test_empty_string(self):
        bf = BloomFilter(100, 3)
        bf.add("")
        assert bf.contains("")

    def test_estimate_without_items(self):
        assert BloomFilter(100, 3).estimated_false_positive_rate(0) == 0.0
