"""
核心層

語言無關的資料結構與演算法：Bloom filter、相似度、建議格式、事件。
"""

from .bloom_filter import BloomFilter
from .events import SuggestionEvent, SuggestionEventHandler
from .similarity import edit_distance, similarity
from .suggestion import CandidateSource, Suggestion, convert_to_word_list

__all__ = [
    "BloomFilter",
    "edit_distance",
    "similarity",
    "Suggestion",
    "CandidateSource",
    "convert_to_word_list",
    "SuggestionEvent",
    "SuggestionEventHandler",
]
