"""
預設字典模組
"""

from .default_words import DEFAULT_WORD_LISTS, get_words_for_language

__all__ = ["DEFAULT_WORD_LISTS", "get_words_for_language"]
