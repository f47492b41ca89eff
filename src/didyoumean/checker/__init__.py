"""
拼字檢查器模組
"""

from .language_store import LanguageDictionary
from .spell_checker import SpellChecker

__all__ = ["SpellChecker", "LanguageDictionary"]
