"""
語言路由

依 Unicode 範圍偵測字的語言。
"""

from .language_router import LanguageRouter, detect_language

__all__ = ["LanguageRouter", "detect_language"]
