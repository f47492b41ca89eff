"""
事件模型（Event Model）

SpellChecker 不直接輸出到 stdout。
若需要得知「哪些字被略過」「哪個語言尚未載入」等資訊，請使用事件回呼（on_event）。

原則：查詢流程一律降級為中性結果（False / 空列表），但不允許「默默」降級，
每次降級都會送出一個事件。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class SuggestionEvent(TypedDict, total=False):
    type: Literal["words_added", "invalid_word", "uninitialized_language", "distance_clamped"]
    language: str

    # invalid_word
    word: str

    # words_added
    count: int
    skipped: int

    # distance_clamped
    requested: int
    applied: int


SuggestionEventHandler = Callable[[SuggestionEvent], None]
