"""
全域配置模組

提供統一的配置類別，控制日誌、計時與拼字建議的預設參數。

使用方式:
    from didyoumean import SpellChecker

    # 簡單開啟 verbose 模式
    checker = SpellChecker(verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("didyoumean").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    else:
        # 不主動設定，讓使用者可以透過標準 logging 控制
        pass


@dataclass
class CheckerConfig:
    """
    拼字檢查器配置類別 (進階用途)

    一般使用者只需要在 SpellChecker 指定 dictionary_size / hash_count 即可。

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        dictionary_size: 每個語言 bloom filter 的位元數
        hash_count: bloom filter 的探測次數
        max_edit_distance: 候選生成允許的最大編輯距離（硬上限）
        default_max_suggestions: 未指定時回傳的建議數量
        default_max_edit_distance: 未指定時使用的編輯距離

    使用範例:
        config = CheckerConfig(dictionary_size=50000, hash_count=5)
        checker = SpellChecker(config=config)
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None

    dictionary_size: int = 10000
    hash_count: int = 7

    # 候選數量隨距離呈組合爆炸，3 以上不可接受
    max_edit_distance: int = 3
    default_max_suggestions: int = 5
    default_max_edit_distance: int = 2

    def __post_init__(self):
        """初始化後設定 logger"""
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = CheckerConfig(verbose=False)
