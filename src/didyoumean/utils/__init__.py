"""
工具模組

提供日誌與計時等通用工具。
"""

from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)

__all__ = [
    "get_logger",
    "setup_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    "log_timing",
    "TimingContext",
]
