"""
日誌與計時工具

所有模組的 logger 皆掛在 "didyoumean" 命名空間之下，
函式庫本身只加上 NullHandler，不主動設定 root logger。

使用方式:
    from didyoumean.utils.logger import get_logger, TimingContext

    logger = get_logger("checker")
    with TimingContext("SpellChecker.get_suggestions", logger):
        ...

    # 開啟詳細日誌
    from didyoumean import enable_debug_logging
    enable_debug_logging()
"""

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "didyoumean"

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得命名空間下的 logger

    Args:
        name: 子模組名稱，例如 "checker" -> "didyoumean.checker"

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為 "didyoumean" logger 加上 StreamHandler 並設定等級

    重複呼叫不會重複加入 handler。
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌（含計時訊息）"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌"""
    setup_logger(level=logging.INFO)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時上下文管理器

    離開區塊時記錄耗時，並呼叫選用的 callback(operation, elapsed_seconds)。

    範例:
        >>> with TimingContext("load", logger, logging.DEBUG) as t:
        ...     do_work()
        >>> t.elapsed
        0.0123
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    函式計時裝飾器

    範例:
        >>> @log_timing("build_index")
        ... def build_index(words):
        ...     ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logger, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
