"""
日誌與計時工具

所有 logger 都掛在 "tmphone" 命名空間之下，預設只有 NullHandler，
不會主動輸出任何內容；需要時由使用者自行透過標準 logging 控制，
或呼叫 enable_debug_logging() / enable_timing_logging()。

使用方式:
    from tmphone.utils.logger import get_logger, TimingContext

    logger = get_logger(__name__)
    with TimingContext("encode", logger):
        ...
"""

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "tmphone"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

_DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 tmphone 命名空間下的 logger

    Args:
        name: 子 logger 名稱，可傳入 __name__ 或簡短名稱 (如 "engine.tamil")

    Returns:
        logging.Logger: 例如 get_logger("engine.tamil") -> "tmphone.engine.tamil"
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為 tmphone 根 logger 掛上 StreamHandler

    重複呼叫只會調整等級，不會重複掛 handler。

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: tmphone 根 logger
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


def enable_debug_logging() -> None:
    """開啟 DEBUG 等級日誌 (包含計時資訊)"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """
    只開啟計時日誌

    其他 logger 維持原本等級，只有 "tmphone.timing" 會輸出 DEBUG。
    """
    setup_logger(level=logging.DEBUG)
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.WARNING)
    logging.getLogger(TIMING_LOGGER_NAME).setLevel(logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    離開區塊時把耗時寫入 logger，並呼叫 callback(operation, elapsed)。

    Args:
        operation: 操作名稱
        logger: 要寫入的 logger，預設為 "tmphone.timing"
        level: 日誌等級
        callback: 計時回呼 (operation: str, elapsed: float) -> None
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.3f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    範例:
        @log_timing("build_tables")
        def build_tables():
            ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
