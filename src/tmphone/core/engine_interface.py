"""
發音引擎抽象基類

定義所有語言引擎必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from tmphone.utils.logger import TimingContext, get_logger, setup_logger


class PhoneticEngine(ABC):
    """
    發音引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有共享的發音系統、分詞器與編譯好的規則
    - 管理配置選項
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次
    - 之後所有 encode 呼叫共用同一個 Engine (唯讀，可跨執行緒共用)
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")
        # 計時紀錄掛在 tmphone.timing 之下，enable_timing_logging() 才看得到
        self._timing_logger = get_logger(f"timing.engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._timing_logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def encode(self, word: str) -> Any:
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass

    @abstractmethod
    def get_backend_stats(self) -> Dict[str, Any]:
        pass
