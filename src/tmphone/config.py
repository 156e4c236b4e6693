"""
引擎配置模組

EncoderConfig 把日誌與計時兩個選項收在一起，可直接交給 TamilEngine：

    from tmphone import TamilEngine
    from tmphone.config import EncoderConfig

    timings = []
    engine = TamilEngine(config=EncoderConfig(on_timing=lambda op, s: timings.append(op)))

未指定時引擎使用 DEFAULT_CONFIG (靜默、無計時回呼)。
個別的 verbose / on_timing 關鍵字參數會覆寫 config 內的值。
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger

TimingCallback = Callable[[str, float], None]


def configure_logging(verbose: bool = False) -> None:
    """verbose 為 True 時把 tmphone logger 開到 DEBUG 並掛上輸出"""
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class EncoderConfig:
    """
    引擎的日誌 / 計時配置

    屬性:
        verbose: 建立時即開啟 DEBUG 日誌
        on_timing: 計時回呼 (operation: str, elapsed: float) -> None，
            會收到 TamilEngine.__init__、encode、is_fuzzy_match 的耗時
    """

    verbose: bool = False
    on_timing: Optional[TimingCallback] = None

    def __post_init__(self):
        configure_logging(self.verbose)

    def merged(
        self,
        verbose: Optional[bool] = None,
        on_timing: Optional[TimingCallback] = None,
    ) -> "EncoderConfig":
        """
        以關鍵字參數覆寫後的新配置

        Args:
            verbose: None 表示沿用目前值
            on_timing: None 表示沿用目前值

        Returns:
            EncoderConfig: 覆寫後的配置 (原物件不變)
        """
        return EncoderConfig(
            verbose=self.verbose if verbose is None else verbose,
            on_timing=self.on_timing if on_timing is None else on_timing,
        )


DEFAULT_CONFIG = EncoderConfig()
