"""
tmphone - 泰米爾文發音 key 產生器 (Tamil Phonetic Keys)

核心概念：
- 把泰米爾文單詞轉為三層精度的羅馬字 key (key0 最粗、key2 最細)
- 發音相近、拼寫不同的單詞會得到相同 (或相近) 的 key，可用於模糊比對與去重

官方入口（穩定 API）：
- `tmphone.encode(word)` -> (key0, key1, key2)
- `tmphone.TamilEngine`
"""

import threading
from typing import Optional

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from tmphone.languages.tamil import (
    PhoneticKey,
    TamilEngine,
    TamilPhoneticConfig,
    TamilPhoneticSystem,
    TamilTokenizer,
)

# =============================================================================
# 日誌工具
# =============================================================================
from tmphone.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Engines
    "TamilEngine",
    "TamilPhoneticSystem",
    "TamilPhoneticConfig",
    "TamilTokenizer",
    "PhoneticKey",
    "encode",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"

_default_engine: Optional[TamilEngine] = None
_default_engine_lock = threading.Lock()


def _get_default_engine() -> TamilEngine:
    global _default_engine
    if _default_engine is None:
        with _default_engine_lock:
            if _default_engine is None:
                _default_engine = TamilEngine()
    return _default_engine


def encode(word: str) -> PhoneticKey:
    """
    以預設引擎將單詞編碼為 (key0, key1, key2)

    Example:
        >>> encode("மோர்")
        PhoneticKey(key0='MR', key1='MR', key2='M8R')
    """
    return _get_default_engine().encode(word)
