"""
核心抽象層

- PhoneticEngine: 引擎基類 (日誌、計時)
- PhoneticSystem: 發音系統介面
"""

from .engine_interface import PhoneticEngine
from .phonetic_interface import PhoneticSystem

__all__ = [
    "PhoneticEngine",
    "PhoneticSystem",
]
