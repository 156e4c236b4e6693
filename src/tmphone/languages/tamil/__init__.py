"""
泰米爾文語言支援模組

提供泰米爾文的字形分詞、三層發音 key 編碼與模糊比對功能。
"""

from .config import TamilPhoneticConfig
from .engine import TamilEngine
from .patterns import TamilPatternSet, get_pattern_set
from .phonetic_impl import PhoneticKey, TamilPhoneticSystem, derive_keys
from .tokenizer import GlyphToken, TamilTokenizer

__all__ = [
    "TamilEngine",
    "TamilPhoneticConfig",
    "TamilPhoneticSystem",
    "TamilTokenizer",
    "TamilPatternSet",
    "GlyphToken",
    "PhoneticKey",
    "derive_keys",
    "get_pattern_set",
]
