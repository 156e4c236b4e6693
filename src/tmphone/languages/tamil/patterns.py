"""
泰米爾文規則編譯模組

為 COMPOUNDS / CONSONANTS / VOWELS 各建立一個「(字形)(依附符號)」的正則，
用來找出後面緊接依附符號的字形 (modified glyph)。

規則只在第一次使用時編譯一次，之後所有編碼共用 (唯讀)。
"""

import re
from functools import lru_cache
from typing import Dict, Iterable, Mapping, Set

from tmphone.utils.logger import get_logger

from .config import COMPOUNDS, CONSONANTS, MODIFIERS, VOWELS

logger = get_logger(__name__)

COMPOUND = "compound"
CONSONANT = "consonant"
VOWEL = "vowel"
MODIFIER = "modifier"
UNKNOWN = "unknown"

# 比對優先順序：叢集 > 子音 > 母音
BASE_CATEGORIES = (COMPOUND, CONSONANT, VOWEL)


def _alternation(glyphs: Iterable[str]) -> str:
    # 長者優先，避免短字形先吃掉長字形的前綴
    return "|".join(re.escape(g) for g in sorted(glyphs, key=lambda g: (-len(g), g)))


def compile_modified_pattern(glyphs: Iterable[str], modifiers: Iterable[str]) -> "re.Pattern[str]":
    """
    編譯「字形 + 依附符號」正則

    Args:
        glyphs: 基底字形 (某一張表的所有 key)
        modifiers: 依附符號 (MODIFIERS 的所有 key)

    Returns:
        re.Pattern: 具名群組 base / modifier 的正則
    """
    return re.compile(
        f"(?P<base>{_alternation(glyphs)})(?P<modifier>{_alternation(modifiers)})"
    )


class TamilPatternSet:
    """
    三組編譯好的 modified 正則

    Attributes:
        tables: 類別 -> 對照表
        patterns: 類別 -> 編譯後正則
    """

    def __init__(
        self,
        compounds: Mapping[str, str] = COMPOUNDS,
        consonants: Mapping[str, str] = CONSONANTS,
        vowels: Mapping[str, str] = VOWELS,
        modifiers: Mapping[str, str] = MODIFIERS,
    ):
        self.tables: Dict[str, Mapping[str, str]] = {
            COMPOUND: compounds,
            CONSONANT: consonants,
            VOWEL: vowels,
        }
        self.modifiers = modifiers
        self.patterns: Dict[str, "re.Pattern[str]"] = {
            category: compile_modified_pattern(table.keys(), modifiers.keys())
            for category, table in self.tables.items()
        }
        self.max_glyph_length = max(len(g) for table in self.tables.values() for g in table)

    @property
    def compounds(self) -> "re.Pattern[str]":
        return self.patterns[COMPOUND]

    @property
    def consonants(self) -> "re.Pattern[str]":
        return self.patterns[CONSONANT]

    @property
    def vowels(self) -> "re.Pattern[str]":
        return self.patterns[VOWEL]

    def find_modified(self, text: str) -> Dict[str, Dict[int, str]]:
        """
        找出所有後面緊接依附符號的字形位置

        每個類別獨立掃描；同一類別內的比對不重疊，由左至右。

        Args:
            text: 已過濾的泰米爾文字串

        Returns:
            Dict[str, Dict[int, str]]: 類別 -> {起始位置: 基底字形}
        """
        found: Dict[str, Dict[int, str]] = {}
        for category in BASE_CATEGORIES:
            found[category] = {
                m.start("base"): m.group("base") for m in self.patterns[category].finditer(text)
            }
        return found

    def modified_positions(self, text: str) -> Set[int]:
        """
        所有 modified 字形的起始位置 (不分類別)

        僅供檢視；modified 與否不改變任何字形的編碼。
        """
        positions: Set[int] = set()
        for hits in self.find_modified(text).values():
            positions.update(hits)
        return positions


@lru_cache(maxsize=None)
def get_pattern_set() -> TamilPatternSet:
    """取得共用的 TamilPatternSet (第一次呼叫時編譯)"""
    pattern_set = TamilPatternSet()
    logger.debug(
        "Compiled Tamil patterns: "
        + ", ".join(f"{c}={len(t)}" for c, t in pattern_set.tables.items())
    )
    return pattern_set
