"""
泰米爾文分詞 / 編碼模組

把一個泰米爾文單詞切成帶標籤的字形 token，再串接成最細的編碼 (key2)。

流程:
1. 文字過濾：去除前後空白，丟棄所有非泰米爾文字元
2. 第一階段：用編譯好的正則找出「字形 + 依附符號」的位置
3. 第二階段：由左至右單次掃描，每個字形只被消耗一次
   優先順序：叢集 > 子音 > 母音；同類別內 modified > 最長的 unmodified
4. 清理：串接 token 編碼，只保留 [0-9A-Z]
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from .config import TamilPhoneticConfig
from .patterns import (
    BASE_CATEGORIES,
    MODIFIER,
    UNKNOWN,
    TamilPatternSet,
    get_pattern_set,
)
from .utils import filter_tamil

_NON_ALNUM = re.compile(r"[^0-9A-Z]")


@dataclass(frozen=True)
class GlyphToken:
    """
    單一字形 token

    Attributes:
        text: 原始字形 (過濾後字串中的片段)
        code: 編碼片段 (可能為空字串)
        category: compound / consonant / vowel / modifier / unknown
        modified: 是否後面緊接依附符號。僅供檢視 / 除錯，不影響 code：
            同一字形不論 modified 與否都得到相同編碼，依附符號另成 token
        start: 在過濾後字串中的起始位置
        end: 結束位置 (不含)
    """

    text: str
    code: str
    category: str
    modified: bool
    start: int
    end: int


class TamilTokenizer:
    """
    泰米爾文字形分詞器

    功能:
    - tokenize: 把單詞切成 GlyphToken 列表
    - process: 直接輸出最細編碼 (key2)

    實例只持有唯讀的對照表與編譯後正則，可跨執行緒共用。
    """

    def __init__(
        self,
        config: Optional[TamilPhoneticConfig] = None,
        pattern_set: Optional[TamilPatternSet] = None,
    ):
        self._config = config or TamilPhoneticConfig()
        self._patterns = pattern_set or get_pattern_set()
        self._tables: Mapping[str, Mapping[str, str]] = self._patterns.tables
        self._modifiers = self._patterns.modifiers
        self._max_len = self._patterns.max_glyph_length

    @property
    def patterns(self) -> TamilPatternSet:
        return self._patterns

    def tokenize(self, text: str) -> List[GlyphToken]:
        """
        將單詞切成字形 token

        Args:
            text: 輸入文字 (預期為單一單詞)

        Returns:
            List[GlyphToken]: token 列表；沒有泰米爾文內容時為空列表
        """
        text = filter_tamil(text, self._config.unicode_normalization)
        if not text:
            return []

        modified = self._patterns.find_modified(text)

        tokens: List[GlyphToken] = []
        pos = 0
        while pos < len(text):
            token = self._match_base(text, pos, modified)
            if token is None:
                token = self._match_single(text, pos)
            tokens.append(token)
            pos = token.end
        return tokens

    def process(self, text: str) -> str:
        """
        將單詞編碼為最細的 key (key2)

        Args:
            text: 輸入文字

        Returns:
            str: 只含大寫英文字母與數字的編碼，可能為空字串
        """
        return _NON_ALNUM.sub("", "".join(t.code for t in self.tokenize(text)))

    def _match_base(
        self, text: str, pos: int, modified: Dict[str, Dict[int, str]]
    ) -> Optional[GlyphToken]:
        for category in BASE_CATEGORIES:
            table = self._tables[category]

            glyph = modified[category].get(pos)
            if glyph is not None:
                return GlyphToken(glyph, table[glyph], category, True, pos, pos + len(glyph))

            glyph = self._longest_match(text, pos, table)
            if glyph is not None:
                return GlyphToken(glyph, table[glyph], category, False, pos, pos + len(glyph))
        return None

    def _longest_match(self, text: str, pos: int, table: Mapping[str, str]) -> Optional[str]:
        for size in range(min(self._max_len, len(text) - pos), 0, -1):
            chunk = text[pos:pos + size]
            if chunk in table:
                return chunk
        return None

    def _match_single(self, text: str, pos: int) -> GlyphToken:
        char = text[pos]
        if char in self._modifiers:
            return GlyphToken(char, self._modifiers[char], MODIFIER, False, pos, pos + 1)
        # 泰米爾數字、符號等不在表內的字元不產生編碼
        return GlyphToken(char, "", UNKNOWN, False, pos, pos + 1)

    def segments(self, text: str) -> List[Tuple[str, str]]:
        """以 (字形, 編碼) 列表呈現分詞結果，方便除錯"""
        return [(t.text, t.code) for t in self.tokenize(text)]
