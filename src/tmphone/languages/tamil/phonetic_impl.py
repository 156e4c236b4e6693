"""
泰米爾文發音系統實作模組

把泰米爾文單詞轉為三層精度的羅馬字 key，並提供基於 key 的模糊比對。

- key2: 最細，保留所有數字
- key1: 刪除 2 (重疊/硬化) 與 4-9 (依附母音音質)，保留 1 與 3
- key0: 最粗，再刪除 1 (子音變體)，只保留 3 (長音)
"""

import re
from typing import NamedTuple, Optional, Tuple

from tmphone.core.phonetic_interface import PhoneticSystem

from .config import TamilPhoneticConfig
from .tokenizer import TamilTokenizer
from .utils import _get_levenshtein

_KEY1_STRIP = re.compile(r"[24-9]")
_KEY0_STRIP = re.compile(r"[124-9]")


class PhoneticKey(NamedTuple):
    """三層 key，可直接解包為 (key0, key1, key2)"""

    key0: str
    key1: str
    key2: str

    def at_level(self, level: int) -> str:
        """
        取得指定層級的 key

        Args:
            level: 0 (最粗)、1、2 (最細)

        Raises:
            ValueError: level 不是 0、1、2
        """
        if level not in (0, 1, 2):
            raise ValueError(f"key level 必須是 0、1 或 2，收到 {level!r}")
        return self[level]


def derive_keys(key2: str) -> PhoneticKey:
    """
    由最細的 key2 推導出 key1 與 key0

    Args:
        key2: TamilTokenizer.process 的輸出

    Returns:
        PhoneticKey: (key0, key1, key2)
    """
    return PhoneticKey(
        key0=_KEY0_STRIP.sub("", key2),
        key1=_KEY1_STRIP.sub("", key2),
        key2=key2,
    )


class TamilPhoneticSystem(PhoneticSystem):
    """
    泰米爾文發音系統

    功能:
    - encode: 單詞 -> PhoneticKey (key0, key1, key2)
    - to_phonetic: 單詞 -> key2
    - 基於 key 的 Levenshtein 模糊比對

    注意：演算法以單一單詞為設計對象，不處理句子。
    """

    def __init__(
        self,
        config: Optional[TamilPhoneticConfig] = None,
        tokenizer: Optional[TamilTokenizer] = None,
    ):
        self._config = config or TamilPhoneticConfig()
        self._tokenizer = tokenizer or TamilTokenizer(self._config)

    @property
    def config(self) -> TamilPhoneticConfig:
        return self._config

    @property
    def tokenizer(self) -> TamilTokenizer:
        return self._tokenizer

    def encode(self, word: str) -> PhoneticKey:
        """
        將單詞編碼為三層 key

        對任何字串都會回傳結果 (可能是三個空字串)，不會拋出例外。

        Args:
            word: 泰米爾文單詞

        Returns:
            PhoneticKey: (key0, key1, key2)
        """
        return derive_keys(self._tokenizer.process(word))

    def to_phonetic(self, text: str) -> str:
        """
        將單詞轉為最細的 key (key2)

        Args:
            text: 泰米爾文單詞

        Returns:
            str: key2
        """
        if not text:
            return ""
        return self._tokenizer.process(text)

    def calculate_similarity_score(self, phonetic1: str, phonetic2: str) -> Tuple[float, bool]:
        """
        計算兩個 key 的相似度分數

        Returns:
            (error_ratio, is_fuzzy_match)
            error_ratio: 0.0 ~ 1.0 (越低越相似)
            is_fuzzy_match: 是否通過模糊匹配閾值
        """
        levenshtein = _get_levenshtein()

        max_len = max(len(phonetic1), len(phonetic2))
        if max_len == 0:
            return 0.0, True

        dist = levenshtein.distance(phonetic1, phonetic2)
        ratio = dist / max_len
        return ratio, dist <= self.get_tolerance(max_len)

    def are_fuzzy_similar(
        self,
        text1: str,
        text2: str,
        tolerance: Optional[int] = None,
        level: Optional[int] = None,
    ) -> bool:
        """
        判斷兩個單詞的 key 是否模糊相似

        Args:
            text1: 單詞 1
            text2: 單詞 2
            tolerance: 容許的編輯距離，None 時依 key 長度決定
            level: 比較的 key 層級，None 時使用 config.fuzzy_level

        Returns:
            bool: 是否相似
        """
        if level is None:
            level = self._config.fuzzy_level
        key1 = self.encode(text1).at_level(level)
        key2 = self.encode(text2).at_level(level)

        # 兩邊都沒有泰米爾文內容時不視為相似
        if not key1 or not key2:
            return False
        if key1 == key2:
            return True

        if tolerance is None:
            tolerance = self.get_tolerance(max(len(key1), len(key2)))
        levenshtein = _get_levenshtein()
        return levenshtein.distance(key1, key2) <= tolerance

    def get_tolerance(self, length: int) -> int:
        """
        根據 key 長度決定容錯量

        Args:
            length: key 長度

        Returns:
            int: 容許的編輯距離
        """
        if length <= 3:
            return 0
        elif length <= 6:
            return 1
        else:
            return 2
