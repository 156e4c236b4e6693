"""
泰米爾文配置模組

定義泰米爾文字形 (grapheme) 與羅馬編碼片段的對應表，以及編碼相關的配置參數。

四張表互不重疊:
- VOWELS: 獨立母音
- CONSONANTS: 子音 (含 aytham ஃ)
- MODIFIERS: 依附母音符號與 virama (்)
- COMPOUNDS: 特定子音叢集，優先於逐字分解

數字的意義 (key 降階時依此刪除):
- 1: 子音變體 (發音相近、拼寫不同，如 ண/ன -> N1)
- 2: 重疊 / 硬化子音叢集
- 3: 長音符號 ா
- 4-9: 依附母音的音質
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

# =========================================================================
# 1. 獨立母音 (Vowels)
# =========================================================================
# 長短母音對收斂為同一編碼
VOWELS: Mapping[str, str] = MappingProxyType({
    "அ": "A",
    "ஆ": "A",
    "இ": "I",
    "ஈ": "I",
    "உ": "U",
    "ஊ": "U",
    "எ": "E",
    "ஏ": "E",
    "ஐ": "AI",
    "ஒ": "O",
    "ஓ": "O",
    "ஔ": "AU",
})

# =========================================================================
# 2. 子音 (Consonants)
# =========================================================================
CONSONANTS: Mapping[str, str] = MappingProxyType({
    "க": "K",
    "ச": "C",
    "ட": "T",
    "த": "D",
    "ப": "P",
    "ற": "TR",
    "ங": "NG",
    "ஞ": "NJ",
    "ண": "N1",
    "ந": "N",
    "ம": "M",
    "ன": "N1",
    "ய": "Y",
    "ர": "R",
    "ல": "L",
    "வ": "V",
    "ழ": "ZH",
    "ள": "L1",
    "ஃ": "",  # aytham: 不產生編碼
    # Grantha
    "ஷ": "S1",
    "ஸ": "S",
    "ஹ": "H",
    "ஜ": "J",
})

# =========================================================================
# 3. 依附符號 (Modifiers)
# =========================================================================
MODIFIERS: Mapping[str, str] = MappingProxyType({
    "ா": "3",  # 長音 aa，不改變音類
    "ி": "4",  # i
    "ீ": "4",  # ii
    "ு": "5",  # u
    "ூ": "5",  # uu
    "ெ": "6",  # e
    "ே": "6",  # ee
    "ை": "7",  # ai
    "ொ": "8",  # o
    "ோ": "8",  # oo
    "ௌ": "9",  # au
    "்": "",   # virama
})

VIRAMA = "்"

# =========================================================================
# 4. 子音叢集 (Compounds)
# =========================================================================
COMPOUNDS: Mapping[str, str] = MappingProxyType({
    # 重疊子音 (gemination)，以 2 結尾
    "க்க": "K2",
    "ச்ச": "C2",
    "த்த": "D2",
    "ப்ப": "P2",
    "ல்ல": "L2",
    "வ்வ": "V2",
    "ண்ண": "N2",
    "ம்ம": "M2",
    "ற்ற": "TR2",
    "ட்ட": "T2",
    "ஞ்ஞ": "NJ2",
    # 異部位叢集，字母本身即足以辨識
    "ன்ற": "NR",
    "ண்ட": "NT",
    "ங்க": "NK",
    "ஞ்ச": "NC",
    "ந்த": "ND",
    "ம்ப": "MP",
    "ந்ன": "NN",
    "ற்க": "RK",
    "ர்ப்": "RP",
    "க்த": "KT",
})


@dataclass
class TamilPhoneticConfig:
    """
    泰米爾文發音配置

    對照表以類別常數提供 (唯讀)，實例屬性只控制編碼前處理與模糊比對。

    Attributes:
        unicode_normalization (Optional[str]): 編碼前套用的 Unicode 正規化形式 (如 "NFC")。
            預設為 None，保留原始碼位；設為 "NFC" 時，分拆輸入的兩段式母音符號
            (ெ + ா) 會與組合形式 (ொ) 得到相同編碼。
        fuzzy_level (int): are_fuzzy_similar 預設比較的 key 層級 (0 最粗、2 最細)。
    """

    unicode_normalization: Optional[str] = None
    fuzzy_level: int = 1

    VOWELS = VOWELS
    CONSONANTS = CONSONANTS
    MODIFIERS = MODIFIERS
    COMPOUNDS = COMPOUNDS

    def __post_init__(self):
        if self.unicode_normalization not in (None, "NFC", "NFD", "NFKC", "NFKD"):
            raise ValueError(f"不支援的 Unicode 正規化形式: {self.unicode_normalization!r}")
        if self.fuzzy_level not in (0, 1, 2):
            raise ValueError(f"fuzzy_level 必須是 0、1 或 2，收到 {self.fuzzy_level!r}")
