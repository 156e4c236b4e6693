"""
泰米爾文工具模組

提供字元判斷與文字過濾等輔助函式。
"""

import unicodedata
from typing import Any, Optional

from tmphone.utils.logger import get_logger

logger = get_logger(__name__)

_levenshtein: Optional[Any] = None

# Tamil: 0x0B80 - 0x0BFF
# Tamil Supplement: 0x11FC0 - 0x11FFF
_TAMIL_RANGES = (
    (0x0B80, 0x0BFF),
    (0x11FC0, 0x11FFF),
)


def is_tamil_char(char: str) -> bool:
    """
    判斷字元是否屬於泰米爾文區塊

    Args:
        char: 單個字元

    Returns:
        bool: 是否為泰米爾文 (含 Tamil Supplement)
    """
    if not char or len(char) != 1:
        return False

    code = ord(char)
    for low, high in _TAMIL_RANGES:
        if low <= code <= high:
            return True
    return False


def contains_tamil(text: str) -> bool:
    """文字中是否至少含有一個泰米爾文字元"""
    return any(is_tamil_char(c) for c in text or "")


def filter_tamil(text: str, normalization: Optional[str] = None) -> str:
    """
    移除所有非泰米爾文字元

    先去除前後空白，再 (可選) 做 Unicode 正規化，最後只保留泰米爾文字元。
    標點、數字與其他文字一律直接丟棄，不會拋出例外。

    Args:
        text: 輸入文字
        normalization: Unicode 正規化形式 (如 "NFC")，None 表示不處理

    Returns:
        str: 只含泰米爾文字元的字串
    """
    if not text:
        return ""

    text = text.strip()
    if normalization:
        text = unicodedata.normalize(normalization, text)
    return "".join(c for c in text if is_tamil_char(c))


def _get_levenshtein() -> Any:
    """
    取得 Levenshtein 模組 (Lazy Loading)

    Returns:
        module: Levenshtein 模組

    Raises:
        ImportError: 如果未安裝 Levenshtein
    """
    global _levenshtein
    if _levenshtein is None:
        try:
            import Levenshtein
            _levenshtein = Levenshtein
        except ImportError as e:
            logger.error("無法載入 Levenshtein，請確認是否已安裝 'Levenshtein'")
            raise ImportError(
                "Missing fuzzy matching dependency. Please install with: pip install Levenshtein"
            ) from e
    return _levenshtein
