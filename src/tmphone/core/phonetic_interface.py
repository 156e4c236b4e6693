"""
發音系統抽象介面

每個語言的發音系統負責把文字轉為「發音表示」，
並提供以發音表示為基礎的模糊比對能力。
"""

from abc import ABC, abstractmethod
from typing import Tuple


class PhoneticSystem(ABC):
    """
    發音系統抽象基類

    職責:
    - to_phonetic: 文字 -> 發音表示
    - calculate_similarity_score: 兩個發音表示的相似度
    - are_fuzzy_similar: 兩段文字是否在容錯範圍內相似
    - get_tolerance: 依長度決定容錯量
    """

    @abstractmethod
    def to_phonetic(self, text: str) -> str:
        pass

    @abstractmethod
    def calculate_similarity_score(self, phonetic1: str, phonetic2: str) -> Tuple[float, bool]:
        pass

    @abstractmethod
    def are_fuzzy_similar(self, text1: str, text2: str, tolerance: int = 1) -> bool:
        pass

    @abstractmethod
    def get_tolerance(self, length: int) -> int:
        pass
