"""
泰米爾文引擎 (TamilEngine)

負責持有共享的泰米爾文發音系統與分詞器，
並提供單詞編碼與模糊比對的入口。
"""

from typing import Any, Callable, Dict, Optional

from tmphone.config import DEFAULT_CONFIG, EncoderConfig
from tmphone.core.engine_interface import PhoneticEngine

from .config import TamilPhoneticConfig
from .phonetic_impl import PhoneticKey, TamilPhoneticSystem
from .tokenizer import TamilTokenizer


class TamilEngine(PhoneticEngine):
    _engine_name = "tamil"

    def __init__(
        self,
        phonetic_config: Optional[TamilPhoneticConfig] = None,
        *,
        config: Optional[EncoderConfig] = None,
        verbose: Optional[bool] = None,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._engine_config = (config or DEFAULT_CONFIG).merged(verbose=verbose, on_timing=on_timing)
        self._init_logger(
            verbose=self._engine_config.verbose,
            on_timing=self._engine_config.on_timing,
        )

        with self._log_timing("TamilEngine.__init__"):
            self._phonetic_config = phonetic_config or TamilPhoneticConfig()
            self._tokenizer = TamilTokenizer(self._phonetic_config)
            self._phonetic = TamilPhoneticSystem(self._phonetic_config, self._tokenizer)

            self._initialized = True
            self._logger.info("TamilEngine initialized")

    @property
    def phonetic(self) -> TamilPhoneticSystem:
        return self._phonetic

    @property
    def tokenizer(self) -> TamilTokenizer:
        return self._tokenizer

    @property
    def config(self) -> TamilPhoneticConfig:
        return self._phonetic_config

    @property
    def engine_config(self) -> EncoderConfig:
        return self._engine_config

    def is_initialized(self) -> bool:
        return getattr(self, "_initialized", False)

    def get_backend_stats(self) -> Dict[str, Any]:
        tables = self._tokenizer.patterns.tables
        return {
            "engine": "tamil",
            "initialized": self.is_initialized(),
            "compounds": len(tables["compound"]),
            "consonants": len(tables["consonant"]),
            "vowels": len(tables["vowel"]),
            "modifiers": len(self._tokenizer.patterns.modifiers),
        }

    def encode(self, word: str) -> PhoneticKey:
        """
        將單詞編碼為 (key0, key1, key2)

        Args:
            word: 泰米爾文單詞

        Returns:
            PhoneticKey: 三層 key
        """
        with self._log_timing("TamilEngine.encode"):
            key = self._phonetic.encode(word)
        self._logger.debug(f"  [Encode] {word!r} -> {tuple(key)}")
        return key

    def is_match(self, word1: str, word2: str, level: Optional[int] = None) -> bool:
        """
        兩個單詞在指定層級的 key 是否完全相同

        Args:
            word1: 單詞 1
            word2: 單詞 2
            level: key 層級，None 時使用 config.fuzzy_level

        Returns:
            bool: key 相同且非空時為 True
        """
        if level is None:
            level = self._phonetic_config.fuzzy_level
        key1 = self.encode(word1).at_level(level)
        key2 = self.encode(word2).at_level(level)
        return bool(key1) and key1 == key2

    def is_fuzzy_match(
        self,
        word1: str,
        word2: str,
        tolerance: Optional[int] = None,
        level: Optional[int] = None,
    ) -> bool:
        """兩個單詞的 key 是否在容錯範圍內相似 (Levenshtein)"""
        with self._log_timing("TamilEngine.is_fuzzy_match"):
            return self._phonetic.are_fuzzy_similar(word1, word2, tolerance=tolerance, level=level)
