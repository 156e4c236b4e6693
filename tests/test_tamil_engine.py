"""
TamilEngine、模組層 encode 與日誌 / 計時工具測試
"""

import logging

import pytest

import tmphone
from tmphone import TamilEngine, TamilPhoneticConfig
from tmphone.config import DEFAULT_CONFIG, EncoderConfig
from tmphone.utils.logger import (
    ROOT_LOGGER_NAME,
    TIMING_LOGGER_NAME,
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)


@pytest.fixture
def restore_logging():
    """保存並還原 tmphone logger 的等級與 handler"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    timing = logging.getLogger(TIMING_LOGGER_NAME)
    saved = (root.level, list(root.handlers), timing.level)
    yield root
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    timing.setLevel(saved[2])


class TestTamilEngine:
    def test_initialization(self):
        engine = TamilEngine()
        assert engine.is_initialized()
        assert engine.phonetic.tokenizer is engine.tokenizer
        assert engine.config == TamilPhoneticConfig()

    def test_backend_stats(self):
        stats = TamilEngine().get_backend_stats()
        assert stats == {
            "engine": "tamil",
            "initialized": True,
            "compounds": 21,
            "consonants": 23,
            "vowels": 12,
            "modifiers": 12,
        }

    def test_encode(self):
        assert TamilEngine().encode("பஞ்சவர்ணம்") == ("PNCVRNM", "PNCVRN1M", "PNCVRN1M")

    def test_encode_never_raises(self):
        engine = TamilEngine()
        for text in ["", " ", "abc", "்", "ஃஃ"]:
            key0, key1, key2 = engine.encode(text)
            assert key0 == key1 == key2 == ""

    def test_is_match(self):
        engine = TamilEngine()
        assert engine.is_match("மிர்", "மோர்")
        assert not engine.is_match("மிர்", "மோர்", level=2)
        assert not engine.is_match("abc", "xyz")

    def test_is_match_uses_config_level(self):
        engine = TamilEngine(TamilPhoneticConfig(fuzzy_level=2))
        assert not engine.is_match("மிர்", "மோர்")

    def test_is_fuzzy_match(self):
        engine = TamilEngine()
        assert engine.is_fuzzy_match("பஞ்சவர்ணம்", "பஞ்சவர்னம்", level=0)
        assert not engine.is_fuzzy_match("தமிழ்", "மோர்")

    def test_timing_callback(self):
        timings = []
        engine = TamilEngine(on_timing=lambda op, elapsed: timings.append((op, elapsed)))
        engine.encode("மோர்")
        engine.is_fuzzy_match("மோர்", "மொர்")

        operations = [op for op, _ in timings]
        assert operations[0] == "TamilEngine.__init__"
        assert "TamilEngine.encode" in operations
        assert "TamilEngine.is_fuzzy_match" in operations
        assert all(elapsed >= 0 for _, elapsed in timings)

    def test_encode_logs_at_debug(self, caplog):
        engine = TamilEngine()
        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
            engine.encode("மோர்")
        assert any("[Encode]" in r.getMessage() and "M8R" in r.getMessage() for r in caplog.records)
        assert any(r.name == "tmphone.engine.tamil" for r in caplog.records)

    def test_verbose_attaches_stream_handler(self, restore_logging):
        TamilEngine(verbose=True)
        assert restore_logging.level == logging.DEBUG
        assert any(type(h) is logging.StreamHandler for h in restore_logging.handlers)


class TestModuleEncode:
    def test_encode(self):
        assert tmphone.encode("மோர்") == ("MR", "MR", "M8R")

    def test_default_engine_is_shared(self):
        tmphone.encode("மோர்")
        assert tmphone._get_default_engine() is tmphone._get_default_engine()

    def test_version(self):
        assert tmphone.__version__


class TestLogger:
    def test_get_logger_namespacing(self):
        assert get_logger().name == "tmphone"
        assert get_logger("engine.tamil").name == "tmphone.engine.tamil"
        assert get_logger("tmphone.languages.tamil.patterns").name == "tmphone.languages.tamil.patterns"

    def test_setup_logger_is_idempotent(self, restore_logging):
        setup_logger(level=logging.INFO)
        setup_logger(level=logging.DEBUG)
        streams = [h for h in restore_logging.handlers if type(h) is logging.StreamHandler]
        assert len(streams) == 1
        assert streams[0].level == logging.DEBUG

    def test_enable_debug_logging(self, restore_logging):
        enable_debug_logging()
        assert restore_logging.level == logging.DEBUG

    def test_enable_timing_logging(self, restore_logging):
        enable_timing_logging()
        assert restore_logging.level == logging.WARNING
        assert logging.getLogger(TIMING_LOGGER_NAME).getEffectiveLevel() == logging.DEBUG

    def test_timing_logging_shows_engine_timings(self, restore_logging, caplog):
        """只開計時日誌時，引擎的計時紀錄要出現，一般 DEBUG 紀錄不出現"""
        enable_timing_logging()
        TamilEngine().encode("மோர்")

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("[Timing] TamilEngine.__init__") for m in messages)
        assert any(m.startswith("[Timing] TamilEngine.encode") for m in messages)
        assert not any("[Encode]" in m for m in messages)
        assert all(r.name.startswith(TIMING_LOGGER_NAME) for r in caplog.records)

    def test_timing_context(self, caplog):
        calls = []
        logger = get_logger("test")
        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
            with TimingContext("unit", logger, callback=lambda op, s: calls.append(op)) as ctx:
                pass
        assert calls == ["unit"]
        assert ctx.elapsed >= 0
        assert any("[Timing] unit" in r.getMessage() for r in caplog.records)

    def test_timing_context_does_not_swallow_errors(self):
        calls = []
        with pytest.raises(RuntimeError):
            with TimingContext("boom", callback=lambda op, s: calls.append(op)):
                raise RuntimeError("boom")
        assert calls == ["boom"]

    def test_log_timing_decorator(self, caplog):
        @log_timing("double")
        def double(x):
            return x * 2

        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
            assert double(21) == 42
        assert double.__name__ == "double"
        assert any(r.name == TIMING_LOGGER_NAME for r in caplog.records)


class TestEncoderConfig:
    def test_default_config_is_silent(self):
        assert DEFAULT_CONFIG.verbose is False
        assert DEFAULT_CONFIG.on_timing is None

    def test_verbose_config_configures_logging(self, restore_logging):
        config = EncoderConfig(verbose=True)
        assert config.verbose
        assert restore_logging.level == logging.DEBUG

    def test_config_drives_engine(self):
        timings = []
        config = EncoderConfig(on_timing=lambda op, s: timings.append(op))
        engine = TamilEngine(config=config)
        engine.encode("தமிழ்")
        assert engine.engine_config.on_timing is config.on_timing
        assert timings[0] == "TamilEngine.__init__"
        assert "TamilEngine.encode" in timings

    def test_engine_defaults_to_default_config(self):
        engine = TamilEngine()
        assert engine.engine_config == DEFAULT_CONFIG

    def test_verbose_config_reaches_engine(self, restore_logging):
        engine = TamilEngine(config=EncoderConfig(verbose=True))
        assert engine.engine_config.verbose
        assert restore_logging.level == logging.DEBUG

    def test_keyword_arguments_override_config(self):
        from_config, from_kwarg = [], []
        config = EncoderConfig(on_timing=lambda op, s: from_config.append(op))
        engine = TamilEngine(config=config, on_timing=lambda op, s: from_kwarg.append(op))
        engine.encode("மோர்")
        assert from_config == []
        assert "TamilEngine.encode" in from_kwarg

    def test_merged_keeps_original(self):
        config = EncoderConfig()
        merged = config.merged(verbose=False, on_timing=print)
        assert merged.on_timing is print
        assert config.on_timing is None
