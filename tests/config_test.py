import gc
from concurrent.futures import ThreadPoolExecutor

import pytest

from drills.core.config import _ALLOWED_LOG_LEVELS
from drills.core.config import _DEFAULT_LOG_DATEFMT
from drills.core.config import _DEFAULT_LOG_FMT
from drills.core.config import Config
from drills.core.config import ConsoleLoggerConfig
from drills.core.config import FileLoggerConfig
from drills.core.config import LoggerConfig
from drills.core.config import TelemetryConfig
from drills.core.config import config_property
from drills.core.config import is_integer
from drills.core.error import ConfigValidationError as Error


@pytest.fixture
def factory():
    def _create_test_class(name="option", default=None, **kwargs):
        class TestClass:
            pass

        _property = config_property(default, **kwargs)
        _property.__set_name__(TestClass, name)
        setattr(TestClass, name, _property)
        return TestClass

    return _create_test_class


@pytest.mark.unit
class TestConfigProperty:
    def test_init_with_defaults(self):
        _property = config_property(None)
        assert _property.default is None
        assert _property.frozen is False
        assert _property.allowed is None
        assert _property.check is None
        assert _property.between is None
        assert _property.property == ""
        assert _property.validate is False

    def test_class_access_returns_descriptor(self, factory):
        TestClass = factory("width", 3)
        assert isinstance(TestClass.__dict__["width"], config_property)
        assert TestClass().width == 3

    @pytest.mark.parametrize(
        "allowed, valid, invalid",
        [
            (("north", "south"), "south", "west"),
            ((-1, 1), -1, 0),
            ((True, False), False, None),
        ],
    )
    def test_set_value_with_allowed(self, allowed, valid, invalid, factory):
        TestClass = factory("heading", valid, allowed=allowed)
        instance = TestClass()
        instance.heading = valid
        assert instance.heading == valid
        with pytest.raises(Error, match="not one of the allowed values"):
            instance.heading = invalid

    def test_check_failure(self, factory):
        TestClass = factory("size", 2, check=lambda x: x % 2 == 0)
        instance = TestClass()
        instance.size = 4
        with pytest.raises(Error, match="property validation failed"):
            instance.size = 3

    def test_check_exception_is_wrapped(self, factory):
        TestClass = factory("size", 2, check=lambda x: x > 0)
        with pytest.raises(Error, match="with message"):
            TestClass().size = "two"

    @pytest.mark.parametrize(
        "between, valids, invalids",
        [
            ((1, 10), [1, 5, 10], [0, 11]),
            ((0.0, 1.0), [0.0, 0.5, 1.0], [-0.1, 1.1]),
        ],
    )
    def test_between(self, between, valids, invalids):
        _property = config_property(None, between=between)
        for value in valids:
            _property.__validate__(value)
        for value in invalids:
            with pytest.raises(Error, match="is not between"):
                _property.__validate__(value)

    def test_between_needs_numbers(self):
        _property = config_property(None, between=("a", "z"))
        with pytest.raises(Error, match="must be a tuple of two numbers"):
            _property.__validate__(5)

    def test_invalid_default_fails_at_declaration(self):
        with pytest.raises(Error, match="got invalid value for 'level'"):

            class Broken:
                level = config_property("TRACE", allowed=_ALLOWED_LOG_LEVELS)

    def test_frozen(self, factory):
        TestClass = factory("name", "fixed", frozen=True)
        with pytest.raises(Error, match="cannot modify frozen property"):
            TestClass().name = "other"

    def test_instances_do_not_share_values(self, factory):
        TestClass = factory("count", 1, check=lambda x: x > 0)
        first, second = TestClass(), TestClass()
        first.count = 7
        assert first.count == 7
        assert second.count == 1

    def test_locks_released_with_instance(self, factory):
        TestClass = factory("count", 1, check=lambda x: x > 0)
        descriptor = TestClass.__dict__["count"]
        instance = TestClass()
        instance.count = 2
        assert len(descriptor.locks) == 1
        del instance
        gc.collect()
        assert len(descriptor.locks) == 0

    def test_unhashable_instances_keep_no_locks(self):
        class Unhashable:
            __hash__ = None
            size = config_property(1, check=lambda x: x > 0)

        for value in range(1, 50):
            Unhashable().size = value
        assert len(Unhashable.__dict__["size"].locks) == 0

    def test_thread_safety(self, factory):
        TestClass = factory("level", "a", allowed=("a", "b", "c"))
        instance = TestClass()

        def worker(offset):
            for index in range(200):
                instance.level = "abc"[(index + offset) % 3]
                assert instance.level in "abc"

        with ThreadPoolExecutor(max_workers=8) as pool:
            for future in [pool.submit(worker, n) for n in range(8)]:
                future.result()


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [(0, True), (-3, True), (True, False), (1.0, False), ("1", False)],
)
def test_is_integer(value, expected):
    assert is_integer(value) is expected


@pytest.mark.integration
class TestSections:
    def test_file_logger_defaults(self):
        config = FileLoggerConfig()
        assert config.enable is False
        assert config.level == "INFO"
        assert config.fmt == _DEFAULT_LOG_FMT
        assert config.datefmt == _DEFAULT_LOG_DATEFMT
        assert config.path == "logs"
        assert config.output == "drills.log"
        assert config.encoding == "utf-8"
        assert config.max_bytes == 10485760
        assert config.backups == 5

    def test_file_logger_encoding_frozen(self):
        with pytest.raises(Error, match="cannot modify frozen property"):
            FileLoggerConfig().encoding = "latin-1"

    @pytest.mark.parametrize("invalid", ["", None])
    def test_file_logger_path(self, invalid):
        with pytest.raises(Error):
            FileLoggerConfig().path = invalid

    def test_console_logger_defaults(self):
        config = ConsoleLoggerConfig()
        assert config.enable is True
        assert config.level == "WARNING"
        assert config.colour is True

    @pytest.mark.parametrize("invalid", ["debug", "Info", "verbose"])
    def test_console_logger_levels(self, invalid):
        with pytest.raises(Error):
            ConsoleLoggerConfig().level = invalid

    def test_logger_sections_are_per_instance(self):
        first, second = LoggerConfig(), LoggerConfig()
        assert first.file is not second.file
        first.tty.level = "ERROR"
        assert second.tty.level == "WARNING"

    def test_telemetry_defaults(self):
        config = TelemetryConfig()
        assert config.enabled is False
        assert config.name is None

    def test_config_defaults(self):
        config = Config()
        assert config.name == "drills"
        assert config.debug is False
        assert isinstance(config.logger, LoggerConfig)
        assert isinstance(config.telemetry, TelemetryConfig)

    @pytest.mark.parametrize("frozen", ["name", "version"])
    def test_config_frozen(self, frozen):
        with pytest.raises(Error, match="cannot modify frozen property"):
            setattr(Config(), frozen, "changed")
