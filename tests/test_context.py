"""Tests for LoggerContext and context selectors"""

import threading

import pytest

from log4py.appenders import ListAppender
from log4py.config import Configuration, ConfigurationBuilder, DefaultConfiguration
from log4py.context import (
    LoggerContext,
    ModuleContextSelector,
    PackageContextSelector,
    SingletonContextSelector,
)
from log4py.context.selector import create_selector
from log4py.core.errors import ContractError, LifeCycleError
from log4py.core.lifecycle import State
from log4py.core.message import PrintfFormattedMessage


class CountingConfiguration(Configuration):
    """Configuration counting its setup phase."""

    def __init__(self):
        super().__init__("counting")
        self.setup_calls = 0
        self.mem = ListAppender("mem")

    def setup(self):
        self.setup_calls += 1
        self.add_appender(self.mem)

    def configure(self):
        self.wire(self.root, "mem")


class TestContextSelector:
    """Test context registration."""

    def test_same_key_same_context(self):
        selector = ModuleContextSelector()
        assert selector.context("app") is selector.context("app")

    def test_different_keys(self):
        selector = ModuleContextSelector()
        assert selector.context("app") is not selector.context("other")
        assert set(selector.contexts()) == {"app", "other"}

    def test_new_context_is_initialized(self):
        ctx = ModuleContextSelector().context("app", "conf.json")
        assert ctx.state is State.INITIALIZED
        assert ctx.config_location == "conf.json"
        assert ctx.configuration is None

    def test_location_recorded_only_once(self):
        selector = ModuleContextSelector()
        selector.context("app")
        selector.context("app", "first.json")
        selector.context("app", "second.json")
        assert selector.context("app").config_location == "first.json"

    def test_concurrent_get_or_create(self):
        selector = ModuleContextSelector()
        barrier = threading.Barrier(8)
        seen = []

        def worker():
            barrier.wait()
            seen.append(selector.context("shared"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(seen) == 8
        assert all(ctx is seen[0] for ctx in seen)

    @pytest.mark.parametrize("selector_cls,fqmn,key", [
        (ModuleContextSelector, "app.db.pool", "app.db.pool"),
        (PackageContextSelector, "app.db.pool", "app"),
        (PackageContextSelector, "app", "app"),
        (SingletonContextSelector, "app.db.pool", "Default"),
    ])
    def test_key_strategies(self, selector_cls, fqmn, key):
        selector = selector_cls()
        assert selector.key_for(fqmn) == key
        assert selector.context_for(fqmn).name == key

    def test_remove_and_clear(self):
        selector = ModuleContextSelector()
        ctx = selector.context("app")
        assert selector.remove_context("app") is ctx
        assert selector.remove_context("app") is None

        selector.context("other")
        selector.clear()
        assert not selector.has_context("other")

    def test_create_selector(self):
        assert isinstance(create_selector("package"), PackageContextSelector)
        with pytest.raises(ValueError):
            create_selector("thread")


class TestLoggerContext:
    """Test the context life cycle."""

    def test_start_with_configuration(self):
        config = CountingConfiguration()
        ctx = LoggerContext("app")
        ctx.start(config)

        assert ctx.is_started
        assert ctx.configuration is config
        assert config.is_started
        assert config.mem.is_started

    def test_start_is_idempotent(self):
        config = CountingConfiguration()
        ctx = LoggerContext("app")
        ctx.start(config)
        ctx.start(CountingConfiguration())
        ctx.start()

        assert ctx.configuration is config
        assert config.setup_calls == 1

    def test_callable_not_called_when_started(self):
        calls = []

        def source():
            calls.append(1)
            return CountingConfiguration()

        ctx = LoggerContext("app")
        ctx.start(source)
        ctx.start(source)
        assert calls == [1]

    def test_start_without_source_loads_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        ctx = LoggerContext("app")
        ctx.start()

        assert isinstance(ctx.configuration, DefaultConfiguration)
        assert ctx.configuration.is_started

    def test_start_with_location(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_text('{"name": "from-file"}')
        ctx = LoggerContext("app", config_location=str(path))
        ctx.start()
        assert ctx.configuration.name == "from-file"

    def test_non_configuration_rejected(self):
        ctx = LoggerContext("app")
        with pytest.raises(ContractError):
            ctx.start(lambda: "nope")
        assert ctx.state is State.INITIALIZED

    def test_stop_cascades(self):
        config = CountingConfiguration()
        ctx = LoggerContext("app")
        ctx.start(config)
        ctx.stop()

        assert ctx.state is State.STOPPED
        assert config.state is State.STOPPED
        assert config.mem.state is State.STOPPED

    def test_start_after_stop_raises(self):
        ctx = LoggerContext("app")
        ctx.start(CountingConfiguration())
        ctx.stop()
        with pytest.raises(LifeCycleError):
            ctx.start(CountingConfiguration())

    def test_get_logger_requires_start(self):
        with pytest.raises(LifeCycleError):
            LoggerContext("app").get_logger("x")

    def test_get_logger_cached_per_name_and_factory(self):
        ctx = LoggerContext("app")
        ctx.start(ConfigurationBuilder().logger("app.db").build())

        logger = ctx.get_logger("app.db.pool")
        assert ctx.get_logger("app.db.pool") is logger
        assert ctx.get_logger("app.db.pool", PrintfFormattedMessage) is not logger
        assert ctx.has_logger("app.db.pool")
        assert len(ctx.loggers) == 2
        assert logger.logger_config.name == "app.db"

    def test_default_logger_name_is_context_name(self):
        ctx = LoggerContext("app.web")
        ctx.start(ConfigurationBuilder().build())
        logger = ctx.get_logger()
        assert logger.name == "app.web"
        assert logger.fqmn == "app.web"

    def test_atexit_registration(self, monkeypatch):
        import log4py.context.logger_context as module

        registered = []
        monkeypatch.setattr(module.atexit, "register", registered.append)
        monkeypatch.setattr(module.atexit, "unregister", registered.remove)

        ctx = LoggerContext("app")
        ctx.start(CountingConfiguration())
        assert registered == [ctx.stop]

        ctx.stop()
        assert registered == []

    def test_repr(self):
        assert repr(LoggerContext("app")) == "LoggerContext(app, INITIALIZED)"
