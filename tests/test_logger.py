"""Basic tests for logger acquisition and logging calls"""

import pytest

import log4py
from log4py import ConfigurationBuilder, Level, Settings
from log4py.appenders import ListAppender
from log4py.config import DefaultConfiguration
from log4py.context import PackageContextSelector, SingletonContextSelector
from log4py.core.lifecycle import State
from log4py.core.message import ObjectMessage, PrintfFormattedMessage, SimpleMessage
from log4py.core.status import STATUS_LOGGER
from log4py.layouts import PatternLayout
from log4py.manager import get_selector


def memory_config(level=Level.TRACE, pattern="{level} {logger} {message}"):
    """Builder with a single list appender on the root logger."""
    return (ConfigurationBuilder("memory")
            .add_appender(ListAppender("mem", layout=PatternLayout(pattern)))
            .root(level=level, appenders=["mem"]))


def messages(logger):
    return logger.context.configuration.appender("mem").messages


class TestGetLogger:
    """Test logger acquisition."""

    def test_logger_named_after_caller(self):
        logger = log4py.get_logger("app.web", config_builder=memory_config())
        assert logger.name == "app.web"
        assert logger.fqmn == "app.web"
        assert logger.context.name == "app.web"
        assert logger.context.is_started

    def test_explicit_logger_name(self):
        logger = log4py.get_logger("app.web", name="audit", config_builder=memory_config())
        assert logger.name == "audit"
        assert logger.fqmn == "app.web"

    def test_same_logger_returned(self):
        first = log4py.get_logger("app", config_builder=memory_config())
        assert log4py.get_logger("app") is first

    def test_builder_ignored_once_started(self):
        log4py.get_logger("app", config_builder=memory_config(level=Level.ERROR))
        logger = log4py.get_logger("app", config_builder=memory_config(level=Level.TRACE))
        assert logger.level == Level.ERROR

    def test_root_logger(self):
        root = log4py.get_root_logger("app", config_builder=memory_config())
        assert root.name == ""
        assert root.logger_config is root.context.configuration.root

    def test_default_configuration(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        logger = log4py.get_logger("app")

        assert isinstance(logger.context.configuration, DefaultConfiguration)
        assert logger.level == Level.ERROR

    def test_config_location(self, tmp_path):
        path = tmp_path / "app.json"
        path.write_text(
            '{"appenders": [{"type": "list", "name": "mem"}],'
            ' "loggers": {"root": {"level": "info", "appenders": ["mem"]}}}'
        )
        logger = log4py.get_logger("app", config_location=str(path))
        assert logger.context.configuration.source == str(path)
        assert logger.level == Level.INFO

    def test_module_selector_separates_modules(self):
        a = log4py.get_logger("app.a", config_builder=memory_config())
        b = log4py.get_logger("app.b", config_builder=memory_config())
        assert a.context is not b.context

    def test_package_selector(self):
        log4py.init(Settings(context_selector="package"))
        assert isinstance(get_selector(), PackageContextSelector)

        a = log4py.get_logger("app.a", config_builder=memory_config())
        b = log4py.get_logger("app.b")
        assert a.context is b.context
        assert a.context.name == "app"

    def test_singleton_selector(self):
        log4py.init(context_selector="singleton")
        assert isinstance(get_selector(), SingletonContextSelector)

        a = log4py.get_logger("app", config_builder=memory_config())
        b = log4py.get_logger("other.module")
        assert a.context is b.context

    def test_shutdown_then_fresh_context(self):
        first = log4py.get_logger("app", config_builder=memory_config())
        ctx = first.context
        log4py.shutdown()

        assert ctx.state is State.STOPPED
        second = log4py.get_logger("app", config_builder=memory_config())
        assert second.context is not ctx
        assert second.context.is_started

    def test_stopped_context_replaced(self):
        first = log4py.get_logger("app", config_builder=memory_config())
        first.context.stop()
        second = log4py.get_logger("app", config_builder=memory_config())
        assert second.context.is_started
        assert second.context is not first.context

    def test_stopped_configuration_reused_after_shutdown(self):
        config = memory_config().build()
        first = log4py.get_logger("app", config_builder=config)
        log4py.shutdown()

        second = log4py.get_logger("app", config_builder=config)
        assert second.context.is_started
        assert isinstance(second.context.configuration, DefaultConfiguration)
        assert second.context is not first.context
        assert STATUS_LOGGER.get_entries(Level.ERROR)

    def test_invalid_context_replaced(self):
        broken = get_selector().context_for("app")
        broken.set_state(State.INVALID)

        logger = log4py.get_logger("app", config_builder=memory_config())
        assert logger.context is not broken
        assert logger.context.is_started


class TestLogging:
    """Test logging calls."""

    def test_level_methods(self):
        logger = log4py.get_logger("app", config_builder=memory_config())
        logger.trace("t")
        logger.debug("d")
        logger.info("i")
        logger.warn("w")
        logger.error("e")
        logger.fatal("f")

        assert messages(logger) == [
            "TRACE app t\n", "DEBUG app d\n", "INFO app i\n",
            "WARN app w\n", "ERROR app e\n", "FATAL app f\n",
        ]

    def test_parameterized_by_default(self):
        logger = log4py.get_logger("app", config_builder=memory_config())
        logger.info("Started {} workers in {}s", 4, 0.5)
        assert messages(logger) == ["INFO app Started 4 workers in 0.5s\n"]

    def test_printf_message_factory(self):
        logger = log4py.get_logger(
            "app", message_factory=PrintfFormattedMessage, config_builder=memory_config()
        )
        logger.info("%d%% done", 50)
        assert messages(logger) == ["INFO app 50% done\n"]

    def test_message_factory_from_settings(self):
        log4py.init(Settings(message_factory=SimpleMessage, line_separator="\n"))
        logger = log4py.get_logger("app", config_builder=memory_config())
        logger.info("{} stays", "ignored")
        assert messages(logger) == ["INFO app {} stays\n"]

    def test_object_message(self):
        logger = log4py.get_logger("app", config_builder=memory_config())
        logger.info({"user": "ada"})
        assert messages(logger) == ["INFO app {'user': 'ada'}\n"]

    def test_message_instance_passes_through(self):
        captured = ListAppender("events")
        builder = (ConfigurationBuilder()
                   .add_appender(captured)
                   .root(level=Level.ALL, appenders=["events"]))
        logger = log4py.get_logger("app", config_builder=builder)

        message = ObjectMessage([1, 2])
        logger.info(message)
        assert captured.events[0].message is message

    def test_filtered_by_level(self):
        logger = log4py.get_logger("app", config_builder=memory_config(level=Level.WARN))
        logger.info("dropped")
        logger.warn("kept")

        assert messages(logger) == ["WARN app kept\n"]
        assert logger.get_metrics() == {"logged": 1, "filtered": 1}
        assert logger.is_enabled(Level.ERROR)
        assert not logger.is_enabled(Level.DEBUG)

    def test_marker_and_fqmn(self):
        logger = log4py.get_logger(
            "app", config_builder=memory_config(pattern="{marker}|{fqmn}|{message}")
        )
        logger.info("ping", marker="AUDIT")
        logger.info("pong", fqmn="app.helpers")
        assert messages(logger) == ["AUDIT|app|ping\n", "|app.helpers|pong\n"]

    def test_event_fields(self):
        captured = ListAppender("events")
        builder = (ConfigurationBuilder()
                   .add_appender(captured)
                   .root(level=Level.ALL, appenders=["events"]))
        logger = log4py.get_logger("app.web", name="http", config_builder=builder)
        logger.error("status {}", 500)

        event = captured.events[0]
        assert event.logger == "http"
        assert event.fqmn == "app.web"
        assert event.level is Level.ERROR
        assert event.message.formatted() == "status 500"
        assert event.message.parameters() == [500]

    def test_hierarchy_through_logger(self):
        root_mem = ListAppender("root", layout=PatternLayout("{logger}:{message}"))
        db_mem = ListAppender("db", layout=PatternLayout("{logger}:{message}"))
        builder = (ConfigurationBuilder()
                   .add_appender(root_mem)
                   .add_appender(db_mem)
                   .root(level=Level.INFO, appenders=["root"])
                   .logger("app.db", level=Level.DEBUG, appenders=["db"]))

        db = log4py.get_logger("app", name="app.db.pool", config_builder=builder)
        web = log4py.get_logger("app", name="app.web")
        db.debug("query")
        web.debug("hidden")
        web.info("request")

        assert db_mem.messages == ["app.db.pool:query\n"]
        assert root_mem.messages == ["app.db.pool:query\n", "app.web:request\n"]

    def test_repr(self):
        logger = log4py.get_root_logger("app", config_builder=memory_config(level=Level.WARN))
        assert repr(logger) == "Logger(root:WARN)"
