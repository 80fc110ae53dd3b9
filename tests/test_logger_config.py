"""Tests for the logger configuration tree"""

import gc

import pytest

import log4py
from log4py.appenders import ListAppender
from log4py.config import LoggerConfig
from log4py.core.errors import AppenderError, LifeCycleError
from log4py.core.event import LogEvent
from log4py.core.level import Level
from log4py.core.message import ParameterizedMessage, SimpleMessage
from log4py.core.status import STATUS_LOGGER
from log4py.filters import BaseFilter, CallbackFilter, LevelFilter, PatternFilter


def chain(*nodes):
    """Link each node to the previous one."""
    for parent, child in zip(nodes, nodes[1:]):
        child.set_parent(parent)
    return nodes


class TestLevelInheritance:
    """Test effective level resolution."""

    def test_root_without_level_uses_default_status_level(self):
        assert LoggerConfig().level == Level.ERROR
        assert LoggerConfig().configured_level is None

    def test_default_status_level_follows_settings(self):
        log4py.init(default_status_level=Level.WARN)
        assert LoggerConfig().level == Level.WARN

    def test_explicit_level(self):
        assert LoggerConfig("svc", level=Level.DEBUG).level == Level.DEBUG

    def test_inherits_recursively(self):
        root, a, ab, abc = chain(
            LoggerConfig("", level=Level.INFO),
            LoggerConfig("a"),
            LoggerConfig("a.b", level=Level.TRACE),
            LoggerConfig("a.b.c"),
        )
        assert a.level == Level.INFO
        assert ab.level == Level.TRACE
        assert abc.level == Level.TRACE

    def test_inherits_default_through_unset_root(self):
        root, child = chain(LoggerConfig(""), LoggerConfig("svc"))
        assert child.level == Level.ERROR

    def test_set_level_none_restores_inheritance(self):
        root, child = chain(LoggerConfig("", level=Level.INFO),
                            LoggerConfig("svc", level=Level.FATAL))
        child.set_level(None)
        assert child.level == Level.INFO

    def test_level_accepts_names(self):
        assert LoggerConfig("svc", level="warn").level == Level.WARN


class TestParentLink:
    """Test weak parent references."""

    def test_parent_is_weak(self):
        parent = LoggerConfig("svc")
        child = LoggerConfig("svc.db")
        child.set_parent(parent)
        assert child.parent is parent

        del parent
        gc.collect()
        assert child.parent is None

    def test_cycle_rejected(self):
        a, b = chain(LoggerConfig("a"), LoggerConfig("a.b"))
        with pytest.raises(ValueError):
            a.set_parent(b)
        with pytest.raises(ValueError):
            a.set_parent(a)


class TestEnablement:
    """Test the level threshold."""

    def test_threshold_is_inclusive(self):
        node = LoggerConfig("svc", level=Level.WARN)
        assert node.is_enabled(Level.INFO) is False
        assert node.is_enabled(Level.ERROR) is True
        assert node.is_enabled(Level.WARN) is True

    def test_marker_and_message_are_accepted(self):
        node = LoggerConfig("svc", level=Level.DEBUG)
        assert node.is_enabled(Level.INFO, "AUDIT", "msg {}", 1) is True

    def test_off_disables_everything(self):
        node = LoggerConfig("svc", level=Level.OFF)
        assert node.is_enabled(Level.FATAL) is False


class TestAppenderReferences:
    """Test appender reference bookkeeping."""

    def test_default_reference_level_is_all(self, make_recorder):
        node = LoggerConfig("svc")
        ref = node.add_appender_reference(make_recorder("A"))
        assert ref.level is Level.ALL
        assert ref.filter is None

    def test_last_write_wins(self, make_recorder):
        node = LoggerConfig("svc")
        appender = make_recorder("A")
        node.add_appender_reference(appender, Level.INFO)
        node.add_appender_reference(appender, Level.ERROR)

        refs = node.appender_references
        assert list(refs) == ["A"]
        assert refs["A"].level is Level.ERROR

    def test_remove(self, make_recorder):
        node = LoggerConfig("svc")
        node.add_appender_reference(make_recorder("A"))
        assert node.remove_appender_reference("A") is True
        assert node.remove_appender_reference("A") is False
        assert node.appender_references == {}


class TestDispatch:
    """Test event dispatch and additive propagation."""

    @pytest.fixture
    def tree(self, make_recorder):
        root = LoggerConfig("", level=Level.TRACE)
        svc = LoggerConfig("svc")
        db = LoggerConfig("svc.db", additive=False)
        chain(root, svc, db)
        root.add_appender_reference(make_recorder("A"))
        svc.add_appender_reference(make_recorder("B"))
        db.add_appender_reference(make_recorder("C"))
        return root, svc, db

    def test_non_additive_stops_propagation(self, tree, journal, make_event):
        root, svc, db = tree
        db.log(make_event())
        assert [name for name, _ in journal] == ["C"]

    def test_additive_propagates_child_before_parent(self, tree, journal, make_event):
        root, svc, db = tree
        svc.log(make_event())
        assert [name for name, _ in journal] == ["B", "A"]

    def test_same_event_reaches_every_ancestor(self, tree, journal, make_event):
        root, svc, db = tree
        event = make_event()
        svc.log(event)
        assert all(logged is event for _, logged in journal)

    def test_sibling_references_keep_insertion_order(self, make_recorder, journal, make_event):
        node = LoggerConfig("svc")
        for name in ("x", "y", "z"):
            node.add_appender_reference(make_recorder(name))
        node.log(make_event())
        assert [name for name, _ in journal] == ["x", "y", "z"]

    def test_reference_level(self, make_recorder, journal, make_event):
        node = LoggerConfig("svc")
        node.add_appender_reference(make_recorder("errors"), Level.ERROR)
        node.add_appender_reference(make_recorder("all"))

        node.log(make_event(Level.INFO))
        node.log(make_event(Level.ERROR))
        assert [name for name, _ in journal] == ["all", "errors", "all"]

    def test_reference_filter(self, make_recorder, journal, make_event):
        node = LoggerConfig("svc")
        node.add_appender_reference(
            make_recorder("audit"),
            filter=CallbackFilter(lambda event: event.marker == "AUDIT"),
        )
        node.log(make_event())
        node.log(make_event(marker="AUDIT"))
        assert [event.marker for _, event in journal] == ["AUDIT"]

    def test_appender_filter(self, make_recorder, journal, make_event):
        node = LoggerConfig("svc")
        node.add_appender_reference(
            make_recorder("quiet", filter=LevelFilter(max_level=Level.INFO))
        )
        node.log(make_event(Level.WARN))
        assert journal == []

    def test_log_message_uses_event_factory(self, make_recorder, journal):
        created = []

        def factory(logger, fqmn, marker, level, message):
            event = log4py.core.LogEvent(logger, fqmn, marker, level, message)
            created.append(event)
            return event

        node = LoggerConfig("svc", event_factory=factory)
        node.add_appender_reference(make_recorder("A"))
        event = node.log_message("svc", "app.mod", Level.INFO, None, SimpleMessage("hi"))

        assert created == [event]
        assert journal == [("A", event)]
        assert event.fqmn == "app.mod"


class TestAppenderFailures:
    """Test ignore_exceptions handling."""

    def test_ignored_failure_does_not_block_others(
        self, failing_appender_cls, make_recorder, journal, make_event
    ):
        broken = failing_appender_cls("broken")
        broken.start()
        root, svc = chain(LoggerConfig(""), LoggerConfig("svc"))
        svc.add_appender_reference(broken)
        svc.add_appender_reference(make_recorder("B"))
        root.add_appender_reference(make_recorder("A"))

        svc.log(make_event())

        assert [name for name, _ in journal] == ["B", "A"]
        errors = STATUS_LOGGER.get_entries(Level.ERROR)
        assert len(errors) == 1
        assert "broken" in errors[0].message
        assert isinstance(errors[0].exc_info, OSError)

    def test_failure_propagates_when_not_ignored(self, failing_appender_cls, make_event):
        strict = failing_appender_cls("strict", ignore_exceptions=False)
        strict.start()
        node = LoggerConfig("svc")
        node.add_appender_reference(strict)

        with pytest.raises(AppenderError) as excinfo:
            node.log(make_event())
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_non_started_appender_is_skipped(self, make_event):
        appender = ListAppender("idle")
        node = LoggerConfig("svc")
        node.add_appender_reference(appender)

        node.log(make_event())

        assert appender.events == []
        assert STATUS_LOGGER.get_entries(Level.ERROR)

    def test_non_started_strict_appender_raises(self, make_event):
        node = LoggerConfig("svc")
        node.add_appender_reference(ListAppender("idle", ignore_exceptions=False))
        with pytest.raises(LifeCycleError):
            node.log(make_event())

    def test_failing_filter_is_reported_and_parent_still_served(
        self, make_recorder, journal
    ):
        root, svc = chain(LoggerConfig(""), LoggerConfig("svc"))
        svc.add_appender_reference(make_recorder("B"), filter=PatternFilter("x"))
        root.add_appender_reference(make_recorder("A"))
        event = LogEvent("svc", "tests", None, Level.INFO,
                         ParameterizedMessage("a {} {}", 1))

        svc.log(event)

        assert [name for name, _ in journal] == ["A"]
        errors = STATUS_LOGGER.get_entries(Level.ERROR)
        assert len(errors) == 1
        assert isinstance(errors[0].exc_info, ValueError)

    def test_failing_filter_raises_when_not_ignored(self, make_recorder, make_event):
        class RaisingFilter(BaseFilter):
            def filter(self, event):
                raise KeyError("missing")

        node = LoggerConfig("svc")
        node.add_appender_reference(
            make_recorder("strict", ignore_exceptions=False), filter=RaisingFilter()
        )
        with pytest.raises(AppenderError) as excinfo:
            node.log(make_event())
        assert isinstance(excinfo.value.__cause__, KeyError)
