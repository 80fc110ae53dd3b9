"""Shared fixtures for log4py tests"""

from typing import List, Tuple

import pytest

import log4py
from log4py.appenders import Appender
from log4py.core.event import LogEvent
from log4py.core.level import Level
from log4py.core.message import SimpleMessage
from log4py.core.settings import Settings
from log4py.core.status import STATUS_LOGGER


class RecordingAppender(Appender):
    """Appender writing (appender name, event) pairs to a shared journal."""

    def __init__(self, name, journal, **kwargs):
        super().__init__(name, **kwargs)
        self.journal = journal
        self.opened = 0

    def _open(self):
        self.opened += 1

    def append(self, event):
        self.journal.append((self.name, event))

    def write(self, data):
        pass


class FailingAppender(Appender):
    """Appender whose append always raises."""

    def append(self, event):
        raise IOError("disk full")

    def write(self, data):
        pass


@pytest.fixture(autouse=True)
def reset_log4py():
    """Give every test fresh settings, registry and status buffer."""
    log4py.init(Settings(line_separator="\n"))
    STATUS_LOGGER.clear()
    yield
    log4py.shutdown()
    STATUS_LOGGER.clear()


@pytest.fixture
def journal() -> List[Tuple[str, LogEvent]]:
    return []


@pytest.fixture
def make_recorder(journal):
    """Create started recording appenders sharing one journal."""
    def factory(name, **kwargs):
        appender = RecordingAppender(name, journal, **kwargs)
        appender.start()
        return appender
    return factory


@pytest.fixture
def failing_appender_cls():
    return FailingAppender


@pytest.fixture
def make_event():
    def factory(level=Level.INFO, text="hello", logger="svc", marker=None):
        return LogEvent(logger, "tests", marker, level, SimpleMessage(text))
    return factory
