"""
Log messages

Messages wrap what the caller passed to a logging call so that formatting
happens only when an appender actually needs the text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional

PLACEHOLDER = "{}"


class Message(ABC):
    """
    Abstract log message.

    Concrete types are used as message factories: `create` applies the
    fixed dispatch rule (string -> the factory's own variant, Message ->
    passed through, anything else -> ObjectMessage).
    """

    @abstractmethod
    def formatted(self) -> str:
        """Return the message formatted as string."""

    @abstractmethod
    def format(self) -> str:
        """Return the message format (pattern) as string."""

    @abstractmethod
    def parameters(self) -> Optional[List[Any]]:
        """Return the message parameters, if any."""

    @classmethod
    def create(cls, msg: Any, *params: Any) -> "Message":
        """Build a message of this type from a logging call's arguments."""
        if isinstance(msg, Message):
            return msg
        if not isinstance(msg, str):
            return ObjectMessage(msg)
        return cls(msg, *params)

    def __str__(self) -> str:
        return self.formatted()


class ObjectMessage(Message):
    """Message with a raw object."""

    __slots__ = ("_message",)

    def __init__(self, message: Any):
        self._message = message

    @classmethod
    def create(cls, msg: Any, *params: Any) -> Message:
        if isinstance(msg, Message):
            return msg
        return cls(msg)

    def formatted(self) -> str:
        return str(self._message)

    def format(self) -> str:
        return self.formatted()

    def parameters(self) -> List[Any]:
        return [self._message]

    def __repr__(self) -> str:
        return f"ObjectMessage(message={self._message!r})"


class SimpleMessage(Message):
    """Message handles everything as string; parameters are ignored."""

    __slots__ = ("_message",)

    def __init__(self, message: str, *params: Any):
        self._message = message

    def formatted(self) -> str:
        return self._message

    def format(self) -> str:
        return self._message

    def parameters(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"SimpleMessage(message={self._message!r})"


class ParameterizedMessage(Message):
    """
    Message pattern with '{}' placeholders.

    Each placeholder is replaced, left to right, by the string form of the
    matching positional parameter. The number of placeholders must equal
    the number of parameters, otherwise formatting raises ValueError.
    A pattern without parameters is returned verbatim.
    """

    __slots__ = ("_pattern", "_params")

    def __init__(self, pattern: str, *params: Any):
        self._pattern = pattern
        self._params = tuple(params)

    def formatted(self) -> str:
        if not self._params:
            return self._pattern

        parts = self._pattern.split(PLACEHOLDER)
        if len(parts) - 1 != len(self._params):
            raise ValueError(
                f"Pattern has {len(parts) - 1} placeholders "
                f"but {len(self._params)} parameters were given"
            )

        chunks = [parts[0]]
        for param, tail in zip(self._params, parts[1:]):
            chunks.append(str(param))
            chunks.append(tail)
        return "".join(chunks)

    def format(self) -> str:
        return self._pattern

    def parameters(self) -> List[Any]:
        return list(self._params)

    def __repr__(self) -> str:
        return (
            f"ParameterizedMessage(pattern={self._pattern!r}, "
            f"args={list(self._params)!r})"
        )


class PrintfFormattedMessage(Message):
    """Message pattern is a printf-style ('%') format string."""

    __slots__ = ("_pattern", "_params")

    def __init__(self, pattern: str, *params: Any):
        self._pattern = pattern
        self._params = tuple(params)

    def formatted(self) -> str:
        if not self._params:
            return self._pattern
        return self._pattern % self._params

    def format(self) -> str:
        return self._pattern

    def parameters(self) -> List[Any]:
        return list(self._params)

    def __repr__(self) -> str:
        return (
            f"PrintfFormattedMessage(pattern={self._pattern!r}, "
            f"args={list(self._params)!r})"
        )
