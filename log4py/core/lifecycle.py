"""
Object life cycle framework

Shared state machine for appenders, configurations and logger contexts.
"""

from __future__ import annotations

from enum import Enum

from log4py.core.errors import ContractError, LifeCycleError


class State(Enum):
    """Life cycle states."""

    INITIALIZED = "initialized"  # Initialized but not yet started
    STARTING = "starting"        # In the process of starting
    STARTED = "started"          # Has started
    STOPPING = "stopping"        # Stopping is in progress
    STOPPED = "stopped"          # Has stopped
    INVALID = "invalid"          # Something happened

    def __str__(self) -> str:
        return self.name


class LifeCycle:
    """
    Base class for stateful entities.

    Subclasses put their work into `_on_start` and `_on_stop`; the public
    `start` and `stop` drive the state transitions around them.

    start():
        STARTED is a no-op. INITIALIZED goes STARTING -> STARTED.
        Any other state raises LifeCycleError.
    stop():
        INITIALIZED, STOPPED and INVALID are no-ops. STARTED goes
        STOPPING -> STOPPED. STARTING and STOPPING raise LifeCycleError.

    If a hook raises, the entity becomes INVALID and the exception propagates.
    """

    def __init__(self):
        self._state = State.INITIALIZED

    @property
    def state(self) -> State:
        """Current life cycle state."""
        return self._state

    def set_state(self, state: State) -> None:
        """Set life cycle state."""
        if not isinstance(state, State):
            raise ContractError(f"Not a life cycle state: {state!r}")
        self._state = state

    @property
    def is_started(self) -> bool:
        return self._state is State.STARTED

    @property
    def is_stopped(self) -> bool:
        return self._state is State.STOPPED

    def start(self) -> None:
        """Start the entity."""
        if self._state is State.STARTED:
            return
        if self._state is not State.INITIALIZED:
            raise LifeCycleError(
                f"Cannot start {self!r} in state {self._state}"
            )

        self._state = State.STARTING
        try:
            self._on_start()
        except Exception:
            self._state = State.INVALID
            raise
        self._state = State.STARTED

    def stop(self) -> None:
        """Stop the entity."""
        if self._state in (State.INITIALIZED, State.STOPPED, State.INVALID):
            return
        if self._state is not State.STARTED:
            raise LifeCycleError(
                f"Cannot stop {self!r} in state {self._state}"
            )

        self._state = State.STOPPING
        try:
            self._on_stop()
        except Exception:
            self._state = State.INVALID
            raise
        self._state = State.STOPPED

    def _on_start(self) -> None:
        """Hook called while STARTING."""

    def _on_stop(self) -> None:
        """Hook called while STOPPING."""


def get_state(obj) -> State:
    """
    Return the life cycle state of `obj`.

    Raises:
        ContractError: If `obj` is not a life cycle entity
    """
    if not isinstance(obj, LifeCycle):
        raise ContractError(f"{type(obj).__name__} is not a life cycle entity")
    return obj.state


def set_state(obj, state: State) -> None:
    """
    Set the life cycle state of `obj`.

    Raises:
        ContractError: If `obj` is not a life cycle entity
    """
    if not isinstance(obj, LifeCycle):
        raise ContractError(f"{type(obj).__name__} is not a life cycle entity")
    obj.set_state(state)
