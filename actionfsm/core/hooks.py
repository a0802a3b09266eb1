# actionfsm/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, List, Optional

from actionfsm.core.events import EventType, StateType

logger = logging.getLogger(__name__)


class HookManager:
    """
    Manages hooks that observe a machine: committed transitions, rejected
    events and errors. A hook is any object; each of ``on_transition``,
    ``on_reject`` and ``on_error`` is optional.

    Hooks run inside the machine's critical section, in registration order.
    A hook that raises is logged at ERROR and skipped; it never changes the
    outcome of a submission.
    """

    def __init__(self, hooks: Optional[List[Any]] = None) -> None:
        self._hooks: List[Any] = list(hooks or [])

    @property
    def hooks(self) -> List[Any]:
        return list(self._hooks)

    def register_hook(self, hook: Any) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object exposing any of the hook methods.
        """
        self._hooks.append(hook)

    def execute_on_transition(self, previous: StateType, current: StateType, event: EventType) -> None:
        self._invoke("on_transition", previous, current, event)

    def execute_on_reject(self, state: StateType, event: EventType) -> None:
        self._invoke("on_reject", state, event)

    def execute_on_error(self, error: Exception) -> None:
        self._invoke("on_error", error)

    def _invoke(self, method: str, *args: Any) -> None:
        for hook in self._hooks:
            fn = getattr(hook, method, None)
            if fn is None:
                continue
            try:
                fn(*args)
            except Exception:
                logger.exception("Hook %r failed in %s", hook, method)


class LoggingHook:
    """
    Writes machine activity to a logger: transitions at DEBUG, rejections at
    INFO and errors at WARNING.
    """

    def __init__(self, name: str = "machine", log: Optional[logging.Logger] = None) -> None:
        self._name = name
        self._logger = log or logger

    def on_transition(self, previous: StateType, current: StateType, event: EventType) -> None:
        self._logger.debug("%s: %r --%s--> %r", self._name, previous, event, current)

    def on_reject(self, state: StateType, event: EventType) -> None:
        self._logger.info("%s: event %r rejected in state %r", self._name, event, state)

    def on_error(self, error: Exception) -> None:
        self._logger.warning("%s: %s: %s", self._name, type(error).__name__, error)
