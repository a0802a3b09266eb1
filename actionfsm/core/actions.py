# actionfsm/core/actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

from actionfsm.core.events import NO_OP, EventType


class Action(ABC):
    """
    Behavior executed when the machine enters a state.

    The machine hands the caller's context through untouched. The returned
    event either ends the submission (``NO_OP``) or is processed next while
    the machine lock is still held.
    """

    @abstractmethod
    def execute(self, context: Any) -> EventType:
        """
        Run the action.

        :param context: Opaque value supplied to ``StateMachine.submit``.
        :return: ``NO_OP`` or the event to cascade into.
        """


class FunctionAction(Action):
    """
    Wraps a plain callable ``fn(context) -> event`` into an Action.
    A callable that returns None is treated as returning ``NO_OP``.
    """

    def __init__(self, action_fn: Callable[[Any], Optional[EventType]]) -> None:
        if not callable(action_fn):
            raise ValueError("Action function must be callable")
        self._action_fn = action_fn

    @property
    def function(self) -> Callable[[Any], Optional[EventType]]:
        return self._action_fn

    def execute(self, context: Any) -> EventType:
        result = self._action_fn(context)
        return NO_OP if result is None else result

    def __repr__(self) -> str:
        name = getattr(self._action_fn, "__qualname__", repr(self._action_fn))
        return f"FunctionAction({name})"


class NoOpAction(Action):
    """
    Explicit do-nothing action for states that are meant to be pure landing
    spots. A state without any action is a configuration error, so a terminal
    state that should do nothing binds this instead.
    """

    def execute(self, context: Any) -> EventType:
        return NO_OP

    def __repr__(self) -> str:
        return "NoOpAction()"


NOOP_ACTION = NoOpAction()


ActionLike = Union[Action, Callable[[Any], Optional[EventType]], None]


def as_action(action: ActionLike) -> Optional[Action]:
    """
    Normalise an action given in a definition.

    :param action: An Action, a callable, or None.
    :return: An Action instance, or None when no action was given.
    :raises ValueError: If ``action`` is neither.
    """
    if action is None or isinstance(action, Action):
        return action
    if callable(action):
        return FunctionAction(action)
    raise ValueError(f"Action must be an Action instance or a callable, got {type(action).__name__}")
