# actionfsm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from actionfsm.core.errors import CascadeLimitError, ConfigurationError, EventRejectedError
from actionfsm.core.events import DEFAULT_STATE, EventType, StateType, is_no_op
from actionfsm.core.hooks import HookManager
from actionfsm.core.states import State, States
from actionfsm.core.validations import Validator
from actionfsm.runtime.concurrency import get_lock, with_lock

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Drives a fixed state definition one event at a time.

    ``submit`` resolves the transition for the current state, commits it,
    runs the destination's action and keeps going for as long as actions
    return follow-up events. The whole chain runs under one lock, so
    concurrent submitters are totally ordered and never observe a half-done
    cascade.
    """

    def __init__(
        self,
        states: Mapping,
        initial: StateType = DEFAULT_STATE,
        hooks: Optional[List[Any]] = None,
        validate: bool = False,
        max_cascade: Optional[int] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        :param states: The definition, as ``States`` or a plain mapping of name -> State.
        :param initial: State the machine rests in before the first event.
        :param hooks: Optional hook objects (see ``HookManager``).
        :param validate: Check the definition for bad destinations now
                         instead of when they are first exercised.
        :param max_cascade: Upper bound on transitions per submission. None
                            means unbounded; a looping action is the caller's
                            problem.
        :param name: Optional label used in log messages and repr.
        :raises ValidationError: If ``validate`` is set and the definition is defective.
        :raises ValueError: If ``max_cascade`` is not a positive integer.
        """
        if not isinstance(states, States):
            states = States(states)
        if max_cascade is not None and max_cascade < 1:
            raise ValueError("max_cascade must be a positive integer")
        if validate:
            Validator().check(states)

        self._states = states
        self._current: StateType = initial
        self._previous: Optional[StateType] = None
        self._hooks = HookManager(hooks)
        self._max_cascade = max_cascade
        self._name = name
        self._lock = get_lock()

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def states(self) -> States:
        """The read-only definition this machine runs."""
        return self._states

    @property
    def current(self) -> StateType:
        return self._current

    @property
    def previous(self) -> Optional[StateType]:
        """State held before the most recent transition, None before the first one."""
        return self._previous

    @property
    def hooks(self) -> HookManager:
        return self._hooks

    def submit(self, event: EventType, context: Any = None) -> None:
        """
        Process ``event`` and every event cascaded from it.

        :param event: The external event.
        :param context: Passed unchanged to every action in the chain.
        :raises EventRejectedError: If the current state does not accept the
            event (or a cascaded event). Transitions already committed in
            this call stay committed.
        :raises ConfigurationError: If the transition leads to an undeclared
            state or to a state without an action.
        :raises CascadeLimitError: If ``max_cascade`` is exceeded.
        :raises TypeError: If an action returns an awaitable. The transition
            into that state stays committed.
        """
        with with_lock(self._lock):
            steps = 0
            while True:
                target, state = self._resolve(event, steps)
                self._commit(target, event)
                steps += 1
                event = self._run_action(state, context)
                if is_no_op(event):
                    return
                logger.debug("%s: cascading from %r with event %r", self._label, self._current, event)

    def send_event(self, event: EventType, context: Any = None) -> bool:
        """
        Like ``submit`` but reports rejection as False instead of raising.
        Configuration errors and action failures still raise.
        """
        try:
            self.submit(event, context)
        except EventRejectedError:
            return False
        return True

    def transition(self, event: EventType, context: Any = None) -> StateType:
        """
        Submit ``event`` and return the state the machine ends up in.

        :raises: Same as ``submit``.
        """
        self.submit(event, context)
        return self._current

    def can_accept(self, event: EventType) -> bool:
        """
        Return True if the current state has a transition for ``event``.

        Takes no lock, so actions may call it while their own submission is
        in progress.
        """
        state = self._states.get(self._current)
        return state is not None and state.accepts(event)

    @property
    def _label(self) -> str:
        return self._name or "machine"

    def _resolve(self, event: EventType, steps: int) -> Tuple[StateType, State]:
        """
        Find the destination of ``event`` from the current state.
        Must be called with the lock held; never changes machine state.
        """
        current = self._current
        if self._max_cascade is not None and steps >= self._max_cascade:
            error = CascadeLimitError(self._max_cascade, current, event)
            logger.error("%s: %s", self._label, error)
            self._hooks.execute_on_error(error)
            raise error

        source = self._states.get(current)
        target = source.next_state(event) if source is not None else None
        if target is None:
            logger.info("%s: event %r rejected in state %r", self._label, event, current)
            self._hooks.execute_on_reject(current, event)
            raise EventRejectedError(current, event)

        state = self._states.get(target)
        if state is None or state.action is None:
            reason = "is not declared" if state is None else "has no action"
            error = ConfigurationError(current, event, target, reason)
            logger.error("%s: %s", self._label, error)
            self._hooks.execute_on_error(error)
            raise error
        return target, state

    def _commit(self, target: StateType, event: EventType) -> None:
        self._previous = self._current
        self._current = target
        logger.debug("%s: %r --%s--> %r", self._label, self._previous, event, target)
        self._hooks.execute_on_transition(self._previous, target, event)

    def _run_action(self, state: State, context: Any) -> EventType:
        try:
            result = state.action.execute(context)
        except Exception as e:
            logger.debug("%s: action for state %r raised %s", self._label, self._current, type(e).__name__)
            self._hooks.execute_on_error(e)
            raise
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            error = TypeError(
                f"Action for state {self._current!r} returned an awaitable; use AsyncStateMachine for async actions"
            )
            self._hooks.execute_on_error(error)
            raise error
        return result

    def __repr__(self) -> str:
        name = f"name={self._name!r}, " if self._name else ""
        return f"{type(self).__name__}({name}current={self._current!r}, previous={self._previous!r})"
