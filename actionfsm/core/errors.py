# actionfsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Optional


class FSMError(Exception):
    """
    Base exception class for errors raised by the state machine library.
    """


class EventRejectedError(FSMError):
    """
    Raised when the current state does not accept the submitted event.

    This is an ordinary negative outcome (switching off a light that is
    already off), not a fault. The machine state is left untouched.
    """

    def __init__(self, state: str, event: str) -> None:
        self.state = state
        self.event = event
        super().__init__(f"Event {event!r} rejected in state {state!r}")


class ConfigurationError(FSMError):
    """
    Raised when a transition points at a state that is not declared or that
    has no action bound. The definition is wrong and must be fixed; retrying
    the submission will fail the same way.
    """

    def __init__(self, source: str, event: str, target: str, reason: Optional[str] = None) -> None:
        self.source = source
        self.event = event
        self.target = target
        reason = reason or "has no action"
        super().__init__(f"Transition {source!r} --{event}--> {target!r}: target state {reason}")


class CascadeLimitError(FSMError):
    """
    Raised when a single submission chains more transitions than the machine's
    configured ``max_cascade``.
    """

    def __init__(self, limit: int, state: str, event: str) -> None:
        self.limit = limit
        self.state = state
        self.event = event
        super().__init__(f"Cascade exceeded {limit} transitions (state {state!r}, pending event {event!r})")


class ValidationError(FSMError):
    """
    Raised when build-time validation finds defects in a state definition.
    """
