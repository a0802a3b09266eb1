# actionfsm/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""actionfsm: action-driven finite state machine engine.

States declare the events they accept and where those events lead. Entering
a state runs its action, and the action may hand back a follow-up event that
the machine processes before the original submission returns. All of this
happens under a single per-machine lock, so concurrent producers observe a
total order of submissions.
"""

from actionfsm.core.actions import NOOP_ACTION, Action, FunctionAction, NoOpAction, as_action
from actionfsm.core.errors import (
    CascadeLimitError,
    ConfigurationError,
    EventRejectedError,
    FSMError,
    ValidationError,
)
from actionfsm.core.events import DEFAULT_STATE, NO_OP, EventType, StateType
from actionfsm.core.hooks import HookManager, LoggingHook
from actionfsm.core.state_machine import StateMachine
from actionfsm.core.states import Events, State, States
from actionfsm.core.validations import Validator
from actionfsm.runtime.async_support import AsyncStateMachine

__version__ = "0.1.0"

__all__ = [
    "Action",
    "AsyncStateMachine",
    "CascadeLimitError",
    "ConfigurationError",
    "DEFAULT_STATE",
    "EventRejectedError",
    "EventType",
    "Events",
    "FSMError",
    "FunctionAction",
    "HookManager",
    "LoggingHook",
    "NO_OP",
    "NOOP_ACTION",
    "NoOpAction",
    "State",
    "StateMachine",
    "StateType",
    "States",
    "ValidationError",
    "Validator",
    "as_action",
]
