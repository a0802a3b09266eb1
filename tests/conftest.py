# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading
from unittest.mock import MagicMock

import pytest

from actionfsm.core.events import DEFAULT_STATE, NO_OP


@pytest.fixture
def off_action():
    """Action recorder for the Off state."""
    return MagicMock(return_value=NO_OP)


@pytest.fixture
def on_action():
    """Action recorder for the On state."""
    return MagicMock(return_value=NO_OP)


@pytest.fixture
def light_switch_states(off_action, on_action):
    """The two-state toggle: Off <-> On, entered from the default state via SwitchOff."""
    from actionfsm.core.states import State, States

    return States(
        {
            DEFAULT_STATE: State(events={"SwitchOff": "Off"}),
            "Off": State(events={"SwitchOn": "On"}, action=off_action),
            "On": State(events={"SwitchOff": "Off"}, action=on_action),
        }
    )


@pytest.fixture
def light_switch(light_switch_states):
    """A fresh light switch machine resting in the default state."""
    from actionfsm.core.state_machine import StateMachine

    return StateMachine(light_switch_states)


@pytest.fixture
def turnstile_config():
    """Coin-operated turnstile in plain-data form."""
    return {
        "locked": {
            "on": {"COIN": {"to": "unlocked"}, "PUSH": {"to": "locked"}},
            "action": lambda ctx: NO_OP,
        },
        "unlocked": {
            "on": {"COIN": "unlocked", "PUSH": "locked"},
            "action": lambda ctx: NO_OP,
        },
    }


@pytest.fixture
def dummy_hooks():
    """A list of hook mocks for testing HookManager."""
    hook = MagicMock()
    hook.on_transition = MagicMock()
    hook.on_reject = MagicMock()
    hook.on_error = MagicMock()
    return [hook]


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from actionfsm.core.errors import (
        CascadeLimitError,
        ConfigurationError,
        EventRejectedError,
        FSMError,
        ValidationError,
    )

    return (FSMError, EventRejectedError, ConfigurationError, CascadeLimitError, ValidationError)


@pytest.fixture(autouse=True)
def cleanup_threads():
    yield
    # Cleanup any remaining threads after each test
    for thread in threading.enumerate():
        if thread != threading.current_thread() and thread.is_alive() and not thread.daemon:
            thread.join(timeout=1.0)
