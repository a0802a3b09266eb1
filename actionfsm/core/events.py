# actionfsm/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
State and event identifiers.

Both are plain strings. Two values are reserved: the default state, which a
freshly built machine rests in before anything has happened, and the no-op
event, which an action returns to end a submission.
"""

from typing import Optional

StateType = str
EventType = str

DEFAULT_STATE: StateType = ""

NO_OP: EventType = "NoOp"


def is_no_op(event: Optional[EventType]) -> bool:
    """Return True if ``event`` asks the machine to stop cascading."""
    return event is None or event == NO_OP
