# actionfsm/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping as MappingType, Optional, Tuple

from actionfsm.core.actions import ActionLike, as_action
from actionfsm.core.events import EventType, StateType

Events = MappingType[EventType, StateType]


@dataclass(frozen=True, eq=False)
class State:
    """
    Declares the events a state accepts and the action run on entering it.

    The transition table is copied into a read-only view at construction, so
    a State can be shared between threads and machines freely.

    :param events: Mapping of accepted event -> destination state.
    :param action: Action (or plain callable) executed when the state is
                   entered. Leave it unset only for states that are never a
                   destination, such as the default state.
    """

    events: Events = field(default_factory=dict)
    action: ActionLike = None

    def __post_init__(self) -> None:
        events = self.events if self.events is not None else {}
        if not isinstance(events, Mapping):
            raise ValueError("State events must be a mapping of event -> state")
        object.__setattr__(self, "events", MappingProxyType(dict(events)))
        object.__setattr__(self, "action", as_action(self.action))

    def accepts(self, event: EventType) -> bool:
        return event in self.events

    def next_state(self, event: EventType) -> Optional[StateType]:
        """Return the destination for ``event``, or None if not accepted."""
        return self.events.get(event)


class States(Mapping):
    """
    The complete, read-only machine definition: state identifier -> State.

    There is no mutation API. To change a definition, build a new one.
    """

    def __init__(self, states: Optional[Mapping] = None) -> None:
        states = states or {}
        for name, state in states.items():
            if not isinstance(state, State):
                raise ValueError(f"State {name!r} must be a State instance, got {type(state).__name__}")
        self._states: Dict[StateType, State] = dict(states)

    def __getitem__(self, name: StateType) -> State:
        return self._states[name]

    def __iter__(self) -> Iterator[StateType]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return f"States({sorted(self._states)!r})"

    def destinations(self) -> Iterator[Tuple[StateType, EventType, StateType]]:
        """
        Yield every declared transition as ``(source, event, target)``.
        """
        for source, state in self._states.items():
            for event, target in state.events.items():
                yield source, event, target

    @classmethod
    def from_config(cls, config: Mapping) -> "States":
        """
        Build a definition from plain data.

        Each key names a state; each value may contain ``on`` (event ->
        target, where target is a state name or ``{"to": name}``) and
        ``action`` (an Action or callable)::

            States.from_config({
                "locked": {"on": {"COIN": "unlocked", "PUSH": {"to": "locked"}}, "action": on_locked},
                "unlocked": {"on": {"COIN": "unlocked", "PUSH": "locked"}, "action": on_unlocked},
            })

        :raises ValueError: If an entry is malformed.
        """
        states: Dict[StateType, State] = {}
        for name, entry in config.items():
            if entry is None:
                entry = {}
            if not isinstance(entry, Mapping):
                raise ValueError(f"Definition for state {name!r} must be a mapping")
            unknown = set(entry) - {"on", "action"}
            if unknown:
                raise ValueError(f"Unknown keys for state {name!r}: {', '.join(sorted(unknown))}")
            events: Dict[EventType, StateType] = {}
            for event, target in (entry.get("on") or {}).items():
                events[event] = _target_of(name, event, target)
            states[name] = State(events=events, action=entry.get("action"))
        return cls(states)


def _target_of(name: StateType, event: EventType, target: Any) -> StateType:
    if isinstance(target, Mapping):
        if "to" not in target:
            raise ValueError(f"Transition {name!r} --{event}--> is missing 'to'")
        target = target["to"]
    if not isinstance(target, str):
        raise ValueError(f"Transition {name!r} --{event}--> target must be a state name")
    return target
