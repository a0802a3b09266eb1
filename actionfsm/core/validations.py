# actionfsm/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import List

from actionfsm.core.errors import ValidationError
from actionfsm.core.states import States


class Validator:
    """
    Build-time checks for a machine definition.

    The runtime reports a bad destination only when the transition is first
    exercised. Running the validator up front finds every such defect at once.
    """

    def validate(self, states: States) -> List[str]:
        """
        Collect problems in the definition.

        :param states: The definition to inspect.
        :return: Human readable problem descriptions; empty if the definition is sound.
        """
        errors: List[str] = []
        for source, event, target in states.destinations():
            state = states.get(target)
            if state is None:
                errors.append(f"Transition {source!r} --{event}--> {target!r} targets an undeclared state")
            elif state.action is None:
                errors.append(f"Transition {source!r} --{event}--> {target!r} targets a state with no action")
        return errors

    def check(self, states: States) -> None:
        """
        :raises ValidationError: If ``validate`` reports any problem.
        """
        errors = self.validate(states)
        if errors:
            raise ValidationError("\n".join(errors))
