# actionfsm/runtime/async_support.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Optional

from actionfsm.core.errors import EventRejectedError
from actionfsm.core.events import EventType, StateType, is_no_op
from actionfsm.core.state_machine import StateMachine
from actionfsm.core.states import State

logger = logging.getLogger(__name__)


class AsyncStateMachine(StateMachine):
    """
    Asynchronous version of the state machine for use inside an event loop.

    Semantics match ``StateMachine``; the critical section is an
    ``asyncio.Lock`` so that tasks queue up instead of blocking the loop.
    Actions may be plain (returning an event) or async (returning an
    awaitable that resolves to one). An instance belongs to a single event
    loop.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._async_lock: Optional[asyncio.Lock] = None

    def _get_async_lock(self) -> asyncio.Lock:
        # Created on first use so construction does not need a running loop.
        if self._async_lock is None:
            self._async_lock = asyncio.Lock()
        return self._async_lock

    async def submit(self, event: EventType, context: Any = None) -> None:
        """
        Process ``event`` and its cascade. Raises the same errors as
        ``StateMachine.submit``.
        """
        async with self._get_async_lock():
            steps = 0
            while True:
                target, state = self._resolve(event, steps)
                self._commit(target, event)
                steps += 1
                event = await self._run_action_async(state, context)
                if is_no_op(event):
                    return
                logger.debug("%s: cascading from %r with event %r", self._label, self._current, event)

    async def send_event(self, event: EventType, context: Any = None) -> bool:
        try:
            await self.submit(event, context)
        except EventRejectedError:
            return False
        return True

    async def transition(self, event: EventType, context: Any = None) -> StateType:
        await self.submit(event, context)
        return self._current

    async def _run_action_async(self, state: State, context: Any) -> EventType:
        try:
            result = state.action.execute(context)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.debug("%s: action for state %r raised %s", self._label, self._current, type(e).__name__)
            self._hooks.execute_on_error(e)
            raise
        return result
