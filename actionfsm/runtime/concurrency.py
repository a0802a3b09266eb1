# actionfsm/runtime/concurrency.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


def get_lock() -> threading.Lock:
    """
    Provide a new lock instance guarding one machine's critical section.

    The lock is deliberately non-reentrant: an action that submits to its own
    machine deadlocks instead of interleaving with the cascade in progress.
    Actions request follow-up work by returning an event.
    """
    return threading.Lock()


@contextmanager
def with_lock(lock: threading.Lock) -> Iterator[None]:
    """
    Acquire ``lock`` for the duration of the with-block and release it on every
    exit path, including exceptions raised by actions.
    """
    lock.acquire()
    try:
        yield
    finally:
        lock.release()
