"""Reader/Writer Guard - many concurrent readers or one exclusive writer.

Invariants:
    - A writer never overlaps any other holder, readers only overlap readers
    - Admission is FIFO by ticket: nobody waits forever behind later arrivals
    - Consecutive readers at the head of the line are admitted together
    - An unexpected exception escaping a write() block poisons the guard;
      every later acquisition raises GuardPoisoned

Design Decisions:
    - threading.Condition over asyncio primitives: endpoints are sync and run
      in the FastAPI thread pool
    - Exceptions listed in `expected` leave the data consistent (raised before
      any mutation) and do not poison
"""

import threading
from contextlib import contextmanager
from enum import Enum
from typing import Iterator


class GuardMode(str, Enum):
    READ = "Read"
    WRITE = "Write"


class GuardPoisoned(Exception):
    """Acquisition refused: a previous writer failed mid-update."""

    def __init__(self, mode: GuardMode):
        super().__init__(f"{mode.value} Lock was poisoned")
        self.mode = mode


class RWGuard:
    """Fair reader/writer exclusion with poisoning."""

    def __init__(self, expected: tuple[type[BaseException], ...] = ()):
        self._cond = threading.Condition()
        self._expected = expected
        self._readers = 0
        self._writer = False
        self._next_ticket = 0
        self._now_serving = 0
        self._poisoned = False

    @property
    def is_poisoned(self) -> bool:
        with self._cond:
            return self._poisoned

    def _can_enter(self, mode: GuardMode) -> bool:
        if mode is GuardMode.READ:
            return not self._writer
        return not self._writer and self._readers == 0

    def acquire(self, mode: GuardMode) -> None:
        with self._cond:
            if self._poisoned:
                raise GuardPoisoned(mode)
            ticket = self._next_ticket
            self._next_ticket += 1
            while not (ticket == self._now_serving and self._can_enter(mode)):
                self._cond.wait()
                if self._poisoned:
                    raise GuardPoisoned(mode)
            self._now_serving += 1
            if mode is GuardMode.WRITE:
                self._writer = True
            else:
                self._readers += 1
            # the next ticket may be a reader that can join right away
            self._cond.notify_all()

    def release(self, mode: GuardMode) -> None:
        with self._cond:
            if mode is GuardMode.WRITE:
                self._writer = False
            else:
                self._readers -= 1
            self._cond.notify_all()

    def _poison(self) -> None:
        with self._cond:
            self._poisoned = True
            self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        self.acquire(GuardMode.READ)
        try:
            yield
        finally:
            self.release(GuardMode.READ)

    @contextmanager
    def write(self) -> Iterator[None]:
        self.acquire(GuardMode.WRITE)
        try:
            yield
        except BaseException as exc:
            if not isinstance(exc, self._expected):
                self._poison()
            raise
        finally:
            self.release(GuardMode.WRITE)

    def hold(self, mode: GuardMode):
        """Context manager for the given mode."""
        return self.write() if mode is GuardMode.WRITE else self.read()
