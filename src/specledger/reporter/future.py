from __future__ import annotations

from concurrent.futures import Future
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ResultView(Generic[T]):
    """Read-only handle on a future owned by someone else.

    Holders can wait for, inspect and subscribe to the outcome but cannot
    resolve or cancel it.
    """

    __slots__ = ("_future",)

    def __init__(self, future: Future[T]) -> None:
        self._future = future

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> T:
        return self._future.result(timeout)

    def exception(self, timeout: float | None = None) -> BaseException | None:
        return self._future.exception(timeout)

    def add_done_callback(self, fn: Callable[[ResultView[T]], object]) -> None:
        self._future.add_done_callback(lambda _: fn(self))
