"""Combinators over concurrent.futures.Future.

Each combinator returns a new Future that is settled from done-callbacks of
its inputs, so none of them block the caller.
"""

from __future__ import annotations

import functools
import logging
import threading
from concurrent.futures import CancelledError, Future
from typing import Any, Callable, Iterable, TypeVar

__all__ = [
    "resolved",
    "rejected",
    "answer_proposal",
    "gather_all",
    "first_settled",
    "reduce_settled",
]

T = TypeVar("T")

log = logging.getLogger(__name__)

YES_ANSWER = 'Hooray!!! She said "Yes"!'
NO_ANSWER = 'Oh no, she said "No".'
WRONG_PARAMETER = "Wrong parameter is passed! Ask her again."


def _failure(future: Future[Any]) -> BaseException | None:
    """Return the exception of a done future, treating cancellation as one."""
    if future.cancelled():
        return CancelledError()
    return future.exception()


def resolved(value: T) -> Future[T]:
    """Return a future already resolved with *value*."""
    future: Future[T] = Future()
    future.set_result(value)
    return future


def rejected(exc: BaseException) -> Future[Any]:
    """Return a future already failed with *exc*."""
    future: Future[Any] = Future()
    future.set_exception(exc)
    return future


def answer_proposal(is_positive: object) -> Future[str]:
    """Resolve with the yes/no answer for a bool, fail with ValueError otherwise."""
    if isinstance(is_positive, bool):
        return resolved(YES_ANSWER if is_positive else NO_ANSWER)
    return rejected(ValueError(WRONG_PARAMETER))


def gather_all(futures: Iterable[Future[T]]) -> Future[list[T]]:
    """Resolve with every result in input order, or fail with the first exception seen."""
    inputs = list(futures)
    result: Future[list[T]] = Future()
    if not inputs:
        result.set_result([])
        return result

    lock = threading.Lock()
    values: list[Any] = [None] * len(inputs)
    remaining = len(inputs)

    def _on_done(index: int, future: Future[T]) -> None:
        nonlocal remaining
        exc = _failure(future)
        with lock:
            if result.done():
                return
            if exc is not None:
                result.set_exception(exc)
                return
            values[index] = future.result()
            remaining -= 1
            if remaining == 0:
                result.set_result(values)

    for index, future in enumerate(inputs):
        future.add_done_callback(functools.partial(_on_done, index))
    return result


def first_settled(futures: Iterable[Future[T]]) -> Future[T]:
    """Settle like whichever input settles first, result or exception."""
    inputs = list(futures)
    if not inputs:
        raise ValueError("first_settled() needs at least one future")

    lock = threading.Lock()
    result: Future[T] = Future()

    def _on_done(future: Future[T]) -> None:
        exc = _failure(future)
        with lock:
            if result.done():
                return
            if exc is not None:
                result.set_exception(exc)
            else:
                result.set_result(future.result())

    for future in inputs:
        future.add_done_callback(_on_done)
    return result


def reduce_settled(futures: Iterable[Future[T]], action: Callable[[T, T], T]) -> Future[T]:
    """Reduce the results of the inputs that succeed, in input order.

    Failed inputs are skipped. If none succeed the returned future fails
    with ValueError.
    """
    inputs = list(futures)
    result: Future[T] = Future()
    lock = threading.Lock()
    remaining = len(inputs)

    def _finish() -> None:
        values = []
        for index, future in enumerate(inputs):
            exc = _failure(future)
            if exc is not None:
                log.debug("Skipping failed future #%d: %s", index, exc)
                continue
            values.append(future.result())
        if not values:
            result.set_exception(ValueError("reduce_settled() got no successful results"))
            return
        try:
            result.set_result(functools.reduce(action, values))
        except Exception as exc:
            result.set_exception(exc)

    if not inputs:
        _finish()
        return result

    def _on_done(_future: Future[T]) -> None:
        nonlocal remaining
        with lock:
            remaining -= 1
            if remaining:
                return
        _finish()

    for future in inputs:
        future.add_done_callback(_on_done)
    return result
