"""\
Closures
========

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

Deferred computations built inside a loop.

A closure created in a loop body refers to the loop variable itself,
not to its value at the time the closure was made. Every closure then
sees whatever the variable holds when it is finally called. Binding a
fresh name per iteration, here through a factory function, gives each
closure its own snapshot.
"""

from __future__ import annotations

import typing as t

from drills.core.base import Exercise
from drills.core.error import ExerciseError
from drills.core.runner import register

__all__: tuple[str, ...] = (
    "ClosureCapture",
    "make_deferred",
    "make_late_bound",
)

Deferred = t.Callable[[], int]


def _check(count: int) -> None:
    if count < 0:
        raise ExerciseError(f"count must not be negative, got {count}")


def _bind(value: int) -> Deferred:
    return lambda: value


def make_deferred(count: int) -> list[Deferred]:
    """Return `count` callables where the one at index `i` returns `i`.

    :param count: Number of callables to build.
    :return: Callables, each bound to its own iteration value.
    :raises ExerciseError: If `count` is negative.
    """
    _check(count)
    return [_bind(index) for index in range(count)]


def make_late_bound(count: int) -> list[Deferred]:
    """Return `count` callables that all share the loop variable.

    Every callable returns `count - 1`, the last value the loop
    variable held.

    :param count: Number of callables to build.
    :return: Callables closing over one shared variable.
    :raises ExerciseError: If `count` is negative.
    """
    _check(count)
    fns: list[Deferred] = []
    for index in range(count):
        fns.append(lambda: index)  # noqa: B023
    return fns


@register
class ClosureCapture(Exercise):
    """Check that the last deferred computation saw its own index."""

    name = "closures"
    description = "per-iteration capture of a loop variable"

    def run(self) -> t.Iterator[bool]:
        x = 2

        def inner() -> list[Deferred]:
            x = 5
            return make_deferred(x)

        fns = inner()
        yield (x * 2) == fns[x * 2]()
