"""\
Argument spreading
==================

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

Two sequences are unpacked into a single call. The callee takes the
first three values positionally and collects whatever is left into
`*rest`; it keeps the first positional value and the collected rest.
"""

from __future__ import annotations

import typing as t
from collections.abc import Iterable
from collections.abc import Sequence

from drills.core.base import Exercise
from drills.core.error import ExerciseError
from drills.core.runner import register

__all__: tuple[str, ...] = (
    "ArgumentSpread",
    "combine",
    "forward",
    "joined",
)

# NOTE: `forward` needs `a`, `x` and `y` before anything reaches `*rest`.
_POSITIONAL: t.Final[int] = 3


def forward(a: t.Any, x: t.Any, y: t.Any, *rest: t.Any) -> list[t.Any]:
    """Return `a` followed by every value collected in `rest`."""
    return [a, *rest]


def combine(first: Sequence[t.Any], second: Sequence[t.Any]) -> list[t.Any]:
    """Spread both sequences into one call to `forward`.

    :param first: Values passed first.
    :param second: Values passed after `first`.
    :return: The first value and everything after the third.
    :raises ExerciseError: If fewer than three values are given in total.
    """
    if len(first) + len(second) < _POSITIONAL:
        raise ExerciseError(
            f"at least {_POSITIONAL} values are needed, got "
            f"{len(first) + len(second)}"
        )
    return forward(*first, *second)


def joined(values: Iterable[t.Any]) -> str:
    """Concatenate the textual form of `values` without a separator."""
    return "".join(str(value) for value in values)


@register
class ArgumentSpread(Exercise):
    """Check the values that survive the positional prefix."""

    name = "spread"
    description = "variadic spreading and collection of arguments"

    first: t.ClassVar[tuple[int, ...]] = (2, 4)
    second: t.ClassVar[tuple[int, ...]] = (6, 8, 10, 12)
    expected: t.ClassVar[str] = "281012"

    def run(self) -> t.Iterator[bool]:
        yield joined(combine(self.first, self.second)) == self.expected
