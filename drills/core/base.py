"""\
Base Tools
==========

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

Base exercise.

This module provides the foundational classes every exercise derives
from: a small mixin for readable representations and the abstract
`Exercise` interface understood by the runner.
"""

from __future__ import annotations

import typing as t
from abc import ABC
from abc import abstractmethod
from collections.abc import Iterator

__all__: tuple[str, ...] = (
    "Exercise",
    "Observable",
)

_AttributeStream = Iterator[tuple[str, t.Any]]

# NOTE: These limits keep `repr` output of exercises holding large
# buffers to a single readable line.
_SEQUENCE_LIMIT: t.Final[int] = 5
_DICTIONARY_LIMIT: t.Final[int] = 3
_STRING_LIMIT: t.Final[int] = 60


class Observable:
    """Provide observable behaviour for derived classes.

    Derived classes get a `repr` built from their public, non-`None`
    attributes. Long strings are truncated while large sequences and
    dictionaries are summarised by type and length.
    """

    __slots__: tuple[str, ...] = ("__weakref__",)

    def __inspect_attrs__(self) -> _AttributeStream:
        """Yield public attributes of the instance.

        :yield: Tuples of attribute names and their values.
        """
        for attr, value in getattr(self, "__dict__", {}).items():
            if not attr.startswith("_") and value is not None:
                yield attr, value

    def _format(self, value: t.Any) -> str:
        """Format value for string representation."""
        if value is self:
            return f"<circular-{type(self).__name__}>"
        elif isinstance(value, str) and len(value) > _STRING_LIMIT:
            return f"{value[:_STRING_LIMIT - 3]}..."
        elif (
            isinstance(value, (list, tuple, set))
            and len(value) > _SEQUENCE_LIMIT
        ):
            return f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict) and len(value) > _DICTIONARY_LIMIT:
            return f"dict({len(value)} items)"
        return repr(value)

    def __repr__(self) -> str:
        """Return a string representation of the instance."""
        attrs = [
            f"{name}={self._format(value)}"
            for name, value in self.__inspect_attrs__()
        ]
        return f"{type(self).__name__}({', '.join(attrs)})"


class Exercise(Observable, ABC):
    """Demonstrate a single language feature.

    An exercise is a self-contained demonstration that produces a short,
    deterministic sequence of values. The runner writes one line per
    value to standard output.

    Concrete exercises set the `name` class attribute, which is the key
    used by the runner registry, and implement `run`.

    .. code-block:: python

        @register
        class Answer(Exercise):
            name = "answer"

            def run(self):
                yield 6 * 7

    :var name: Registry key of the exercise.
    :var description: One line summary shown in logs.
    """

    name: t.ClassVar[str] = ""
    description: t.ClassVar[str] = ""

    def __inspect_attrs__(self) -> _AttributeStream:
        """Yield the exercise name followed by its public attributes."""
        yield "name", self.name
        yield from super().__inspect_attrs__()

    @abstractmethod
    def run(self) -> Iterator[t.Any]:
        """Yield the values produced by the exercise, in order.

        :yield: Values whose `str` form is written out, one per line.
        """
        raise NotImplementedError("Subclasses must implement run method")

    def lines(self) -> Iterator[str]:
        """Yield the textual form of every value from `run`."""
        for value in self.run():
            yield str(value)
