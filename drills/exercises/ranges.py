"""\
Lazy ranges
===========

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

Inclusive integer ranges produced one value at a time.

Two versions of the same sequence live here. `BufferedNumbers` walks a
precomputed buffer of the integers 0 to 100 and yields the entries at
the requested positions. `numbers` and `NumberRange` compute every value
on demand and hold no storage at all; these are the ones to reach for.

Both are restartable: iterating a `NumberRange` or a `BufferedNumbers`
twice, or calling `numbers` again with the same arguments, produces the
same values again. A range whose start lies past its end is empty.
"""

from __future__ import annotations

import typing as t
from collections.abc import Iterator

from drills.core.base import Exercise
from drills.core.config import config_property
from drills.core.config import is_integer
from drills.core.error import ConfigValidationError
from drills.core.runner import register

__all__: tuple[str, ...] = (
    "BufferedNumbers",
    "BufferedRange",
    "LazyRange",
    "NumberRange",
    "RangeConfig",
    "numbers",
)

_BUFFER_SIZE: t.Final[int] = 101


def _is_step(value: t.Any) -> bool:
    return is_integer(value) and value > 0


class RangeConfig:
    """Bounds and stride of an inclusive range.

    Every field has a default and can be overridden on its own by
    keyword, e.g. `RangeConfig(step=5)`.

    :raises ConfigValidationError: On unknown fields, non-integer bounds
        or a step that is not a positive integer.
    """

    start: config_property[int] = config_property(0, check=is_integer)
    end: config_property[int] = config_property(100, check=is_integer)
    step: config_property[int] = config_property(1, check=_is_step)

    fields: t.ClassVar[tuple[str, ...]] = ("start", "end", "step")

    def __init__(self, **overrides: int) -> None:
        """Initialise the range, applying any keyword overrides."""
        unknown = sorted(set(overrides) - set(self.fields))
        if unknown:
            raise ConfigValidationError(
                f"unknown range field(s): {', '.join(unknown)}"
            )
        for field, value in overrides.items():
            try:
                setattr(self, field, value)
            except ConfigValidationError as error:
                raise ConfigValidationError(
                    f"got invalid value for {field!r}: {error}"
                ) from error

    def __repr__(self) -> str:
        """Return a string representation of the range."""
        return (
            f"{type(self).__name__}(start={self.start}, end={self.end}, "
            f"step={self.step})"
        )

    def __eq__(self, other: object) -> bool:
        """Compare two ranges field by field."""
        if not isinstance(other, RangeConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def as_dict(self) -> dict[str, int]:
        """Return the fields as a dictionary."""
        return {field: getattr(self, field) for field in self.fields}

    def replace(self, **overrides: int) -> RangeConfig:
        """Return a copy with `overrides` applied."""
        return type(self)(**(self.as_dict() | overrides))

    def __len__(self) -> int:
        """Return how many values the range produces."""
        if self.start > self.end:
            return 0
        return (self.end - self.start) // self.step + 1

    @property
    def last(self) -> int | None:
        """Return the final value the stride reaches, `None` when empty."""
        if self.start > self.end:
            return None
        return self.start + (self.end - self.start) // self.step * self.step


def _count(start: int, end: int, step: int) -> Iterator[int]:
    value = start
    while value <= end:
        yield value
        value += step


def numbers(
    *,
    start: int = 0,
    end: int = 100,
    step: int = 1,
) -> Iterator[int]:
    """Return a generator over `start..end` (inclusive) by `step`.

    Arguments are validated when this function is called, not on the
    first `next()` of the returned generator.

    :param start: First value, defaults to `0`.
    :param end: Inclusive upper bound, defaults to `100`.
    :param step: Positive stride, defaults to `1`.
    :return: A fresh generator.
    :raises ConfigValidationError: If an argument is invalid.
    """
    config = RangeConfig(start=start, end=end, step=step)
    return _count(config.start, config.end, config.step)


class NumberRange:
    """Re-iterable inclusive range computed on demand.

    Each call to `iter()` starts a new generator, so the range can be
    looped over any number of times.

    :param config: Range bounds, defaults to `RangeConfig()`.
    :param overrides: Field overrides applied on top of `config`.
    """

    def __init__(
        self,
        config: RangeConfig | None = None,
        **overrides: int,
    ) -> None:
        """Initialise the range."""
        if config is None:
            config = RangeConfig()
        self.config = config.replace(**overrides) if overrides else config

    def __repr__(self) -> str:
        """Return a string representation of the range."""
        fields = ", ".join(
            f"{key}={value}" for key, value in self.config.as_dict().items()
        )
        return f"{type(self).__name__}({fields})"

    def __iter__(self) -> Iterator[int]:
        """Return a new generator over the range."""
        return numbers(**self.config.as_dict())

    def __len__(self) -> int:
        """Return how many values the range produces."""
        return len(self.config)


class BufferedNumbers:
    """Inclusive range read from a precomputed buffer.

    :param start: First buffer position, defaults to `0`.
    :param end: Inclusive last buffer position, defaults to `100`.
    :param multiple: Positive stride, defaults to `1`.
    :raises ConfigValidationError: If the arguments are invalid or the
        range reaches outside the buffer.
    :var values: The integers `0` to `100`.
    """

    def __init__(self, start: int = 0, end: int = 100, multiple: int = 1):
        """Initialise the range and its buffer."""
        config = RangeConfig(start=start, end=end, step=multiple)
        self.values = list(range(_BUFFER_SIZE))
        last = config.last
        if last is not None and (
            config.start < 0 or last >= len(self.values)
        ):
            raise ConfigValidationError(
                f"range {config.start}..{last} does not fit a buffer "
                f"of {len(self.values)} values"
            )
        self.start = config.start
        self.end = config.end
        self.multiple = config.step

    def __repr__(self) -> str:
        """Return a string representation of the range."""
        return (
            f"{type(self).__name__}(start={self.start}, end={self.end}, "
            f"multiple={self.multiple})"
        )

    def __iter__(self) -> Iterator[int]:
        """Yield the buffered values at the requested positions."""
        for index in range(self.start, self.end + 1, self.multiple):
            yield self.values[index]


@register
class LazyRange(Exercise):
    """Print the default range followed by `6..30` by 4s."""

    name = "ranges"
    description = "on-demand generator over an inclusive range"

    def run(self) -> Iterator[int]:
        yield from numbers()
        yield from numbers(start=6, step=4, end=30)


@register
class BufferedRange(Exercise):
    """Print the same values as `LazyRange` using the buffered variant."""

    name = "ranges-buffered"
    description = "iterator over a precomputed buffer"

    def run(self) -> Iterator[int]:
        yield from BufferedNumbers()
        yield from BufferedNumbers(6, 30, 4)
