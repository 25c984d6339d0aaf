"""\
Runner
======

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module keeps the registry of known exercises and runs them,
writing each produced line to an output stream.

Exercises register themselves with the `register` class decorator when
their module is imported. The runner looks them up by name, wraps each
run in a tracing span, logs its start and completion and times it.
"""

from __future__ import annotations

import sys
import typing as t

from drills.core.base import Exercise
from drills.core.config import Config
from drills.core.error import ExerciseError
from drills.utils.logging import get_logger
from drills.utils.logging import perf_logger
from drills.utils.opentelemetry import get_tracer

if t.TYPE_CHECKING:
    from collections.abc import Iterable

__all__: tuple[str, ...] = (
    "Runner",
    "register",
    "registry",
)

_REGISTRY: dict[str, type[Exercise]] = {}

logger = get_logger(__name__)


def register(exercise: type[Exercise]) -> type[Exercise]:
    """Add an exercise class to the registry under its `name`.

    :param exercise: Exercise class to register.
    :return: The same class, so this can be used as a decorator.
    :raises ExerciseError: If the class has no name or the name is
        already taken by another class.
    """
    if not exercise.name:
        raise ExerciseError(f"{exercise.__qualname__} does not define a name")
    current = _REGISTRY.get(exercise.name)
    if current is not None and current is not exercise:
        raise ExerciseError(
            f"exercise {exercise.name!r} is already registered by "
            f"{current.__qualname__}"
        )
    _REGISTRY[exercise.name] = exercise
    return exercise


def registry() -> dict[str, type[Exercise]]:
    """Return a copy of the registry in registration order."""
    return dict(_REGISTRY)


class Runner:
    """Run registered exercises.

    :param config: Configuration object, defaults to a fresh `Config`.
    :param stream: Text stream the exercise output is written to,
        defaults to `sys.stdout` at call time.
    """

    def __init__(
        self,
        config: Config | None = None,
        stream: t.TextIO | None = None,
    ) -> None:
        """Initialise the runner and its tracer."""
        self.config = config or Config()
        self.stream = stream
        self.tracer = get_tracer(self.config)

    def __repr__(self) -> str:
        """Return a string representation of the runner."""
        return f"{type(self).__name__}(exercises={len(_REGISTRY)})"

    def resolve(self, name: str) -> type[Exercise]:
        """Return the exercise class registered under `name`.

        :raises ExerciseError: If no exercise is registered as `name`.
        """
        try:
            return _REGISTRY[name]
        except KeyError:
            known = ", ".join(sorted(_REGISTRY)) or "none"
            raise ExerciseError(
                f"unknown exercise {name!r} (known: {known})"
            ) from None

    @perf_logger
    def run(self, name: str) -> int:
        """Run a single exercise and write its output.

        :param name: Registry name of the exercise.
        :return: Number of lines written.
        """
        exercise = self.resolve(name)()
        stream = self.stream or sys.stdout
        logger.debug(
            f"Running {name!r}",
            extra={"exercise": name, "description": exercise.description},
        )
        with self.tracer.start_as_current_span(name) as span:
            count = 0
            for line in exercise.lines():
                stream.write(f"{line}\n")
                count += 1
            span.set_attribute("drills.lines", count)
        logger.debug(
            f"Finished {name!r}",
            extra={"exercise": name, "lines": count},
        )
        return count

    def run_all(self, names: Iterable[str] | None = None) -> int:
        """Run several exercises in order.

        Names are resolved up front, so an unknown name stops the run
        before anything is written.

        :param names: Exercise names, defaults to every registered
            exercise in registration order.
        :return: Total number of lines written.
        """
        selected = list(_REGISTRY) if names is None else list(names)
        for name in selected:
            self.resolve(name)
        return sum(self.run(name) for name in selected)
