"""\
Command line entry point
========================

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

Run exercises with `python -m drills [NAME ...]`. Without names every
registered exercise runs in registration order.
"""

from __future__ import annotations

import sys
import typing as t

from drills.core.config import Config
from drills.core.error import ExerciseError
from drills.core.runner import Runner
from drills.utils.logging import configure

import drills.exercises  # noqa: F401

if t.TYPE_CHECKING:
    from collections.abc import Sequence


def main(
    argv: Sequence[str] | None = None,
    config: Config | None = None,
) -> int:
    """Run the requested exercises and return the exit status."""
    config = config or Config()
    logger = configure(config.logger)
    names = list(sys.argv[1:] if argv is None else argv)
    try:
        Runner(config).run_all(names or None)
    except ExerciseError as error:
        logger.error(error.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
