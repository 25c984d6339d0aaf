"""\
Exercises
=========

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module imports every exercise so that each one is registered with
the runner, in the order they are run by default.
"""

from __future__ import annotations

from .closures import *
from .spread import *
from .ranges import *


__all__: tuple[str, ...] = closures.__all__ + spread.__all__ + ranges.__all__
