"""\
Drills
======

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

Small, self-contained exercises for core Python language features.

Each exercise demonstrates one feature and prints either a boolean
check or a short sequence of integers:

- `closures`: deferred computations capturing a per-iteration value.
- `spread`: unpacking sequences into a call with a variadic tail.
- `ranges`: a lazy, restartable inclusive range (plus a buffer-backed
  variant, `ranges-buffered`).

Run them with `python -m drills [NAME ...]`.
"""

from __future__ import annotations

from .core import *
from .utils import *
from .exercises import *


__all__: tuple[str, ...] = ("__version__",)
__all__ += core.__all__
__all__ += utils.__all__
__all__ += exercises.__all__

__version__: str = "19.10.2026"
