"""\
Core
====

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module acts as an entry point for combining the core objects and
configurations used throughout this package.
"""

from __future__ import annotations

from .config import *
from .error import *
from .base import *
from .runner import *


__all__: tuple[str, ...] = (
    config.__all__ + error.__all__ + base.__all__ + runner.__all__
)
