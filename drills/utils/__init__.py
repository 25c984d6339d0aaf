"""\
Utilities
=========

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module acts as an entry point for combining the logging and
tracing helpers used by the runner.
"""

from __future__ import annotations

from .logging import *
from .opentelemetry import *


__all__: tuple[str, ...] = logging.__all__ + opentelemetry.__all__
