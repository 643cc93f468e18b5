"""
Reader — computations that depend on an environment.

    from readerstack import reader as R

    program = R.ask().map(lambda cfg: cfg.data_store).flat_map(...)
    result = program.run(config)
"""

from __future__ import annotations

from readerstack.reader._types import Reader
from readerstack.reader._ops import ask, pure

__all__ = (
    "Reader",
    "ask",
    "pure",
)
