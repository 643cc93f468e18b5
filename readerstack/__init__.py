"""
readerstack — dependency injection with the Reader monad.

    from readerstack import reader as R         # Environment effect
    from readerstack import option_reader as OR # Environment + absence
    from readerstack import lift as L           # Single effect -> both
"""

from readerstack import reader
from readerstack import option_reader
from readerstack import lift
from readerstack import datastore
from readerstack.reader import Reader
from readerstack.option_reader import OptionReader
from readerstack._types import (
    Option,
    Some,
    Nothing,
    Run,
    Projection,
)

__version__ = "0.1.0"

__all__ = (
    "reader",
    "option_reader",
    "lift",
    "datastore",
    "Reader",
    "OptionReader",
    "Option",
    "Some",
    "Nothing",
    "Run",
    "Projection",
)
