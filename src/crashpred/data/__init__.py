"""Game history records and windowed access.

File loading lives in ``crashpred.data.loader`` and is imported only by the CLI.
"""

from .history import History, IndexOutOfRangeError, at, last_n
from .record import Record

__all__ = [
    "History",
    "IndexOutOfRangeError",
    "Record",
    "at",
    "last_n",
]
