"""9P2000 wire-type codecs."""

from .data import Data
from .qid import Qid
from .scalars import Int8, Int16, Int32, Int64
from .stat import Stat
from . import structures

__all__ = [
    "Data",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Qid",
    "Stat",
    "structures",
]
