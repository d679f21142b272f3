"""Bounds-checked codecs for the 9P2000 wire types."""

__version__ = "1.0.0"

from .buffer import Cursor
from .errors import MalformedInputError
from .protocol import Data, Int8, Int16, Int32, Int64, Qid, Stat
from .result import Err, Ok, bind, capture, unwrap

__all__ = [
    "Cursor",
    "Data",
    "Err",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "MalformedInputError",
    "Ok",
    "Qid",
    "Stat",
    "bind",
    "capture",
    "unwrap",
]
