"""Sequence and set helpers, SQL column types, row scanning and synchronisation primitives."""

__version__ = "0.1.0"

__all__ = [
    "atomic",
    "cond",
    "keylock",
    "sliceops",
    "sliceset",
    "sqlcolumns",
    "sqlnull",
    "sqlscan",
    "syncmap",
    "syncpool",
]