"""Reading whole rows from a DB-API cursor as lists of values."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Rows(Protocol):
    """The part of a DB-API cursor that ``RowsScanner`` relies on.

    A cursor may also offer ``nextset()`` to move to the next result set.
    """

    @property
    def description(self) -> Sequence[Sequence[Any]] | None: ...

    def fetchone(self) -> Sequence[Any] | None: ...


class NoMoreRowsError(Exception):
    """Raised by ``RowsScanner.scan`` when every row has been read."""


class InvalidArgumentError(ValueError):
    """Raised when a scanner is built from unusable rows."""


def _copy(value: Any) -> Any:
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    return value


class RowsScanner:
    """Reads rows from a cursor, one list of column values per row.

    The scanner never closes the cursor; that stays with the caller.
    """

    def __init__(self, rows: Rows | None) -> None:
        if rows is None:
            raise InvalidArgumentError("rows must not be None")
        try:
            description = rows.description
        except Exception as exc:
            raise InvalidArgumentError(
                f"cannot read column information of rows: {exc}"
            ) from exc
        if not description:
            raise InvalidArgumentError("cannot read column information of rows")
        self._rows = rows

    def scan(self) -> list[Any]:
        """Return the next row; raise NoMoreRowsError when there is none."""
        row = self._rows.fetchone()
        if row is None:
            raise NoMoreRowsError("no more rows")
        return [_copy(value) for value in row]

    def scan_all(self) -> list[list[Any]]:
        """Return every remaining row of the current result set."""
        return list(self)

    def next_result_set(self) -> bool:
        """Move to the next result set; False when there is none."""
        nextset = getattr(self._rows, "nextset", None)
        if nextset is None:
            return False
        return bool(nextset())

    def __iter__(self) -> Iterator[list[Any]]:
        while True:
            try:
                yield self.scan()
            except NoMoreRowsError:
                return