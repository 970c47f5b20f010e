"""
Column traversal over a Matrix without copying the column.

ColumnIterator is a bidirectional cursor: it holds a reference to the
parent matrix plus a (row, column) position and reads the element on
demand. ColumnView packages a begin/end pair into something Python code
can iterate repeatedly and in reverse.

Both are read-only and valid only while the parent matrix is alive; they
never own the parent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from matrixmath.matrix.matrix import Matrix


class ColumnIterator:
    """
    Cursor over one column of a matrix.

    Usage:
        it = m.column_begin(2)
        end = m.column_end(2)
        while it != end:
            total += it.value
            it.advance()
    """

    __slots__ = ('_parent', '_row', '_column')

    def __init__(self, parent: Matrix, row: int, column: int):
        self._parent = parent
        self._row = row
        self._column = column

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def value(self):
        """Element at the current position."""
        return self._parent[self._row, self._column]

    def advance(self) -> ColumnIterator:
        """Move down one row. Returns self for chaining."""
        self._row += 1
        return self

    def retreat(self) -> ColumnIterator:
        """Move up one row. Returns self for chaining."""
        self._row -= 1
        return self

    def copy(self) -> ColumnIterator:
        """Independent cursor at the same position."""
        return ColumnIterator(self._parent, self._row, self._column)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnIterator):
            return NotImplemented
        return (
            self._parent is other._parent
            and self._row == other._row
            and self._column == other._column
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # mutable position

    def __repr__(self) -> str:
        return f"ColumnIterator(row={self._row}, column={self._column})"


class ColumnView:
    """
    Restartable, reversible view of one matrix column.

    Each call to iter() or reversed() starts a fresh traversal, so the same
    view can feed any number of inner products.
    """

    __slots__ = ('_parent', '_column')

    def __init__(self, parent: Matrix, column: int):
        self._parent = parent
        self._column = column

    @property
    def column(self) -> int:
        return self._column

    def begin(self) -> ColumnIterator:
        return ColumnIterator(self._parent, 0, self._column)

    def end(self) -> ColumnIterator:
        return ColumnIterator(self._parent, self._parent.height, self._column)

    def __len__(self) -> int:
        return self._parent.height

    def __iter__(self) -> Iterator:
        it = self.begin()
        end = self.end()
        while it != end:
            yield it.value
            it.advance()

    def __reversed__(self) -> Iterator:
        it = self.end()
        begin = self.begin()
        while it != begin:
            it.retreat()
            yield it.value

    def __repr__(self) -> str:
        return f"ColumnView(column={self._column}, height={self._parent.height})"
