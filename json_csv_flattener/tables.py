from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Optional


class RowPolicy(str, Enum):
    """How to serialize a row when some columns are shorter than others."""

    DROP_RAGGED_ROW = 'drop-ragged-row'
    PAD_WITH_EMPTY = 'pad-with-empty'


class EmptyTableError(ValueError):
    """Raised when serializing a table that never received a column."""


class ColumnTable:
    """Named, append-only columns belonging to one group key.

    Columns keep first-seen order. Cells are strings; `None` marks a hole
    left by `append_at` and renders as an empty cell.
    """

    def __init__(self) -> None:
        self._columns: Dict[str, List[Optional[str]]] = {}

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, header: object) -> bool:
        return header in self._columns

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __repr__(self) -> str:
        return f"ColumnTable(headers={self.headers!r}, row_count={self.row_count})"

    @property
    def headers(self) -> List[str]:
        return list(self._columns)

    @property
    def columns(self) -> Dict[str, List[Optional[str]]]:
        return {h: list(values) for h, values in self._columns.items()}

    @property
    def row_count(self) -> int:
        if not self._columns:
            return 0
        return max(len(values) for values in self._columns.values())

    def column(self, header: str) -> List[Optional[str]]:
        return list(self._columns.get(header, []))

    def append(self, header: str, value: str) -> None:
        self._columns.setdefault(header, []).append(value)

    def append_at(self, header: str, value: str, index: int) -> None:
        """Put `value` at row `index`, replacing or padding with holes."""
        if index < 0:
            raise IndexError(f"Row index must be >= 0, got {index}.")
        values = self._columns.setdefault(header, [])
        if index < len(values):
            values[index] = value
            return
        while len(values) < index:
            values.append(None)
        values.append(value)

    def rows(self, policy: RowPolicy = RowPolicy.DROP_RAGGED_ROW) -> List[List[str]]:
        policy = RowPolicy(policy)
        columns = list(self._columns.values())
        out: List[List[str]] = []

        for i in range(self.row_count):
            if policy is RowPolicy.DROP_RAGGED_ROW and any(i >= len(col) for col in columns):
                continue
            row: List[str] = []
            for col in columns:
                cell = col[i] if i < len(col) else None
                row.append('' if cell is None else cell)
            out.append(row)

        return out

    def serialize(
        self,
        label: str,
        policy: RowPolicy = RowPolicy.DROP_RAGGED_ROW,
        field_separator: str = ', ',
        line_terminator: str = '\r\n',
    ) -> str:
        """Render the table as a header line followed by its rows.

        Headers are written as `label.header`. Under DROP_RAGGED_ROW a row is
        left out when any column has no cell for it; under PAD_WITH_EMPTY the
        missing cells are written empty.
        """
        if not self._columns:
            raise EmptyTableError(f"Table '{label}' has no columns to serialize.")

        header_line = field_separator.join(f"{label}.{h}" for h in self._columns)
        body = line_terminator.join(field_separator.join(row) for row in self.rows(policy))
        return f"{header_line}{line_terminator}{body}"
