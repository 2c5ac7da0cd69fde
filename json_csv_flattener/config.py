from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .tables import RowPolicy

LINE_ENDINGS = {
    'crlf': '\r\n',
    'lf': '\n',
}


@dataclass(frozen=True, slots=True)
class FlattenConfig:
    """Output options for one flattening session.

    Defaults reproduce the classic output: ragged rows dropped, cells joined
    by ", " and CRLF line endings.
    """

    row_policy: RowPolicy = RowPolicy.DROP_RAGGED_ROW
    field_separator: str = ', '
    line_terminator: str = '\r\n'
    shorten_labels: bool = False  # label blocks by shortest unique key suffix

    def validate(self) -> None:
        if not isinstance(self.row_policy, RowPolicy):
            raise ValueError(f"row_policy must be a RowPolicy, got {self.row_policy!r}")
        if not self.field_separator:
            raise ValueError("field_separator must not be empty")
        if not self.line_terminator:
            raise ValueError("line_terminator must not be empty")

    @property
    def block_separator(self) -> str:
        return self.line_terminator * 2

    @classmethod
    def from_options(
        cls,
        row_policy: Optional[str] = None,
        line_ending: Optional[str] = None,
        shorten_labels: bool = False,
    ) -> 'FlattenConfig':
        """Build a config from UI / CLI primitives."""
        policy = RowPolicy(row_policy) if row_policy else RowPolicy.DROP_RAGGED_ROW

        key = (line_ending or 'crlf').strip().lower()
        if key not in LINE_ENDINGS:
            raise ValueError(f"Unknown line ending '{line_ending}'. Use one of: {', '.join(LINE_ENDINGS)}.")

        cfg = cls(row_policy=policy, line_terminator=LINE_ENDINGS[key], shorten_labels=bool(shorten_labels))
        cfg.validate()
        return cfg
