from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .config import FlattenConfig
from .labels import LabelShortener
from .router import route
from .tables import ColumnTable
from .tokens import JsonToken, iter_tokens, tokenize_json_text

logger = logging.getLogger(__name__)


class FlatteningEngine:
    """Group the leaf values of one document into per-array tables.

    Tables are created lazily, one per group key, and serialized in the
    order their keys first appeared. An engine covers a single session and
    is not meant to be reused for another document.
    """

    def __init__(self, tokens: Optional[Iterable[JsonToken]] = None, config: Optional[FlattenConfig] = None) -> None:
        self.config = config or FlattenConfig()
        self.config.validate()
        self._tables: Dict[str, ColumnTable] = {}
        self.leaf_count = 0
        if tokens is not None:
            self.consume(tokens)

    def consume(self, tokens: Iterable[JsonToken]) -> None:
        """Route every leaf token; structural and null tokens are skipped."""
        before = self.leaf_count
        for token in tokens:
            if token.is_leaf:
                self.add(token.path, token.value)
        logger.info(
            "Flattened %d leaf values into %d tables",
            self.leaf_count - before,
            len(self._tables),
        )

    def add(self, path: str, value: str) -> None:
        route(self._tables, path, value)
        self.leaf_count += 1

    @property
    def tables(self) -> Mapping[str, ColumnTable]:
        return MappingProxyType(self._tables)

    @property
    def group_keys(self) -> List[str]:
        return list(self._tables)

    def labels(self) -> Dict[str, str]:
        """Map each group key to the label its block is written with."""
        if not self.config.shorten_labels:
            return {key: key for key in self._tables}

        shortener = LabelShortener(self._tables)
        return {key: shortener.label(key) for key in self._tables}

    def to_frames(self) -> List[Tuple[str, List[str], List[List[str]]]]:
        labels = self.labels()
        return [
            (labels[key], table.headers, table.rows(self.config.row_policy))
            for key, table in self._tables.items()
        ]

    def serialize(self) -> str:
        cfg = self.config
        labels = self.labels()
        blocks = [
            table.serialize(
                labels[key],
                policy=cfg.row_policy,
                field_separator=cfg.field_separator,
                line_terminator=cfg.line_terminator,
            )
            for key, table in self._tables.items()
        ]
        return cfg.block_separator.join(blocks)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"FlatteningEngine(tables={self.group_keys!r}, leaf_count={self.leaf_count})"


def flatten_document(data: Any, config: Optional[FlattenConfig] = None) -> str:
    return FlatteningEngine(iter_tokens(data), config).serialize()


def flatten_json_text(text: str, config: Optional[FlattenConfig] = None) -> str:
    return FlatteningEngine(tokenize_json_text(text), config).serialize()
