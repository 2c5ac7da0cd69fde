"""Turn a parsed JSON document into a stream of path-addressed tokens.

Tokens arrive in document order: object members in source order, array
elements by ascending index. Leaf tokens carry their value as text.
"""
from __future__ import annotations

import base64
import json
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Iterator, NamedTuple, Optional

from .paths import index_path, join_path


class TokenKind(Enum):
    START_OBJECT = 'start_object'
    END_OBJECT = 'end_object'
    START_ARRAY = 'start_array'
    END_ARRAY = 'end_array'
    PROPERTY_NAME = 'property_name'
    NULL = 'null'
    INTEGER = 'integer'
    FLOAT = 'float'
    STRING = 'string'
    BOOLEAN = 'boolean'
    BYTES = 'bytes'
    DATE = 'date'
    RAW = 'raw'


LEAF_KINDS = frozenset({
    TokenKind.INTEGER,
    TokenKind.FLOAT,
    TokenKind.STRING,
    TokenKind.BOOLEAN,
    TokenKind.BYTES,
    TokenKind.DATE,
    TokenKind.RAW,
})


class JsonToken(NamedTuple):
    kind: TokenKind
    path: str
    value: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return self.kind in LEAF_KINDS


def classify_scalar(value: Any) -> TokenKind:
    # bool first: it is a subclass of int
    if value is None:
        return TokenKind.NULL
    if isinstance(value, bool):
        return TokenKind.BOOLEAN
    if isinstance(value, int):
        return TokenKind.INTEGER
    if isinstance(value, float):
        return TokenKind.FLOAT
    if isinstance(value, str):
        return TokenKind.STRING
    if isinstance(value, (bytes, bytearray)):
        return TokenKind.BYTES
    if isinstance(value, (datetime, date, time)):
        return TokenKind.DATE
    return TokenKind.RAW


def scalar_text(value: Any) -> Optional[str]:
    """Render a scalar the way it appears in the flattened output."""
    kind = classify_scalar(value)
    if kind is TokenKind.NULL:
        return None
    if kind is TokenKind.STRING:
        return value
    if kind in (TokenKind.BOOLEAN, TokenKind.INTEGER, TokenKind.FLOAT):
        return json.dumps(value)
    if kind is TokenKind.BYTES:
        return base64.b64encode(bytes(value)).decode('ascii')
    if kind is TokenKind.DATE:
        return value.isoformat()
    return str(value)


def iter_tokens(data: Any, path: str = '') -> Iterator[JsonToken]:
    """Walk `data` depth-first, yielding structural and leaf tokens."""
    if isinstance(data, dict):
        yield JsonToken(TokenKind.START_OBJECT, path)
        for k, v in data.items():
            child = join_path(path, k)
            yield JsonToken(TokenKind.PROPERTY_NAME, child, str(k))
            yield from iter_tokens(v, child)
        yield JsonToken(TokenKind.END_OBJECT, path)
    elif isinstance(data, (list, tuple)):
        yield JsonToken(TokenKind.START_ARRAY, path)
        for i, item in enumerate(data):
            yield from iter_tokens(item, index_path(path, i))
        yield JsonToken(TokenKind.END_ARRAY, path)
    else:
        yield JsonToken(classify_scalar(data), path, scalar_text(data))


def tokenize_json_text(text: str) -> Iterator[JsonToken]:
    return iter_tokens(json.loads(text))
