from datetime import datetime
from decimal import Decimal

import pytest

from json_csv_flattener.tokens import (
    JsonToken,
    TokenKind,
    classify_scalar,
    iter_tokens,
    scalar_text,
    tokenize_json_text,
)


def test_tokens_follow_document_order():
    tokens = list(iter_tokens({"a": [1, "x"]}))

    assert tokens == [
        JsonToken(TokenKind.START_OBJECT, ""),
        JsonToken(TokenKind.PROPERTY_NAME, "a", "a"),
        JsonToken(TokenKind.START_ARRAY, "a"),
        JsonToken(TokenKind.INTEGER, "a[0]", "1"),
        JsonToken(TokenKind.STRING, "a[1]", "x"),
        JsonToken(TokenKind.END_ARRAY, "a"),
        JsonToken(TokenKind.END_OBJECT, ""),
    ]


def test_special_property_names_are_quoted():
    leaves = [t for t in iter_tokens({"a.b": {"c d": 1}}) if t.is_leaf]

    assert [t.path for t in leaves] == ["['a.b']['c d']"]


def test_top_level_array_paths():
    leaves = [t for t in iter_tokens([1, 2]) if t.is_leaf]

    assert [t.path for t in leaves] == ["[0]", "[1]"]


def test_null_is_not_a_leaf():
    tokens = list(tokenize_json_text('{"k": null}'))

    null = tokens[2]
    assert null.kind is TokenKind.NULL
    assert null.value is None
    assert not null.is_leaf


@pytest.mark.parametrize(
    "value, kind, text",
    [
        (True, TokenKind.BOOLEAN, "true"),
        (False, TokenKind.BOOLEAN, "false"),
        (3, TokenKind.INTEGER, "3"),
        (1.5, TokenKind.FLOAT, "1.5"),
        ("s", TokenKind.STRING, "s"),
        (b"hi", TokenKind.BYTES, "aGk="),
        (datetime(2024, 1, 2, 3, 4, 5), TokenKind.DATE, "2024-01-02T03:04:05"),
        (Decimal("1.10"), TokenKind.RAW, "1.10"),
    ],
)
def test_scalar_rendering(value, kind, text):
    assert classify_scalar(value) is kind
    assert scalar_text(value) == text
