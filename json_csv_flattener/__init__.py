"""Core logic for the JSON Array Flattener.

The Gradio UI lives in `app.py`. This package turns a JSON document into
grouped comma-separated blocks:
- walk the document into path-addressed tokens
- route each leaf value to the table of its innermost array
- serialize every table, in the order it was first seen
"""
from .config import FlattenConfig
from .engine import FlatteningEngine, flatten_document, flatten_json_text
from .tables import ColumnTable, EmptyTableError, RowPolicy

__all__ = [
    'ColumnTable',
    'EmptyTableError',
    'FlattenConfig',
    'FlatteningEngine',
    'RowPolicy',
    'flatten_document',
    'flatten_json_text',
]
