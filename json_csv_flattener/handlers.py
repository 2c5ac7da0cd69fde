from __future__ import annotations

import json
import logging
from typing import Any, List, Optional, Tuple

from .config import FlattenConfig
from .engine import FlatteningEngine
from .io_utils import read_json_content, write_text_output
from .tokens import iter_tokens

logger = logging.getLogger(__name__)


def run_engine(data: Any, row_policy=None, line_ending=None, shorten_labels: bool = False) -> FlatteningEngine:
    config = FlattenConfig.from_options(row_policy, line_ending, shorten_labels)
    return FlatteningEngine(iter_tokens(data), config)


def compute_table_count_text(engine: Optional[FlatteningEngine]) -> str:
    if engine is None:
        return ""
    return f"Tables: {len(engine.tables)} | Values: {engine.leaf_count}"


def load_and_flatten_json(file_obj, row_policy=None, line_ending=None, shorten_labels: bool = False):
    """Parse an uploaded JSON file and flatten it with the chosen options."""
    if file_obj is None:
        return None, "No file uploaded.", "", ""

    try:
        data = read_json_content(file_obj)
    except (ValueError, OSError) as e:
        logger.warning("Failed to read upload: %s", e)
        return None, f"Error parsing JSON: {str(e)}", "", ""

    try:
        engine = run_engine(data, row_policy, line_ending, shorten_labels)
    except ValueError as e:
        return data, f"Error flattening JSON: {str(e)}", "", ""

    message = f"Successfully loaded. Found {len(engine.tables)} tables."
    return data, message, engine.serialize(), compute_table_count_text(engine)


def reflatten_handler(data, row_policy=None, line_ending=None, shorten_labels: bool = False):
    if data is None:
        return "", ""
    try:
        engine = run_engine(data, row_policy, line_ending, shorten_labels)
    except ValueError as e:
        return f"Error flattening JSON: {str(e)}", ""
    return engine.serialize(), compute_table_count_text(engine)


def build_table_previews(
    data,
    row_policy=None,
    shorten_labels: bool = False,
    limit: int = 5,
) -> List[Tuple[str, List[str], List[List[str]]]]:
    """Return (label, headers, first rows) for each table, for display."""
    if data is None:
        return []
    try:
        engine = run_engine(data, row_policy, None, shorten_labels)
    except ValueError:
        return []

    limit = max(1, int(limit))
    return [(label or "(root)", headers, rows[:limit]) for label, headers, rows in engine.to_frames()]


def export_csv_handler(csv_text, file_name):
    if not csv_text:
        return None, "Nothing to export."

    try:
        path = write_text_output(csv_text, file_name)
    except OSError as e:
        return None, f"Error during export: {str(e)}"

    logger.info("Exported flattened tables to %s", path)
    return path, f"Export successful! Saved to {path}"


def flatten_pasted_json(text, row_policy=None, line_ending=None, shorten_labels: bool = False):
    """Same as `load_and_flatten_json`, for JSON pasted into a text box."""
    if not text or not text.strip():
        return None, "No JSON provided.", "", ""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return None, f"Error parsing JSON: {str(e)}", "", ""

    csv_text, count_text = reflatten_handler(data, row_policy, line_ending, shorten_labels)
    return data, "Successfully parsed pasted JSON.", csv_text, count_text
