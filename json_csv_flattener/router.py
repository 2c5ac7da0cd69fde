from __future__ import annotations

import logging
from typing import MutableMapping, Tuple

from .paths import find_last_array_segment, strip_indices
from .tables import ColumnTable

logger = logging.getLogger(__name__)

ROOT_KEY = ''


def resolve_target(path: str) -> Tuple[str, str]:
    """Return (group_key, local_header) for a header path.

    Paths without an array marker belong to the root table under their full
    path. Otherwise the innermost marker names the table; everything before
    it, minus indices, is the key prefix and everything after it is the
    column header. Non-array nesting below the marker stays in the header.
    """
    m = find_last_array_segment(path)
    if m is None:
        return ROOT_KEY, path

    post_header = path[m.end:]
    if post_header.startswith('.'):
        post_header = post_header[1:]

    pre_header = strip_indices(path[:m.start]).strip('.')
    group_key = f"{pre_header}.{m.name}" if pre_header else m.name
    return group_key, post_header


def route(tables: MutableMapping[str, ColumnTable], path: str, value: str) -> None:
    group_key, header = resolve_target(path)

    table = tables.get(group_key)
    if table is None:
        table = ColumnTable()
        tables[group_key] = table
        logger.debug("Created table '%s' for path '%s'", group_key, path)

    table.append(header, value)
