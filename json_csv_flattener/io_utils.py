from __future__ import annotations

import json
import os
import tempfile


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return json.loads(content)

    if isinstance(file_obj, (str, os.PathLike)):
        path = file_obj
    else:
        path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def build_output_path(file_name, default_name: str = 'output', ext: str = '.csv') -> str:
    if not file_name or not str(file_name).strip():
        file_name = default_name
    file_name = os.path.basename(str(file_name).strip())
    if not file_name.lower().endswith(ext):
        file_name += ext
    return os.path.join(tempfile.gettempdir(), file_name)


def write_text_output(text: str, file_name=None, default_name: str = 'output') -> str:
    """Write flattened text into the temp dir and return the file path."""
    path = build_output_path(file_name, default_name)
    # newline='' keeps the configured line terminator untouched
    with open(path, 'w', newline='', encoding='utf-8') as f:
        f.write(text)
    return path
