from __future__ import annotations

from typing import Dict, Iterable, List


class LabelShortener:
    """Assign each group key the shortest dot-suffix that tells it apart.

    Keys are compared segment by segment from the tail. Two keys that differ
    at the i-th segment from the end both need at least i segments. When one
    key is a tail of the other, the shorter keeps all of its segments and the
    longer one gets one more. Labels only grow as keys are added.
    """

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._parts: Dict[str, List[str]] = {}
        self._lengths: Dict[str, int] = {}
        for key in keys:
            self.add(key)

    def __contains__(self, key: object) -> bool:
        return key in self._parts

    def add(self, key: str) -> None:
        if key in self._parts or not key:
            return

        parts = key.split('.')
        needed = 1

        for other, other_parts in self._parts.items():
            shortest = min(len(parts), len(other_parts))
            for i in range(1, shortest + 1):
                if parts[-i] != other_parts[-i]:
                    needed = max(needed, i)
                    self._grow(other, i)
                    break
            else:
                if len(parts) < len(other_parts):
                    needed = max(needed, len(parts))
                    self._grow(other, shortest + 1)
                else:
                    needed = max(needed, shortest + 1)
                    self._grow(other, len(other_parts))

        self._parts[key] = parts
        self._lengths[key] = needed

    def _grow(self, key: str, length: int) -> None:
        self._lengths[key] = max(self._lengths[key], length)

    def label(self, key: str) -> str:
        if key not in self._parts:
            return key
        return '.'.join(self._parts[key][-self._lengths[key]:])

    def labels(self) -> Dict[str, str]:
        return {key: self.label(key) for key in self._parts}
