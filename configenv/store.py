"""Thread-safe string value store backing a configuration context."""
from __future__ import annotations

from threading import Lock
from typing import Dict, Iterator, List, Mapping, Optional, Tuple


class ValueStore:
    """Mapping from configuration key to its current string value."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})
        self.lock = Lock()

    def get(self, key: str, default: str = "") -> str:
        with self.lock:
            return self._values.get(key, default)

    def lookup(self, key: str) -> Tuple[str, bool]:
        """Return ``(value, found)`` so unset and empty can be told apart."""
        with self.lock:
            if key in self._values:
                return self._values[key], True
            return "", False

    def set(self, key: str, value: str) -> None:
        with self.lock:
            self._values[key] = value

    def update(self, values: Mapping[str, str]) -> None:
        with self.lock:
            self._values.update(values)

    def keys(self) -> List[str]:
        with self.lock:
            return list(self._values)

    def to_dict(self) -> Dict[str, str]:
        with self.lock:
            return dict(self._values)

    def __contains__(self, key: object) -> bool:
        with self.lock:
            return key in self._values

    def __len__(self) -> int:
        with self.lock:
            return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
