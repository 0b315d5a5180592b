from __future__ import annotations

import copy
from typing import Any
from typing import Dict
from typing import Optional

from hijri_calendar.use_cases.interfaces.key_value_store_interface import KeyValueStoreInterface


class InMemoryKeyValueStore(KeyValueStoreInterface):
    """Process-local store; values are deep-copied in and out like a real backend."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
