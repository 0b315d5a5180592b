from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import Optional


class KeyValueStoreInterface(ABC):
    """Minimal persistence boundary for notes and preferences."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the JSON-compatible value stored under ``key`` or None."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass
