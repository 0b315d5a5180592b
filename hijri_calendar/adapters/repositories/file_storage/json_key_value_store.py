"""Key-value store kept as a single JSON document on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from typing import Dict
from typing import Optional

from hijri_calendar import DEFAULT_PATH
from hijri_calendar import LOGGER
from hijri_calendar.use_cases.interfaces.key_value_store_interface import KeyValueStoreInterface
from hijri_calendar.utils.exceptions import StorageCorrupt

DATA_STORE_PATH = f"{DEFAULT_PATH}/data/hijri_calendar_store.json"


class JsonFileKeyValueStore(KeyValueStoreInterface):
    """File-based implementation of the key-value store.

    Every write rewrites the whole document. A document that cannot be parsed
    reads as missing keys, while writes against it raise ``StorageCorrupt``
    and leave the file untouched.
    """

    def __init__(self, file_path: str = DATA_STORE_PATH):
        """Initialize the store.

        Args:
            file_path: Path to the JSON document; created on first write
        """
        self.file_path = Path(file_path)

    def load_data_store(self) -> Dict[str, Any]:
        """Load the data store from the JSON file.

        Raises:
            StorageCorrupt: the file is not a JSON object
        """
        if not self.file_path.exists():
            return {}
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageCorrupt(f"Failed to parse data store: {self.file_path}") from e
        if not isinstance(data, dict):
            raise StorageCorrupt(f"Invalid data store format in {self.file_path}")
        return data

    def save_data_store(self, data: Dict[str, Any]) -> None:
        """Save the data store to the JSON file."""
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=4)

    def get(self, key: str) -> Optional[Any]:
        try:
            return self.load_data_store().get(key)
        except StorageCorrupt as e:
            LOGGER.error(f"{e}; reading {key!r} as missing")
            return None

    def set(self, key: str, value: Any) -> None:
        data = self.load_data_store()
        data[key] = value
        self.save_data_store(data)

    def remove(self, key: str) -> None:
        data = self.load_data_store()
        if data.pop(key, None) is not None:
            self.save_data_store(data)
