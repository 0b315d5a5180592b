import json
import os
import tempfile
import unittest

from hijri_calendar.adapters.repositories.file_storage.json_key_value_store import JsonFileKeyValueStore
from hijri_calendar.adapters.repositories.memory.in_memory_key_value_store import InMemoryKeyValueStore
from hijri_calendar.utils.exceptions import StorageCorrupt


class TestInMemoryKeyValueStore(unittest.TestCase):
    def test_values_are_copied(self):
        store = InMemoryKeyValueStore({"notes": [1]})

        value = store.get("notes")
        value.append(2)

        self.assertEqual(store.get("notes"), [1])

    def test_set_and_remove(self):
        store = InMemoryKeyValueStore()
        store.set("key", {"a": 1})
        self.assertEqual(store.get("key"), {"a": 1})

        store.remove("key")
        store.remove("missing")

        self.assertIsNone(store.get("key"))


class TestJsonFileKeyValueStore(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.file_path = os.path.join(self.temp_dir.name, "nested", "store.json")
        self.store = JsonFileKeyValueStore(self.file_path)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_missing_file_is_empty(self):
        self.assertIsNone(self.store.get("anything"))

    def test_values_persist_across_instances(self):
        self.store.set("user_settings", {"holiday_country": "MY"})

        reopened = JsonFileKeyValueStore(self.file_path)

        self.assertEqual(reopened.get("user_settings"), {"holiday_country": "MY"})

    def test_remove(self):
        self.store.set("a", 1)
        self.store.set("b", 2)

        self.store.remove("a")

        with open(self.file_path, encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"b": 2})

    def _write_raw(self, text):
        os.makedirs(os.path.dirname(self.file_path))
        with open(self.file_path, "w", encoding="utf-8") as f:
            f.write(text)

    def _read_raw(self):
        with open(self.file_path, encoding="utf-8") as f:
            return f.read()

    def test_corrupt_file_reads_as_missing(self):
        self._write_raw("{not json")

        self.assertIsNone(self.store.get("user_settings"))
        with self.assertRaises(StorageCorrupt):
            self.store.load_data_store()

    def test_write_to_truncated_document_leaves_it_untouched(self):
        # Arrange
        truncated = '{"custom_events": [{"id": "a1"}], "user_settings": {"holiday_country": "MY"}'
        self._write_raw(truncated)

        # Act
        with self.assertRaises(StorageCorrupt):
            self.store.set("custom_hijri_events", [])
        with self.assertRaises(StorageCorrupt):
            self.store.remove("user_settings")

        # Assert
        self.assertEqual(self._read_raw(), truncated)
        self.assertIn("custom_events", self._read_raw())

    def test_non_object_document_refuses_writes(self):
        self._write_raw(json.dumps([1, 2, 3]))

        with self.assertRaises(StorageCorrupt):
            self.store.set("user_settings", {})

        self.assertIsNone(self.store.get("user_settings"))
        self.assertEqual(json.loads(self._read_raw()), [1, 2, 3])
