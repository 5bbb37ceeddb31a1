import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from study_calendar.cache import STORAGE_KEY, LocalCache, LocalStorage
from study_calendar.model.entry import StudyEntry


class TestLocalCache(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.directory = Path(self._tmp.name) / 'cache'
        self.storage = LocalStorage(self.directory)
        self.cache = LocalCache(self.storage)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_slot_loads_as_none(self):
        self.assertIsNone(self.cache.load())

    def test_save_then_load(self):
        ledger = {'2024-03-05': StudyEntry(1, 30, 'algebra'), '2024-03-06': StudyEntry(0, 0)}
        self.cache.save(ledger)
        self.assertEqual(self.cache.load(), ledger)

    def test_slot_holds_plain_json_ledger(self):
        self.cache.save({'2024-01-01': StudyEntry(2, 0)})
        data = json.loads(self.storage.get_item(STORAGE_KEY))
        self.assertEqual(data, {'2024-01-01': {'hours': 2, 'minutes': 0, 'content': ''}})

    def test_entries_without_content_are_accepted(self):
        self.storage.set_item(STORAGE_KEY, '{"2024-01-01":{"hours":2,"minutes":0}}')
        self.assertEqual(self.cache.load(), {'2024-01-01': StudyEntry(2, 0, '')})

    def test_corrupt_data_loads_as_none(self):
        for payload in ('{not json', '[1, 2]', '{"2024-01-01": 5}', '{"2024-01-01": {"hours": "x", "minutes": 0}}'):
            self.storage.set_item(STORAGE_KEY, payload)
            with self.assertLogs('study_calendar.cache', level='ERROR'):
                self.assertIsNone(self.cache.load())

    def test_save_failure_is_logged_not_raised(self):
        with mock.patch.object(self.storage, 'set_item', side_effect=OSError('disk full')):
            with self.assertLogs('study_calendar.cache', level='ERROR') as logs:
                self.cache.save({'2024-01-01': StudyEntry(1, 0)})
        self.assertIn('disk full', logs.output[0])

    def test_read_failure_is_logged_not_raised(self):
        with mock.patch.object(self.storage, 'get_item', side_effect=PermissionError('denied')):
            with self.assertLogs('study_calendar.cache', level='ERROR'):
                self.assertIsNone(self.cache.load())


if __name__ == '__main__':
    unittest.main()
