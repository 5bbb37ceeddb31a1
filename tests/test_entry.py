import unittest

from study_calendar.model.entry import StudyEntry, StudyRecord, parse_int


class TestFormInput(unittest.TestCase):
    def test_parse_int_reads_leading_digits(self):
        self.assertEqual(parse_int('12'), 12)
        self.assertEqual(parse_int(' 7h'), 7)
        self.assertEqual(parse_int('1.9'), 1)
        self.assertEqual(parse_int('abc'), 0)
        self.assertEqual(parse_int(''), 0)

    def test_clamps_hours_and_minutes(self):
        self.assertEqual(StudyEntry.from_form('25', '', ''), StudyEntry(23, 0, ''))
        self.assertEqual(StudyEntry.from_form('-2', '75', ''), StudyEntry(0, 59, ''))

    def test_requires_hours_or_minutes(self):
        with self.assertRaises(ValueError):
            StudyEntry.from_form('', '', 'algebra')

    def test_zero_time_is_a_valid_entry(self):
        self.assertEqual(StudyEntry.from_form('0', '0'), StudyEntry(0, 0, ''))

    def test_content_is_trimmed_and_truncated(self):
        entry = StudyEntry.from_form('1', '', '  ' + 'x' * 40 + '  ')
        self.assertEqual(entry.content, 'x' * 30)


class TestStudyRecord(unittest.TestCase):
    def test_from_row_ignores_server_columns_in_comparison(self):
        row = {'id': 7, 'date': '2024-03-05', 'hours': 1, 'minutes': 30, 'content': None,
               'user_id': None, 'created_at': '2024-03-05T10:00:00Z', 'updated_at': '2024-03-05T10:00:00Z'}
        record = StudyRecord.from_row(row)
        self.assertEqual(record, StudyRecord('2024-03-05', 1, 30))
        self.assertEqual(record.entry, StudyEntry(1, 30, ''))

    def test_payload_clears_empty_content(self):
        record = StudyRecord.from_entry('2024-03-05', StudyEntry(1, 0, ''))
        self.assertEqual(record.to_payload(), {'date': '2024-03-05', 'hours': 1, 'minutes': 0, 'content': None})
        record = StudyRecord.from_entry('2024-03-05', StudyEntry(1, 0, 'algebra'))
        self.assertEqual(record.to_payload()['content'], 'algebra')


if __name__ == '__main__':
    unittest.main()
