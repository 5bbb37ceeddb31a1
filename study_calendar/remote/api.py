import logging

import requests

from study_calendar.errors import StoreError
from study_calendar.model.entry import StudyRecord

logger = logging.getLogger(__name__)

DEFAULT_TABLE = 'study_records'
DEFAULT_TIMEOUT = 10.0


class StudyRecordsAPI:
    """Thin client for the hosted ``study_records`` table (PostgREST interface).

    Every call raises :class:`StoreError` on transport errors, timeouts and
    non-2xx responses; nothing is retried.
    """

    def __init__(self, url, key, table=DEFAULT_TABLE, timeout=DEFAULT_TIMEOUT, session=None):
        self.url = url.rstrip('/')
        self.key = key
        self.table = table
        self.timeout = timeout
        self.session = session or requests

    def call_api(self, method, params=None, json=None, prefer=None):
        headers = {
            'apikey': self.key,
            'Authorization': f'Bearer {self.key}',
            'Content-Type': 'application/json',
            'User-Agent': 'study-calendar (study time records client)'
        }
        if prefer:
            headers['Prefer'] = prefer
        try:
            response = self.session.request(method,
                                            f'{self.url}/rest/v1/{self.table}',
                                            params=params,
                                            json=json,
                                            headers=headers,
                                            timeout=self.timeout)
        except requests.Timeout as e:
            raise StoreError(f'request timed out after {self.timeout}s') from e
        except requests.RequestException as e:
            raise StoreError(str(e)) from e
        if not response.ok:
            raise StoreError(self._error_message(response), status=response.status_code)
        return response

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get('message'):
            return body['message']
        return f'{response.status_code} {response.reason}'

    def select_all_order_by_date(self) -> list[StudyRecord]:
        response = self.call_api('GET', params={'select': '*', 'order': 'date.asc'})
        try:
            rows = response.json()
            return [StudyRecord.from_row(row) for row in rows]
        except (ValueError, TypeError, KeyError) as e:
            raise StoreError(f'unexpected response from store: {e}') from e

    def upsert_by_date(self, record: StudyRecord):
        logger.debug('upserting record for %s', record.date)
        self.call_api('POST',
                      params={'on_conflict': 'date'},
                      json=record.to_payload(),
                      prefer='resolution=merge-duplicates,return=minimal')

    def delete_by_date(self, date: str):
        logger.debug('deleting record for %s', date)
        self.call_api('DELETE', params={'date': f'eq.{date}'})
