import datetime
import logging
import types
import typing

from study_calendar.cache import LocalCache
from study_calendar.errors import StoreError, StoreNotReady
from study_calendar.model import grid
from study_calendar.model.entry import StudyEntry, StudyRecord, Totals

logger = logging.getLogger(__name__)


class RemoteStore(typing.Protocol):

    def select_all_order_by_date(self) -> list[StudyRecord]: ...
    def upsert_by_date(self, record: StudyRecord) -> None: ...
    def delete_by_date(self, date: str) -> None: ...


class StudyRecordStore:
    """In-memory ledger of study entries keyed by date.

    Writes go to the remote store first and reach the ledger only after the
    store acknowledged them. The local cache is read only when the startup load
    fails, and written only as a backup when an upsert fails.

    Subscribers are called with the store after every state change.
    """

    def __init__(self, remote: RemoteStore, cache: LocalCache):
        self._remote = remote
        self._cache = cache
        self._ledger: dict[str, StudyEntry] = {}
        self._subscribers = []
        self.error = ''
        self.loading = False
        self.ready = False

    @property
    def ledger(self) -> typing.Mapping[str, StudyEntry]:
        return types.MappingProxyType(self._ledger)

    def subscribe(self, callback: typing.Callable[['StudyRecordStore'], None]) -> typing.Callable[[], None]:
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    def _notify(self):
        for callback in list(self._subscribers):
            callback(self)

    def _fail(self, action: str, error: StoreError):
        self.error = f'Failed to {action} data: {error}'
        logger.warning(self.error)
        self._notify()

    def _ensure_ready(self):
        if not self.ready:
            raise StoreNotReady('study records are not loaded yet')

    def load(self) -> tuple[typing.Mapping[str, StudyEntry], typing.Optional[str]]:
        self.loading = True
        self.error = ''
        try:
            records = self._remote.select_all_order_by_date()
        except StoreError as e:
            self.error = f'Failed to load data: {e}'
            logger.warning(self.error)
            cached = self._cache.load()
            if cached is not None:
                logger.warning('using %d locally cached entries', len(cached))
                self._ledger = cached
        else:
            self._ledger = {record.date: record.entry for record in records}
            logger.debug('loaded %d study records', len(self._ledger))
        finally:
            self.loading = False
            self.ready = True
        self._notify()
        return self.ledger, self.error or None

    def upsert(self, date_key: str, entry: StudyEntry):
        self._ensure_ready()
        self.error = ''
        try:
            self._remote.upsert_by_date(StudyRecord.from_entry(date_key, entry))
        except StoreError as e:
            self._cache.save({**self._ledger, date_key: entry})
            self._fail('save', e)
            raise
        self._ledger[date_key] = entry
        self._notify()

    def remove(self, date_key: str):
        self._ensure_ready()
        self.error = ''
        try:
            self._remote.delete_by_date(date_key)
        except StoreError as e:
            self._fail('delete', e)
            raise
        self._ledger.pop(date_key, None)
        self._notify()

    def total_for(self, date_key: str) -> typing.Optional[StudyEntry]:
        return self._ledger.get(date_key)

    def totals(self, reference: datetime.date) -> Totals:
        return grid.totals(self._ledger, reference)
