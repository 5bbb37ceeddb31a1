import os
import typing
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import click

from study_calendar.cache import LocalCache, LocalStorage, STORAGE_KEY
from study_calendar.common import local_today
from study_calendar.errors import ConfigError
from study_calendar.remote.api import DEFAULT_TABLE, DEFAULT_TIMEOUT, StudyRecordsAPI
from study_calendar.store import StudyRecordStore

DEFAULT_CACHE_DIR = '~/.cache/study-calendar'


class StudyCalendarContext:

    def __init__(self, config: typing.Mapping = None, environ: typing.Mapping = None):
        self._config = config or {}
        self._environ = os.environ if environ is None else environ
        self._store = None

    @property
    def _supabase(self) -> typing.Mapping:
        return self._config.get('supabase') or {}

    @property
    def url(self) -> str:
        url = self._supabase.get('url') or self._environ.get('SUPABASE_URL')
        if not url:
            raise ConfigError('missing store url, set supabase.url or SUPABASE_URL')
        return url

    @property
    def key(self) -> str:
        key = self._supabase.get('key') or self._environ.get('SUPABASE_KEY')
        if not key:
            raise ConfigError('missing store key, set supabase.key or SUPABASE_KEY')
        return key

    @property
    def table(self) -> str:
        return self._supabase.get('table', DEFAULT_TABLE)

    @property
    def timeout(self) -> float:
        return float(self._supabase.get('timeout', DEFAULT_TIMEOUT))

    @property
    def cache_directory(self) -> str:
        cache = self._config.get('cache') or {}
        return os.path.expanduser(cache.get('directory', DEFAULT_CACHE_DIR))

    @property
    def cache_key(self) -> str:
        cache = self._config.get('cache') or {}
        return cache.get('key', STORAGE_KEY)

    @property
    def timezone(self):
        name = self._config.get('timezone')
        if not name:
            return None
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f'unknown timezone: {name}') from e

    def today(self):
        return local_today(self.timezone)

    def create_api(self) -> StudyRecordsAPI:
        return StudyRecordsAPI(self.url, self.key, table=self.table, timeout=self.timeout)

    def create_cache(self) -> LocalCache:
        return LocalCache(LocalStorage(self.cache_directory), self.cache_key)

    @property
    def store(self) -> StudyRecordStore:
        if self._store is None:
            self._store = StudyRecordStore(self.create_api(), self.create_cache())
        return self._store


pass_study_calendar = click.make_pass_decorator(StudyCalendarContext, ensure=True)
