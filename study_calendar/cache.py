import json
import logging
import os
import typing
from pathlib import Path

from study_calendar.model.entry import StudyEntry

logger = logging.getLogger(__name__)

STORAGE_KEY = 'study-time-data'


class LocalStorage:
    """String slots on the local device, one file per key."""

    def __init__(self, directory):
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self._directory / f'{key.replace("/", "-")}.json'

    def get_item(self, key: str) -> typing.Optional[str]:
        path = self._path(key)
        if not path.is_file():
            return None
        return path.read_text(encoding='utf-8')

    def set_item(self, key: str, value: str):
        os.makedirs(self._directory, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix('.tmp')
        tmp.write_text(value, encoding='utf-8')
        os.replace(tmp, path)


class LocalCache:
    """Best-effort copy of the ledger. Never raises to its caller."""

    def __init__(self, storage: LocalStorage, key: str = STORAGE_KEY):
        self._storage = storage
        self._key = key

    def save(self, ledger: typing.Mapping[str, StudyEntry]):
        try:
            data = {key: entry.to_dict() for key, entry in ledger.items()}
            self._storage.set_item(self._key, json.dumps(data, ensure_ascii=False))
        except (OSError, TypeError, ValueError, AttributeError) as e:
            logger.error('failed to save ledger to local cache: %s', e)

    def load(self) -> typing.Optional[dict[str, StudyEntry]]:
        try:
            saved = self._storage.get_item(self._key)
        except (OSError, UnicodeDecodeError) as e:
            logger.error('failed to read local cache: %s', e)
            return None
        if not saved:
            return None
        try:
            data = json.loads(saved)
            if not isinstance(data, dict):
                raise ValueError(f'expected an object, got {type(data).__name__}')
            return {key: StudyEntry.from_dict(value) for key, value in data.items()}
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.error('local cache is corrupt, ignoring it: %s', e)
            return None
