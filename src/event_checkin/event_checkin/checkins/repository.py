from __future__ import annotations

from ..core.constants import CHECKINS_KEY
from ..store.dataset import DatasetRepository
from ..store.repository import RecordStore
from .model import CheckInsData

CheckInsRepository = DatasetRepository[CheckInsData]


def checkins_repository(store: RecordStore) -> CheckInsRepository:
    return DatasetRepository(store, key=CHECKINS_KEY, decode=CheckInsData.from_dict, initial=CheckInsData)
