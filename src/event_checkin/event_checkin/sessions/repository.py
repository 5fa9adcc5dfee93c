from __future__ import annotations

from ..core.constants import BIOMETRICS_KEY, DEFAULT_EVENT_DATE, SESSIONS_KEY
from ..store.dataset import DatasetRepository
from ..store.repository import RecordStore
from .defaults import initial_biometrics_data, initial_sessions_data
from .model import BiometricsData, SessionsData

SessionsRepository = DatasetRepository[SessionsData]
BiometricsRepository = DatasetRepository[BiometricsData]


def sessions_repository(store: RecordStore, *, event_date: str = DEFAULT_EVENT_DATE) -> SessionsRepository:
    return DatasetRepository(
        store,
        key=SESSIONS_KEY,
        decode=SessionsData.from_dict,
        initial=lambda: initial_sessions_data(event_date),
    )


def biometrics_repository(store: RecordStore, *, event_date: str = DEFAULT_EVENT_DATE) -> BiometricsRepository:
    return DatasetRepository(
        store,
        key=BIOMETRICS_KEY,
        decode=BiometricsData.from_dict,
        initial=lambda: initial_biometrics_data(event_date),
    )
