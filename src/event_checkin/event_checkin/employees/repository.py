from __future__ import annotations

from ..core.constants import EMPLOYEES_KEY
from ..store.dataset import DatasetRepository
from ..store.repository import RecordStore
from .model import EmployeesData

EmployeesRepository = DatasetRepository[EmployeesData]


def employees_repository(store: RecordStore) -> EmployeesRepository:
    return DatasetRepository(store, key=EMPLOYEES_KEY, decode=EmployeesData.from_dict, initial=EmployeesData)
