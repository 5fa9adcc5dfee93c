"""Write the initial session datasets (and empty directory/check-ins).

Existing documents are left alone unless --reset is given.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.event_checkin.event_checkin.checkins.model import CheckInsData
from src.event_checkin.event_checkin.container import build_container, build_store
from src.event_checkin.event_checkin.employees.model import EmployeesData
from src.event_checkin.event_checkin.sessions.defaults import initial_biometrics_data, initial_sessions_data


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="overwrite existing datasets")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    store = build_store(settings.RECORD_STORE, db_config=dict(settings.DB_CONFIG))
    container = build_container(store=store, admin_password=settings.ADMIN_PASSWORD, event_date=settings.EVENT_DATE)

    if args.reset:
        container.sessions_repo.save(initial_sessions_data(settings.EVENT_DATE))
        container.biometrics_repo.save(initial_biometrics_data(settings.EVENT_DATE))
        container.employees_repo.save(EmployeesData())
        container.checkins_repo.save(CheckInsData())
    else:
        # load() writes the initial document for any missing key
        for repo in (container.sessions_repo, container.biometrics_repo, container.employees_repo, container.checkins_repo):
            repo.load()

    print(f"OK: Seeded datasets ({settings.RECORD_STORE}, reset={args.reset})")


if __name__ == "__main__":
    main()
