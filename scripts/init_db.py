"""Create the database and the record_store table, then report what it holds."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.event_checkin.event_checkin.container import build_store
from src.event_checkin.event_checkin.core.constants import BIOMETRICS_KEY, CHECKINS_KEY, EMPLOYEES_KEY, SESSIONS_KEY
from src.event_checkin.event_checkin.database.bootstrap import apply_schema, list_tables


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    if "record_store" not in list_tables(db_config):
        raise SystemExit("ERROR: record_store table missing after applying schema.sql")

    store = build_store("mysql", db_config=db_config)
    print(f"OK: record_store ready on {db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}")
    for key in (SESSIONS_KEY, BIOMETRICS_KEY, EMPLOYEES_KEY, CHECKINS_KEY):
        state = "present" if store.get(key) is not None else "empty (created on first read or by seed_db.py)"
        print(f"  {key}: {state}")


if __name__ == "__main__":
    main()
