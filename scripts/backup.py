"""Backup every dataset document to a JSON file under backups/."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.event_checkin.event_checkin.container import build_store
from src.event_checkin.event_checkin.core.constants import BIOMETRICS_KEY, CHECKINS_KEY, EMPLOYEES_KEY, SESSIONS_KEY


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(settings.RECORD_STORE, db_config=dict(settings.DB_CONFIG))

    snapshot = {key: store.get(key) for key in (SESSIONS_KEY, BIOMETRICS_KEY, EMPLOYEES_KEY, CHECKINS_KEY)}

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"event_checkin_{ts}.json"
    out_file.write_text(json.dumps(snapshot, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
