from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from src.employee_directory.employee_directory.settings import load_config
from src.employee_directory.employee_directory.storage.bootstrap import ensure_store
from src.employee_directory.employee_directory.storage.snapshot import JsonSnapshotStore


def main() -> None:
    load_dotenv(override=False)
    config = load_config()
    store = JsonSnapshotStore(config.data_path)
    created = ensure_store(store)
    snapshot = store.load()
    print(
        f"OK: {'Created' if created else 'Found'} data file -> {config.data_path} "
        f"(companies={len(snapshot.companies)}, departments={len(snapshot.departments)}, "
        f"users={len(snapshot.users)}, employees={len(snapshot.employees)})"
    )


if __name__ == "__main__":
    main()
