from __future__ import annotations

import argparse
import getpass
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from src.employee_directory.employee_directory.container import build_container
from src.employee_directory.employee_directory.settings import load_config
from src.employee_directory.employee_directory.storage.bootstrap import ensure_admin_user, ensure_store


def main() -> None:
    load_dotenv(override=False)
    config = load_config()

    parser = argparse.ArgumentParser(description="Create the admin account if it does not exist.")
    parser.add_argument("--username", default=config.admin_username or "admin")
    parser.add_argument("--password", default=config.admin_password)
    args = parser.parse_args()

    password = args.password or getpass.getpass("Admin password: ")

    container = build_container(config=config)
    ensure_store(container.store)
    user = ensure_admin_user(container.users_repo, container.hasher, username=args.username, password=password)
    if user:
        print(f"OK: Created admin '{user.username}' in {config.data_path}")
    else:
        print(f"OK: User '{args.username}' already exists in {config.data_path}")


if __name__ == "__main__":
    main()
