#!/usr/bin/env python3
"""
Snapshot the users data file into the backup directory.

Usage:
  python scripts/backup_data.py [--name backup.json]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usermgr.core.log import configure_logging  # noqa: E402
from usermgr.services.user_service import UserService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Backup the users data file")
    ap.add_argument("--name", help="Backup file name (default: backup-<epoch-ms>.json)")
    args = ap.parse_args()

    configure_logging()
    target = UserService().backup(args.name)
    if target is None:
        raise SystemExit("Backup failed")
    print(f"OK: backup created at {target}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
