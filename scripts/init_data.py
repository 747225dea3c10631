#!/usr/bin/env python3
"""
Seed the users data file with synthetic users before first use.

Usage:
  python scripts/init_data.py [--count 20] [--file users.json] [--seed 42]
"""
from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Make the usermgr package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usermgr.core.config import get_settings  # noqa: E402
from usermgr.core.log import configure_logging  # noqa: E402
from usermgr.repositories.json_storage import JsonUserStore  # noqa: E402
from usermgr.seed import Seeder  # noqa: E402


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Initialize the users data file with sample data")
    ap.add_argument("--count", type=int, default=settings.seed_users, help="Number of users to generate")
    ap.add_argument("--file", default=settings.data_file, help="Data file name inside the data directory")
    ap.add_argument("--seed", type=int, help="Random seed for reproducible data")
    args = ap.parse_args()

    if args.count < 1:
        raise SystemExit("--count must be positive")
    configure_logging()
    print("Initializing application data...")
    seeder = Seeder(count=args.count, rng=random.Random(args.seed))
    store = JsonUserStore(args.file, settings.data_dir, settings.backup_dir)
    store.save(seeder.users)
    print(f"OK: {len(seeder.users)} users saved to: {store.path}")
    print("Application ready! Run `usermgr` to begin.")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
