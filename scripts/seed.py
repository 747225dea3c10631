#!/usr/bin/env python3
"""
Generate synthetic data, print a summary and write seed files.

Writes `seed-data.json` (with generatedAt/totalUsers/totalPosts metadata) and
`users-data.json` into the data directory.

Usage:
  python scripts/seed.py [--count 20] [--seed 42]
"""
from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usermgr.core.config import get_settings  # noqa: E402
from usermgr.seed import Seeder  # noqa: E402


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Generate seed data files")
    ap.add_argument("--count", type=int, default=settings.seed_users, help="Number of users to generate")
    ap.add_argument("--seed", type=int, help="Random seed for reproducible data")
    args = ap.parse_args()

    print("Generating sample data ...")
    seeder = Seeder(count=args.count, rng=random.Random(args.seed))
    print("\n".join(seeder.summary_lines()))
    for name in ("seed-data.json", "users-data.json"):
        path = seeder.save_document(settings.data_dir / name)
        print(f"Data saved to: {path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
