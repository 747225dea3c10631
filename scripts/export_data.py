#!/usr/bin/env python3
"""
Export users from the data file as {user, posts} pairs.

Usage:
  python scripts/export_data.py [--out export.json]
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usermgr.core.log import configure_logging  # noqa: E402
from usermgr.seed import export_users_with_posts  # noqa: E402
from usermgr.services.user_service import UserService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Export users and posts as JSON")
    ap.add_argument("--out", help="Output file (default: stdout)")
    args = ap.parse_args()

    configure_logging()
    payload = json.dumps(export_users_with_posts(UserService().list_all()), ensure_ascii=False, indent=2)
    if args.out:
        Path(args.out).write_text(payload, encoding="utf-8")
        print(f"OK: export written to {args.out}")
    else:
        print(payload)


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
