#!/usr/bin/env python3
"""
Reset the data file to empty collections ({"shops": [], "employees": []}).

Usage:
  python scripts/reset_db.py [--data-file data/db.json] [--yes]
"""
from __future__ import annotations

import argparse
import sys

from mall.core.config import get_settings
from mall.repositories.json_storage import JsonStore, empty_document


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Reset the mall directory data file")
    ap.add_argument("--data-file", default=settings.data_file, help="Path to the JSON document")
    ap.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
    args = ap.parse_args()

    store = JsonStore(args.data_file)
    if store.path.exists() and not args.yes:
        db = store.load()
        answer = input(
            f"Remove {len(db['shops'])} shop(s) and {len(db['employees'])} employee(s) from {store.path}? [y/N] "
        )
        if answer.strip().lower() not in {"y", "yes"}:
            raise SystemExit("Aborted")

    store.save(empty_document())
    print(f"OK: {store.path} reset")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
