#!/usr/bin/env python3
"""
Add a shop straight into the data file.

Usage:
  python scripts/add_shop.py --name "Book Corner" [--category Books] [--location "Level 2"] [--phone 555-0100]
"""
from __future__ import annotations

import argparse
import sys

from mall.core.config import get_settings
from mall.repositories.json_storage import JsonStore
from mall.services.shop_service import ShopService


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Add a shop to the data file")
    ap.add_argument("--name", required=True, help="Shop name")
    ap.add_argument("--category", default="", help="Category (ex.: Retail)")
    ap.add_argument("--location", default="", help="Where in the mall")
    ap.add_argument("--phone", default="", help="Contact phone")
    ap.add_argument("--data-file", default=settings.data_file, help="Path to the JSON document")
    args = ap.parse_args()

    svc = ShopService(JsonStore(args.data_file))
    shop = svc.create_shop(
        {"name": args.name, "category": args.category, "location": args.location, "phone": args.phone}
    )
    print("OK: shop added")
    print(f"  ID: {shop['id']}")
    print(f"  Name: {shop['name']}")
    if shop["category"]:
        print(f"  Category: {shop['category']}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
