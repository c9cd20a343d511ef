"""Shop use cases: listing, CRUD and the shop -> employees relation."""

from __future__ import annotations

import logging
from typing import Optional

from mall.core.utils import new_id, utc_now_iso
from mall.repositories.json_storage import DocumentStore
from mall.services.errors import NotFoundError, merge_fields, require_text

logger = logging.getLogger(__name__)

SHOP_ID_PREFIX = "shop"
SHOP_OPTIONAL_FIELDS = ("category", "location", "phone")
SHOP_EDITABLE_FIELDS = ("name",) + SHOP_OPTIONAL_FIELDS


def _matches(shop: dict, needle: str) -> bool:
    name = str(shop.get("name") or "").lower()
    category = str(shop.get("category") or "").lower()
    return needle in name or needle in category


class ShopService:
    """CRUD over the ``shops`` collection; deleting a shop also removes its employees."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def list_shops(self, q: Optional[str] = None) -> list[dict]:
        shops = self.store.load()["shops"]
        needle = (q or "").strip().lower()
        if not needle:
            return shops
        return [shop for shop in shops if _matches(shop, needle)]

    def get_shop(self, shop_id: str) -> dict:
        for shop in self.store.load()["shops"]:
            if shop.get("id") == shop_id:
                return shop
        raise NotFoundError("Shop not found")

    def create_shop(self, payload: dict) -> dict:
        name = require_text(payload, "name")
        shop = {"id": new_id(SHOP_ID_PREFIX), "name": name}
        for field in SHOP_OPTIONAL_FIELDS:
            shop[field] = payload.get(field) or ""
        shop["createdAt"] = utc_now_iso()
        with self.store.locked():
            db = self.store.load()
            db["shops"].append(shop)
            self.store.save(db)
        return shop

    def update_shop(self, shop_id: str, payload: dict) -> dict:
        with self.store.locked():
            db = self.store.load()
            for shop in db["shops"]:
                if shop.get("id") == shop_id:
                    merge_fields(shop, payload, SHOP_EDITABLE_FIELDS)
                    self.store.save(db)
                    return shop
        raise NotFoundError("Shop not found")

    def delete_shop(self, shop_id: str) -> None:
        with self.store.locked():
            db = self.store.load()
            shops = [s for s in db["shops"] if s.get("id") != shop_id]
            employees = [e for e in db["employees"] if e.get("shopId") != shop_id]
            removed = len(db["employees"]) - len(employees)
            if len(shops) == len(db["shops"]) and not removed:
                return
            db["shops"] = shops
            db["employees"] = employees
            self.store.save(db)
        if removed:
            logger.info("Deleted shop %s and %d employee(s)", shop_id, removed)

    def list_shop_employees(self, shop_id: str) -> list[dict]:
        """Employees whose ``shopId`` is ``shop_id``; the shop itself need not exist."""
        return [e for e in self.store.load()["employees"] if e.get("shopId") == shop_id]
