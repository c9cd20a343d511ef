"""Employee use cases."""

from __future__ import annotations

from typing import Optional

from mall.core.utils import new_id
from mall.repositories.json_storage import DocumentStore
from mall.services.errors import NotFoundError, merge_fields, require_text

EMPLOYEE_ID_PREFIX = "emp"
EMPLOYEE_EDITABLE_FIELDS = ("firstName", "lastName", "role", "email", "shopId")


class EmployeeService:
    """CRUD over the ``employees`` collection. ``shopId`` is stored as given."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def list_employees(self, shop_id: Optional[str] = None) -> list[dict]:
        employees = self.store.load()["employees"]
        if not shop_id:
            return employees
        return [e for e in employees if e.get("shopId") == shop_id]

    def get_employee(self, employee_id: str) -> dict:
        for employee in self.store.load()["employees"]:
            if employee.get("id") == employee_id:
                return employee
        raise NotFoundError("Employee not found")

    def create_employee(self, payload: dict) -> dict:
        first_name = require_text(payload, "firstName")
        last_name = require_text(payload, "lastName")
        employee = {
            "id": new_id(EMPLOYEE_ID_PREFIX),
            "firstName": first_name,
            "lastName": last_name,
            "role": payload.get("role") or "",
            "shopId": payload.get("shopId") or None,
            "email": payload.get("email") or "",
        }
        with self.store.locked():
            db = self.store.load()
            db["employees"].append(employee)
            self.store.save(db)
        return employee

    def update_employee(self, employee_id: str, payload: dict) -> dict:
        with self.store.locked():
            db = self.store.load()
            for employee in db["employees"]:
                if employee.get("id") == employee_id:
                    merge_fields(employee, payload, EMPLOYEE_EDITABLE_FIELDS)
                    self.store.save(db)
                    return employee
        raise NotFoundError("Employee not found")

    def delete_employee(self, employee_id: str) -> None:
        with self.store.locked():
            db = self.store.load()
            remaining = [e for e in db["employees"] if e.get("id") != employee_id]
            if len(remaining) != len(db["employees"]):
                db["employees"] = remaining
                self.store.save(db)
