"""
HTTP tests for the shops/employees API backed by a temporary JSON file.
"""
from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the mall package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mall.app import create_app  # noqa: E402
from mall.core import config as core_config  # noqa: E402
from mall.repositories.json_storage import JsonStore  # noqa: E402


@pytest.fixture()
def settings(tmp_path):
    return dataclasses.replace(
        core_config.get_settings(),
        data_file=str(tmp_path / "data" / "db.json"),
        static_dir=str(tmp_path / "public"),
    )


@pytest.fixture()
def make_client(settings):
    def _make() -> TestClient:
        return TestClient(create_app(JsonStore(settings.data_file), settings))

    return _make


@pytest.fixture()
def client(make_client):
    return make_client()


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["time"]


def test_create_shop_and_fetch_it(client):
    res = client.post("/api/shops", json={"name": "Test Shop", "category": "Retail"})
    assert res.status_code == 201
    shop = res.json()
    assert shop["name"] == "Test Shop"
    assert shop["category"] == "Retail"
    assert shop["id"].startswith("shop_")

    got = client.get(f"/api/shops/{shop['id']}")
    assert got.status_code == 200
    assert got.json() == shop


def test_create_employee_assigned_to_shop_and_fetch_by_shop(client):
    shop_id = client.post("/api/shops", json={"name": "Shop A"}).json()["id"]
    res = client.post("/api/employees", json={"firstName": "Sam", "lastName": "Lee", "shopId": shop_id})
    assert res.status_code == 201
    client.post("/api/employees", json={"firstName": "Ana", "lastName": "Cruz", "shopId": "shop_other"})

    emps = client.get(f"/api/shops/{shop_id}/employees")
    assert emps.status_code == 200
    assert [e["firstName"] for e in emps.json()] == ["Sam"]

    filtered = client.get("/api/employees", params={"shopId": shop_id})
    assert filtered.json() == emps.json()
    assert len(client.get("/api/employees").json()) == 2


def test_missing_required_fields_are_client_errors(client):
    res = client.post("/api/shops", json={"category": "Retail"})
    assert res.status_code == 400
    assert res.json() == {"error": "name is required"}

    res = client.post("/api/employees", json={"firstName": "Sam"})
    assert res.status_code == 400
    assert "lastName" in res.json()["error"]

    assert client.post("/api/shops").status_code == 400
    assert client.get("/api/shops").json() == []
    assert client.get("/api/employees").json() == []


def test_non_object_body_is_a_client_error(client):
    res = client.post("/api/shops", content="[1, 2]", headers={"Content-Type": "application/json"})
    assert res.status_code == 400


def test_unknown_ids_are_not_found(client):
    for path in ("/api/shops/shop_missing", "/api/employees/emp_missing"):
        res = client.get(path)
        assert res.status_code == 404
        assert "error" in res.json()
        assert client.put(path, json={"role": "x"}).status_code == 404


def test_search_shops(client):
    client.post("/api/shops", json={"name": "Book Corner", "category": "Retail"})
    client.post("/api/shops", json={"name": "Noodle Bar", "category": "Food"})

    names = [s["name"] for s in client.get("/api/shops", params={"q": "food"}).json()]
    assert names == ["Noodle Bar"]
    assert client.get("/api/shops", params={"q": "nothing"}).json() == []


def test_partial_updates_preserve_other_fields(client):
    shop = client.post("/api/shops", json={"name": "Kiosk", "category": "Retail", "phone": "555"}).json()
    res = client.put(f"/api/shops/{shop['id']}", json={"location": "Level 2"})
    assert res.status_code == 200
    assert res.json() == {**shop, "location": "Level 2"}

    emp = client.post("/api/employees", json={"firstName": "Sam", "lastName": "Lee", "role": "Cashier"}).json()
    res = client.put(f"/api/employees/{emp['id']}", json={"email": "sam@example.com"})
    assert res.json() == {**emp, "email": "sam@example.com"}


def test_delete_shop_cascades(client):
    shop_id = client.post("/api/shops", json={"name": "Shop A"}).json()["id"]
    client.post("/api/employees", json={"firstName": "Sam", "lastName": "Lee", "shopId": shop_id})
    other = client.post("/api/employees", json={"firstName": "Bo", "lastName": "Kim"}).json()

    res = client.delete(f"/api/shops/{shop_id}")
    assert res.status_code == 204
    assert res.content == b""
    assert client.get("/api/shops").json() == []
    assert client.get("/api/employees").json() == [other]


def test_delete_unknown_ids_succeeds(client):
    shop = client.post("/api/shops", json={"name": "Shop A"}).json()

    assert client.delete("/api/shops/shop_missing").status_code == 204
    assert client.delete("/api/employees/emp_missing").status_code == 204
    assert client.get("/api/shops").json() == [shop]


def test_delete_employee(client):
    emp = client.post("/api/employees", json={"firstName": "Sam", "lastName": "Lee"}).json()
    assert client.delete(f"/api/employees/{emp['id']}").status_code == 204
    assert client.get(f"/api/employees/{emp['id']}").status_code == 404


def test_state_survives_restart(client, make_client):
    shop = client.post("/api/shops", json={"name": "Shop A", "location": "Level 1"}).json()
    client.post("/api/employees", json={"firstName": "Sam", "lastName": "Lee", "shopId": shop["id"]})
    shops_before = client.get("/api/shops").json()
    employees_before = client.get("/api/employees").json()

    restarted = make_client()
    assert restarted.get("/api/shops").json() == shops_before
    assert restarted.get("/api/employees").json() == employees_before


def test_storage_failure_is_a_server_error(settings):
    blocker = Path(settings.data_file).parent
    blocker.write_text("", encoding="utf-8")
    client = TestClient(create_app(JsonStore(settings.data_file), settings))

    res = client.get("/api/shops")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert client.get("/api/health").status_code == 200


def test_static_files_are_served_when_present(settings):
    public = Path(settings.static_dir)
    public.mkdir()
    (public / "index.html").write_text("<h1>Mall</h1>", encoding="utf-8")
    client = TestClient(create_app(JsonStore(settings.data_file), settings))

    assert "<h1>Mall</h1>" in client.get("/").text
    assert client.get("/api/shops").json() == []


def test_memory_data_file_selects_memory_store(settings):
    client = TestClient(create_app(settings=dataclasses.replace(settings, data_file=":memory:")))

    client.post("/api/shops", json={"name": "Shop A"})
    assert len(client.get("/api/shops").json()) == 1
    assert not Path(settings.data_file).exists()


def test_blank_shop_id_filter_lists_every_employee(client):
    emp = client.post("/api/employees", json={"firstName": "Sam", "lastName": "Lee"}).json()

    res = client.get("/api/employees", params={"shopId": ""})
    assert res.status_code == 200
    assert res.json() == [emp]


def test_corrupt_collection_is_a_json_server_error(settings, client):
    Path(settings.data_file).parent.mkdir(parents=True, exist_ok=True)
    Path(settings.data_file).write_text('{"shops": null, "employees": []}', encoding="utf-8")

    res = client.get("/api/shops/shop_x")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
