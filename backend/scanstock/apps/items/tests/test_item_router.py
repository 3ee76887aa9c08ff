from __future__ import annotations

from scanstock.apps.items.router import router as items_router


def _create(client, **body):
    return client.post("/items", json=body)


def test_router_has_expected_routes():
    def _has(method: str, path: str) -> bool:
        return any(route.path == path and method in (route.methods or []) for route in items_router.routes)

    assert _has("GET", "/items")
    assert _has("POST", "/items")
    assert _has("GET", "/items/code/{code:path}")
    assert _has("GET", "/items/{item_id}")
    assert _has("PUT", "/items/{item_id}")
    assert _has("DELETE", "/items/{item_id}")
    assert _has("POST", "/items/scan")


def test_crud_scenario(client):
    created = _create(client, code="A1", name="Widget", quantity=5)
    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 1
    assert body["code"] == "A1"
    assert body["quantity"] == 5
    assert body["description"] is None
    assert "created_at" in body

    duplicate = _create(client, code="A1", name="Other")
    assert duplicate.status_code == 409
    assert duplicate.json() == {"message": "Item with this code already exists"}

    invalid = client.put("/items/1", json={"quantity": -1})
    assert invalid.status_code == 400
    assert invalid.json()["field"] == "quantity"
    assert invalid.json()["message"]

    deleted = client.delete("/items/1")
    assert deleted.status_code == 204
    assert deleted.content == b""

    missing = client.get("/items/1")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Item not found"}


def test_get_by_id_and_code(client):
    item_id = _create(client, code="12345678", name="Wireless Mouse").json()["id"]

    assert client.get(f"/items/{item_id}").json()["code"] == "12345678"
    assert client.get("/items/code/12345678").json()["id"] == item_id
    assert client.get("/items/code/00000000").status_code == 404


def test_get_by_code_containing_slashes(client):
    item_id = _create(client, code="AB/12", name="Pallet label").json()["id"]

    assert client.get("/items/code/AB/12").json()["id"] == item_id
    assert client.get("/items/code/AB%2F12").json()["id"] == item_id
    assert client.get("/items/code/AB/13").status_code == 404


def test_get_by_code_ignores_scanner_whitespace(client):
    created = _create(client, code=" 12345678\r\n", name="Wireless Mouse").json()
    assert created["code"] == "12345678"

    found = client.get("/items/code/%2012345678%20")
    assert found.status_code == 200
    assert found.json()["id"] == created["id"]


def test_list_and_search(client):
    _create(client, code="12345678", name="Wireless Mouse", category="Electronics")
    _create(client, code="87654321", name="Mechanical Keyboard", description="Blue switches")
    _create(client, code="11223344", name="USB-C Cable")

    everything = client.get("/items")
    assert everything.status_code == 200
    assert [item["id"] for item in everything.json()] == [1, 2, 3]

    found = client.get("/items", params={"search": "blue"})
    assert [item["code"] for item in found.json()] == ["87654321"]

    assert client.get("/items", params={"search": "zzz"}).json() == []


def test_create_validation_reports_first_failing_field(client):
    missing_name = _create(client, code="A1")
    assert missing_name.status_code == 400
    assert missing_name.json()["field"] == "name"

    bad_quantity = _create(client, code="A1", name="Widget", quantity="lots")
    assert bad_quantity.status_code == 400
    assert bad_quantity.json()["field"] == "quantity"

    assert client.get("/items").json() == []


def test_malformed_json_is_a_validation_error(client):
    response = client.post(
        "/items",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "field" not in response.json()


def test_update_paths(client):
    first = _create(client, code="A1", name="Widget", description="Blue").json()
    _create(client, code="B2", name="Gadget")

    same_code = client.put(f"/items/{first['id']}", json={"code": "A1", "quantity": 9})
    assert same_code.status_code == 200
    assert same_code.json()["quantity"] == 9
    assert same_code.json()["description"] == "Blue"

    taken = client.put(f"/items/{first['id']}", json={"code": "B2"})
    assert taken.status_code == 409
    assert taken.json() == {"message": "Code already in use"}

    null_name = client.put(f"/items/{first['id']}", json={"name": None})
    assert null_name.status_code == 400
    assert null_name.json()["field"] == "name"

    assert client.put("/items/999", json={"name": "Ghost"}).status_code == 404


def test_delete_missing_item(client):
    response = client.delete("/items/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Item not found"}


def test_non_integer_id_is_rejected(client):
    response = client.get("/items/not-a-number")

    assert response.status_code == 400
    assert response.json()["field"] == "item_id"


def test_scan_routes_to_edit_or_create(client):
    item = _create(client, code="12345678", name="Wireless Mouse", quantity=15).json()

    edit = client.post("/items/scan", json={"code": "12345678"})
    assert edit.status_code == 200
    assert edit.json()["action"] == "edit"
    assert edit.json()["item"]["id"] == item["id"]
    assert edit.json()["draft"] is None

    create = client.post("/items/scan", json={"code": "99999999"})
    assert create.status_code == 200
    assert create.json()["action"] == "create"
    assert create.json()["item"] is None
    assert create.json()["draft"] == {
        "code": "99999999",
        "name": "",
        "description": None,
        "quantity": 0,
        "category": None,
    }


def test_empty_scan_returns_no_content(client):
    for body in ({}, {"code": None}, {"code": "  "}):
        response = client.post("/items/scan", json=body)
        assert response.status_code == 204
        assert response.content == b""
