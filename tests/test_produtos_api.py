# tests/test_produtos_api.py

"""End-to-end tests of the /api/produto endpoints, run against both backends."""

from decimal import Decimal

URL = "/api/produto"


def _create(client, name="Widget", price=9.99):
    resp = client.post(URL, json={"name": name, "price": price})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_example_lifecycle(client):
    resp = client.post(URL, json={"name": "Widget", "price": 9.99})
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] == 1
    assert resp.headers["location"] == "/api/produto/1"

    resp = client.get(f"{URL}/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Widget", "price": 9.99, "version": 1}

    assert client.delete(f"{URL}/1").status_code == 204
    assert client.get(f"{URL}/1").status_code == 404


def test_create_assigns_positive_unique_ids(client):
    ids = [_create(client, name=f"P{i}", price=i)["id"] for i in range(5)]
    assert all(i > 0 for i in ids)
    assert len(set(ids)) == len(ids)


def test_get_after_create_returns_same_fields(client):
    created = _create(client, name="Teclado", price=199.99)
    resp = client.get(f"{URL}/{created['id']}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Teclado"
    assert Decimal(str(body["price"])) == Decimal("199.99")


def test_list_returns_all_rows_in_id_order(client):
    assert client.get(URL).json() == []
    _create(client, name="A", price=1)
    _create(client, name="B", price=2)

    rows = client.get(URL).json()
    assert [r["name"] for r in rows] == ["A", "B"]
    assert rows[0]["id"] < rows[1]["id"]


def test_get_missing_returns_404(client):
    resp = client.get(f"{URL}/999")
    assert resp.status_code == 404
    assert "999" in resp.json()["detail"]


def test_replace_overwrites_fields_and_bumps_version(client):
    created = _create(client)
    resp = client.put(
        f"{URL}/{created['id']}",
        json={"id": created["id"], "name": "Gadget", "price": 12.5},
    )
    assert resp.status_code == 204
    assert resp.content == b""

    body = client.get(f"{URL}/{created['id']}").json()
    assert body["name"] == "Gadget"
    assert body["price"] == 12.5
    assert body["version"] == 2


def test_replace_with_mismatched_id_returns_400_and_keeps_row(client):
    created = _create(client)
    resp = client.put(
        f"{URL}/{created['id']}",
        json={"id": created["id"] + 1, "name": "Other", "price": 1},
    )
    assert resp.status_code == 400

    body = client.get(f"{URL}/{created['id']}").json()
    assert body["name"] == "Widget"
    assert body["version"] == 1


def test_replace_missing_returns_404(client):
    resp = client.put(f"{URL}/42", json={"id": 42, "name": "X", "price": 1})
    assert resp.status_code == 404


def test_replace_with_stale_version_returns_409(client):
    created = _create(client)
    pid = created["id"]

    first = client.put(f"{URL}/{pid}", json={"id": pid, "name": "v2", "price": 2, "version": 1})
    assert first.status_code == 204

    stale = client.put(f"{URL}/{pid}", json={"id": pid, "name": "lost", "price": 3, "version": 1})
    assert stale.status_code == 409

    body = client.get(f"{URL}/{pid}").json()
    assert body["name"] == "v2"
    assert body["version"] == 2


def test_delete_missing_returns_404(client):
    assert client.delete(f"{URL}/7").status_code == 404


def test_delete_removes_only_target(client):
    a = _create(client, name="A")
    b = _create(client, name="B")

    assert client.delete(f"{URL}/{a['id']}").status_code == 204
    assert [r["id"] for r in client.get(URL).json()] == [b["id"]]


def test_invalid_bodies_are_rejected(client):
    assert client.post(URL, json={"name": "", "price": 1}).status_code == 422
    assert client.post(URL, json={"name": "X", "price": -1}).status_code == 422
    assert client.post(URL, json={"price": 1}).status_code == 422
    assert client.get(URL).json() == []


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_ids_outside_column_range_are_rejected(client):
    too_big = 2**70
    body = {"id": too_big, "name": "X", "price": 1}

    assert client.get(f"{URL}/{too_big}").status_code == 422
    assert client.delete(f"{URL}/{too_big}").status_code == 422
    assert client.put(f"{URL}/{too_big}", json=body).status_code == 422
    assert client.get(f"{URL}/0").status_code == 422


def test_replace_body_id_outside_column_range_is_rejected(client):
    created = _create(client)
    resp = client.put(
        f"{URL}/{created['id']}",
        json={"id": 2**70, "name": "X", "price": 1},
    )
    assert resp.status_code == 422
    assert client.get(f"{URL}/{created['id']}").json()["name"] == "Widget"
