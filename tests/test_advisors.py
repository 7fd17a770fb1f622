from __future__ import annotations

import asyncio

from advisors import repository
from core import db


def test_get_advisors(client, monkeypatch):
    rows = [
        {"id": 7, "nombre": "Ana", "ciudad": "Lima", "whatsapp": "+51999"},
        {"id": 2, "nombre": "Beatriz", "ciudad": "Cusco", "whatsapp": "+51888"},
    ]

    async def fake_list():
        return rows

    monkeypatch.setattr(repository, "list_advisors", fake_list)

    resp = client.get("/asesoras")

    assert resp.status_code == 200
    assert resp.json() == rows


def test_post_advisor(client, monkeypatch, calls):
    async def fake_create(**kwargs):
        calls.append(kwargs)
        return {"id": 7}

    monkeypatch.setattr(repository, "create_advisor", fake_create)

    resp = client.post("/asesoras", json={"nombre": "Ana", "ciudad": "Lima", "whatsapp": "+51999"})

    assert resp.status_code == 201
    assert resp.json() == {"message": "Asesora registrada correctamente", "id": 7}
    assert calls == [{"nombre": "Ana", "ciudad": "Lima", "whatsapp": "+51999"}]


def test_put_unknown_advisor_still_succeeds(client, monkeypatch, calls):
    async def fake_update(advisor_id, **kwargs):
        calls.append((advisor_id, kwargs))
        return 0

    monkeypatch.setattr(repository, "update_advisor", fake_update)

    resp = client.put("/asesoras", json={"id": 99, "nombre": "Ana", "ciudad": "Arequipa", "whatsapp": "+51999"})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Asesora actualizada"}
    assert calls == [(99, {"nombre": "Ana", "ciudad": "Arequipa", "whatsapp": "+51999"})]


def test_delete_advisor(client, monkeypatch, calls):
    async def fake_delete(advisor_id):
        calls.append(advisor_id)
        return 1

    monkeypatch.setattr(repository, "delete_advisor", fake_delete)

    resp = client.request("DELETE", "/asesoras", json={"id": 7})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Asesora eliminada"}
    assert calls == [7]


def test_delete_advisor_still_referenced_is_500(client, monkeypatch):
    async def fake_delete(advisor_id):
        raise db.DatabaseError('update or delete on table "asesoras" violates foreign key constraint')

    monkeypatch.setattr(repository, "delete_advisor", fake_delete)

    resp = client.request("DELETE", "/asesoras", json={"id": 7})

    assert resp.status_code == 500
    assert "foreign key" in resp.json()["details"]


def test_wrong_method_on_advisors_is_405(client):
    resp = client.patch("/asesoras", json={})

    assert resp.status_code == 405
    assert resp.json() == {"error": "Método no permitido"}


def test_list_query_orders_by_name(monkeypatch, calls):
    async def fake_fetch_all(sql, *args):
        calls.append(sql)
        return []

    monkeypatch.setattr(db, "fetch_all", fake_fetch_all)

    asyncio.run(repository.list_advisors())

    assert "ORDER BY nombre ASC" in calls[0]


def test_update_returns_affected_rows(monkeypatch, calls):
    async def fake_execute(sql, *args):
        calls.append(args)
        return 0

    monkeypatch.setattr(db, "execute", fake_execute)

    updated = asyncio.run(repository.update_advisor(5, nombre="Ana", ciudad="Lima", whatsapp="+51999"))

    assert updated == 0
    assert calls == [("Ana", "Lima", "+51999", 5)]
