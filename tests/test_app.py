from __future__ import annotations

import main


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_unexpected_error_is_500(client, monkeypatch):
    from listings import repository

    async def fake_list():
        raise ValueError("boom")

    monkeypatch.setattr(repository, "list_listings", fake_list)

    resp = client.get("/anuncios")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Error interno del servidor", "details": "boom"}


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://admin.example.com, https://www.example.com")

    assert main.cors_origins() == ["https://admin.example.com", "https://www.example.com"]
