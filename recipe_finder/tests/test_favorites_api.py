from __future__ import annotations


def _login_demo(c):
    c.post("/api/auth/login", json={"username": "demo", "password": "password"})


def test_favorites_empty_initially(client):
    _login_demo(client)
    resp = client.get("/api/favorites")
    assert resp.status_code == 200
    assert resp.json() == []


def test_add_favorite(client, store):
    _login_demo(client)
    resp = client.post("/api/favorites/3")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Recipe added to favorites"
    assert [r["id"] for r in client.get("/api/favorites").json()] == [3]
    assert store.is_favorite(1, 3)


def test_add_favorite_twice_keeps_one_row(client, store):
    _login_demo(client)
    client.post("/api/favorites/3")
    client.post("/api/favorites/3")
    assert store.favorite_count() == 1
    assert len(client.get("/api/favorites").json()) == 1


def test_add_favorite_for_missing_recipe(client, store):
    _login_demo(client)
    resp = client.post("/api/favorites/999")
    assert resp.status_code == 404
    assert store.favorite_count() == 0


def test_add_favorite_invalid_id(client):
    _login_demo(client)
    assert client.post("/api/favorites/abc").status_code == 400


def test_remove_favorite(client):
    _login_demo(client)
    client.post("/api/favorites/3")
    resp = client.delete("/api/favorites/3")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Recipe removed from favorites"
    assert client.get("/api/favorites").json() == []


def test_remove_favorite_that_does_not_exist_still_succeeds(client):
    _login_demo(client)
    resp = client.delete("/api/favorites/5")
    assert resp.status_code == 200


def test_favorites_listed_in_recipe_order(client):
    _login_demo(client)
    for recipe_id in (6, 1, 4):
        client.post(f"/api/favorites/{recipe_id}")
    assert [r["id"] for r in client.get("/api/favorites").json()] == [1, 4, 6]


def test_favorites_are_per_user(client):
    _login_demo(client)
    client.post("/api/favorites/2")
    client.post("/api/auth/register", json={"username": "alice", "password": "pw"})
    assert client.get("/api/favorites").json() == []
    assert client.get("/api/recipes/2").json()["isFavorite"] is False
