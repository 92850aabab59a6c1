"""HTTP surface of products, categories and health."""

import asyncio


def _category(catalog_store, name):
    return asyncio.run(catalog_store.create_category(name))


def test_product_crud(client, catalog_store):
    audio = _category(catalog_store, "Audio")
    resp = client.post("/api/products", json={"name": "Headphones", "price": 89.99, "category_id": audio.id})
    assert resp.status_code == 201
    product = resp.json()
    assert product["category_id"] == audio.id

    assert client.get(f"/api/products/{product['id']}").json()["name"] == "Headphones"

    updated = client.put(f"/api/products/{product['id']}", json={"name": "Headphones Pro", "price": 99.0})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Headphones Pro"

    assert client.delete(f"/api/products/{product['id']}").status_code == 204
    assert client.get(f"/api/products/{product['id']}").status_code == 404
    assert client.delete(f"/api/products/{product['id']}").status_code == 404


def test_invalid_product_is_400(client):
    assert client.post("/api/products", json={"name": "", "price": 1}).status_code == 400
    assert client.post("/api/products", json={"name": "x", "price": -1}).status_code == 400
    assert client.post("/api/products", json={"name": "x", "price": 1, "category_id": 9}).status_code == 400


def test_delete_product_removes_its_reviews(client, make_review):
    product_id = client.post("/api/products", json={"name": "Charger", "price": 29.99}).json()["id"]
    client.post("/api/reviews", json=make_review(product_id=product_id))
    client.post("/api/reviews", json=make_review(product_id=product_id, rating=2))

    assert client.delete(f"/api/products/{product_id}").status_code == 204
    agg = client.get(f"/api/reviews/aggregate/{product_id}").json()
    assert agg["overall"]["total_reviews"] == 0


def test_list_products_meta(client, catalog_store):
    audio = _category(catalog_store, "Audio")
    for i in range(11):
        client.post("/api/products", json={"name": f"p{i}", "price": 1, "category_id": audio.id if i < 4 else None})

    body = client.get("/api/products").json()
    assert len(body["data"]) == 9
    assert body["meta"] == {"total": 11, "page": 1, "per_page": 9, "total_pages": 2}

    second = client.get("/api/products", params={"page": 2}).json()
    assert [p["name"] for p in second["data"]] == ["p9", "p10"]

    filtered = client.get("/api/products", params={"category_id": audio.id}).json()
    assert filtered["meta"]["total"] == 4

    assert client.get("/api/products", params={"page": 0}).status_code == 400


def test_categories(client, catalog_store):
    _category(catalog_store, "Smart Home")
    _category(catalog_store, "Accessories")
    resp = client.get("/api/categories")
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Accessories", "Smart Home"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["checks"]["storage"] == "memory"
    assert body["checks"]["mongodb"] == "skipped"
    assert body["checks"]["redis"] == "skipped"
