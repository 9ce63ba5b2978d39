"""API tests for the catalog endpoints."""

from bson import ObjectId


def test_admin_creates_and_lists_product(client, admin_token, auth_headers):
    response = client.post(
        "/api/admin/products",
        headers=auth_headers(admin_token),
        json={"title": "Pixel 7A", "price": 34999, "brand": "Google"},
    )

    assert response.status_code == 201
    product_id = response.json()["id"]
    assert response.json()["message"] == "Product added"

    listed = client.get("/api/products").json()
    assert [p["id"] for p in listed] == [product_id]
    assert listed[0]["brand"] == "Google"

    single = client.get(f"/api/products/{product_id}")
    assert single.status_code == 200
    assert single.json()["title"] == "Pixel 7A"


def test_create_requires_title_and_price(client, admin_token, auth_headers):
    response = client.post(
        "/api/admin/products", headers=auth_headers(admin_token), json={"title": "No price"}
    )

    assert response.status_code == 400


def test_create_requires_admin(client, user_token, auth_headers):
    response = client.post(
        "/api/admin/products",
        headers=auth_headers(user_token),
        json={"title": "Phone", "price": 10},
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Admin role required"


def test_get_product_with_invalid_id(client):
    response = client.get("/api/products/not-an-id")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid product ID"


def test_get_missing_product(client):
    response = client.get(f"/api/products/{ObjectId()}")

    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


def test_admin_deletes_product(client, db, admin_token, auth_headers):
    product_id = str(db.products.insert_one({"title": "Old", "price": 1}).inserted_id)

    response = client.delete(f"/api/admin/products/{product_id}", headers=auth_headers(admin_token))

    assert response.status_code == 200
    assert response.json() == {"message": "Product deleted"}
    assert db.products.count_documents({}) == 0

    again = client.delete(f"/api/admin/products/{product_id}", headers=auth_headers(admin_token))
    assert again.status_code == 404


def test_catalog_serves_products_seeded_outside_the_api(client, db):
    legacy_id = str(db.products.insert_one({"title": "Legacy", "price": "34,999"}).inserted_id)
    db.products.insert_one({"price": 12, "image": "x.png"})

    response = client.get("/api/products")

    assert response.status_code == 200
    listed = response.json()
    assert len(listed) == 2
    assert listed[0]["id"] == legacy_id
    assert listed[0]["price"] == "34,999"
    assert listed[1]["title"] is None
    assert listed[1]["image"] == "x.png"

    single = client.get(f"/api/products/{legacy_id}")
    assert single.status_code == 200
    assert single.json()["price"] == "34,999"
