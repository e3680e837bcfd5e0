from decimal import Decimal

from app.data.models.product import ProductModel


def test_list_by_user_with_no_products_is_empty_200(client, register):
    user_id = register()
    resp = client.get(f"/users/{user_id}/products")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_by_user_unknown_user_404(client):
    assert client.get("/users/77/products").status_code == 404


def test_list_by_user_non_numeric_id_400(client):
    assert client.get("/users/abc/products").status_code == 400


def test_listing_has_canonical_fields(client, register, add_product):
    user_id = register()
    product_id = add_product(user_id, description="arabika")

    rows = client.get(f"/users/{user_id}/products").json()
    assert len(rows) == 1
    row = rows[0]
    assert set(row) == {
        "product_id", "name", "price", "image_url", "description",
        "category", "user_id", "user_name", "user_profile_picture",
    }
    assert row["product_id"] == product_id
    assert row["user_name"] == "Budi"
    assert Decimal(row["price"]) == Decimal("25000")

    # ten sam ksztalt z listy ogolnej
    assert client.get("/products", params={"user_id": user_id}).json() == rows


def test_list_by_category_filters_exactly(client, register, add_product):
    user_id = register()
    add_product(user_id, name="Kopi", category="food")
    add_product(user_id, name="Kaos", category="fashion")

    all_rows = client.get("/products").json()
    assert [r["name"] for r in all_rows] == ["Kopi", "Kaos"]

    food = client.get("/products", params={"category": "food"}).json()
    assert [r["name"] for r in food] == ["Kopi"]

    assert client.get("/products", params={"category": "Food"}).json() == []


def test_create_product_for_unknown_owner_404(client):
    resp = client.post(
        "/products",
        json={"name": "X", "price": "1", "image_url": "u", "user_id": 5, "category": "c"},
    )
    assert resp.status_code == 404


def test_create_product_rejects_negative_price(client, register):
    user_id = register()
    resp = client.post(
        "/products",
        json={"name": "X", "price": "-1", "image_url": "u", "user_id": user_id, "category": "c"},
    )
    assert resp.status_code == 400


def test_update_product(client, register, add_product):
    user_id = register()
    product_id = add_product(user_id)

    resp = client.put(
        f"/products/{product_id}",
        json={"name": "Kopi Gayo", "price": "30000", "image_url": "new.png", "description": "enak"},
    )
    assert resp.status_code == 200

    row = client.get(f"/products/{product_id}").json()
    assert row["name"] == "Kopi Gayo"
    assert row["description"] == "enak"
    assert Decimal(row["price"]) == Decimal("30000")


def test_update_unknown_product_404_and_table_unchanged(client, db, register, add_product):
    user_id = register()
    add_product(user_id)
    before = [(p.id, p.name, p.price) for p in db.query(ProductModel).all()]

    resp = client.put(
        "/products/999",
        json={"name": "Y", "price": "1", "image_url": "y.png", "description": "d"},
    )
    assert resp.status_code == 404

    db.expire_all()
    after = [(p.id, p.name, p.price) for p in db.query(ProductModel).all()]
    assert after == before


def test_update_product_requires_all_fields(client, register, add_product):
    product_id = add_product(register())
    resp = client.put(f"/products/{product_id}", json={"name": "Y", "price": "1", "image_url": "y.png"})
    assert resp.status_code == 400


def test_create_product_rejects_blank_name_or_category(client, register):
    user_id = register()
    for field in ("name", "category"):
        body = {"name": "X", "price": "1", "image_url": "u", "user_id": user_id, "category": "c"}
        body[field] = "   "
        assert client.post("/products", json=body).status_code == 400

    assert client.get("/products").json() == []


def test_product_routes_do_not_redirect(client, register):
    user_id = register()
    resp = client.post(
        "/products",
        json={"name": "X", "price": "1", "image_url": "u", "user_id": user_id, "category": "c"},
        follow_redirects=False,
    )
    assert resp.status_code == 200

    resp = client.get("/products", params={"category": "c"}, follow_redirects=False)
    assert resp.status_code == 200
    assert len(resp.json()) == 1
