def add_line(client, **body):
    payload = {"productId": 1, "quantity": 1, "sessionId": "guest-session"}
    payload.update(body)
    return client.post("/api/cart", json=payload)


def test_root_and_status(client):
    assert client.get("/").json() == {"message": "BireuenVape API is running"}
    status = client.get("/test").json()
    assert status["backend"] == "✅ Running"
    assert status["collections"]["product"] == 11


def test_list_products_uses_camel_case(client):
    res = client.get("/api/products")
    assert res.status_code == 200
    products = res.json()
    assert len(products) == 11
    first = products[0]
    assert first["id"] == 1
    assert first["isNewArrival"] is True
    assert first["reviewCount"] == 42
    assert "createdAt" in first
    assert "is_new_arrival" not in first


def test_get_product(client):
    res = client.get("/api/products/5")
    assert res.status_code == 200
    assert res.json()["name"] == "Qita Series - Mango"
    assert res.json()["subcategory"] == "Fruit"


def test_get_product_errors(client):
    assert client.get("/api/products/abc").status_code == 400
    res = client.get("/api/products/999")
    assert res.status_code == 404
    assert res.json() == {"detail": "Product not found"}


def test_product_filters(client):
    featured = client.get("/api/products/featured")
    assert featured.status_code == 200
    assert all(p["isFeatured"] for p in featured.json())

    arrivals = client.get("/api/products/new-arrivals").json()
    assert {p["name"] for p in arrivals} >= {"Vprime Pro", "Ghost Rabbit"}

    by_category = client.get("/api/products/category/box mods").json()
    assert [p["name"] for p in by_category] == ["R234 Pro Electrical Mod"]

    by_brand = client.get("/api/products/brand/JAX").json()
    assert len(by_brand) == 3

    assert client.get("/api/products/category/unknown").json() == []


def test_search(client):
    res = client.get("/api/products/search/mango")
    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["Qita Series - Mango"]


def test_brands_and_categories(client):
    brands = client.get("/api/brands").json()
    assert [b["name"] for b in brands] == ["OXVA", "JAX", "LUNIX", "NIXX", "PANDA", "HOTCIG"]
    assert client.get("/api/brands/panda").json()["description"] == "Unique design vape devices"
    assert client.get("/api/brands/NITROUS").status_code == 404

    categories = client.get("/api/categories").json()
    assert len(categories) == 4
    category = client.get("/api/categories/e-liquids").json()
    assert category["productCount"] == 56
    assert client.get("/api/categories/Coils").status_code == 404


def test_add_same_line_twice_merges(client):
    first = add_line(client)
    assert first.status_code == 201
    assert first.json()["product"]["name"] == "Vprime Pro"
    second = add_line(client)
    assert second.status_code == 201
    assert second.json()["id"] == first.json()["id"]

    cart = client.get("/api/cart/guest-session").json()
    assert len(cart) == 1
    assert cart[0]["quantity"] == 2
    assert cart[0]["product"]["id"] == 1


def test_add_to_cart_defaults(client):
    res = client.post("/api/cart", json={"productId": 3})
    assert res.status_code == 201
    body = res.json()
    assert body["quantity"] == 1
    assert body["sessionId"] == "guest-session"
    assert body["color"] is None


def test_add_to_cart_colors_are_separate_lines(client):
    add_line(client, color="red")
    add_line(client, color="blue")
    assert len(client.get("/api/cart/guest-session").json()) == 2


def test_add_to_cart_rejects_bad_bodies(client):
    assert client.post("/api/cart", json={"quantity": 1}).status_code == 400
    assert add_line(client, quantity=0).status_code == 400
    assert add_line(client, productId="not-a-number").status_code == 400
    res = add_line(client, sessionId="  ")
    assert res.status_code == 400


def test_add_unknown_product_returns_null_product(client):
    res = add_line(client, productId=999)
    assert res.status_code == 201
    assert res.json()["product"] is None


def test_update_cart_item(client):
    item_id = add_line(client).json()["id"]
    res = client.put(f"/api/cart/{item_id}", json={"quantity": 4})
    assert res.status_code == 200
    assert res.json()["quantity"] == 4
    assert res.json()["product"]["name"] == "Vprime Pro"


def test_update_cart_item_rejects_non_positive_quantity(client):
    item_id = add_line(client).json()["id"]
    assert client.put(f"/api/cart/{item_id}", json={"quantity": 0}).status_code == 400
    assert client.put(f"/api/cart/{item_id}", json={"quantity": -2}).status_code == 400
    assert client.put(f"/api/cart/{item_id}", json={}).status_code == 400
    assert client.get("/api/cart/guest-session").json()[0]["quantity"] == 1


def test_update_cart_item_errors(client):
    assert client.put("/api/cart/abc", json={"quantity": 1}).status_code == 400
    res = client.put("/api/cart/999", json={"quantity": 1})
    assert res.status_code == 404
    assert res.json() == {"detail": "Cart item not found"}


def test_remove_from_cart(client):
    item_id = add_line(client).json()["id"]
    res = client.delete(f"/api/cart/{item_id}")
    assert res.status_code == 204
    assert res.content == b""
    assert client.get("/api/cart/guest-session").json() == []
    assert client.delete(f"/api/cart/{item_id}").status_code == 204
    assert client.delete("/api/cart/abc").status_code == 400


def test_clear_cart(client):
    add_line(client, productId=1)
    add_line(client, productId=2)
    add_line(client, sessionId="someone-else")
    res = client.delete("/api/cart/session/guest-session")
    assert res.status_code == 204
    assert client.get("/api/cart/guest-session").json() == []
    assert len(client.get("/api/cart/someone-else").json()) == 1


def test_blank_session_id_is_rejected(client):
    assert client.get("/api/cart/%20").status_code == 400
    assert client.delete("/api/cart/session/%20").status_code == 400


def test_cart_summary(client):
    add_line(client, productId=5, quantity=2)
    add_line(client, productId=8)
    res = client.get("/api/cart/guest-session/summary")
    assert res.status_code == 200
    assert res.json() == {
        "sessionId": "guest-session",
        "lineCount": 2,
        "itemCount": 3,
        "subtotal": 6500000 * 2 + 85000000,
    }


def test_each_client_gets_a_fresh_store(client):
    assert client.get("/api/cart/guest-session").json() == []


def test_register_and_fetch_user(client):
    res = client.post(
        "/api/users",
        json={"username": "rina", "password": "s3cret", "email": "rina@example.com", "dateOfBirth": "1999-01-01"},
    )
    assert res.status_code == 201
    user = res.json()
    assert user["username"] == "rina"
    assert user["isVerified"] is False
    assert "password" not in user

    fetched = client.get(f"/api/users/{user['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["dateOfBirth"] == "1999-01-01"


def test_register_rejects_taken_username(client):
    client.post("/api/users", json={"username": "rina", "password": "a"})
    res = client.post("/api/users", json={"username": "rina", "password": "b"})
    assert res.status_code == 400
    assert res.json() == {"detail": "Username already exists"}


def test_user_errors(client):
    assert client.post("/api/users", json={"username": "x", "password": "y", "email": "nope"}).status_code == 400
    assert client.get("/api/users/7").status_code == 404
    assert client.get("/api/users/abc").status_code == 400


def test_update_cart_item_rejects_non_integer_quantity(client):
    item_id = add_line(client).json()["id"]
    assert client.put(f"/api/cart/{item_id}", json={"quantity": True}).status_code == 400
    assert client.put(f"/api/cart/{item_id}", json={"quantity": "3"}).status_code == 400
    assert client.put(f"/api/cart/{item_id}", json={"quantity": 2.5}).status_code == 400
    assert client.get("/api/cart/guest-session").json()[0]["quantity"] == 1


def test_add_to_cart_rejects_non_integer_fields(client):
    assert add_line(client, productId="2").status_code == 400
    assert add_line(client, quantity="2").status_code == 400
    assert add_line(client, quantity=True).status_code == 400
    assert client.get("/api/cart/guest-session").json() == []


def test_list_products_filters(client):
    res = client.get("/api/products", params={"brand": ["OXVA", "jax"], "category": "Pod Systems"})
    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["Vprime Pro", "Oneo Pod Kit"]

    cheap = client.get("/api/products", params={"maxPrice": 6500000}).json()
    assert len(cheap) == 3

    ranged = client.get("/api/products", params={"minPrice": 32000000, "maxPrice": 32500000}).json()
    assert [p["name"] for p in ranged] == ["Filter Plus Pod Kit", "RTA 24mm Tank"]

    on_sale = client.get("/api/products", params={"onSale": "true"}).json()
    assert [p["name"] for p in on_sale] == ["Ghost Rabbit", "R234 Pro Electrical Mod"]

    assert len(client.get("/api/products", params={"inStock": "true"}).json()) == 11
    assert client.get("/api/products", params={"inStock": "false"}).json() == []


def test_list_products_rejects_bad_filters(client):
    assert client.get("/api/products", params={"minPrice": "cheap"}).status_code == 400
    assert client.get("/api/products", params={"minPrice": -1}).status_code == 400
    assert client.get("/api/products", params={"onSale": "maybe"}).status_code == 400
