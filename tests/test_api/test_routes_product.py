# tests/test_api/test_routes_product.py - Catalog endpoints


def test_list_products(client):
    response = client.get("/api/products")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 12
    assert body[0]["name"] == "iPhone 13 Pro"
    assert body[0]["is_on_sale"] is True


def test_get_product(client):
    response = client.get("/api/products/2")
    assert response.status_code == 200
    assert response.json()["name"] == "MacBook Pro"


def test_get_missing_product_is_404(client):
    response = client.get("/api/products/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


def test_get_product_with_non_numeric_id_is_400(client):
    response = client.get("/api/products/abc")
    assert response.status_code == 400
    assert response.json()["errors"]


def test_featured_new_and_sale_listings(client):
    featured = client.get("/api/products/featured/all").json()
    new = client.get("/api/products/new/all").json()
    sale = client.get("/api/products/sale/all").json()

    assert all(p["is_featured"] for p in featured)
    assert all(p["is_new"] for p in new)
    assert sale and all(p["old_price"] > p["price"] for p in sale)
    assert "Samsung QLED TV" not in {p["name"] for p in sale}


def test_products_by_category(client):
    response = client.get("/api/categories/audio")
    assert response.status_code == 200
    assert {p["name"] for p in response.json()} == {
        "Sony WH-1000XM4", "Samsung Galaxy Buds Pro", "Bose QuietComfort Earbuds",
    }


def test_search(client):
    names = {p["name"] for p in client.get("/api/search", params={"q": "pro"}).json()}
    assert {"iPhone 13 Pro", "MacBook Pro"} <= names

    smartphones = client.get("/api/search", params={"q": "smartphone"}).json()
    assert [p["name"] for p in smartphones] == ["iPhone 13 Pro"]


def test_search_requires_query(client):
    response = client.get("/api/search")
    assert response.status_code == 400
    assert response.json()["detail"] == "Search query is required"


def test_search_rejects_too_short_query(client):
    response = client.get("/api/search", params={"q": "p"})
    assert response.status_code == 400


def test_price_comparison(client):
    response = client.get("/api/price-comparison/1")
    assert response.status_code == 200

    offers = response.json()
    assert [o["retailer"] for o in offers] == ["Amazon", "Flipkart", "Croma", "Reliance Digital"]
    for offer in offers:
        assert 99999 <= offer["price"] <= round(99999 * 1.25)
        assert "iPhone%2013%20Pro" in offer["link"]


def test_price_comparison_for_missing_product(client):
    assert client.get("/api/price-comparison/999").status_code == 404
