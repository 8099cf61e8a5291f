import base64

import pytest

PNG_DATA_URL = "data:image/png;base64," + base64.b64encode(b"\x89PNG\r\n\x1a\n").decode()


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "Resale Hub API"
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"
    assert "X-Request-ID" in health.headers


def test_unknown_route_is_structured_404(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


class TestCurrencyEndpoints:
    def test_rates_table(self, client):
        body = client.get("/currency/rates").json()
        assert body["reference"] == "EUR"
        assert body["rates"] == {"EUR": 1.0, "USD": 1.08, "GBP": 0.85, "CHF": 0.96}

    def test_rate(self, client):
        body = client.get("/currency/rate", params={"from": "EUR", "to": "GBP"}).json()
        assert body == {"from_currency": "EUR", "to_currency": "GBP", "rate": 0.85}

    def test_convert(self, client):
        resp = client.get(
            "/currency/convert", params={"amount": 100, "from": "usd", "to": "eur"}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["converted_amount"] == 92.59
        assert body["from_currency"] == "USD"
        assert body["rate"] == pytest.approx(1 / 1.08)

    def test_invalid_currency_is_400(self, client):
        resp = client.get(
            "/currency/convert", params={"amount": 1, "from": "EUR", "to": "JPY"}
        )
        assert resp.status_code == 400
        body = resp.json()
        assert body["error"] == "invalid_currency"
        assert body["currency"] == "JPY"
        assert body["supported"] == ["EUR", "USD", "GBP", "CHF"]

    def test_missing_amount_is_422(self, client):
        resp = client.get("/currency/convert", params={"from": "EUR", "to": "USD"})
        assert resp.status_code == 422
        assert resp.json()["error"] == "validation_error"


class TestItemEndpoints:
    def test_parse_name(self, client):
        resp = client.post("/items/parse-name", json={"name": "Nike Air Max 90"})
        assert resp.json() == {"detected_brand": "Nike", "detected_category": "Sneakers"}

    def test_parse_name_no_match(self, client):
        resp = client.post("/items/parse-name", json={"name": ""})
        assert resp.json() == {"detected_brand": "", "detected_category": ""}

    def test_auto_detect(self, client):
        assert client.post("/items/auto-detect", json={"name": "ni"}).status_code == 204
        assert (
            client.post("/items/auto-detect", json={"name": "xyz item"}).status_code
            == 204
        )
        resp = client.post("/items/auto-detect", json={"name": "leather belt"})
        assert resp.status_code == 200
        assert resp.json()["detected_category"] == "Accessories"

    def test_create_fills_labels(self, client):
        resp = client.post(
            "/items/",
            json={"name": "  Nike Air Max 90 ", "purchase_price": 100, "listing_price": 150},
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["name"] == "Nike Air Max 90"
        assert body["brand"] == "Nike"
        assert body["category"] == "Sneakers"
        assert body["currency"] == "EUR"

    def test_create_keeps_explicit_labels(self, client):
        body = client.post(
            "/items/",
            json={"name": "Wool coat", "brand": "Own label", "category": "Coats"},
        ).json()
        assert body["brand"] == "Own label"
        assert body["category"] == "Coats"

    def test_create_rejects_negative_price(self, client):
        resp = client.post("/items/", json={"name": "belt", "purchase_price": -1})
        assert resp.status_code == 422

    def test_list_filter_and_currency_view(self, client):
        client.post("/items/", json={"name": "Nike Air Max 90", "purchase_price": 100})
        client.post("/items/", json={"name": "leather belt", "purchase_price": 20})
        all_items = client.get("/items/").json()
        assert len(all_items) == 2
        belts = client.get("/items/", params={"category": "Accessories"}).json()
        assert [i["name"] for i in belts] == ["leather belt"]
        in_usd = client.get("/items/", params={"currency": "USD"}).json()
        assert [i["purchase_price"] for i in in_usd] == [108, 21.6]
        assert {i["currency"] for i in in_usd} == {"USD"}
        # storage unchanged
        assert client.get("/items/").json()[0]["purchase_price"] == 100

    def test_unknown_view_currency_is_400_even_when_empty(self, client):
        resp = client.get("/items/", params={"currency": "JPY"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["error"] == "invalid_currency"
        assert body["currency"] == "JPY"
        missing = client.get("/items/999", params={"currency": "JPY"})
        assert missing.status_code == 400

    def test_get_and_delete(self, client):
        item_id = client.post("/items/", json={"name": "Gold necklace"}).json()["id"]
        assert client.get(f"/items/{item_id}").json()["category"] == "Jewelry"
        assert client.delete(f"/items/{item_id}").status_code == 204
        missing = client.get(f"/items/{item_id}")
        assert missing.status_code == 404
        assert missing.json() == {"error": "not_found", "detail": "item not found"}
        assert client.delete(f"/items/{item_id}").status_code == 404


class TestCustomerEndpoints:
    def test_create_minimal(self, client):
        resp = client.post(
            "/customers/",
            json={"name": " Max Mustermann ", "platform": "Vinted", "email": "", "phone": ""},
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["name"] == "Max Mustermann"
        assert body["email"] is None
        assert body["phone"] is None
        assert body["total_purchases"] == 0
        assert body["last_purchase"] is not None

    def test_create_full(self, client):
        body = client.post(
            "/customers/",
            json={
                "name": "Erika",
                "platform": "eBay",
                "email": "erika@example.com",
                "phone": "+49 123 456789",
                "notes": "prefers pickup",
                "image": PNG_DATA_URL,
            },
        ).json()
        assert body["email"] == "erika@example.com"
        assert body["image"] == PNG_DATA_URL
        fetched = client.get(f"/customers/{body['id']}").json()
        assert fetched["notes"] == "prefers pickup"

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "   ", "platform": "eBay"},
            {"name": "x" * 101, "platform": "eBay"},
            {"name": "Max", "platform": ""},
            {"name": "Max", "platform": "p" * 51},
            {"name": "Max", "platform": "eBay", "email": "not-an-email"},
            {"name": "Max", "platform": "eBay", "notes": "n" * 501},
            {"name": "Max", "platform": "eBay", "image": "data:text/plain;base64,aGk="},
            {"name": "Max", "platform": "eBay", "image": "data:image/png;base64,@@@"},
        ],
    )
    def test_rejects_invalid(self, client, payload):
        resp = client.post("/customers/", json=payload)
        assert resp.status_code == 422
        assert resp.json()["error"] == "validation_error"

    def test_rejects_oversized_image(self, client):
        big = base64.b64encode(b"\0" * (5 * 1024 * 1024 + 1)).decode()
        resp = client.post(
            "/customers/",
            json={"name": "Max", "platform": "eBay", "image": f"data:image/jpeg;base64,{big}"},
        )
        assert resp.status_code == 422

    def test_list_by_platform_and_delete(self, client):
        first = client.post("/customers/", json={"name": "A", "platform": "eBay"}).json()
        client.post("/customers/", json={"name": "B", "platform": "Instagram"})
        ebay = client.get("/customers/", params={"platform": "ebay"}).json()
        assert [c["name"] for c in ebay] == ["A"]
        assert len(client.get("/customers/").json()) == 2
        assert client.delete(f"/customers/{first['id']}").status_code == 204
        assert client.get(f"/customers/{first['id']}").status_code == 404


class TestSettingsEndpoints:
    def test_defaults(self, client):
        assert client.get("/settings/").json() == {
            "theme": "dark",
            "currency": "EUR",
            "previous_currency": None,
        }

    def test_theme(self, client):
        assert client.put("/settings/theme", json={"theme": "light"}).json()["theme"] == "light"
        assert client.put("/settings/theme", json={"theme": "neon"}).status_code == 422

    def test_currency_switch_converts_items(self, client):
        item_id = client.post(
            "/items/", json={"name": "Nike Air Max 90", "purchase_price": 100}
        ).json()["id"]
        resp = client.put("/settings/currency", json={"currency": "usd"})
        assert resp.json() == {
            "currency": "USD",
            "previous_currency": "EUR",
            "converted_items": 1,
        }
        item = client.get(f"/items/{item_id}").json()
        assert item["purchase_price"] == 108
        assert item["currency"] == "USD"
        current = client.get("/settings/").json()
        assert current["currency"] == "USD"
        assert current["previous_currency"] == "EUR"

    def test_currency_switch_rejects_unknown(self, client):
        resp = client.put("/settings/currency", json={"currency": "BTC"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "invalid_currency"
        assert client.get("/settings/").json()["currency"] == "EUR"
