URL = "/api/v1/inventory/"


def _create(client, headers, **overrides):
    payload = {"name": "Urea", "type": "fertilizer", "quantity": 2, "alert_level": 5, "unit": "bags"}
    payload.update(overrides)
    response = client.post(URL, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_low_stock_badge_is_inclusive(client, auth_headers):
    at_threshold = _create(client, auth_headers, quantity=5, alert_level=5)
    above = _create(client, auth_headers, name="Seeds", quantity=5.01, alert_level=5)

    assert at_threshold["is_low_stock"] is True
    assert above["is_low_stock"] is False


def test_low_stock_only_filter(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers, name="Twine", type="supply", quantity=20)

    response = client.get(URL, params={"low_stock_only": True}, headers=auth_headers)

    assert [i["name"] for i in response.json()] == ["Urea"]


def test_type_filter(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers, name="Twine", type="supply", quantity=20)

    response = client.get(URL, params={"type": "supply"}, headers=auth_headers)

    assert [i["name"] for i in response.json()] == ["Twine"]


def test_restock_clears_badge(client, auth_headers):
    item = _create(client, auth_headers)

    response = client.put(f"{URL}{item['id']}", json={"quantity": 50}, headers=auth_headers)

    assert response.json()["is_low_stock"] is False


def test_foreign_item_is_not_found(client, auth_headers, other_headers):
    item = _create(client, other_headers)

    response = client.put(f"{URL}{item['id']}", json={"quantity": 1}, headers=auth_headers)

    assert response.status_code == 404


def test_null_for_required_column_rejected(client, auth_headers):
    item = _create(client, auth_headers)

    for field in ("name", "type", "quantity", "unit", "alert_level", "cost_per_unit"):
        response = client.put(f"{URL}{item['id']}", json={field: None}, headers=auth_headers)
        assert response.status_code == 422, field

    assert client.get(f"{URL}{item['id']}", headers=auth_headers).json()["quantity"] == 2
