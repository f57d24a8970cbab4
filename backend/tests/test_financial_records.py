URL = "/api/v1/financial-records/"


def _create(client, headers, **overrides):
    payload = {"type": "expense", "category": "Seeds", "amount": 100, "date": "2026-04-01"}
    payload.update(overrides)
    response = client.post(URL, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_list_is_sorted_by_date_desc(client, auth_headers):
    _create(client, auth_headers, date="2026-01-10")
    _create(client, auth_headers, date="2026-03-05", category="Fuel")
    _create(client, auth_headers, date="2026-02-20", category="Labor")

    dates = [r["date"] for r in client.get(URL, headers=auth_headers).json()]

    assert dates == ["2026-03-05", "2026-02-20", "2026-01-10"]


def test_type_filter(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers, type="revenue", category="Wheat sale", amount=300)

    response = client.get(URL, params={"type": "revenue"}, headers=auth_headers)

    assert [r["category"] for r in response.json()] == ["Wheat sale"]


def test_summary(client, auth_headers, other_headers):
    _create(client, auth_headers, amount=100)
    _create(client, auth_headers, amount=50)
    _create(client, auth_headers, type="revenue", category="Sale", amount=300)
    _create(client, other_headers, type="revenue", category="Not mine", amount=9999)

    summary = client.get(f"{URL}summary", headers=auth_headers).json()

    assert summary == {"total_expenses": 150.0, "total_revenue": 300.0, "profit_loss": 150.0, "records": 3}


def test_summary_with_a_loss(client, auth_headers):
    _create(client, auth_headers, amount=80)

    summary = client.get(f"{URL}summary", headers=auth_headers).json()

    assert summary["profit_loss"] == -80.0


def test_linked_crop_must_belong_to_user(client, auth_headers, other_headers):
    crop = client.post("/api/v1/crops/", json={"name": "Theirs"}, headers=other_headers).json()

    response = client.post(
        URL,
        json={"type": "revenue", "category": "Sale", "amount": 5, "date": "2026-04-01", "crop_id": crop["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Crop not found"


def test_deleting_crop_keeps_records(client, auth_headers):
    crop = client.post("/api/v1/crops/", json={"name": "Wheat"}, headers=auth_headers).json()
    record = _create(client, auth_headers, crop_id=crop["id"])

    client.delete(f"/api/v1/crops/{crop['id']}", headers=auth_headers)

    record = client.get(f"{URL}{record['id']}", headers=auth_headers).json()
    assert record["crop_id"] is None


def test_invalid_type_rejected(client, auth_headers):
    response = client.post(
        URL, json={"type": "gift", "category": "x", "amount": 1, "date": "2026-04-01"}, headers=auth_headers
    )

    assert response.status_code == 422


def test_null_for_required_column_rejected(client, auth_headers):
    record = _create(client, auth_headers)

    for field in ("type", "category", "amount", "date"):
        response = client.put(f"{URL}{record['id']}", json={field: None}, headers=auth_headers)
        assert response.status_code == 422, field

    assert client.get(f"{URL}{record['id']}", headers=auth_headers).json()["amount"] == 100
