from datetime import date, timedelta

URL = "/api/v1/crops/"


def _create(client, headers, **overrides):
    payload = {"name": "Wheat", "status": "growing", "area_planted": 4}
    payload.update(overrides)
    response = client.post(URL, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _in_days(days):
    return (date.today() + timedelta(days=days)).isoformat()


def test_upcoming_harvest_badge(client, auth_headers):
    soon = _create(client, auth_headers, expected_harvest_date=_in_days(30))
    later = _create(client, auth_headers, name="Corn", expected_harvest_date=_in_days(31))
    undated = _create(client, auth_headers, name="Beans")

    assert soon["upcoming_harvest"] is True
    assert later["upcoming_harvest"] is False
    assert undated["upcoming_harvest"] is False


def test_status_filter(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers, name="Barley", status="harvested")

    response = client.get(URL, params={"status": "harvested"}, headers=auth_headers)

    assert [c["name"] for c in response.json()] == ["Barley"]


def test_invalid_status_rejected(client, auth_headers):
    response = client.post(URL, json={"name": "Rye", "status": "ripe"}, headers=auth_headers)

    assert response.status_code == 422


def test_parcel_must_belong_to_user(client, auth_headers, other_headers):
    parcel = client.post(
        "/api/v1/land-parcels/", json={"name": "Theirs", "area": 2}, headers=other_headers
    ).json()

    response = client.post(URL, json={"name": "Oats", "land_parcel_id": parcel["id"]}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Land parcel not found"


def test_filter_by_parcel(client, auth_headers):
    parcel = client.post(
        "/api/v1/land-parcels/", json={"name": "East", "area": 3}, headers=auth_headers
    ).json()
    _create(client, auth_headers, land_parcel_id=parcel["id"])
    _create(client, auth_headers, name="Loose")

    response = client.get(URL, params={"land_parcel_id": parcel["id"]}, headers=auth_headers)

    assert [c["name"] for c in response.json()] == ["Wheat"]


def test_update_recomputes_badge(client, auth_headers):
    crop = _create(client, auth_headers, expected_harvest_date=_in_days(60))

    response = client.put(
        f"{URL}{crop['id']}", json={"expected_harvest_date": _in_days(5)}, headers=auth_headers
    )

    assert response.json()["upcoming_harvest"] is True
    assert response.json()["status"] == "growing"


def test_delete(client, auth_headers):
    crop = _create(client, auth_headers)

    assert client.delete(f"{URL}{crop['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"{URL}{crop['id']}", headers=auth_headers).status_code == 404


def test_null_for_required_column_rejected(client, auth_headers):
    crop = _create(client, auth_headers)

    for field in ("name", "area_planted", "status", "yield_expected"):
        response = client.put(f"{URL}{crop['id']}", json={field: None}, headers=auth_headers)
        assert response.status_code == 422, field

    assert client.get(f"{URL}{crop['id']}", headers=auth_headers).json()["status"] == "growing"


def test_parcel_link_can_be_cleared(client, auth_headers):
    parcel = client.post("/api/v1/land-parcels/", json={"name": "North", "area": 3}, headers=auth_headers).json()
    crop = _create(client, auth_headers, land_parcel_id=parcel["id"])

    response = client.put(f"{URL}{crop['id']}", json={"land_parcel_id": None}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["land_parcel_id"] is None
