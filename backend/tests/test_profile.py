import uuid
from types import SimpleNamespace

from farmhub.models import UserProfile
from farmhub.services import profiles
from farmhub.services.supabase_client import SupabaseAdminError, SupabaseNotConfigured


def test_profile_is_created_on_first_access(client, db, user_id, auth_headers):
    response = client.get("/api/v1/profile", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["id"] == str(user_id)
    assert response.json()["role"] == "farmer"
    assert db.query(UserProfile).count() == 1


def test_update_profile(client, auth_headers):
    response = client.put(
        "/api/v1/profile",
        json={"full_name": "Ada Farmer", "farm_name": "Green Acres", "location": "Fresno"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["farm_name"] == "Green Acres"
    assert client.get("/api/v1/profile", headers=auth_headers).json()["location"] == "Fresno"


def test_role_is_not_editable(client, auth_headers):
    response = client.put("/api/v1/profile", json={"role": "admin"}, headers=auth_headers)

    assert response.json()["role"] == "farmer"


def test_full_name_cannot_be_nulled(client, auth_headers):
    response = client.put("/api/v1/profile", json={"full_name": None}, headers=auth_headers)

    assert response.status_code == 422


def test_optional_fields_can_be_cleared(client, auth_headers):
    client.put("/api/v1/profile", json={"location": "Fresno"}, headers=auth_headers)

    response = client.put("/api/v1/profile", json={"location": None}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["location"] is None


SIGNUP = {"email": "ada@example.com", "password": "secret123", "full_name": "Ada Farmer", "farm_name": "Green Acres"}


def test_signup_creates_profile(client, db, monkeypatch):
    new_id = uuid.uuid4()
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(id=str(new_id))

    monkeypatch.setattr(profiles, "create_supabase_user", fake_create)

    response = client.post("/api/v1/auth/signup", json=SIGNUP)

    assert response.status_code == 201
    assert response.json()["profile"]["id"] == str(new_id)
    assert calls[0]["email"] == "ada@example.com"
    assert db.query(UserProfile).filter(UserProfile.id == new_id).first().farm_name == "Green Acres"


def test_signup_without_supabase_is_unavailable(client, monkeypatch):
    def not_configured(**kwargs):
        raise SupabaseNotConfigured("Supabase URL or service role key not configured.")

    monkeypatch.setattr(profiles, "create_supabase_user", not_configured)

    assert client.post("/api/v1/auth/signup", json=SIGNUP).status_code == 503


def test_signup_rejected_by_supabase(client, monkeypatch):
    def rejected(**kwargs):
        raise SupabaseAdminError("User already registered")

    monkeypatch.setattr(profiles, "create_supabase_user", rejected)

    response = client.post("/api/v1/auth/signup", json=SIGNUP)

    assert response.status_code == 400
    assert response.json()["detail"] == "User already registered"


def test_signup_validates_password(client):
    response = client.post("/api/v1/auth/signup", json={**SIGNUP, "password": "123"})

    assert response.status_code == 422
