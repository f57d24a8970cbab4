from datetime import datetime, timedelta

from farmhub.models import Notification

URL = "/api/v1/notifications/"


def _seed(db, user_id, count, status="unread"):
    base = datetime(2026, 5, 1, 8, 0)
    for i in range(count):
        db.add(
            Notification(
                user_id=user_id,
                title=f"Alert {i}",
                message=f"Message {i}",
                status=status,
                created_at=base + timedelta(hours=i),
            )
        )
    db.commit()


def test_list_newest_first(client, db, user_id, auth_headers):
    _seed(db, user_id, 3)

    titles = [n["title"] for n in client.get(URL, headers=auth_headers).json()]

    assert titles == ["Alert 2", "Alert 1", "Alert 0"]


def test_create_is_unread(client, auth_headers):
    response = client.post(
        URL,
        json={"title": "Harvest soon", "message": "Wheat in 5 days", "type": "harvest", "priority": "high"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["status"] == "unread"
    assert response.json()["priority"] == "high"


def test_mark_read_and_unread_count(client, db, user_id, auth_headers):
    _seed(db, user_id, 3)
    first = client.get(URL, headers=auth_headers).json()[0]

    response = client.post(f"{URL}{first['id']}/read", headers=auth_headers)

    assert response.json()["status"] == "read"
    assert client.get(f"{URL}unread-count", headers=auth_headers).json() == {"unread": 2}


def test_read_all(client, db, user_id, auth_headers, other_headers):
    _seed(db, user_id, 4)
    client.post(URL, json={"title": "Other", "message": "Other user"}, headers=other_headers)

    assert client.post(f"{URL}read-all", headers=auth_headers).json() == {"unread": 0}
    assert client.get(f"{URL}unread-count", headers=auth_headers).json() == {"unread": 0}
    assert client.get(f"{URL}unread-count", headers=other_headers).json() == {"unread": 1}


def test_status_filter(client, db, user_id, auth_headers):
    _seed(db, user_id, 2)
    _seed(db, user_id, 1, status="read")

    response = client.get(URL, params={"status": "read"}, headers=auth_headers)

    assert len(response.json()) == 1


def test_delete_foreign_notification(client, db, user_id, other_headers):
    _seed(db, user_id, 1)
    notification = db.query(Notification).first()

    assert client.delete(f"{URL}{notification.id}", headers=other_headers).status_code == 404
