"""
Tests for the unauthenticated endpoints
"""
from fastapi.testclient import TestClient

from sportcenter.config import Settings
from sportcenter.main import create_app


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"


def test_status_checks_database(client):
    response = client.get("/api/public/status")

    assert response.status_code == 200
    assert response.json()["message"] == "Nylöse SportCenter API is running"


def test_unknown_route(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


def test_seeded_sports(client):
    response = client.get("/api/public/sports")

    assert response.status_code == 200
    sports = {sport["name"]: sport for sport in response.json()}
    assert set(sports) == {"Brottning", "Wresfit", "Girls Only"}
    assert sports["Brottning"]["age_groups"] == ["6-15 år", "15+"]


def test_schedule_is_ordered_by_weekday(client):
    response = client.get("/api/public/schedule")

    assert response.status_code == 200
    entries = [(s["day_of_week"], s["start_time"]) for s in response.json()]
    assert len(entries) == 10
    assert entries[0] == ("Måndag", "18:00")
    assert entries[1] == ("Måndag", "19:00")
    assert entries[2] == ("Tisdag", "17:30")
    assert entries[-1] == ("Söndag", "13:00")


def test_schedule_for_new_sport_is_ordered(client, admin_headers):
    sport = client.post(
        "/api/admin/sports",
        data={"name": "Judo", "description": "Kampsport"},
        headers=admin_headers,
    ).json()["sport"]

    # Inserted out of order on purpose
    for day, start, end in (
        ("Onsdag", "18:00", "19:00"),
        ("Måndag", "19:00", "20:00"),
        ("Måndag", "18:00", "19:00"),
    ):
        response = client.post(
            "/api/admin/schedules",
            json={
                "sport_id": sport["id"],
                "day_of_week": day,
                "start_time": start,
                "end_time": end,
                "age_group": "Alla",
            },
            headers=admin_headers,
        )
        assert response.status_code == 201

    response = client.get("/api/public/schedule/judo")

    assert response.status_code == 200
    assert [(s["day_of_week"], s["start_time"]) for s in response.json()] == [
        ("Måndag", "18:00"),
        ("Måndag", "19:00"),
        ("Onsdag", "18:00"),
    ]
    assert response.json()[0]["sport_name"] == "Judo"


def test_schedule_for_unknown_sport_is_empty(client):
    response = client.get("/api/public/schedule/curling")

    assert response.status_code == 200
    assert response.json() == []


def test_pricing(client):
    response = client.get("/api/public/pricing")

    assert response.json()["term_price"] == 600
    assert response.json()["currency"] == "SEK"


def test_social_media_and_contact_info(client):
    links = client.get("/api/public/social-media").json()
    contacts = client.get("/api/public/contact-info").json()

    assert [link["platform"] for link in links] == ["instagram", "tiktok"]
    assert [contact["type"] for contact in contacts] == ["phone", "phone", "email"]


def test_inactive_content_is_hidden(client, admin_headers):
    links = client.get("/api/public/social-media").json()
    link = links[0]

    client.put(
        f"/api/admin/social-media/{link['id']}",
        json={**link, "is_active": False},
        headers=admin_headers,
    )

    platforms = [item["platform"] for item in client.get("/api/public/social-media").json()]
    assert link["platform"] not in platforms


def test_security_headers(client):
    response = client.get("/api/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "Strict-Transport-Security" not in response.headers


def test_unhandled_error_keeps_security_headers(app):
    @app.get("/api/failing")
    def failing():
        raise RuntimeError("database on fire")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/failing")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Something went wrong!",
        "message": "database on fire",
    }
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "SAMEORIGIN"


def test_production_adds_strict_transport_security(tmp_path):
    settings = Settings(
        database_url="sqlite://",
        upload_dir=str(tmp_path / "uploads"),
        environment="production",
    )

    with TestClient(create_app(settings)) as client:
        response = client.get("/api/health")

    assert "max-age" in response.headers["Strict-Transport-Security"]
    assert response.headers["Content-Security-Policy"] == "default-src 'self'"
