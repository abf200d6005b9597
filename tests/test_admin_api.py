"""
Tests for the admin endpoints
"""
import pytest


@pytest.fixture
def sport(client, admin_headers):
    response = client.post(
        "/api/admin/sports",
        data={"name": "Judo", "description": "Kampsport", "age_groups": "7-12, 13+"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()["sport"]


def _schedule_payload(sport_id, **changes):
    payload = {
        "sport_id": sport_id,
        "day_of_week": "Lördag",
        "start_time": "10:00",
        "end_time": "11:00",
        "age_group": "13+",
    }
    payload.update(changes)
    return payload


def test_create_sport(sport):
    assert sport["name"] == "Judo"
    assert sport["age_groups"] == ["7-12", "13+"]
    assert sport["image_path"] is None


def test_create_sport_with_image(client, admin_headers, settings):
    response = client.post(
        "/api/admin/sports",
        data={"name": "Boxning", "description": "Boxning för alla"},
        files={"image": ("ring.png", b"\x89PNG fake", "image/png")},
        headers=admin_headers,
    )

    assert response.status_code == 201
    image_path = response.json()["sport"]["image_path"]
    assert image_path.startswith("sport-") and image_path.endswith(".png")

    served = client.get(f"/uploads/{image_path}")
    assert served.status_code == 200
    assert served.content == b"\x89PNG fake"


def test_create_sport_rejects_non_image(client, admin_headers):
    response = client.post(
        "/api/admin/sports",
        data={"name": "Boxning", "description": "Boxning för alla"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_create_sport_duplicate_name(client, admin_headers):
    response = client.post(
        "/api/admin/sports",
        data={"name": "brottning", "description": "Igen"},
        headers=admin_headers,
    )

    assert response.status_code == 409


def test_create_sport_requires_name(client, admin_headers):
    response = client.post(
        "/api/admin/sports", data={"description": "Utan namn"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert "name: Field required" in response.json()["details"]


def test_update_sport(client, admin_headers, sport):
    response = client.put(
        f"/api/admin/sports/{sport['id']}",
        data={"name": "Judo", "description": "Ny beskrivning", "is_active": "false"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    updated = response.json()["sport"]
    assert updated["description"] == "Ny beskrivning"
    assert updated["is_active"] is False
    assert updated["age_groups"] == ["7-12", "13+"]

    public_names = [s["name"] for s in client.get("/api/public/sports").json()]
    assert "Judo" not in public_names


def test_update_missing_sport(client, admin_headers):
    response = client.put(
        "/api/admin/sports/9999",
        data={"name": "X", "description": "Y"},
        headers=admin_headers,
    )

    assert response.status_code == 404


def test_delete_sport_with_active_schedules(client, admin_headers):
    sports = client.get("/api/admin/sports", headers=admin_headers).json()
    wrestling = next(s for s in sports if s["name"] == "Brottning")

    response = client.delete(
        f"/api/admin/sports/{wrestling['id']}", headers=admin_headers
    )

    assert response.status_code == 409
    assert response.json() == {"error": "Cannot delete sport with active schedules"}


def test_delete_sport_without_schedules(client, admin_headers, sport):
    response = client.delete(f"/api/admin/sports/{sport['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Sport deleted successfully"}


def test_delete_unknown_sport(client, admin_headers):
    response = client.delete("/api/admin/sports/9999", headers=admin_headers)

    assert response.status_code == 404


def test_schedule_crud(client, admin_headers, sport):
    response = client.post(
        "/api/admin/schedules",
        json=_schedule_payload(sport["id"], start_time="9:30"),
        headers=admin_headers,
    )
    assert response.status_code == 201
    schedule = response.json()["schedule"]
    assert schedule["start_time"] == "09:30"
    assert schedule["max_participants"] == 20

    response = client.put(
        f"/api/admin/schedules/{schedule['id']}",
        json=_schedule_payload(sport["id"], max_participants=12),
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["schedule"]["max_participants"] == 12

    response = client.delete(
        f"/api/admin/schedules/{schedule['id']}", headers=admin_headers
    )
    assert response.status_code == 200

    response = client.delete(
        f"/api/admin/schedules/{schedule['id']}", headers=admin_headers
    )
    assert response.status_code == 404


def test_schedule_blocks_sport_deletion(client, admin_headers, sport):
    client.post(
        "/api/admin/schedules",
        json=_schedule_payload(sport["id"]),
        headers=admin_headers,
    )

    response = client.delete(f"/api/admin/sports/{sport['id']}", headers=admin_headers)

    assert response.status_code == 409


def test_schedule_for_inactive_sport(client, admin_headers, sport):
    client.put(
        f"/api/admin/sports/{sport['id']}",
        data={"name": "Judo", "description": "Kampsport", "is_active": "false"},
        headers=admin_headers,
    )

    response = client.post(
        "/api/admin/schedules",
        json=_schedule_payload(sport["id"]),
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid or inactive sport"}


def test_schedule_with_end_before_start(client, admin_headers, sport):
    response = client.post(
        "/api/admin/schedules",
        json=_schedule_payload(sport["id"], start_time="12:00", end_time="11:00"),
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert "Start time must be before end time" in response.json()["details"]


def test_social_media_crud(client, admin_headers):
    response = client.post(
        "/api/admin/social-media",
        json={
            "platform": "facebook",
            "url": "https://facebook.com/nylose",
            "icon_class": "fab fa-facebook",
            "display_order": 3,
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    link_id = response.json()["id"]

    links = client.get("/api/admin/social-media", headers=admin_headers).json()
    assert links[-1]["platform"] == "facebook"

    response = client.put(
        f"/api/admin/social-media/{link_id}",
        json={"platform": "facebook", "url": "https://fb.com/nylose", "icon_class": "x"},
        headers=admin_headers,
    )
    assert response.status_code == 200

    response = client.delete(
        f"/api/admin/social-media/{link_id}", headers=admin_headers
    )
    assert response.status_code == 200


def test_social_media_requires_fields(client, admin_headers):
    response = client.post(
        "/api/admin/social-media", json={"platform": "x"}, headers=admin_headers
    )

    assert response.status_code == 400


def test_contact_info_crud(client, admin_headers):
    response = client.post(
        "/api/admin/contact-info",
        json={"type": "address", "label": "Adress", "value": "Nylöse 1"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    contact_id = response.json()["id"]

    response = client.put(
        "/api/admin/contact-info/9999",
        json={"type": "address", "label": "Adress", "value": "Nylöse 2"},
        headers=admin_headers,
    )
    assert response.status_code == 404

    response = client.delete(
        f"/api/admin/contact-info/{contact_id}", headers=admin_headers
    )
    assert response.status_code == 200
    assert len(client.get("/api/admin/contact-info", headers=admin_headers).json()) == 3


def test_statistics(client, admin_headers, member_headers):
    response = client.get("/api/admin/statistics", headers=admin_headers)

    assert response.status_code == 200
    stats = response.json()
    assert stats["total_members"] == 1
    assert stats["total_admins"] == 1
    assert stats["recent_member_registrations"] == 1
    assert stats["total_sports"] == 3
    assert stats["total_sessions"] == 10
    assert stats["active_memberships"] == 0
    assert stats["total_revenue"] == 0
    assert stats["system_stats"]["sports_with_schedules"] == 3


def test_statistics_count_paid_memberships(
    client, admin_headers, member_headers, registered_member
):
    client.post(
        "/api/auth/payment",
        json={"membership_id": registered_member["membership"]["id"]},
        headers=member_headers,
    )

    stats = client.get("/api/admin/statistics", headers=admin_headers).json()

    assert stats["active_memberships"] == 1
    assert stats["total_revenue"] == 600.0


def test_members_include_membership(client, admin_headers, registered_member):
    members = client.get("/api/admin/members", headers=admin_headers).json()

    assert len(members) == 1
    assert members[0]["email"] == "anna@example.com"
    assert members[0]["membership"]["payment_status"] == "pending"


def test_admins_and_users(client, admin_headers, registered_member):
    admins = client.get("/api/admin/admins", headers=admin_headers).json()
    users = client.get("/api/admin/users", headers=admin_headers).json()

    assert [admin["email"] for admin in admins] == ["admin@nylose.se"]
    assert len(users) == 2


def test_user_status_toggle(client, admin_headers, registered_member, member_headers):
    user_id = registered_member["user"]["id"]

    response = client.put(
        f"/api/admin/users/{user_id}/status",
        json={"is_active": False},
        headers=admin_headers,
    )
    assert response.status_code == 200

    # Existing tokens stop working once the account is deactivated
    response = client.get("/api/member/profile", headers=member_headers)
    assert response.status_code == 401


def test_admin_status_only_targets_admins(client, admin_headers, registered_member):
    user_id = registered_member["user"]["id"]

    response = client.put(
        f"/api/admin/admins/{user_id}/status",
        json={"is_active": False},
        headers=admin_headers,
    )

    assert response.status_code == 404


def test_admin_cannot_deactivate_self(client, admin_headers):
    admins = client.get("/api/admin/admins", headers=admin_headers).json()

    response = client.put(
        f"/api/admin/admins/{admins[0]['id']}/status",
        json={"is_active": False},
        headers=admin_headers,
    )

    assert response.status_code == 400
