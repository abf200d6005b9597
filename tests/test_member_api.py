"""
Tests for the member area: memberships, renewal and payments
"""
from datetime import date, timedelta

from sportcenter.models.membership import Membership
from sportcenter.services.membership import add_months


def _membership_id(registered_member):
    return registered_member["membership"]["id"]


def test_registration_membership_spans_three_months(registered_member):
    membership = registered_member["membership"]
    start = date.fromisoformat(membership["start_date"])

    assert start == date.today()
    assert date.fromisoformat(membership["end_date"]) == add_months(start, 3)
    assert membership["is_active"] is True
    assert membership["days_remaining"] > 80


def test_member_profile(client, member_headers, registered_member):
    response = client.get("/api/member/profile", headers=member_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["email"] == "anna@example.com"
    assert body["membership"]["id"] == _membership_id(registered_member)
    assert body["payments"] == []


def test_membership_status(client, member_headers, registered_member):
    response = client.get("/api/member/membership/status", headers=member_headers)

    assert response.status_code == 200
    assert response.json()["membership"]["id"] == _membership_id(registered_member)


def test_membership_status_without_membership(client, member_headers, db):
    db.query(Membership).delete()
    db.commit()

    response = client.get("/api/member/membership/status", headers=member_headers)

    assert response.json() == {"status": "no_active_membership"}


def test_own_membership_status_by_user_id(client, member_headers, registered_member):
    user_id = registered_member["user"]["id"]

    response = client.get(
        f"/api/member/users/{user_id}/membership/status", headers=member_headers
    )

    assert response.status_code == 200
    assert "membership" in response.json()


def test_admin_reads_any_membership_status(client, admin_headers, registered_member):
    user_id = registered_member["user"]["id"]

    response = client.get(
        f"/api/member/users/{user_id}/membership/status", headers=admin_headers
    )

    assert response.status_code == 200


def test_renewal_extends_active_membership(client, member_headers, registered_member):
    current_end = registered_member["membership"]["end_date"]

    response = client.post("/api/member/membership/renew", headers=member_headers)

    assert response.status_code == 201
    renewed = response.json()["membership"]
    assert renewed["start_date"] == current_end
    assert renewed["end_date"] == add_months(date.fromisoformat(current_end), 3).isoformat()
    assert renewed["payment_status"] == "pending"


def test_renewal_after_expiry_starts_today(client, member_headers, registered_member, db):
    membership = db.get(Membership, _membership_id(registered_member))
    membership.start_date = date.today() - timedelta(days=200)
    membership.end_date = date.today() - timedelta(days=110)
    db.commit()

    response = client.post("/api/member/membership/renew", headers=member_headers)

    assert response.status_code == 201
    assert response.json()["membership"]["start_date"] == date.today().isoformat()


def test_payment_marks_membership_paid(client, member_headers, registered_member):
    response = client.post(
        "/api/auth/payment",
        json={"membership_id": _membership_id(registered_member)},
        headers=member_headers,
    )

    assert response.status_code == 200
    payment = response.json()["payment"]
    assert payment["status"] == "completed"
    assert payment["payment_method"] == "swish"
    assert payment["amount"] == 600.0
    assert payment["transaction_id"].startswith("mock_txn_")

    profile = client.get("/api/auth/profile", headers=member_headers).json()
    assert profile["membership"]["payment_status"] == "paid"

    history = client.get("/api/member/payments", headers=member_headers).json()
    assert len(history) == 1
    assert history[0]["membership_id"] == _membership_id(registered_member)


def test_paying_twice_is_rejected(client, member_headers, registered_member):
    payload = {"membership_id": _membership_id(registered_member)}
    client.post("/api/auth/payment", json=payload, headers=member_headers)

    response = client.post("/api/auth/payment", json=payload, headers=member_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Membership already paid"}


def test_payment_requires_membership_id(client, member_headers):
    response = client.post("/api/auth/payment", json={}, headers=member_headers)

    assert response.status_code == 400


def test_payment_for_unknown_membership(client, member_headers):
    response = client.post(
        "/api/auth/payment", json={"membership_id": 9999}, headers=member_headers
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Membership not found"}


def test_member_profile_update(client, member_headers):
    response = client.put(
        "/api/member/profile",
        json={"first_name": "Annika", "phone": "bad"},
        headers=member_headers,
    )

    assert response.status_code == 400

    response = client.put(
        "/api/member/profile", json={"first_name": "Annika"}, headers=member_headers
    )

    assert response.status_code == 200
    assert response.json()["user"]["first_name"] == "Annika"


def _set_end_date(db, registered_member, end_date):
    membership = db.get(Membership, _membership_id(registered_member))
    membership.start_date = end_date - timedelta(days=90)
    membership.end_date = end_date
    db.commit()


def test_expired_membership_status(client, member_headers, registered_member, db):
    _set_end_date(db, registered_member, date.today() - timedelta(days=5))

    response = client.get("/api/member/membership/status", headers=member_headers)

    assert response.status_code == 200
    membership = response.json()["membership"]
    assert membership["is_active"] is False
    assert membership["days_remaining"] == 0


def test_membership_ending_in_ten_days(client, member_headers, registered_member, db):
    _set_end_date(db, registered_member, date.today() + timedelta(days=10))

    response = client.get("/api/member/membership/status", headers=member_headers)

    membership = response.json()["membership"]
    assert membership["is_active"] is True
    assert membership["days_remaining"] == 10
