"""
Dashboard statistics.

Everything is computed live from the domain tables on each request; the
``statistics`` table is not consulted.
"""

from datetime import datetime, timedelta
from sqlalchemy.orm import Session
from typing import Optional

from sportcenter.database import fetch_all, fetch_one

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _count(db: Session, sql: str, **params) -> int:
    row = fetch_one(db, sql, params)
    return int(row["count"]) if row and row["count"] is not None else 0


def _monthly_registrations(db: Session, role: str, since: str):
    return fetch_all(
        db,
        """
        SELECT strftime('%Y-%m', created_at) AS month, COUNT(*) AS count
        FROM users
        WHERE role = :role AND created_at >= :since
        GROUP BY strftime('%Y-%m', created_at)
        ORDER BY month
        """,
        {"role": role, "since": since},
    )


def get_dashboard_statistics(db: Session, now: Optional[datetime] = None) -> dict:
    now = now or datetime.utcnow()
    last_30_days = (now - timedelta(days=30)).strftime(TIMESTAMP_FORMAT)
    last_12_months = (now - timedelta(days=365)).strftime(TIMESTAMP_FORMAT)
    today = now.date().isoformat()

    stats = {}
    for role, plural in (("member", "members"), ("admin", "admins")):
        stats[f"total_{plural}"] = _count(
            db, "SELECT COUNT(*) AS count FROM users WHERE role = :role", role=role
        )
        stats[f"active_{plural}"] = _count(
            db,
            "SELECT COUNT(*) AS count FROM users WHERE role = :role AND is_active = 1",
            role=role,
        )
        stats[f"recent_{role}_registrations"] = _count(
            db,
            "SELECT COUNT(*) AS count FROM users "
            "WHERE role = :role AND created_at >= :since",
            role=role,
            since=last_30_days,
        )
        stats[f"monthly_{role}_registrations"] = _monthly_registrations(
            db, role, last_12_months
        )

    stats["total_sports"] = _count(
        db, "SELECT COUNT(*) AS count FROM sports WHERE is_active = 1"
    )
    stats["total_sessions"] = _count(
        db, "SELECT COUNT(*) AS count FROM schedules WHERE is_active = 1"
    )
    stats["active_memberships"] = _count(
        db,
        "SELECT COUNT(*) AS count FROM memberships "
        "WHERE status = 'active' AND payment_status = 'paid' AND end_date > :today",
        today=today,
    )

    revenue = fetch_one(
        db,
        "SELECT COALESCE(SUM(amount), 0) AS total FROM payments "
        "WHERE status = 'completed'",
    )
    stats["total_revenue"] = float(revenue["total"]) if revenue else 0.0

    system_stats = fetch_one(
        db,
        """
        SELECT COUNT(DISTINCT sport_id) AS sports_with_schedules,
               COUNT(*) AS total_schedule_entries
        FROM schedules WHERE is_active = 1
        """,
    )
    stats["system_stats"] = {
        "sports_with_schedules": system_stats["sports_with_schedules"],
        "total_schedule_entries": system_stats["total_schedule_entries"],
    }
    return stats
