from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from sportcenter.database import commit, execute
from sportcenter.models.user import User, UserRole

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "phone", "address")


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user_by_personnummer(db: Session, personnummer: str) -> Optional[User]:
    return db.query(User).filter(User.personnummer == personnummer).first()


def get_users(db: Session, role: Optional[str] = None) -> List[User]:
    query = db.query(User)
    if role:
        query = query.filter(User.role == role)
    return query.order_by(User.created_at.desc(), User.id.desc()).all()


def build_member(data: dict, password_hash: str) -> User:
    return User(
        email=data["email"],
        password_hash=password_hash,
        first_name=data["first_name"],
        last_name=data["last_name"],
        personnummer=data["personnummer"],
        phone=data["phone"],
        address=data["address"],
        guardian_name=data.get("guardian_name"),
        guardian_lastname=data.get("guardian_lastname"),
        guardian_phone=data.get("guardian_phone"),
        role=UserRole.MEMBER.value,
        is_active=True,
    )


def update_profile(db: Session, user: User, changes: dict) -> User:
    for field in PROFILE_FIELDS:
        if field in changes and changes[field] is not None:
            setattr(user, field, changes[field])
    commit(db)
    db.refresh(user)
    return user


def set_user_status(
    db: Session, user_id: int, is_active: bool, role: Optional[str] = None
) -> bool:
    """Activate or deactivate a user. Returns False when no row matched."""
    sql = (
        "UPDATE users SET is_active = :is_active, updated_at = CURRENT_TIMESTAMP "
        "WHERE id = :id"
    )
    params = {"is_active": is_active, "id": user_id}
    if role:
        sql += " AND role = :role"
        params["role"] = role

    result = execute(db, sql, params)
    commit(db)
    if result.changes:
        logger.info(f"User {user_id} is_active set to {is_active}")
    return result.changes > 0
