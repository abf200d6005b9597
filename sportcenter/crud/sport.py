from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List, Optional
import json

from sportcenter.database import commit
from sportcenter.models.schedule import Schedule
from sportcenter.models.sport import Sport


def get_sport(db: Session, sport_id: int) -> Optional[Sport]:
    return db.query(Sport).filter(Sport.id == sport_id).first()


def get_active_sport(db: Session, sport_id: int) -> Optional[Sport]:
    return (
        db.query(Sport)
        .filter(Sport.id == sport_id, Sport.is_active == True)  # noqa: E712
        .first()
    )


def get_sports(db: Session, active_only: bool = False) -> List[Sport]:
    query = db.query(Sport)
    if active_only:
        query = query.filter(Sport.is_active == True)  # noqa: E712
    return query.order_by(Sport.name).all()


def find_active_by_name(
    db: Session, name: str, exclude_id: Optional[int] = None
) -> Optional[Sport]:
    query = db.query(Sport).filter(
        func.lower(Sport.name) == name.lower(),
        Sport.is_active == True,  # noqa: E712
    )
    if exclude_id is not None:
        query = query.filter(Sport.id != exclude_id)
    return query.first()


def create_sport(
    db: Session,
    name: str,
    description: str,
    age_groups: Optional[List[str]] = None,
    image_path: Optional[str] = None,
) -> Sport:
    db_sport = Sport(
        name=name,
        description=description,
        age_groups=json.dumps(age_groups, ensure_ascii=False)
        if age_groups is not None
        else None,
        image_path=image_path,
        is_active=True,
    )
    db.add(db_sport)
    commit(db)
    db.refresh(db_sport)
    return db_sport


def update_sport(db: Session, db_sport: Sport, **fields) -> Sport:
    if "age_groups" in fields:
        age_groups = fields.pop("age_groups")
        if age_groups is not None:
            db_sport.age_groups = json.dumps(age_groups, ensure_ascii=False)
    for field, value in fields.items():
        setattr(db_sport, field, value)

    commit(db)
    db.refresh(db_sport)
    return db_sport


def count_active_schedules(db: Session, sport_id: int) -> int:
    return (
        db.query(Schedule)
        .filter(Schedule.sport_id == sport_id, Schedule.is_active == True)  # noqa: E712
        .count()
    )


def delete_sport(db: Session, db_sport: Sport) -> None:
    db.delete(db_sport)
    commit(db)
