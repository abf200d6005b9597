from sqlalchemy import case, func
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from sportcenter.database import commit
from sportcenter.models.schedule import WEEKDAYS, Schedule
from sportcenter.models.sport import Sport

# Monday..Sunday, not alphabetical
weekday_order = case(
    {day: index for index, day in enumerate(WEEKDAYS, start=1)},
    value=Schedule.day_of_week,
    else_=len(WEEKDAYS) + 1,
)


def get_schedule(db: Session, schedule_id: int) -> Optional[Schedule]:
    return db.query(Schedule).filter(Schedule.id == schedule_id).first()


def get_schedules(
    db: Session, active_only: bool = False, sport_name: Optional[str] = None
) -> List[Schedule]:
    query = db.query(Schedule).join(Sport).options(joinedload(Schedule.sport))
    if active_only:
        query = query.filter(
            Schedule.is_active == True, Sport.is_active == True  # noqa: E712
        )
    if sport_name is not None:
        query = query.filter(func.lower(Sport.name) == sport_name.lower())
    return query.order_by(weekday_order, Schedule.start_time, Schedule.id).all()


def create_schedule(db: Session, data: dict) -> Schedule:
    db_schedule = Schedule(**data, is_active=True)
    db.add(db_schedule)
    commit(db)
    db.refresh(db_schedule)
    return db_schedule


def update_schedule(db: Session, db_schedule: Schedule, data: dict) -> Schedule:
    for field, value in data.items():
        setattr(db_schedule, field, value)

    commit(db)
    db.refresh(db_schedule)
    return db_schedule


def delete_schedule(db: Session, schedule_id: int) -> bool:
    db_schedule = get_schedule(db, schedule_id)
    if not db_schedule:
        return False

    db.delete(db_schedule)
    commit(db)
    return True
