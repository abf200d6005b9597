from pydantic import BaseModel, Field, model_validator, validator
from typing import Optional

from sportcenter.models.schedule import WEEKDAYS
from sportcenter.validators import normalize_time


class ScheduleRequest(BaseModel):
    sport_id: int
    day_of_week: str
    start_time: str
    end_time: str
    age_group: str
    max_participants: int = Field(20, ge=1)
    is_active: Optional[bool] = None

    @validator("day_of_week")
    def validate_day_of_week(cls, v):
        if v.strip() not in WEEKDAYS:
            raise ValueError("Invalid day of week")
        return v.strip()

    @validator("start_time", "end_time")
    def validate_time(cls, v):
        normalized = normalize_time(v.strip())
        if normalized is None:
            raise ValueError("Invalid time format (HH:MM required)")
        return normalized

    @validator("age_group")
    def validate_age_group(cls, v):
        if not v.strip():
            raise ValueError("Age group is required")
        return v.strip()

    @model_validator(mode="after")
    def validate_time_range(self):
        # Zero-padded HH:MM compares correctly as text
        if self.start_time >= self.end_time:
            raise ValueError("Start time must be before end time")
        return self


class ScheduleResponse(BaseModel):
    id: int
    sport_id: int
    sport_name: str
    sport_description: Optional[str] = None
    day_of_week: str
    start_time: str
    end_time: str
    age_group: str
    max_participants: int
    is_active: bool

    @classmethod
    def from_schedule(cls, schedule):
        return cls(
            id=schedule.id,
            sport_id=schedule.sport_id,
            sport_name=schedule.sport.name,
            sport_description=schedule.sport.description,
            day_of_week=schedule.day_of_week,
            start_time=schedule.start_time,
            end_time=schedule.end_time,
            age_group=schedule.age_group,
            max_participants=schedule.max_participants,
            is_active=bool(schedule.is_active),
        )
