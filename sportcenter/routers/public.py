from datetime import datetime
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from sportcenter.crud import schedule as schedule_crud
from sportcenter.crud import site_content as content_crud
from sportcenter.crud import sport as sport_crud
from sportcenter.database import fetch_one, get_db
from sportcenter.models.site_content import ContactInfo, SocialMediaLink
from sportcenter.schemas.schedule import ScheduleResponse
from sportcenter.schemas.site_content import (
    ContactInfoResponse,
    SocialMediaLinkResponse,
)
from sportcenter.schemas.sport import SportResponse
from sportcenter.services.membership import pricing_info

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/sports", response_model=List[SportResponse])
def read_sports(db: Session = Depends(get_db)):
    sports = sport_crud.get_sports(db, active_only=True)
    return [SportResponse.from_sport(sport) for sport in sports]


@router.get("/schedule", response_model=List[ScheduleResponse])
def read_schedule(db: Session = Depends(get_db)):
    schedules = schedule_crud.get_schedules(db, active_only=True)
    return [ScheduleResponse.from_schedule(schedule) for schedule in schedules]


@router.get("/schedule/{sport}", response_model=List[ScheduleResponse])
def read_schedule_for_sport(sport: str, db: Session = Depends(get_db)):
    schedules = schedule_crud.get_schedules(db, active_only=True, sport_name=sport)
    return [ScheduleResponse.from_schedule(schedule) for schedule in schedules]


@router.get("/pricing")
def read_pricing():
    return pricing_info()


@router.get("/social-media", response_model=List[SocialMediaLinkResponse])
def read_social_media(db: Session = Depends(get_db)):
    return content_crud.get_items(db, SocialMediaLink, active_only=True)


@router.get("/contact-info", response_model=List[ContactInfoResponse])
def read_contact_info(db: Session = Depends(get_db)):
    return content_crud.get_items(db, ContactInfo, active_only=True)


@router.get("/status")
def read_status(db: Session = Depends(get_db)):
    try:
        fetch_one(db, "SELECT 1 AS ok")
    except SQLAlchemyError:
        logger.exception("Health check failed")
        return JSONResponse(
            status_code=500,
            content={
                "status": "ERROR",
                "message": "Database connection failed",
                "timestamp": datetime.utcnow().isoformat(),
            },
        )

    return {
        "status": "OK",
        "message": "Nylöse SportCenter API is running",
        "timestamp": datetime.utcnow().isoformat(),
    }
