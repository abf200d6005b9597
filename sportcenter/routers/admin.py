from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from sportcenter.config import Settings
from sportcenter.crud import membership as membership_crud
from sportcenter.crud import schedule as schedule_crud
from sportcenter.crud import site_content as content_crud
from sportcenter.crud import sport as sport_crud
from sportcenter.crud import statistics as statistics_crud
from sportcenter.crud import user as user_crud
from sportcenter.database import get_db
from sportcenter.errors import BadRequest, Conflict, NotFound, ValidationError
from sportcenter.models.site_content import ContactInfo, SocialMediaLink
from sportcenter.models.user import User, UserRole
from sportcenter.schemas.membership import MembershipResponse
from sportcenter.schemas.schedule import ScheduleRequest, ScheduleResponse
from sportcenter.schemas.site_content import (
    ContactInfoRequest,
    ContactInfoResponse,
    SocialMediaLinkRequest,
    SocialMediaLinkResponse,
)
from sportcenter.schemas.sport import SportForm, SportResponse
from sportcenter.schemas.user import StatusUpdate, UserResponse
from sportcenter.services.auth import get_settings, require_admin
from sportcenter.services.uploads import save_sport_image

# Every route here needs an admin token
router = APIRouter(dependencies=[Depends(require_admin)])

logger = logging.getLogger(__name__)


# ===== Sports =====


def _sport_form(**fields) -> dict:
    """Validate the text fields of a multipart sport form."""
    try:
        form = SportForm(**{k: v for k, v in fields.items() if v is not None})
    except PydanticValidationError as exc:
        raise ValidationError.from_errors(exc.errors())
    return form.model_dump()


@router.get("/sports", response_model=List[SportResponse])
def read_sports(db: Session = Depends(get_db)):
    return [SportResponse.from_sport(sport) for sport in sport_crud.get_sports(db)]


@router.post("/sports", status_code=status.HTTP_201_CREATED)
def create_sport(
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    age_groups: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    data = _sport_form(name=name, description=description, age_groups=age_groups)
    if sport_crud.find_active_by_name(db, data["name"]):
        raise Conflict("Sport with this name already exists")

    image_path = save_sport_image(image, settings.upload_dir)
    db_sport = sport_crud.create_sport(db, image_path=image_path, **data)
    logger.info(f"Sport created: {db_sport.id} ({db_sport.name})")
    return {
        "message": "Sport created successfully",
        "sport": SportResponse.from_sport(db_sport),
    }


@router.put("/sports/{sport_id}")
def update_sport(
    sport_id: int,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    age_groups: Optional[str] = Form(None),
    is_active: Optional[bool] = Form(None),
    existing_image_path: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    data = _sport_form(name=name, description=description, age_groups=age_groups)
    db_sport = sport_crud.get_sport(db, sport_id)
    if db_sport is None:
        raise NotFound("Sport not found")

    if is_active is not None:
        data["is_active"] = is_active
    will_be_active = data.get("is_active", db_sport.is_active)
    if will_be_active and sport_crud.find_active_by_name(
        db, data["name"], exclude_id=sport_id
    ):
        raise Conflict("Sport with this name already exists")

    image_path = save_sport_image(image, settings.upload_dir)
    if image_path:
        data["image_path"] = image_path
    elif existing_image_path is not None:
        data["image_path"] = existing_image_path or None

    db_sport = sport_crud.update_sport(db, db_sport, **data)
    logger.info(f"Sport updated: {db_sport.id} ({db_sport.name})")
    return {
        "message": "Sport updated successfully",
        "sport": SportResponse.from_sport(db_sport),
    }


@router.delete("/sports/{sport_id}")
def delete_sport(sport_id: int, db: Session = Depends(get_db)):
    db_sport = sport_crud.get_sport(db, sport_id)
    if db_sport is None:
        raise NotFound("Sport not found")
    if sport_crud.count_active_schedules(db, sport_id) > 0:
        raise Conflict("Cannot delete sport with active schedules")

    sport_crud.delete_sport(db, db_sport)
    logger.info(f"Sport deleted: {sport_id}")
    return {"message": "Sport deleted successfully"}


# ===== Schedules =====


def _require_active_sport(db: Session, sport_id: int):
    sport = sport_crud.get_active_sport(db, sport_id)
    if sport is None:
        raise BadRequest("Invalid or inactive sport")
    return sport


@router.get("/schedules", response_model=List[ScheduleResponse])
def read_schedules(db: Session = Depends(get_db)):
    schedules = schedule_crud.get_schedules(db)
    return [ScheduleResponse.from_schedule(schedule) for schedule in schedules]


@router.post("/schedules", status_code=status.HTTP_201_CREATED)
def create_schedule(payload: ScheduleRequest, db: Session = Depends(get_db)):
    data = payload.model_dump(exclude={"is_active"})
    _require_active_sport(db, data["sport_id"])

    db_schedule = schedule_crud.create_schedule(db, data)
    logger.info(
        f"Schedule created: {db_schedule.id} ({db_schedule.day_of_week} "
        f"{db_schedule.start_time}-{db_schedule.end_time})"
    )
    return {
        "message": "Schedule created successfully",
        "schedule": ScheduleResponse.from_schedule(db_schedule),
    }


@router.put("/schedules/{schedule_id}")
def update_schedule(
    schedule_id: int, payload: ScheduleRequest, db: Session = Depends(get_db)
):
    data = payload.model_dump(exclude={"is_active"})
    db_schedule = schedule_crud.get_schedule(db, schedule_id)
    if db_schedule is None:
        raise NotFound("Schedule not found")
    _require_active_sport(db, data["sport_id"])

    if payload.is_active is not None:
        data["is_active"] = payload.is_active
    db_schedule = schedule_crud.update_schedule(db, db_schedule, data)
    return {
        "message": "Schedule updated successfully",
        "schedule": ScheduleResponse.from_schedule(db_schedule),
    }


@router.delete("/schedules/{schedule_id}")
def delete_schedule(schedule_id: int, db: Session = Depends(get_db)):
    if not schedule_crud.delete_schedule(db, schedule_id):
        raise NotFound("Schedule not found")
    return {"message": "Schedule deleted successfully"}


# ===== Social media links =====


@router.get("/social-media", response_model=List[SocialMediaLinkResponse])
def read_social_media(db: Session = Depends(get_db)):
    return content_crud.get_items(db, SocialMediaLink)


@router.post("/social-media", status_code=status.HTTP_201_CREATED)
def create_social_media(payload: SocialMediaLinkRequest, db: Session = Depends(get_db)):
    data = payload.model_dump(exclude={"is_active"})
    db_link = content_crud.create_item(db, SocialMediaLink, data)
    return {
        "id": db_link.id,
        "message": "Social media link added successfully",
    }


@router.put("/social-media/{link_id}")
def update_social_media(
    link_id: int, payload: SocialMediaLinkRequest, db: Session = Depends(get_db)
):
    data = payload.model_dump(exclude={"is_active"})
    if payload.is_active is not None:
        data["is_active"] = payload.is_active
    if content_crud.update_item(db, SocialMediaLink, link_id, data) is None:
        raise NotFound("Social media link not found")
    return {"message": "Social media link updated successfully"}


@router.delete("/social-media/{link_id}")
def delete_social_media(link_id: int, db: Session = Depends(get_db)):
    if not content_crud.delete_item(db, SocialMediaLink, link_id):
        raise NotFound("Social media link not found")
    return {"message": "Social media link deleted successfully"}


# ===== Contact information =====


@router.get("/contact-info", response_model=List[ContactInfoResponse])
def read_contact_info(db: Session = Depends(get_db)):
    return content_crud.get_items(db, ContactInfo)


@router.post("/contact-info", status_code=status.HTTP_201_CREATED)
def create_contact_info(payload: ContactInfoRequest, db: Session = Depends(get_db)):
    data = payload.model_dump(exclude={"is_active"})
    db_contact = content_crud.create_item(db, ContactInfo, data)
    return {
        "id": db_contact.id,
        "message": "Contact information added successfully",
    }


@router.put("/contact-info/{contact_id}")
def update_contact_info(
    contact_id: int, payload: ContactInfoRequest, db: Session = Depends(get_db)
):
    data = payload.model_dump(exclude={"is_active"})
    if payload.is_active is not None:
        data["is_active"] = payload.is_active
    if content_crud.update_item(db, ContactInfo, contact_id, data) is None:
        raise NotFound("Contact information not found")
    return {"message": "Contact information updated successfully"}


@router.delete("/contact-info/{contact_id}")
def delete_contact_info(contact_id: int, db: Session = Depends(get_db)):
    if not content_crud.delete_item(db, ContactInfo, contact_id):
        raise NotFound("Contact information not found")
    return {"message": "Contact information deleted successfully"}


# ===== Statistics =====


@router.get("/statistics")
def read_statistics(db: Session = Depends(get_db)):
    return statistics_crud.get_dashboard_statistics(db)


# ===== Users =====


@router.get("/members")
def read_members(db: Session = Depends(get_db)):
    members = []
    for member in user_crud.get_users(db, role=UserRole.MEMBER.value):
        data = UserResponse.model_validate(member).model_dump()
        data["membership"] = MembershipResponse.from_membership(
            membership_crud.get_latest_membership(db, member.id)
        )
        members.append(data)
    return members


@router.get("/admins", response_model=List[UserResponse])
def read_admins(db: Session = Depends(get_db)):
    return user_crud.get_users(db, role=UserRole.ADMIN.value)


@router.get("/users", response_model=List[UserResponse])
def read_users(db: Session = Depends(get_db)):
    return user_crud.get_users(db)


def _update_status(
    db: Session,
    current_user: User,
    user_id: int,
    payload: StatusUpdate,
    role: Optional[str] = None,
) -> bool:
    if user_id == current_user.id and not payload.is_active:
        raise BadRequest("You cannot deactivate your own account")
    return user_crud.set_user_status(db, user_id, payload.is_active, role=role)


@router.put("/admins/{admin_id}/status")
def update_admin_status(
    admin_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not _update_status(
        db, current_user, admin_id, payload, role=UserRole.ADMIN.value
    ):
        raise NotFound("Admin not found")
    return {"message": "Admin status updated successfully"}


@router.put("/users/{user_id}/status")
def update_user_status(
    user_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not _update_status(db, current_user, user_id, payload):
        raise NotFound("User not found")
    return {"message": "User status updated successfully"}
