from sqlalchemy.orm import Session
import json
import logging

from sportcenter.config import Settings
from sportcenter.database import commit
from sportcenter.models.schedule import Schedule
from sportcenter.models.site_content import ContactInfo, SocialMediaLink
from sportcenter.models.sport import Sport
from sportcenter.models.user import User, UserRole
from sportcenter.services.auth import get_password_hash

logger = logging.getLogger(__name__)

DEFAULT_SPORTS = [
    {
        "name": "Brottning",
        "description": "Greco-Roman och Freestyle brottning",
        "age_groups": ["6-15 år", "15+"],
    },
    {
        "name": "Wresfit",
        "description": "Funktionell styrketräning inspirerad av brottning",
        "age_groups": ["Alla åldrar"],
    },
    {
        "name": "Girls Only",
        "description": "Boxning för tjejer i trygg miljö",
        "age_groups": ["7-13 år", "13+"],
    },
]

# (sport, day, start, end, age group)
DEFAULT_SCHEDULE = [
    ("Brottning", "Måndag", "18:00", "19:00", "6-15 år"),
    ("Brottning", "Måndag", "19:00", "20:30", "15+"),
    ("Girls Only", "Tisdag", "17:30", "18:30", "7-13 år"),
    ("Girls Only", "Tisdag", "18:30", "19:45", "13+"),
    ("Brottning", "Onsdag", "18:00", "19:00", "6-15 år"),
    ("Brottning", "Onsdag", "19:00", "20:30", "15+"),
    ("Girls Only", "Torsdag", "17:30", "18:30", "7-13 år"),
    ("Girls Only", "Torsdag", "18:30", "19:45", "13+"),
    ("Wresfit", "Fredag", "18:00", "20:00", "Alla åldrar"),
    ("Brottning", "Söndag", "13:00", "14:00", "6-15 år"),
]

DEFAULT_SOCIAL_LINKS = [
    {
        "platform": "instagram",
        "url": "https://www.instagram.com/nylosegirls/",
        "icon_class": "fab fa-instagram",
        "display_order": 1,
    },
    {
        "platform": "tiktok",
        "url": "https://www.tiktok.com/@nylosegirls",
        "icon_class": "fab fa-tiktok",
        "display_order": 2,
    },
]

DEFAULT_CONTACT_INFO = [
    {
        "type": "phone",
        "label": "Telefon",
        "value": "072-910 25 75",
        "href": "tel:072-910 25 75",
        "display_order": 1,
    },
    {
        "type": "phone",
        "label": "Telefon",
        "value": "070-042 42 21",
        "href": "tel:070-042 42 21",
        "display_order": 2,
    },
    {
        "type": "email",
        "label": "E-post",
        "value": "nylosesportcenter@gmail.com",
        "href": "mailto:nylosesportcenter@gmail.com",
        "display_order": 3,
    },
]


def seed_initial_data(db: Session, settings: Settings) -> bool:
    """
    Fills an empty database with the admin account and default site content.

    Nothing is written when the users table already has rows, so restarts are
    harmless. Returns True when data was seeded.
    """
    if db.query(User).count() > 0:
        logger.info("Initial data already exists, skipping seed")
        return False

    db.add(
        User(
            email=settings.admin_email,
            password_hash=get_password_hash(settings.admin_password),
            first_name="Admin",
            last_name="User",
            role=UserRole.ADMIN.value,
            is_active=True,
        )
    )

    sports = {}
    for sport in DEFAULT_SPORTS:
        db_sport = Sport(
            name=sport["name"],
            description=sport["description"],
            age_groups=json.dumps(sport["age_groups"], ensure_ascii=False),
            is_active=True,
        )
        db.add(db_sport)
        sports[sport["name"]] = db_sport

    for sport_name, day, start, end, age_group in DEFAULT_SCHEDULE:
        db.add(
            Schedule(
                sport=sports[sport_name],
                day_of_week=day,
                start_time=start,
                end_time=end,
                age_group=age_group,
                max_participants=20,
                is_active=True,
            )
        )

    for link in DEFAULT_SOCIAL_LINKS:
        db.add(SocialMediaLink(**link, is_active=True))

    for contact in DEFAULT_CONTACT_INFO:
        db.add(ContactInfo(**contact, is_active=True))

    commit(db)
    logger.info(f"Initial data seeded, admin account: {settings.admin_email}")
    return True
