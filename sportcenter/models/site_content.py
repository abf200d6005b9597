from sqlalchemy import Boolean, Column, DateTime, Integer, String
from datetime import datetime

from sportcenter.database import Base


class SocialMediaLink(Base):
    __tablename__ = "social_media_links"

    id = Column(Integer, primary_key=True, index=True)
    platform = Column(String, nullable=False)
    url = Column(String, nullable=False)
    icon_class = Column(String, nullable=False)  # e.g. "fab fa-instagram"
    display_order = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String, nullable=False)  # phone, email, address
    label = Column(String, nullable=False)
    value = Column(String, nullable=False)
    href = Column(String, nullable=True)
    display_order = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
