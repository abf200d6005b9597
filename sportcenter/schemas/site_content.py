from pydantic import BaseModel, validator
from typing import Optional


class SocialMediaLinkRequest(BaseModel):
    platform: str
    url: str
    icon_class: str
    display_order: int = 0
    is_active: Optional[bool] = None

    @validator("platform", "url", "icon_class")
    def validate_required(cls, v):
        if not v.strip():
            raise ValueError("Platform, URL, and icon class are required")
        return v.strip()


class SocialMediaLinkResponse(BaseModel):
    id: int
    platform: str
    url: str
    icon_class: str
    display_order: int
    is_active: bool

    class Config:
        from_attributes = True


class ContactInfoRequest(BaseModel):
    type: str
    label: str
    value: str
    href: Optional[str] = None
    display_order: int = 0
    is_active: Optional[bool] = None

    @validator("type", "label", "value")
    def validate_required(cls, v):
        if not v.strip():
            raise ValueError("Type, label, and value are required")
        return v.strip()

    @validator("href")
    def strip_href(cls, v):
        if v is None:
            return None
        return v.strip() or None


class ContactInfoResponse(BaseModel):
    id: int
    type: str
    label: str
    value: str
    href: Optional[str] = None
    display_order: int
    is_active: bool

    class Config:
        from_attributes = True
