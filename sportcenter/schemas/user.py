from pydantic import BaseModel, EmailStr, model_validator, validator
from typing import Optional
from datetime import datetime

from sportcenter.validators import (
    ADULT_AGE,
    MIN_PASSWORD_LENGTH,
    age_from_personnummer,
    birth_date_from_personnummer,
    is_valid_phone,
)


def _required_text(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value.strip()


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    first_name: str
    last_name: str
    personnummer: str
    phone: str
    address: str
    guardian_name: Optional[str] = None
    guardian_lastname: Optional[str] = None
    guardian_phone: Optional[str] = None

    @validator("email")
    def normalize_email(cls, v):
        return v.strip().lower()

    @validator("password")
    def validate_password(cls, v):
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        return v

    @validator("first_name", "last_name")
    def validate_names(cls, v):
        return _required_text(v, "First name and last name are required")

    @validator("personnummer")
    def validate_personnummer(cls, v):
        v = v.strip()
        if birth_date_from_personnummer(v) is None:
            raise ValueError("Valid personnummer (YYYYMMDD-XXXX) is required")
        return v

    @validator("phone")
    def validate_phone(cls, v):
        if not is_valid_phone(v.strip()):
            raise ValueError("Valid phone number is required")
        return v.strip()

    @validator("address")
    def validate_address(cls, v):
        return _required_text(v, "Address is required")

    @validator("guardian_name", "guardian_lastname", "guardian_phone")
    def strip_guardian(cls, v):
        if v is None:
            return None
        return v.strip() or None

    @model_validator(mode="after")
    def validate_guardian_for_minors(self):
        if age_from_personnummer(self.personnummer) >= ADULT_AGE:
            return self
        if not self.guardian_name or not self.guardian_lastname:
            raise ValueError("Guardian name and last name are required for minors")
        if not is_valid_phone(self.guardian_phone):
            raise ValueError("Valid guardian phone number is required for minors")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "email": "anna@example.com",
                "password": "hemligt1",
                "first_name": "Anna",
                "last_name": "Svensson",
                "personnummer": "19900101-1234",
                "phone": "070-123 45 67",
                "address": "Storgatan 1, Göteborg",
            }
        }


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @validator("email")
    def normalize_email(cls, v):
        return v.strip().lower()


class ProfileUpdate(BaseModel):
    """Only the fields sent are changed."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @validator("first_name")
    def validate_first_name(cls, v):
        return None if v is None else _required_text(v, "First name cannot be empty")

    @validator("last_name")
    def validate_last_name(cls, v):
        return None if v is None else _required_text(v, "Last name cannot be empty")

    @validator("phone")
    def validate_phone(cls, v):
        if v is None:
            return None
        if not is_valid_phone(v.strip()):
            raise ValueError("Valid phone number is required")
        return v.strip()

    @validator("address")
    def validate_address(cls, v):
        return None if v is None else _required_text(v, "Address is required")


class StatusUpdate(BaseModel):
    is_active: bool


class UserSummary(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    role: str

    class Config:
        from_attributes = True


class UserResponse(UserSummary):
    phone: Optional[str] = None
    address: Optional[str] = None
    personnummer: Optional[str] = None
    guardian_name: Optional[str] = None
    guardian_lastname: Optional[str] = None
    guardian_phone: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
