from pydantic import BaseModel, validator
from typing import List, Optional

from sportcenter.validators import parse_age_groups


class SportForm(BaseModel):
    """Text fields of the multipart sport form."""

    name: str
    description: str
    age_groups: Optional[List[str]] = None

    @validator("name")
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Sport name is required")
        return v.strip()

    @validator("description")
    def validate_description(cls, v):
        if not v.strip():
            raise ValueError("Sport description is required")
        return v.strip()

    @validator("age_groups", pre=True)
    def validate_age_groups(cls, v):
        return parse_age_groups(v)


class SportResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    image_path: Optional[str] = None
    age_groups: List[str] = []
    is_active: bool = True

    @classmethod
    def from_sport(cls, sport):
        return cls(
            id=sport.id,
            name=sport.name,
            description=sport.description,
            image_path=sport.image_path,
            age_groups=sport.age_group_list,
            is_active=bool(sport.is_active),
        )
