from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship
from datetime import datetime
import json

from sportcenter.database import Base


class Sport(Base):
    __tablename__ = "sports"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    image_path = Column(String, nullable=True)
    age_groups = Column(Text, nullable=True)  # JSON array of labels
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    schedules = relationship(
        "Schedule", back_populates="sport", cascade="all, delete-orphan"
    )

    @property
    def age_group_list(self):
        if not self.age_groups:
            return []
        return json.loads(self.age_groups)
