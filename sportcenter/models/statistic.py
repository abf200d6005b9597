from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Text
from datetime import datetime

from sportcenter.database import Base


class Statistic(Base):
    __tablename__ = "statistics"

    id = Column(Integer, primary_key=True, index=True)
    metric_type = Column(String, nullable=False)  # registration, payment, ...
    metric_value = Column(Float, nullable=False)
    date_recorded = Column(Date, nullable=False)
    additional_data = Column(Text, nullable=True)  # JSON
    created_at = Column(DateTime, default=datetime.utcnow)
