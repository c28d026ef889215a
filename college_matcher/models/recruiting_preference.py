from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON, ForeignKey

from .base import Base


class RecruitingPreference(Base):
    __tablename__ = "recruiting_preferences"

    id = Column(Integer, primary_key=True)
    athlete_id = Column(Integer, ForeignKey("athletes.id"), nullable=False, unique=True)
    desired_division = Column(String)
    schools_of_interest = Column(JSON)  # list of school names
    has_highlight_film = Column(Boolean, default=False, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
