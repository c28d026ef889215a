from sqlalchemy import Column, Integer, String, Float

from .base import Base


class Athlete(Base):
    __tablename__ = "athletes"

    id = Column(Integer, primary_key=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    school = Column(String)
    graduation_year = Column(Integer)
    position = Column(String, nullable=False)

    # Physical
    height = Column(String)  # inches
    weight = Column(Integer)  # lbs

    # Academic
    gpa = Column(Float)
    act_score = Column(Integer)
    sat_score = Column(Integer)
