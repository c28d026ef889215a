from datetime import datetime
from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey

from .base import Base


class CombineMetric(Base):
    __tablename__ = "combine_metrics"

    id = Column(Integer, primary_key=True)
    athlete_id = Column(Integer, ForeignKey("athletes.id"), nullable=False, index=True)

    # Speed & agility (seconds)
    forty_yard = Column(Float)
    ten_yard_split = Column(Float)
    shuttle = Column(Float)  # 5-10-5 shuttle
    three_cone = Column(Float)

    # Explosiveness (inches)
    vertical_jump = Column(Float)
    broad_jump = Column(Float)

    # Strength
    bench_press = Column(Integer)  # max weight
    bench_press_reps = Column(Integer)  # reps at 225 lbs
    squat_max = Column(Integer)
    power_clean = Column(Integer)
    deadlift = Column(Integer)
    pull_ups = Column(Integer)

    date_recorded = Column(DateTime, default=datetime.utcnow, nullable=False)
