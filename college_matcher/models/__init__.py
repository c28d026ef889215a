# Export all athlete models for easy imports
from .base import Base
from .athlete import Athlete
from .combine_metric import CombineMetric
from .recruiting_preference import RecruitingPreference

__all__ = [
    "Base",
    "Athlete",
    "CombineMetric",
    "RecruitingPreference",
]
