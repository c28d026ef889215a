"""
College Matcher

Athlete-to-college matching: division recommendation, school ranking by
academic and athletic fit, and improvement feedback.
"""

__version__ = "1.0.0"
