"""CV Insight: rule-based CV analysis (contact details, skills, expertise, experience, education)."""

from cv_insight.cv_pipeline import InvalidInputError, analyze_cv, run_cv_pipeline
from cv_insight.schemas.cv_profile import EducationEntry, ExtractedProfile

__version__ = "0.1.0"

__all__ = [
    "analyze_cv",
    "run_cv_pipeline",
    "InvalidInputError",
    "ExtractedProfile",
    "EducationEntry",
]
