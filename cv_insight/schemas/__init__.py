"""Schema exports."""

from .cv_analysis import CVAnalysisRecord, CVAnalysisRequest
from .cv_profile import EducationEntry, ExtractedProfile, fallback_education

__all__ = [
    "CVAnalysisRecord",
    "CVAnalysisRequest",
    "EducationEntry",
    "ExtractedProfile",
    "fallback_education",
]
