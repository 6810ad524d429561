"""CV pipeline: text extraction (PDF/DOCX/TXT), cleaning, rule-based profile extraction."""

from cv_insight.cv_pipeline.cv_extractor import (
    analyze_cv,
    estimate_experience,
    extract_education,
    extract_email,
    extract_full_name,
    extract_job_titles,
    extract_phone,
    extract_skills,
    generate_summary,
    infer_expertise,
    run_cv_pipeline,
)
from cv_insight.cv_pipeline.errors import InvalidInputError
from cv_insight.cv_pipeline.text_extractor import extract_text_from_file
from cv_insight.schemas.cv_profile import ExtractedProfile

__all__ = [
    "analyze_cv",
    "run_cv_pipeline",
    "extract_text_from_file",
    "extract_email",
    "extract_phone",
    "extract_skills",
    "infer_expertise",
    "extract_job_titles",
    "estimate_experience",
    "extract_education",
    "extract_full_name",
    "generate_summary",
    "ExtractedProfile",
    "InvalidInputError",
]
