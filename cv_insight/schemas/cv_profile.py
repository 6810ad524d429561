"""Structured CV profile extracted from raw resume text."""

from typing import List, Optional

from pydantic import BaseModel, Field

from cv_insight.cv_pipeline.catalogs import DEFAULT_EXPERTISE

NOT_SPECIFIED = "Not specified"


class EducationEntry(BaseModel):
    """One education line: degree keyword, institution placeholder, optional year."""

    degree: str = Field(..., description="Degree keyword matched on the line (e.g. Bachelor, MBA)")
    institution: str = Field(..., description="Institution name; extraction only fills a placeholder")
    year: Optional[str] = Field(default=None, description="First 4-digit number found on the same line")


def fallback_education() -> List[EducationEntry]:
    """Education list used when no degree keyword is present."""
    return [EducationEntry(degree=NOT_SPECIFIED, institution=NOT_SPECIFIED)]


class ExtractedProfile(BaseModel):
    """Structured CV data derived deterministically from the CV text."""

    full_name: str = Field(..., description="First line of the CV when it looks like a name")
    email: Optional[str] = Field(default=None, description="First email address, lower-cased")
    phone: Optional[str] = Field(default=None, description="First phone number")
    skills: List[str] = Field(default_factory=list, description="Catalog skills found in the CV")
    expertise: str = Field(default=DEFAULT_EXPERTISE, description="Expertise category inferred from skills")
    job_titles: List[str] = Field(default_factory=list, description="Catalog job titles found in the CV")
    experience_years: int = Field(default=0, ge=0, description="Estimated years of experience")
    education: List[EducationEntry] = Field(default_factory=fallback_education, min_length=1)
    summary: str = Field(default="", description="Generated one-paragraph professional summary")
