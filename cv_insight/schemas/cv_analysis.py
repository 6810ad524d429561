"""Schemas for CV analysis requests and the stored analysis record."""

from typing import Optional

from pydantic import BaseModel, Field


class CVAnalysisRequest(BaseModel):
    """Validated body of a 'analyze this CV' request."""

    cv_text: str = Field(..., min_length=1, description="Raw CV text (non-blank)")
    resume_id: Optional[int] = Field(default=None, description="Resume the analysis belongs to, if any")


class CVAnalysisRecord(BaseModel):
    """One cv_analysis row; list columns hold JSON text."""

    id: Optional[int] = Field(default=None, description="Primary key assigned by the store")
    user_id: str = Field(..., description="Owner of the analysis")
    resume_id: Optional[int] = Field(default=None)
    full_name: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    skills: Optional[str] = Field(default=None, description="JSON array of skills")
    expertise: Optional[str] = Field(default=None)
    job_titles: Optional[str] = Field(default=None, description="JSON array of job titles")
    experience_years: Optional[int] = Field(default=None)
    education: Optional[str] = Field(default=None, description="JSON array of education entries")
    summary: Optional[str] = Field(default=None)
    raw_text: Optional[str] = Field(default=None, description="Trimmed text that was analyzed")
    analyzed_at: str = Field(..., description="ISO-8601 UTC timestamp of the analysis")
    updated_at: str = Field(..., description="ISO-8601 UTC timestamp of the last change")
