"""
CV analysis request handling: validate request bodies, build the stored
analysis record from an extracted profile, and normalize partial updates.
No persistence here; callers own storage and ownership checks.
"""

import json
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from cv_insight.cv_pipeline.cv_extractor import analyze_cv
from cv_insight.cv_pipeline.errors import InvalidInputError
from cv_insight.schemas.cv_analysis import CVAnalysisRecord, CVAnalysisRequest
from cv_insight.schemas.cv_profile import ExtractedProfile
from cv_insight.utils.helpers import parse_int_prefix, trim_text
from cv_insight.utils.logger import get_logger

logger = get_logger(__name__)

EMAIL_FORMAT_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# JSON columns: request key -> column name
JSON_LIST_FIELDS = {"skills": "skills", "jobTitles": "job_titles", "education": "education"}
# Trimmed text columns: request key -> column name
TEXT_FIELDS = {"fullName": "full_name", "phone": "phone", "expertise": "expertise", "summary": "summary"}


class AnalysisRequestError(ValueError):
    """Client-side error in an analysis request; code is the machine-readable reason."""

    def __init__(self, code: str, message: str, status: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.message, "code": self.code}


def _to_json(value: Any) -> str:
    """Compact JSON, same separators as a browser's JSON.stringify."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with milliseconds and a 'Z' suffix."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_analysis_request(body: Any) -> CVAnalysisRequest:
    """
    Validate the body of an analysis request ({"cvText": ..., "resumeId": ...}).
    Raises AnalysisRequestError with the matching code on invalid input.
    """
    if not isinstance(body, dict):
        raise AnalysisRequestError("INVALID_BODY", "Request body must be a JSON object")
    if "userId" in body or "user_id" in body:
        raise AnalysisRequestError("USER_ID_NOT_ALLOWED", "User ID cannot be provided in request body")

    cv_text = body.get("cvText")
    if not isinstance(cv_text, str) or not trim_text(cv_text):
        raise AnalysisRequestError("MISSING_CV_TEXT", "cvText is required and must be a non-empty string")

    resume_id = body.get("resumeId")
    parsed_resume_id: Optional[int] = None
    if resume_id is not None:
        parsed_resume_id = parse_int_prefix(resume_id)
        if parsed_resume_id is None:
            raise AnalysisRequestError("INVALID_RESUME_ID", "resumeId must be a valid integer")

    return CVAnalysisRequest(cv_text=cv_text, resume_id=parsed_resume_id)


def profile_to_columns(profile: ExtractedProfile) -> Dict[str, Any]:
    """Map a profile onto record columns; list fields become JSON text, missing years are omitted."""
    return {
        "full_name": profile.full_name,
        "email": profile.email,
        "phone": profile.phone,
        "skills": _to_json(profile.skills),
        "expertise": profile.expertise,
        "job_titles": _to_json(profile.job_titles),
        "experience_years": profile.experience_years,
        "education": _to_json([e.model_dump(exclude_none=True) for e in profile.education]),
        "summary": profile.summary,
    }


def build_analysis_record(
    request: CVAnalysisRequest,
    user_id: str,
    now: Optional[datetime] = None,
) -> CVAnalysisRecord:
    """
    Analyze the request's CV text and compose the record to store for user_id.
    Raises AnalysisRequestError(MISSING_CV_TEXT) if the text is blank.
    """
    try:
        profile = analyze_cv(request.cv_text)
    except InvalidInputError as e:
        raise AnalysisRequestError("MISSING_CV_TEXT", str(e)) from e

    timestamp = _iso_timestamp(now)
    record = CVAnalysisRecord(
        user_id=user_id,
        resume_id=request.resume_id or None,
        raw_text=trim_text(request.cv_text),
        analyzed_at=timestamp,
        updated_at=timestamp,
        **profile_to_columns(profile),
    )
    logger.info(
        "Built CV analysis for user %s (resume=%s, expertise=%s)",
        user_id,
        record.resume_id,
        record.expertise,
    )
    return record


def _clean_text(key: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise AnalysisRequestError("INVALID_FIELD", f"{key} must be a string or null")
    return value.strip()


def _clean_json_field(value: Any) -> Optional[str]:
    """Strings are stored as given (already JSON); lists/objects are encoded; anything else clears the column."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, dict)):
        return _to_json(value)
    return None


def normalize_analysis_update(body: Any, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Validate a partial update ({"fullName": ..., "email": ..., ...}) and map it
    to column values. Only keys present in body are returned, plus updated_at.
    """
    if not isinstance(body, dict):
        raise AnalysisRequestError("INVALID_BODY", "Request body must be a JSON object")

    email = body.get("email")
    if email is not None:
        if not isinstance(email, str):
            raise AnalysisRequestError("INVALID_EMAIL", "Invalid email format")
        if email.strip() and not EMAIL_FORMAT_RE.match(email):
            raise AnalysisRequestError("INVALID_EMAIL", "Invalid email format")

    years: Optional[int] = None
    if body.get("experienceYears") is not None:
        years = parse_int_prefix(body["experienceYears"])
        if years is None or years < 0:
            raise AnalysisRequestError(
                "INVALID_EXPERIENCE_YEARS", "Experience years must be a non-negative integer"
            )

    changes: Dict[str, Any] = {"updated_at": _iso_timestamp(now)}
    for key, column in TEXT_FIELDS.items():
        if key in body:
            changes[column] = _clean_text(key, body[key])
    if "email" in body:
        changes["email"] = email.strip().lower() if email is not None else None
    for key, column in JSON_LIST_FIELDS.items():
        if key in body:
            changes[column] = _clean_json_field(body[key])
    if "experienceYears" in body:
        changes["experience_years"] = years
    if "rawText" in body:
        changes["raw_text"] = body["rawText"]
    return changes


def apply_analysis_update(record: CVAnalysisRecord, changes: Dict[str, Any]) -> CVAnalysisRecord:
    """Return a new record with normalized changes applied (the input is not mutated)."""
    try:
        return CVAnalysisRecord.model_validate({**record.model_dump(), **changes})
    except ValidationError as e:
        logger.warning("CV analysis update rejected: %s", e)
        raise AnalysisRequestError("INVALID_FIELD", "Update contains invalid values") from e


def decode_record_lists(record: CVAnalysisRecord) -> Dict[str, Any]:
    """Record as a dict with the JSON list columns decoded; undecodable text is kept as-is."""
    data = record.model_dump()
    for column in JSON_LIST_FIELDS.values():
        raw = data.get(column)
        if not isinstance(raw, str):
            continue
        try:
            data[column] = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Column %s of analysis %s is not valid JSON", column, record.id)
    return data


def decode_records(records: List[CVAnalysisRecord]) -> List[Dict[str, Any]]:
    return [decode_record_lists(r) for r in records]
