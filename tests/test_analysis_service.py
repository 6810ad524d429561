"""Tests for request validation, record building and update normalization."""

import json
from datetime import datetime, timezone

import pytest

from cv_insight.schemas.cv_analysis import CVAnalysisRequest
from cv_insight.services.analysis_service import (
    AnalysisRequestError,
    apply_analysis_update,
    build_analysis_record,
    decode_record_lists,
    decode_records,
    normalize_analysis_update,
    parse_analysis_request,
)

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
CV_TEXT = "  5+ years of experience in JavaScript and React. Bachelor degree 2015.  "


def _error_code(fn, *args):
    with pytest.raises(AnalysisRequestError) as exc:
        fn(*args)
    return exc.value.code


def test_parse_request_ok():
    req = parse_analysis_request({"cvText": CV_TEXT, "resumeId": "12"})
    assert req.cv_text == CV_TEXT
    assert req.resume_id == 12


def test_parse_request_resume_id_variants():
    assert parse_analysis_request({"cvText": "x", "resumeId": None}).resume_id is None
    assert parse_analysis_request({"cvText": "x"}).resume_id is None
    assert parse_analysis_request({"cvText": "x", "resumeId": 7}).resume_id == 7
    assert parse_analysis_request({"cvText": "x", "resumeId": "42abc"}).resume_id == 42


def test_parse_request_errors():
    assert _error_code(parse_analysis_request, ["not", "a", "dict"]) == "INVALID_BODY"
    assert _error_code(parse_analysis_request, {"cvText": "x", "userId": "u1"}) == "USER_ID_NOT_ALLOWED"
    assert _error_code(parse_analysis_request, {"cvText": "x", "user_id": "u1"}) == "USER_ID_NOT_ALLOWED"
    assert _error_code(parse_analysis_request, {}) == "MISSING_CV_TEXT"
    assert _error_code(parse_analysis_request, {"cvText": "   "}) == "MISSING_CV_TEXT"
    assert _error_code(parse_analysis_request, {"cvText": 123}) == "MISSING_CV_TEXT"
    assert _error_code(parse_analysis_request, {"cvText": "x", "resumeId": "abc"}) == "INVALID_RESUME_ID"


def test_error_body():
    err = AnalysisRequestError("MISSING_CV_TEXT", "cvText is required")
    assert err.status == 400
    assert err.to_dict() == {"error": "cvText is required", "code": "MISSING_CV_TEXT"}


def test_build_record():
    req = parse_analysis_request({"cvText": CV_TEXT, "resumeId": 3})
    record = build_analysis_record(req, "user-1", now=NOW)
    assert record.id is None
    assert record.user_id == "user-1"
    assert record.resume_id == 3
    assert record.raw_text == CV_TEXT.strip()
    assert record.analyzed_at == "2024-01-02T03:04:05.000Z"
    assert record.updated_at == record.analyzed_at
    assert record.experience_years == 5
    assert record.full_name == "Name Not Found"
    assert record.education == '[{"degree":"Bachelor","institution":"University","year":"2015"}]'
    assert json.loads(record.skills)[:2] == ["JavaScript", "React"]
    assert json.loads(record.job_titles) == []


def test_build_record_fallback_education_omits_year():
    record = build_analysis_record(CVAnalysisRequest(cv_text="Jane Doe"), "u", now=NOW)
    assert record.education == '[{"degree":"Not specified","institution":"Not specified"}]'
    assert record.skills == "[]"
    assert record.expertise == "General"


def test_build_record_blank_text():
    req = CVAnalysisRequest(cv_text="   ")
    assert _error_code(build_analysis_record, req, "u") == "MISSING_CV_TEXT"


def test_naive_timestamp_treated_as_utc():
    record = build_analysis_record(CVAnalysisRequest(cv_text="x"), "u", now=datetime(2024, 5, 6, 7, 8, 9))
    assert record.analyzed_at == "2024-05-06T07:08:09.000Z"


def test_normalize_update_maps_and_cleans_fields():
    changes = normalize_analysis_update(
        {
            "fullName": "  Jane Doe ",
            "email": "Jane@Example.COM",
            "phone": " 555-123-4567 ",
            "skills": ["Python", "SQL"],
            "jobTitles": '["Analyst"]',
            "education": [{"degree": "MBA", "institution": "University"}],
            "experienceYears": "7",
            "summary": " Short. ",
            "rawText": "  raw  ",
        },
        now=NOW,
    )
    assert changes == {
        "updated_at": "2024-01-02T03:04:05.000Z",
        "full_name": "Jane Doe",
        "phone": "555-123-4567",
        "summary": "Short.",
        "email": "jane@example.com",
        "skills": '["Python","SQL"]',
        "job_titles": '["Analyst"]',
        "education": '[{"degree":"MBA","institution":"University"}]',
        "experience_years": 7,
        "raw_text": "  raw  ",
    }


def test_normalize_update_only_present_keys():
    changes = normalize_analysis_update({"expertise": "Design"}, now=NOW)
    assert changes == {"updated_at": "2024-01-02T03:04:05.000Z", "expertise": "Design"}


def test_normalize_update_nulls():
    changes = normalize_analysis_update(
        {"email": None, "phone": None, "experienceYears": None, "skills": 5}, now=NOW
    )
    assert changes["email"] is None
    assert changes["phone"] is None
    assert changes["experience_years"] is None
    assert changes["skills"] is None


def test_normalize_update_empty_email_allowed():
    assert normalize_analysis_update({"email": "  "}, now=NOW)["email"] == ""


def test_normalize_update_errors():
    assert _error_code(normalize_analysis_update, {"email": "not-an-email"}) == "INVALID_EMAIL"
    assert _error_code(normalize_analysis_update, {"email": " a@b.co"}) == "INVALID_EMAIL"
    assert _error_code(normalize_analysis_update, {"email": 42}) == "INVALID_EMAIL"
    assert _error_code(normalize_analysis_update, {"experienceYears": -1}) == "INVALID_EXPERIENCE_YEARS"
    assert _error_code(normalize_analysis_update, {"experienceYears": "many"}) == "INVALID_EXPERIENCE_YEARS"
    assert _error_code(normalize_analysis_update, {"fullName": 12}) == "INVALID_FIELD"
    assert _error_code(normalize_analysis_update, "body") == "INVALID_BODY"


def test_apply_update_returns_new_record():
    record = build_analysis_record(CVAnalysisRequest(cv_text="Jane Doe\nPython"), "u", now=NOW)
    later = datetime(2024, 2, 1, tzinfo=timezone.utc)
    updated = apply_analysis_update(record, normalize_analysis_update({"expertise": "Data Science"}, now=later))
    assert updated.expertise == "Data Science"
    assert updated.updated_at == "2024-02-01T00:00:00.000Z"
    assert updated.analyzed_at == record.analyzed_at
    assert record.expertise == "Software Engineering"


def test_apply_update_rejects_bad_values():
    record = build_analysis_record(CVAnalysisRequest(cv_text="Jane Doe"), "u", now=NOW)
    with pytest.raises(AnalysisRequestError) as exc:
        apply_analysis_update(record, {"raw_text": ["not", "text"]})
    assert exc.value.code == "INVALID_FIELD"


def test_decode_record_lists():
    record = build_analysis_record(CVAnalysisRequest(cv_text=CV_TEXT), "u", now=NOW)
    data = decode_record_lists(record)
    assert data["skills"][:2] == ["JavaScript", "React"]
    assert data["job_titles"] == []
    assert data["education"] == [{"degree": "Bachelor", "institution": "University", "year": "2015"}]
    assert data["user_id"] == "u"


def test_decode_keeps_invalid_json_text():
    record = build_analysis_record(CVAnalysisRequest(cv_text="Jane Doe"), "u", now=NOW)
    record = apply_analysis_update(record, {"skills": "Python, SQL"})
    assert decode_records([record])[0]["skills"] == "Python, SQL"


def test_zero_resume_id_stored_as_none():
    req = parse_analysis_request({"cvText": "x", "resumeId": 0})
    assert build_analysis_record(req, "u", now=NOW).resume_id is None
    req = parse_analysis_request({"cvText": "x", "resumeId": "0"})
    assert build_analysis_record(req, "u", now=NOW).resume_id is None


def test_byte_order_mark_only_cv_text_rejected():
    assert _error_code(parse_analysis_request, {"cvText": "\ufeff "}) == "MISSING_CV_TEXT"


def test_raw_text_trimmed_of_byte_order_mark():
    req = parse_analysis_request({"cvText": "\ufeffJane Doe\n"})
    assert build_analysis_record(req, "u", now=NOW).raw_text == "Jane Doe"
