"""Rule-based extraction of a structured CV profile from raw CV text."""

import re
from typing import List, Optional, Sequence

from cv_insight.config import CV_MIN_TEXT_CHARS
from cv_insight.cv_pipeline.catalogs import (
    DEFAULT_EXPERTISE,
    DEFAULT_TITLE,
    DEGREE_KEYWORDS,
    EXPERTISE_CATEGORIES,
    INSTITUTION_PLACEHOLDER,
    JOB_TITLE_KEYWORDS,
    NAME_NOT_FOUND,
    SKILL_KEYWORDS,
)
from cv_insight.cv_pipeline.errors import InvalidInputError
from cv_insight.schemas.cv_profile import EducationEntry, ExtractedProfile, fallback_education
from cv_insight.utils.helpers import find_catalog_keywords, first_match, trim_text
from cv_insight.utils.logger import get_logger

logger = get_logger(__name__)

# Word and digit classes are ASCII only; \s stays Unicode so NBSP counts as a separator
EMAIL_RE = re.compile(r"[A-Za-z0-9_.-]+@[A-Za-z0-9_.-]+\.[A-Za-z0-9_]+")
PHONE_RE = re.compile(r"(?:\+?[0-9]{1,3}[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")
YEARS_RE = re.compile(r"([0-9]+)\+?\s*years?", re.IGNORECASE)
DATE_RANGE_RE = re.compile(r"[0-9]{4}\s*-\s*[0-9]{4}")
FOUR_DIGITS_RE = re.compile(r"[0-9]{4}")
NAME_RE = re.compile(r"[a-zA-Z\s]{2,50}")

MAX_ESTIMATED_YEARS = 15
YEARS_PER_DATE_RANGE = 2
MAX_NAME_WORDS = 4
SUMMARY_SKILL_COUNT = 5


def extract_email(text: str) -> Optional[str]:
    """First email address in the text, lower-cased."""
    email = first_match(EMAIL_RE, text)
    return email.lower() if email else None


def extract_phone(text: str) -> Optional[str]:
    """First North-American style phone number in the text."""
    phone = first_match(PHONE_RE, text)
    return phone.strip() if phone else None


def extract_skills(text: str) -> List[str]:
    return find_catalog_keywords(text, SKILL_KEYWORDS)


def infer_expertise(skills: Sequence[str]) -> str:
    """
    Pick the expertise category whose keywords cover the most skills.
    A skill counts for a category when it contains any of the category keywords
    (case-insensitive). Ties keep the earlier category; no hits gives 'General'.
    """
    lowered = [s.lower() for s in skills]
    best, best_count = DEFAULT_EXPERTISE, 0
    for category, keywords in EXPERTISE_CATEGORIES:
        needles = [k.lower() for k in keywords]
        count = sum(1 for s in lowered if any(n in s for n in needles))
        if count > best_count:
            best, best_count = category, count
    return best


def extract_job_titles(text: str) -> List[str]:
    return find_catalog_keywords(text, JOB_TITLE_KEYWORDS)


def estimate_experience(text: str) -> int:
    """
    Largest 'N years' / 'N+ years' mention. Without one, count 'YYYY-YYYY'
    ranges as two years each, capped at 15.
    """
    mentions = [int(n) for n in YEARS_RE.findall(text or "")]
    if mentions:
        return max(mentions)
    ranges = len(DATE_RANGE_RE.findall(text or ""))
    return min(ranges * YEARS_PER_DATE_RANGE, MAX_ESTIMATED_YEARS)


def extract_education(text: str) -> List[EducationEntry]:
    """One entry per line mentioning a degree keyword; at most one per line."""
    education: List[EducationEntry] = []
    for line in (text or "").split("\n"):
        lower_line = line.lower()
        for degree in DEGREE_KEYWORDS:
            if degree.lower() in lower_line:
                education.append(
                    EducationEntry(
                        degree=degree,
                        institution=INSTITUTION_PLACEHOLDER,
                        year=first_match(FOUR_DIGITS_RE, line),
                    )
                )
                break
    return education or fallback_education()


def extract_full_name(text: str) -> str:
    """
    First non-empty line, if it is 2-50 letters/spaces and at most four words.
    Heuristic only: a title line such as 'Senior Backend Engineer' passes too.
    """
    lines = [trim_text(line) for line in (text or "").split("\n")]
    lines = [line for line in lines if line]
    if lines:
        first_line = lines[0]
        if NAME_RE.fullmatch(first_line) and len(first_line.split(" ")) <= MAX_NAME_WORDS:
            return first_line
    return NAME_NOT_FOUND


def generate_summary(
    full_name: str,
    expertise: str,
    experience_years: int,
    skills: Sequence[str],
    job_titles: Sequence[str],
) -> str:
    skills_list = ", ".join(skills[:SUMMARY_SKILL_COUNT])
    latest_title = job_titles[0] if job_titles else DEFAULT_TITLE
    if experience_years > 0:
        return (
            f"{full_name} is an experienced {expertise} professional with {experience_years}+ years of expertise. "
            f"Skilled in {skills_list}. Previously worked as {latest_title}, bringing strong technical and "
            f"leadership capabilities to drive successful project outcomes."
        )
    return (
        f"{full_name} is a {expertise} professional with expertise in {skills_list}. "
        f"Demonstrates strong capabilities as {latest_title} with a focus on delivering high-quality "
        f"results and continuous learning."
    )


def analyze_cv(raw_text: str) -> ExtractedProfile:
    """
    Derive a structured profile from raw CV text.
    Raises InvalidInputError for empty or whitespace-only input; any other text
    yields a profile, with None / [] / sentinel values for fields not found.
    """
    if not isinstance(raw_text, str) or not trim_text(raw_text):
        raise InvalidInputError("CV text is required and must be a non-empty string")

    text = trim_text(raw_text)
    skills = extract_skills(text)
    expertise = infer_expertise(skills)
    job_titles = extract_job_titles(text)
    full_name = extract_full_name(text)
    experience_years = estimate_experience(text)
    profile = ExtractedProfile(
        full_name=full_name,
        email=extract_email(text),
        phone=extract_phone(text),
        skills=skills,
        expertise=expertise,
        job_titles=job_titles,
        experience_years=experience_years,
        education=extract_education(text),
        summary=generate_summary(full_name, expertise, experience_years, skills, job_titles),
    )
    logger.debug(
        "CV analyzed: %d skills, %d titles, %d education entries, expertise=%s",
        len(profile.skills),
        len(profile.job_titles),
        len(profile.education),
        profile.expertise,
    )
    return profile


def run_cv_pipeline(file_bytes: bytes, filename: str) -> Optional[ExtractedProfile]:
    """
    Run the full CV pipeline: extract text from the uploaded file, then analyze it.
    Returns None when the file yields no usable text (unsupported, too large,
    unreadable, or shorter than CV_MIN_TEXT_CHARS, e.g. a scanned PDF).
    """
    from cv_insight.cv_pipeline.text_extractor import extract_text_from_file

    raw_text = extract_text_from_file(file_bytes, filename)
    if not raw_text:
        return None
    if len(raw_text.strip()) < CV_MIN_TEXT_CHARS:
        logger.warning(
            "Not enough text extracted from %s (%d chars); scanned or image-based CV?",
            filename,
            len(raw_text.strip()),
        )
        return None
    profile = analyze_cv(raw_text)
    logger.info("CV pipeline finished for %s: expertise=%s", filename, profile.expertise)
    return profile
