"""Service exports."""

from .analysis_service import (
    AnalysisRequestError,
    apply_analysis_update,
    build_analysis_record,
    decode_record_lists,
    decode_records,
    normalize_analysis_update,
    parse_analysis_request,
)

__all__ = [
    "AnalysisRequestError",
    "parse_analysis_request",
    "build_analysis_record",
    "normalize_analysis_update",
    "apply_analysis_update",
    "decode_record_lists",
    "decode_records",
]
