"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# CV text limits
CV_MAX_CHARS: int = int(os.getenv("CV_MAX_CHARS", "50000"))
CV_MIN_TEXT_CHARS: int = 50  # below this an upload is treated as scanned/image-only

# Upload limits (matches the upload dialog: 10MB)
CV_MAX_UPLOAD_BYTES: int = int(os.getenv("CV_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

# Extensions accepted by the text extractor
SUPPORTED_CV_EXTENSIONS: tuple = (".pdf", ".docx", ".txt")
