"""
Folio - Configuration
Extraction constants and service limits, overridable from the environment.
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = os.getenv("FOLIO_LOG_LEVEL", "INFO").upper()

# =============================================================================
# EPUB EXTRACTION
# =============================================================================
# Upper bound on a derived chapter title, in characters
TITLE_MAX_LENGTH = int(os.getenv("FOLIO_TITLE_MAX_LENGTH", "20000"))

# =============================================================================
# PDF RECONSTRUCTION
# =============================================================================
# A text run whose vertical position is within this many layout units of a
# line's first run is placed on that line
LINE_THRESHOLD = float(os.getenv("FOLIO_LINE_THRESHOLD", "10"))

# =============================================================================
# HTTP
# =============================================================================
MAX_UPLOAD_BYTES = int(os.getenv("FOLIO_MAX_UPLOAD_BYTES", str(200 * 1024 * 1024)))
# Comma-separated list of allowed browser origins
CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("FOLIO_CORS_ORIGINS", "*").split(",") if origin.strip()
]
