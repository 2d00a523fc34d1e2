"""Productivity suite configuration.

All environment variables are loaded here and made available as module-level constants.
Everything has a default, so the server starts without a .env file.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root
_project_root = Path(__file__).parent.parent.parent
load_dotenv(_project_root / ".env")

# =============================================================================
# SERVER
# =============================================================================

SERVER_NAME = os.getenv("SUITE_SERVER_NAME", "ai-productivity-suite")
SERVER_VERSION = os.getenv("SUITE_SERVER_VERSION", "1.0.0")

# =============================================================================
# LOGGING (stderr only - stdout belongs to the MCP stdio transport)
# =============================================================================

LOG_LEVEL = os.getenv("SUITE_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("SUITE_LOG_FILE", "")

# =============================================================================
# IDENTIFIERS
# =============================================================================

ID_STRATEGY = os.getenv("SUITE_ID_STRATEGY", "random")  # random, counter, uuid
ID_LENGTH = int(os.getenv("SUITE_ID_LENGTH", "11"))

# =============================================================================
# CALENDAR
# =============================================================================

WORKDAY_START_HOUR = int(os.getenv("SUITE_WORKDAY_START_HOUR", "9"))
WORKDAY_END_HOUR = int(os.getenv("SUITE_WORKDAY_END_HOUR", "17"))
SLOT_INTERVAL_MINUTES = int(os.getenv("SUITE_SLOT_INTERVAL_MINUTES", "60"))

# =============================================================================
# NOTES
# =============================================================================

DEFAULT_NOTE_FOLDER = os.getenv("SUITE_DEFAULT_NOTE_FOLDER", "General")

# =============================================================================
# FEATURE FLAGS
# =============================================================================

def is_file_logging_enabled() -> bool:
    """Check if a log file is configured."""
    return bool(LOG_FILE)
