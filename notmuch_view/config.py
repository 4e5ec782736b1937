"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"
LOG_FILE = os.getenv("NOTMUCH_VIEW_LOG_FILE", "")

# Thread view
ID_PREFIX = os.getenv("NOTMUCH_VIEW_ID_PREFIX", "msg_")
MAX_SUBJECT_LEN = int(os.getenv("NOTMUCH_VIEW_MAX_SUBJECT_LEN", "60"))

# Recorded notmuch payloads (file-backed source)
FIXTURE_DIR = Path(os.getenv("NOTMUCH_VIEW_FIXTURE_DIR", str(Path.cwd() / "payloads")))

# Initial query of the query window
DEFAULT_QUERY = os.getenv("NOTMUCH_VIEW_DEFAULT_QUERY", "tag:unread and not tag:openbsd")
