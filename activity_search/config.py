"""
Configuration constants for activity-search.
Centralized configuration for storage, visibility rules, ranking and logging.
"""

import os
from pathlib import Path

# Database
DB_PATH = Path(os.environ.get(
    "ACTIVITY_SEARCH_DB_PATH",
    Path(__file__).parent.parent / "data" / "activities.db",
))

# Visibility values stored on activity records
PUBLIC_VISIBILITY = "public"
FRIENDS_VISIBILITY = "friends"
PRIVATE_VISIBILITY = "private"

# Filter handling
WILDCARD_TOKEN = "*"

# Relevance weights (fixed, not user-editable)
CATEGORY_WEIGHT = 400
NAME_WEIGHT = 200
COMMENTS_WEIGHT = 100

# Also match a query against the keyword list of the record's category
# (e.g. "hik" matching a "RANDO" record through the keyword "hiking").
PARTIAL_KEYWORD_MATCH = os.environ.get("ACTIVITY_SEARCH_PARTIAL_KEYWORDS", "false").lower() == "true"

# Pagination
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 200

# Seconds a single search request may run before it is abandoned between stages
SEARCH_TIMEOUT_SECONDS = float(os.environ.get("ACTIVITY_SEARCH_TIMEOUT", "10"))

# REST API
API_VERSION = "v1"
API_HOST = os.environ.get("ACTIVITY_SEARCH_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("ACTIVITY_SEARCH_PORT", "8000"))

# Logging
LOG_DIR = Path(os.environ.get("ACTIVITY_SEARCH_LOG_DIR", Path(__file__).parent.parent / "logs"))
LOG_LEVEL = os.environ.get("ACTIVITY_SEARCH_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
