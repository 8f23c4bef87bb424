"""Centralized configuration for the annual review"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# =============================================================================
# Base Paths
# =============================================================================

BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
CACHE_DIR = DATA_DIR / "cache"
EXPORTS_DIR = DATA_DIR / "exports"


# =============================================================================
# GitHub Configuration
# =============================================================================

# API
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
REQUEST_TIMEOUT = 30  # seconds

# Query limits
REVIEW_REPOSITORY_LIMIT = 100
LANGUAGES_PER_REPOSITORY = 10
COMMIT_MESSAGE_REPOSITORIES = 30
COMMITS_PER_REPOSITORY = 100

# Cache paths
REVIEW_CACHE_DIR = CACHE_DIR

# Export paths
REVIEW_EXPORTS_DIR = EXPORTS_DIR / "reviews"


# =============================================================================
# Review Configuration
# =============================================================================

TOP_LANGUAGES_LIMIT = 10
TOP_WORDS_LIMIT = 30
LONGEST_MESSAGE_LENGTH = 100
DEFAULT_LANGUAGE_COLOR = "#8b949e"
OTHER_COMMIT_TYPE_COLOR = "#484f58"

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def get_github_token() -> str:
    """Read the GitHub token from the environment (or .env)"""
    return os.getenv("GITHUB_TOKEN", "").strip()
