"""
Uploader Constants

Centralized configuration for the YouTube uploader package.
Values that operators are expected to change live in config/settings.py.
"""

from enum import Enum

# =============================================================================
# YOUTUBE API CONFIGURATION
# =============================================================================

# OAuth 2.0 scopes: upload + read-only access to the user's channel
# https://developers.google.com/youtube/v3/guides/authentication
YOUTUBE_SCOPES = [
    "https://www.googleapis.com/auth/youtube.upload",
    "https://www.googleapis.com/auth/youtube.readonly",
]

# Out-of-band redirect for desktop apps (user pastes the code back)
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"

# Single identity per token store
DEFAULT_USER_ID = "default_user"

# YouTube API service details
YOUTUBE_API_SERVICE_NAME = "youtube"
YOUTUBE_API_VERSION = "v3"

# Watch page, computed locally from the returned video ID
YOUTUBE_WATCH_URL_BASE = "https://www.youtube.com/watch"

# =============================================================================
# LISTING CONFIGURATION
# =============================================================================

DEFAULT_MAX_RESULTS = 25
# Provider cap for playlistItems.list
MAX_RESULTS_LIMIT = 50

# =============================================================================
# VIDEO METADATA
# =============================================================================


class PrivacyStatus(str, Enum):
    """Visibility of an uploaded video"""

    PUBLIC = "public"
    PRIVATE = "private"
    UNLISTED = "unlisted"


DEFAULT_PRIVACY_STATUS = PrivacyStatus.PRIVATE

# =============================================================================
# AUDIT LOG
# =============================================================================


class LogStatus(str, Enum):
    """Outcome of an upload attempt as written to the audit log"""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


DEFAULT_LOG_FILE_PATH = "logs/upload_log.csv"

# Stable column order, one row per upload attempt
CSV_HEADERS = [
    "Upload Date",
    "File Path",
    "Video Title",
    "Status",
    "Details",
    "YouTube URL",
]

# =============================================================================
# REMOTE ERROR CLASSIFICATION
# =============================================================================


class RemoteErrorKind(Enum):
    """Failure categories shared by upload and listing calls"""

    CLIENT = "client_error"
    AUTHORIZATION = "authorization_error"
    UNEXPECTED = "unexpected_error"


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL_DEBUG = "DEBUG"
LOG_LEVEL_INFO = "INFO"
LOG_LEVEL_WARNING = "WARNING"
LOG_LEVEL_ERROR = "ERROR"

VALID_LOG_LEVELS = [LOG_LEVEL_DEBUG, LOG_LEVEL_INFO, LOG_LEVEL_WARNING, LOG_LEVEL_ERROR]


def watch_url(video_id: str) -> str:
    """Build the public watch-page URL for a video ID"""
    return f"{YOUTUBE_WATCH_URL_BASE}?v={video_id}"
