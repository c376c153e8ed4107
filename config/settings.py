"""
Central Configuration File

ALL default configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (client secret, tokens) live in files referenced from .env, NOT here
- Import these settings in modules: from config.settings import UPLOAD_LOG_PATH
- uploader.config.UploaderConfig layers an optional YAML file on top
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# YOUTUBE OAUTH CONFIGURATION (file-based)
# =============================================================================
# These point to credential files, not inline secrets.
# Never commit client_secret.json or tokens.json to version control!

GOOGLE_CLIENT_SECRET_PATH = os.getenv(
    "GOOGLE_CLIENT_SECRET_PATH",
    "config/client_secret.json",
)
YOUTUBE_TOKENS_PATH = os.getenv("YOUTUBE_TOKENS_PATH", "config/tokens.json")
YOUTUBE_APP_NAME = os.getenv("YOUTUBE_APP_NAME", "YouTube Uploader CLI")

# =============================================================================
# UPLOAD / LISTING CONFIGURATION
# =============================================================================

UPLOAD_LOG_PATH = os.getenv("UPLOAD_LOG_PATH", "logs/upload_log.csv")
DEFAULT_MAX_RESULTS = int(os.getenv("YOUTUBE_DEFAULT_MAX_RESULTS", "25"))

# Gateway selection: "auto" (YouTube if client secret exists), "youtube", "mock"
UPLOADER_MODE = os.getenv("YOUTUBE_UPLOADER_MODE", "auto")

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("YOUTUBE_UPLOADER_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("YOUTUBE_UPLOADER_LOG_FILE", "")  # Empty = console only
LOG_BACKUP_DAYS = 7

# =============================================================================
# OVERRIDE FILE
# =============================================================================

CONFIG_FILE_PATH = os.getenv("YOUTUBE_UPLOADER_CONFIG", "config/uploader.yaml")
