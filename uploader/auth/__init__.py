"""
Authentication Package

OAuth 2.0 authentication and credential persistence for the YouTube API.
"""

from uploader.auth.credential_store import FileCredentialStore
from uploader.auth.oauth_manager import OAuthManager, console_interaction

__all__ = [
    "FileCredentialStore",
    "OAuthManager",
    "console_interaction",
]
