"""
Credential Store

File-backed persistence of OAuth credentials, keyed by user ID.

File format (JSON):
    {
        "default_user": {"token": "...", "refresh_token": "...", "expiry": "...", ...}
    }
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from google.oauth2.credentials import Credentials

from uploader.constants import YOUTUBE_SCOPES


class FileCredentialStore:
    """
    Stores one credential blob per user ID in a JSON file.

    The store owns the credentials on disk; callers get fresh Credentials
    objects from load() and hand them back to save() after an exchange or
    refresh.
    """

    def __init__(
        self,
        token_path: str,
        scopes: Optional[List[str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize credential store.

        Args:
            token_path: Path to the token JSON file (created on first save)
            scopes: Scopes attached to loaded credentials
            logger: Logger to use (default: module logger)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.token_path = Path(token_path)
        self.scopes = scopes or YOUTUBE_SCOPES

    def _read_all(self) -> Dict[str, dict]:
        if not self.token_path.exists():
            return {}
        try:
            with open(self.token_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.warning(f"Could not read token store {self.token_path}: {e}")
            return {}
        if not isinstance(data, dict):
            self.logger.warning(f"Token store {self.token_path} is not a JSON object")
            return {}
        return data

    def _write_all(self, data: Dict[str, dict]) -> None:
        self.token_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.token_path.with_name(self.token_path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.token_path)

    def load(self, user_id: str) -> Optional[Credentials]:
        """
        Load stored credentials for a user.

        Args:
            user_id: Key in the token store

        Returns:
            Credentials, or None if absent or structurally invalid
        """
        info = self._read_all().get(user_id)
        if not info:
            self.logger.debug(f"No stored credentials for '{user_id}'")
            return None

        try:
            credentials = Credentials.from_authorized_user_info(info, self.scopes)
        except (ValueError, TypeError) as e:
            self.logger.warning(f"Stored credentials for '{user_id}' are invalid: {e}")
            return None

        self.logger.debug(f"Loaded stored credentials for '{user_id}'")
        return credentials

    def save(self, user_id: str, credentials: Credentials) -> None:
        """
        Persist credentials for a user, keeping other users' entries.

        Args:
            user_id: Key in the token store
            credentials: Credentials to serialize

        Raises:
            OSError: If the file cannot be written
        """
        data = self._read_all()
        data[user_id] = json.loads(credentials.to_json())
        self._write_all(data)
        self.logger.info(f"Credentials for '{user_id}' saved to {self.token_path}")

    def delete(self, user_id: str) -> bool:
        """
        Remove stored credentials for a user.

        Returns:
            True if an entry was removed
        """
        data = self._read_all()
        if user_id not in data:
            return False
        del data[user_id]
        self._write_all(data)
        self.logger.info(f"Credentials for '{user_id}' removed from {self.token_path}")
        return True
