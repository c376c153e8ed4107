"""
OAuth Manager

Handles Google OAuth 2.0 authentication for the YouTube Data API.

Flow:
1. Stored credentials (token store) are used when present and valid
2. Expired access tokens are refreshed with the stored refresh token
3. Otherwise the out-of-band authorization-code flow runs: the user opens
   the authorization URL, grants access and pastes the code back
4. The code is exchanged for tokens, which are persisted for next time
"""

import logging
import os
from typing import Optional

from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from uploader.auth.credential_store import FileCredentialStore
from uploader.constants import (
    DEFAULT_USER_ID,
    OOB_REDIRECT_URI,
    YOUTUBE_API_SERVICE_NAME,
    YOUTUBE_API_VERSION,
    YOUTUBE_SCOPES,
)
from uploader.interfaces.authenticator_interface import (
    AuthConfig,
    AuthenticationError,
    AuthenticatorInterface,
    AuthFailureReason,
    ClientSecretNotFoundError,
    InteractionProvider,
    YouTubeSession,
)


def console_interaction(instructions: str) -> Optional[str]:
    """Default interaction provider: print instructions, read the code from stdin"""
    print(instructions, end="", flush=True)
    return input()


class OAuthManager(AuthenticatorInterface):
    """
    Manages Google OAuth 2.0 authentication.

    This class:
    - Loads credentials from the token store
    - Refreshes expired tokens automatically
    - Runs the authorization-code flow when no usable credentials exist
    - Builds the YouTube API service for the session
    """

    def __init__(
        self,
        credential_store: Optional[FileCredentialStore] = None,
        user_id: str = DEFAULT_USER_ID,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize OAuth manager.

        Args:
            credential_store: Store to use (default: built from config.tokens_path)
            user_id: Identity key in the token store
            logger: Logger to use (default: module logger)

        Example:
            oauth = OAuthManager()
            session = oauth.authenticate(
                AuthConfig("config/client_secret.json", "config/tokens.json")
            )
        """
        self.logger = logger or logging.getLogger(__name__)
        self.credential_store = credential_store
        self.user_id = user_id

    def _store_for(self, config: AuthConfig) -> FileCredentialStore:
        if self.credential_store is not None:
            return self.credential_store
        return FileCredentialStore(config.tokens_path, logger=self.logger)

    def _validate_paths(self, config: AuthConfig) -> None:
        """
        Raises:
            ClientSecretNotFoundError: If client_secret.json doesn't exist
        """
        if not os.path.exists(config.client_secret_path):
            raise ClientSecretNotFoundError(
                f"Client secret file not found at: {config.client_secret_path}. "
                "Download it from Google Cloud Console > Credentials.",
            )

    def authenticate(
        self,
        config: AuthConfig,
        interaction_provider: Optional[InteractionProvider] = None,
    ) -> YouTubeSession:
        """
        Produce an authenticated YouTube session.

        Args:
            config: Paths to client secret and token store, app name
            interaction_provider: Shows instructions, returns the code
                (default: console prompt)

        Returns:
            YouTubeSession backed by valid credentials

        Raises:
            ClientSecretNotFoundError: If the client secret file is missing
            AuthenticationError: If the flow is cancelled or fails
        """
        self._validate_paths(config)
        store = self._store_for(config)

        credentials = self._load_credentials(store)
        if credentials is None:
            self.logger.info("No usable stored credentials, starting authorization flow")
            credentials = self._run_authorization_flow(config, store, interaction_provider)
        else:
            self.logger.debug("Using stored credentials")

        return self._build_session(credentials, config.app_name)

    def reset_credentials(self, config: AuthConfig) -> bool:
        """
        Forget stored credentials so the next authenticate() prompts again.

        Returns:
            True if stored credentials were removed
        """
        return self._store_for(config).delete(self.user_id)

    def _load_credentials(self, store: FileCredentialStore):
        """
        Load stored credentials, refreshing them if expired.

        Returns:
            Valid credentials, or None if the flow must run
        """
        credentials = store.load(self.user_id)
        if credentials is None:
            return None

        if credentials.valid:
            return credentials

        if not credentials.refresh_token:
            self.logger.warning("Stored credentials expired and cannot be refreshed")
            return None

        try:
            self.logger.info("Access token expired, refreshing...")
            credentials.refresh(Request())
        except (RefreshError, TransportError) as e:
            self.logger.warning(f"Token refresh failed: {e}")
            return None

        self._save_credentials(store, credentials)
        self.logger.info("Access token refreshed successfully")
        return credentials

    def _run_authorization_flow(
        self,
        config: AuthConfig,
        store: FileCredentialStore,
        interaction_provider: Optional[InteractionProvider],
    ):
        """
        Run the out-of-band authorization-code flow.

        Returns:
            Freshly exchanged credentials (already persisted)

        Raises:
            AuthenticationError: On cancellation, exchange failure, or no credentials
        """
        flow = InstalledAppFlow.from_client_secrets_file(
            config.client_secret_path,
            scopes=YOUTUBE_SCOPES,
            redirect_uri=OOB_REDIRECT_URI,
        )
        auth_url, _ = flow.authorization_url(access_type="offline", prompt="consent")

        code = self._request_code(
            self.get_authorization_instructions(auth_url),
            interaction_provider or console_interaction,
        )
        if not code:
            raise AuthenticationError(
                "Authentication cancelled or code not provided.",
                AuthFailureReason.CANCELLED,
            )

        try:
            flow.fetch_token(code=code)
        except Exception as e:
            raise AuthenticationError(
                f"Failed to exchange authorization code: {e}",
                AuthFailureReason.EXCHANGE_ERROR,
            ) from e

        try:
            credentials = flow.credentials
        except ValueError:
            # Raised by google-auth-oauthlib when the session holds no token
            credentials = None

        if credentials is None or not credentials.token:
            raise AuthenticationError(
                "Failed to obtain credentials.",
                AuthFailureReason.CREDENTIALS_UNOBTAINABLE,
            )

        self._save_credentials(store, credentials)
        self.logger.info("Authorization code exchanged successfully")
        return credentials

    def _request_code(
        self,
        instructions: str,
        interaction_provider: InteractionProvider,
    ) -> Optional[str]:
        try:
            code = interaction_provider(instructions)
        except (EOFError, KeyboardInterrupt):
            self.logger.info("Authorization prompt interrupted")
            return None
        return code.strip() if code else None

    def _save_credentials(self, store: FileCredentialStore, credentials) -> None:
        """Persist credentials; a write failure only costs a future re-prompt"""
        try:
            store.save(self.user_id, credentials)
        except OSError as e:
            self.logger.warning(f"Failed to save credentials: {e}")

    def _build_session(self, credentials, app_name: str) -> YouTubeSession:
        service = build(
            YOUTUBE_API_SERVICE_NAME,
            YOUTUBE_API_VERSION,
            credentials=credentials,
            cache_discovery=False,
        )
        self.logger.debug(f"YouTube API service initialized for {app_name}")
        return YouTubeSession(
            service=service,
            credentials=credentials,
            application_name=app_name,
        )
