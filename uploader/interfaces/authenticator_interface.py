"""
Authenticator Interface

Abstract interface for producing an authenticated YouTube session.
Controllers depend on this abstraction, never on the OAuth implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

# Receives the instructions text, returns the authorization code (or None)
InteractionProvider = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class AuthConfig:
    """
    Paths and names needed to authenticate.

    Attributes:
        client_secret_path: OAuth client secret JSON from Google Cloud Console
        tokens_path: Where stored credentials are read and written
        app_name: Application name shown in logs
    """

    client_secret_path: str
    tokens_path: str
    app_name: str = "YouTube Uploader CLI"


@dataclass
class YouTubeSession:
    """
    Authenticated session handle.

    Attributes:
        service: googleapiclient resource for the YouTube Data API
        credentials: OAuth credentials backing the service
        application_name: Name of the calling application
    """

    service: Any
    credentials: Any
    application_name: str = ""

    @property
    def access_token(self) -> Optional[str]:
        if self.credentials is None:
            return None
        return getattr(self.credentials, "token", None)

    @property
    def is_authenticated(self) -> bool:
        return self.service is not None and bool(self.access_token)


class AuthFailureReason(Enum):
    """Terminal failure states of the authorization flow"""

    CANCELLED = "authorization_cancelled"
    EXCHANGE_ERROR = "exchange_error"
    CREDENTIALS_UNOBTAINABLE = "credentials_unobtainable"


class AuthenticationError(Exception):
    """
    Raised when the authorization flow ends in a failed state.

    Recoverable: the caller may run authenticate() again.
    """

    def __init__(self, message: str, reason: AuthFailureReason):
        super().__init__(message)
        self.reason = reason


class ClientSecretNotFoundError(FileNotFoundError):
    """Client secret file is missing (configuration error, not an auth failure)"""


class AuthenticatorInterface(ABC):
    """Abstract base class for authenticators"""

    @abstractmethod
    def authenticate(
        self,
        config: AuthConfig,
        interaction_provider: Optional[InteractionProvider] = None,
    ) -> YouTubeSession:
        """
        Produce an authenticated session.

        Uses stored credentials when available, otherwise runs the
        interactive authorization-code flow.

        Args:
            config: Paths to client secret and token store, app name
            interaction_provider: Shows instructions, returns the code

        Returns:
            YouTubeSession with a non-empty access token

        Raises:
            ClientSecretNotFoundError: If the client secret file is missing
            AuthenticationError: If the flow is cancelled or fails
        """

    def get_authorization_instructions(self, auth_url: str) -> str:
        """Text shown to the user during the out-of-band flow"""
        return (
            "Please open this URL in your browser to authorize the application:\n"
            f"{auth_url}\n"
            "After authorization, copy the code from your browser and paste it here: "
        )
