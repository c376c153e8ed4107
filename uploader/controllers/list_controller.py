"""
List Videos Controller

Authenticate, then list the user's uploads. Read-only, so nothing is
written to the audit log; any failure degrades to an empty list.
"""

import logging
from typing import List, Optional

from uploader.constants import DEFAULT_MAX_RESULTS
from uploader.interfaces.authenticator_interface import (
    AuthConfig,
    AuthenticationError,
    AuthenticatorInterface,
    ClientSecretNotFoundError,
    InteractionProvider,
)
from uploader.interfaces.video_gateway_interface import (
    AuthenticationRequired,
    RemoteAuthorizationError,
    VideoGatewayInterface,
)
from uploader.models import VideoListItem


class ListVideosController:
    """
    High-level video listing controller.

    The last swallowed exception is kept in last_error so callers can still
    tell "no videos" apart from "session expired, run auth again".
    """

    def __init__(
        self,
        gateway: VideoGatewayInterface,
        authenticator: Optional[AuthenticatorInterface] = None,
        auth_config: Optional[AuthConfig] = None,
        interaction_provider: Optional[InteractionProvider] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize list controller.

        Args:
            gateway: Gateway exposing list_videos()
            authenticator: Authenticator run before listing (optional)
            auth_config: Required when authenticator is given
            interaction_provider: Passed through to the authenticator
            logger: Logger to use (default: module logger)

        Raises:
            TypeError: If the gateway cannot list videos
            ValueError: If authenticator is given without auth_config
        """
        if not callable(getattr(gateway, "list_videos", None)):
            raise TypeError(
                f"The provided gateway ({type(gateway).__name__}) does not support list_videos",
            )
        if authenticator is not None and auth_config is None:
            raise ValueError("auth_config is required when an authenticator is given")

        self.logger = logger or logging.getLogger(__name__)
        self.gateway = gateway
        self.authenticator = authenticator
        self.auth_config = auth_config
        self.interaction_provider = interaction_provider
        self.last_error: Optional[Exception] = None

    @property
    def next_page_token(self) -> Optional[str]:
        """Page token from the gateway's last listing, if any"""
        return getattr(self.gateway, "next_page_token", None)

    @property
    def needs_reauthentication(self) -> bool:
        """True when the last failure was an authorization problem"""
        return isinstance(
            self.last_error,
            (AuthenticationError, AuthenticationRequired, RemoteAuthorizationError),
        )

    def execute(
        self,
        max_results: int = DEFAULT_MAX_RESULTS,
        page_token: Optional[str] = None,
    ) -> List[VideoListItem]:
        """
        Authenticate and list videos.

        Args:
            max_results: Page size (capped at 50)
            page_token: Token for a specific page

        Returns:
            Video list items; empty when none exist or on any error

        Raises:
            ClientSecretNotFoundError: Configuration error
        """
        self.last_error = None
        try:
            if self.authenticator is not None:
                session = self.authenticator.authenticate(
                    self.auth_config,
                    self.interaction_provider,
                )
                self.gateway.use_session(session)

            videos = self.gateway.list_videos(max_results=max_results, page_token=page_token)
        except ClientSecretNotFoundError:
            raise
        except Exception as e:
            self.last_error = e
            self.logger.error(f"Error while listing videos: {e}")
            return []

        self.logger.info(f"Found {len(videos)} videos.")
        return list(videos)
