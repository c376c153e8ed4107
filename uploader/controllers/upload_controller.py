"""
Upload Controller

High-level coordinator for video uploads.
Binds authenticator, gateway and audit log into one operation that
always produces exactly one UploadLogEntry per invocation.
"""

import logging
from typing import Optional

from uploader.interfaces.authenticator_interface import (
    AuthConfig,
    AuthenticationError,
    AuthenticatorInterface,
    ClientSecretNotFoundError,
    InteractionProvider,
)
from uploader.interfaces.log_store_interface import LogStoreInterface
from uploader.interfaces.video_gateway_interface import (
    AuthenticationRequired,
    UploadFailed,
    VideoFileNotFoundError,
    VideoGatewayInterface,
)
from uploader.models import UploadLogEntry, VideoDetails


class UploadController:
    """
    High-level video upload controller.

    This class:
    - Authenticates (when an authenticator is configured)
    - Delegates the upload to the gateway
    - Turns every outcome into a SUCCESS or FAILURE log entry
    - Persists the entry, even when the upload failed

    Usage:
        controller = UploadController(
            gateway=YouTubeGateway(),
            log_store=CsvLogStore(),
            authenticator=OAuthManager(),
            auth_config=auth_config,
        )
        entry = controller.execute(video_details)
        if entry.is_success:
            print(entry.youtube_url)
    """

    def __init__(
        self,
        gateway: VideoGatewayInterface,
        log_store: LogStoreInterface,
        authenticator: Optional[AuthenticatorInterface] = None,
        auth_config: Optional[AuthConfig] = None,
        interaction_provider: Optional[InteractionProvider] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize upload controller.

        Args:
            gateway: Remote video gateway
            log_store: Audit log store
            authenticator: Authenticator run before each upload (None = gateway
                already has a session, or does not need one)
            auth_config: Required when authenticator is given
            interaction_provider: Passed through to the authenticator
            logger: Logger to use (default: module logger)
        """
        if authenticator is not None and auth_config is None:
            raise ValueError("auth_config is required when an authenticator is given")

        self.logger = logger or logging.getLogger(__name__)
        self.gateway = gateway
        self.log_store = log_store
        self.authenticator = authenticator
        self.auth_config = auth_config
        self.interaction_provider = interaction_provider

        self.logger.info("Upload Controller initialized")

    def execute(self, video_details: VideoDetails) -> UploadLogEntry:
        """
        Upload a video and record the outcome.

        Args:
            video_details: The video to upload

        Returns:
            The persisted log entry; callers branch on entry.status

        Raises:
            ClientSecretNotFoundError: Configuration error, no attempt is made
        """
        self.logger.info(f"Starting video upload for title: '{video_details.title}'")
        self.logger.debug(f"Video details for upload: {video_details!r}")

        try:
            self._authenticate()
            video_id = self.gateway.upload_video(video_details)
            self.logger.info(f"Video uploaded successfully. YouTube Video ID: {video_id}")
            entry = UploadLogEntry.success(
                video_title=video_details.title,
                file_path=video_details.file_path,
                video_id=video_id,
            )
        except ClientSecretNotFoundError:
            raise
        except VideoFileNotFoundError as e:
            self.logger.error(f"File not found for '{video_details.title}': {e}")
            entry = self._failure(video_details, str(e))
        except (AuthenticationError, AuthenticationRequired) as e:
            self.logger.error(f"Authentication error during upload for '{video_details.title}': {e}")
            entry = self._failure(video_details, str(e))
        except UploadFailed as e:
            self.logger.error(f"YouTube upload error for '{video_details.title}': {e}")
            entry = self._failure(video_details, str(e))
        except Exception as e:
            self.logger.error(
                f"Unexpected error during upload for '{video_details.title}': "
                f"{type(e).__name__} - {e}",
                exc_info=True,
            )
            entry = self._failure(video_details, f"Unexpected error: {str(e) or type(e).__name__}")

        self._persist(entry)
        self.logger.info(
            f"Finished video upload for: '{video_details.title}'. Final Status: {entry.status.value}",
        )
        return entry

    def _authenticate(self) -> None:
        if self.authenticator is None:
            return
        session = self.authenticator.authenticate(self.auth_config, self.interaction_provider)
        self.gateway.use_session(session)

    @staticmethod
    def _failure(video_details: VideoDetails, message: str) -> UploadLogEntry:
        return UploadLogEntry.failure(
            video_title=video_details.title,
            file_path=video_details.file_path,
            error_message=message,
        )

    def _persist(self, entry: UploadLogEntry) -> None:
        """Save the entry; a logging failure never masks the upload outcome"""
        try:
            self.log_store.save(entry)
            self.logger.info(f"Upload log entry saved for video title: '{entry.video_title}'")
        except Exception as e:
            self.logger.error(
                f"Failed to save upload log entry for '{entry.video_title}'. Error: {e}",
                exc_info=True,
            )
