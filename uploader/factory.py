"""
Uploader Factory

Factory pattern for wiring authenticator, gateway, log store and controllers.
Automatically configures from UploaderConfig (environment + optional YAML).
"""

import logging
import os
from typing import Literal, Optional

from uploader.auth.oauth_manager import OAuthManager
from uploader.config import UploaderConfig
from uploader.controllers.list_controller import ListVideosController
from uploader.controllers.upload_controller import UploadController
from uploader.implementations.csv_log_store import CsvLogStore
from uploader.implementations.mock_gateway import MockVideoGateway
from uploader.implementations.youtube_gateway import YouTubeGateway
from uploader.interfaces.authenticator_interface import (
    AuthenticatorInterface,
    InteractionProvider,
)
from uploader.interfaces.video_gateway_interface import VideoGatewayInterface

# Type alias
GatewayMode = Literal["auto", "youtube", "mock"]


class UploaderFactory:
    """
    Factory for creating uploader components.

    Usage:
        factory = UploaderFactory()
        controller = factory.create_upload_controller()

        # Force mock for testing
        factory = UploaderFactory(mode="mock")
    """

    def __init__(
        self,
        config: Optional[UploaderConfig] = None,
        mode: Optional[GatewayMode] = None,
        interaction_provider: Optional[InteractionProvider] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize factory.

        Args:
            config: Configuration (default: UploaderConfig())
            mode: Override config.mode ("auto", "youtube", "mock")
            interaction_provider: Passed to the authenticator (default: console)
            logger: Logger to use (default: module logger)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config = config or UploaderConfig()
        self.mode = self._resolve_mode(mode or self.config.mode)
        self.interaction_provider = interaction_provider

    def _resolve_mode(self, mode: str) -> str:
        if mode != "auto":
            self.logger.debug(f"Gateway mode forced: {mode}")
            return mode

        client_secret_path = self.config.auth_config().client_secret_path
        if os.path.exists(client_secret_path):
            self.logger.debug("Client secret found, using YouTube gateway (auto-detected)")
            return "youtube"

        self.logger.warning(
            f"Client secret not found at {client_secret_path}, using Mock Gateway",
        )
        return "mock"

    @property
    def is_mock(self) -> bool:
        return self.mode == "mock"

    def create_authenticator(self) -> Optional[AuthenticatorInterface]:
        """OAuth manager, or None in mock mode (mock gateway needs no session)"""
        if self.is_mock:
            return None
        return OAuthManager()

    def create_gateway(self) -> VideoGatewayInterface:
        if self.is_mock:
            self.logger.info("Creating Mock Gateway")
            return MockVideoGateway()
        return YouTubeGateway()

    def create_log_store(self, log_file_path: Optional[str] = None) -> CsvLogStore:
        """
        Args:
            log_file_path: Override the configured audit log path
        """
        return CsvLogStore(log_file_path or self.config.upload_log_path)

    def create_upload_controller(self, log_file_path: Optional[str] = None) -> UploadController:
        authenticator = self.create_authenticator()
        return UploadController(
            gateway=self.create_gateway(),
            log_store=self.create_log_store(log_file_path),
            authenticator=authenticator,
            auth_config=self.config.auth_config() if authenticator else None,
            interaction_provider=self.interaction_provider,
        )

    def create_list_controller(self) -> ListVideosController:
        authenticator = self.create_authenticator()
        return ListVideosController(
            gateway=self.create_gateway(),
            authenticator=authenticator,
            auth_config=self.config.auth_config() if authenticator else None,
            interaction_provider=self.interaction_provider,
        )
