"""
Interfaces Package

Abstract interfaces and error types for uploader implementations.
"""

from uploader.interfaces.authenticator_interface import (
    AuthConfig,
    AuthenticationError,
    AuthenticatorInterface,
    AuthFailureReason,
    ClientSecretNotFoundError,
    InteractionProvider,
    YouTubeSession,
)
from uploader.interfaces.log_store_interface import LogStoreInterface
from uploader.interfaces.video_gateway_interface import (
    AuthenticationRequired,
    RemoteAuthorizationError,
    UploadFailed,
    VideoFileNotFoundError,
    VideoGatewayInterface,
)

__all__ = [
    "AuthConfig",
    "AuthFailureReason",
    "AuthenticationError",
    "AuthenticationRequired",
    "AuthenticatorInterface",
    "ClientSecretNotFoundError",
    "InteractionProvider",
    "LogStoreInterface",
    "RemoteAuthorizationError",
    "UploadFailed",
    "VideoFileNotFoundError",
    "VideoGatewayInterface",
    "YouTubeSession",
]
