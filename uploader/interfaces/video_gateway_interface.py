"""
Video Gateway Interface

Abstract interface for authenticated remote video operations.
Follows Dependency Inversion Principle - controllers depend on this abstraction,
not on the YouTube API client.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from uploader.constants import DEFAULT_MAX_RESULTS, RemoteErrorKind
from uploader.interfaces.authenticator_interface import YouTubeSession
from uploader.models import VideoDetails, VideoListItem


class VideoGatewayInterface(ABC):
    """
    Abstract base class for video platform gateways.

    Any implementation (YouTube, in-memory mock, etc.) must implement these
    methods. Every operation requires a session attached with use_session().
    """

    #: Page token returned by the last list_videos() call, if any
    next_page_token: Optional[str] = None

    @abstractmethod
    def use_session(self, session: YouTubeSession) -> None:
        """
        Attach an authenticated session for subsequent operations.

        Args:
            session: Session produced by an authenticator
        """

    @abstractmethod
    def upload_video(self, video_details: VideoDetails) -> str:
        """
        Upload a video file with its metadata.

        Single attempt, no retries.

        Args:
            video_details: File path and metadata

        Returns:
            Remote video ID

        Raises:
            AuthenticationRequired: If no authenticated session is attached
            VideoFileNotFoundError: If the file does not exist
            UploadFailed: On any remote failure
        """

    @abstractmethod
    def list_videos(
        self,
        max_results: int = DEFAULT_MAX_RESULTS,
        page_token: Optional[str] = None,
    ) -> List[VideoListItem]:
        """
        List the authenticated user's uploaded videos.

        Args:
            max_results: Page size (capped at 50 by the provider)
            page_token: Token for a specific page

        Returns:
            Video list items (empty on client/unexpected errors)

        Raises:
            AuthenticationRequired: If no authenticated session is attached
            RemoteAuthorizationError: If the session was rejected remotely
        """


class AuthenticationRequired(Exception):
    """Gateway operation attempted without an authenticated session"""


class VideoFileNotFoundError(FileNotFoundError):
    """Video file to upload does not exist (input error, not a remote failure)"""


class UploadFailed(Exception):
    """
    Exception raised for remote upload failures.

    Examples:
    - Quota exceeded / bad metadata / unsupported format (CLIENT)
    - Expired or revoked token (AUTHORIZATION)
    - Network or server errors (UNEXPECTED)
    """

    def __init__(self, message: str, kind: RemoteErrorKind = RemoteErrorKind.UNEXPECTED):
        super().__init__(message)
        self.kind = kind

    @property
    def requires_reauthentication(self) -> bool:
        """True when re-running auth is the likely fix"""
        return self.kind is RemoteErrorKind.AUTHORIZATION


class RemoteAuthorizationError(Exception):
    """Listing rejected because the session is expired or revoked"""
