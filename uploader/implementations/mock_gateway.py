"""
Mock Gateway Implementation

In-memory gateway for tests and offline runs without the YouTube API.
"""

import logging
import os
import random
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from uploader.constants import DEFAULT_MAX_RESULTS, MAX_RESULTS_LIMIT, RemoteErrorKind, watch_url
from uploader.interfaces.authenticator_interface import YouTubeSession
from uploader.interfaces.video_gateway_interface import (
    AuthenticationRequired,
    UploadFailed,
    VideoFileNotFoundError,
    VideoGatewayInterface,
)
from uploader.models import VideoDetails, VideoListItem


class MockVideoGateway(VideoGatewayInterface):
    """
    Mock video gateway for testing.

    Uploaded videos become visible to list_videos(), newest first, the same
    order the uploads playlist uses. Useful for:
    - Unit tests
    - Development without YouTube credentials
    - CI/CD pipelines
    """

    def __init__(
        self,
        fail_rate: float = 0.0,
        require_session: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize mock gateway.

        Args:
            fail_rate: Probability of upload failure (0.0 to 1.0)
            require_session: If True, behave like the real gateway and
                raise AuthenticationRequired until use_session() is called
            logger: Logger to use (default: module logger)

        Example:
            # Always fails, for error-path tests
            gateway = MockVideoGateway(fail_rate=1.0)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.fail_rate = fail_rate
        self.require_session = require_session
        self.session: Optional[YouTubeSession] = None
        self.next_page_token: Optional[str] = None

        # Track upload history for testing
        self.upload_history: List[dict] = []
        self.videos: List[VideoListItem] = []

        self.logger.info(f"Mock Gateway initialized (fail_rate: {fail_rate})")

    def use_session(self, session: YouTubeSession) -> None:
        self.session = session

    def _check_session(self) -> None:
        if self.require_session and (self.session is None or not self.session.is_authenticated):
            raise AuthenticationRequired(
                "Authentication required. Please run the auth command.",
            )

    def upload_video(self, video_details: VideoDetails) -> str:
        """Simulate an upload; the file must still exist"""
        self._check_session()

        if not os.path.isfile(video_details.file_path):
            raise VideoFileNotFoundError(f"Video file not found: {video_details.file_path}")

        if random.random() < self.fail_rate:
            self.logger.error("[MOCK] Simulated upload failure")
            raise UploadFailed("Simulated upload failure", kind=RemoteErrorKind.UNEXPECTED)

        video_id = f"mock_{uuid4().hex[:11]}"
        self.upload_history.append(
            {
                "video_id": video_id,
                "file_path": video_details.file_path,
                "title": video_details.title,
                "metadata": video_details.to_metadata(),
            },
        )
        self.videos.insert(
            0,
            VideoListItem(
                id=video_id,
                title=video_details.title,
                youtube_url=watch_url(video_id),
                published_at=datetime.now().astimezone(),
            ),
        )

        self.logger.info(f"[MOCK] Upload successful: {video_id}")
        return video_id

    def list_videos(
        self,
        max_results: int = DEFAULT_MAX_RESULTS,
        page_token: Optional[str] = None,
    ) -> List[VideoListItem]:
        """Page through the in-memory videos; page tokens are stringified offsets"""
        self._check_session()

        max_results = max(1, min(int(max_results or DEFAULT_MAX_RESULTS), MAX_RESULTS_LIMIT))
        start = int(page_token) if page_token and page_token.isdigit() else 0
        end = start + max_results

        self.next_page_token = str(end) if end < len(self.videos) else None
        return list(self.videos[start:end])

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_last_upload(self) -> Optional[dict]:
        """Most recent upload record, or None"""
        return self.upload_history[-1] if self.upload_history else None

    def was_uploaded(self, file_path: str) -> bool:
        return any(record["file_path"] == file_path for record in self.upload_history)

    def clear_history(self) -> None:
        self.upload_history.clear()
        self.videos.clear()
        self.logger.debug("[MOCK] Upload history cleared")
