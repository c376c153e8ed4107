"""
YouTube Gateway Implementation

Concrete implementation of VideoGatewayInterface for YouTube Data API v3.
Uploads are a single blocking call; listing chains two calls because the
API has no "my uploads" endpoint:

    channels.list(mine=True) -> uploads playlist ID -> playlistItems.list
"""

import logging
import os
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from google.auth.exceptions import RefreshError
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaFileUpload

from uploader.constants import (
    DEFAULT_MAX_RESULTS,
    MAX_RESULTS_LIMIT,
    RemoteErrorKind,
    watch_url,
)
from uploader.interfaces.authenticator_interface import YouTubeSession
from uploader.interfaces.video_gateway_interface import (
    AuthenticationRequired,
    RemoteAuthorizationError,
    UploadFailed,
    VideoFileNotFoundError,
    VideoGatewayInterface,
)
from uploader.models import VideoDetails, VideoListItem

_FRACTION_RE = re.compile(r"\.(\d+)(?=Z|[+-]\d{2}:?\d{2}$|$)")


def classify_remote_error(error: Exception) -> RemoteErrorKind:
    """
    Map an exception from a remote call to a failure category.

    Shared by upload and both listing calls so the policies cannot drift.

    Args:
        error: Exception raised by the API client or the auth transport

    Returns:
        AUTHORIZATION for 401 / failed token refresh,
        CLIENT for other 4xx, UNEXPECTED for everything else
    """
    if isinstance(error, RefreshError):
        return RemoteErrorKind.AUTHORIZATION
    if isinstance(error, HttpError):
        status = error.resp.status
        if status == 401:
            return RemoteErrorKind.AUTHORIZATION
        if 400 <= status < 500:
            return RemoteErrorKind.CLIENT
    return RemoteErrorKind.UNEXPECTED


def describe_remote_error(error: Exception) -> str:
    """Provider message for HttpError, str() for anything else"""
    if isinstance(error, HttpError):
        return f"{error.resp.status} {error.reason}"
    return str(error) or type(error).__name__


def parse_published_at(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp as returned by the API ("2023-01-01T12:00:00Z").

    Raises:
        ValueError: If value is not a timestamp
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    # fromisoformat before 3.11 only takes 3 or 6 fraction digits
    value = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class YouTubeGateway(VideoGatewayInterface):
    """
    YouTube video gateway using YouTube Data API v3.

    Features:
    - Single-request upload (no retries, fail fast)
    - Uploads playlist listing with per-item fault tolerance
    - One error classifier for every remote call
    """

    def __init__(
        self,
        session: Optional[YouTubeSession] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize YouTube gateway.

        Args:
            session: Authenticated session (can be attached later via use_session)
            logger: Logger to use (default: module logger)

        Example:
            session = OAuthManager().authenticate(auth_config)
            gateway = YouTubeGateway(session)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.session = session
        self.next_page_token: Optional[str] = None

    def use_session(self, session: YouTubeSession) -> None:
        self.session = session
        self.logger.debug("Session attached to YouTube gateway")

    def _require_session(self, operation: str) -> Any:
        """
        Returns:
            The API service of the attached session

        Raises:
            AuthenticationRequired: If no authenticated session is attached
        """
        if self.session is None or not self.session.is_authenticated:
            self.logger.warning(f"Attempted to {operation} without prior authentication.")
            raise AuthenticationRequired(
                f"Authentication required before trying to {operation}. "
                "Please run the auth command.",
            )
        return self.session.service

    # =========================================================================
    # UPLOAD
    # =========================================================================

    def upload_video(self, video_details: VideoDetails) -> str:
        """
        Upload video to YouTube.

        Args:
            video_details: File path and metadata

        Returns:
            YouTube video ID

        Raises:
            AuthenticationRequired: If no authenticated session is attached
            VideoFileNotFoundError: If the file does not exist
            UploadFailed: On any remote failure
        """
        service = self._require_session("upload a video")

        file_path = video_details.file_path
        if not os.path.isfile(file_path):
            raise VideoFileNotFoundError(f"Video file not found: {file_path}")

        body = video_details.to_metadata()
        self.logger.info(
            f"Starting upload: {file_path} ({os.path.getsize(file_path)} bytes)",
        )
        self.logger.debug(f"Upload metadata: {body}")

        try:
            media = MediaFileUpload(file_path, resumable=False)
            request = service.videos().insert(
                part="snippet,status",
                body=body,
                media_body=media,
            )
            response = request.execute()
        except Exception as e:
            kind = classify_remote_error(e)
            message = self._upload_error_message(kind, e)
            self.logger.error(message)
            raise UploadFailed(message, kind=kind) from e

        video_id = (response or {}).get("id")
        if not video_id:
            raise UploadFailed(
                "Upload completed but no video ID returned",
                kind=RemoteErrorKind.UNEXPECTED,
            )

        self.logger.info(f"Upload successful: {video_id}")
        return video_id

    @staticmethod
    def _upload_error_message(kind: RemoteErrorKind, error: Exception) -> str:
        detail = describe_remote_error(error)
        if kind is RemoteErrorKind.CLIENT:
            return f"YouTube API client error: {detail}"
        if kind is RemoteErrorKind.AUTHORIZATION:
            return f"YouTube API authorization error: {detail}. Please run the auth command again."
        return f"Unexpected upload error: {detail}"

    # =========================================================================
    # LISTING
    # =========================================================================

    def list_videos(
        self,
        max_results: int = DEFAULT_MAX_RESULTS,
        page_token: Optional[str] = None,
    ) -> List[VideoListItem]:
        """
        List the authenticated user's uploaded videos.

        Args:
            max_results: Page size, clamped to 1..50
            page_token: Token for a specific page

        Returns:
            Video list items; empty on client or unexpected errors

        Raises:
            AuthenticationRequired: If no authenticated session is attached
            RemoteAuthorizationError: If the API rejected the session
        """
        service = self._require_session("list videos")
        self.next_page_token = None
        if max_results is None:
            max_results = DEFAULT_MAX_RESULTS
        max_results = max(1, min(int(max_results), MAX_RESULTS_LIMIT))

        try:
            playlist_id = self._fetch_uploads_playlist_id(service)
            if not playlist_id:
                return []
            items = self._fetch_playlist_items(service, playlist_id, max_results, page_token)
        except Exception as e:
            kind = classify_remote_error(e)
            detail = describe_remote_error(e)
            if kind is RemoteErrorKind.AUTHORIZATION:
                self.logger.error(
                    "YouTube API authorization error while fetching channel details "
                    f"or playlist items: {detail}",
                )
                raise RemoteAuthorizationError(
                    f"YouTube rejected the stored authorization: {detail}",
                ) from e
            if kind is RemoteErrorKind.CLIENT:
                self.logger.error(
                    "YouTube API client error while fetching channel details "
                    f"or playlist items: {detail}",
                )
            else:
                self.logger.error(
                    f"An unexpected error occurred while listing videos: {detail}",
                    exc_info=True,
                )
            return []

        videos = [video for video in map(self._to_list_item, items) if video is not None]
        self.logger.info(f"Mapped {len(videos)} items to VideoListItem entities.")
        return videos

    def _fetch_uploads_playlist_id(self, service: Any) -> Optional[str]:
        response = service.channels().list(part="contentDetails", mine=True).execute()

        channels = response.get("items") or []
        if not channels:
            self.logger.error("Could not find YouTube channel for the authenticated user.")
            return None

        playlist_id = (
            channels[0].get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")
        )
        if not playlist_id:
            self.logger.error("Could not find uploads playlist ID for the user.")
            return None

        self.logger.info(f"Successfully fetched uploads playlist ID: {playlist_id}")
        return playlist_id

    def _fetch_playlist_items(
        self,
        service: Any,
        playlist_id: str,
        max_results: int,
        page_token: Optional[str],
    ) -> List[Dict[str, Any]]:
        self.logger.info(
            f"Fetching playlist items from playlist ID: {playlist_id} "
            f"with max_results: {max_results}, page_token: {page_token}",
        )
        response = service.playlistItems().list(
            part="snippet",
            playlistId=playlist_id,
            maxResults=max_results,
            pageToken=page_token,
        ).execute()

        self.next_page_token = response.get("nextPageToken")
        items = response.get("items") or []
        if not items:
            self.logger.info(f"No video items found in playlist: {playlist_id}")
            return []

        self.logger.info(
            f"Successfully fetched {len(items)} video items from playlist: {playlist_id}",
        )
        return items

    def _to_list_item(self, item: Dict[str, Any]) -> Optional[VideoListItem]:
        """
        Map one playlist item; None means "skip this item".
        """
        snippet = item.get("snippet") or {}
        video_id = (snippet.get("resourceId") or {}).get("videoId")
        if not video_id:
            self.logger.warning(
                "Skipping playlist item due to missing snippet, resource_id, or "
                f"video_id. Item ID: {item.get('id')}",
            )
            return None

        published_at = None
        raw_published_at = snippet.get("publishedAt")
        if raw_published_at:
            try:
                published_at = parse_published_at(raw_published_at)
            except ValueError as e:
                self.logger.warning(
                    f"Failed to parse published_at for video ID {video_id}: {e}. "
                    f"Raw value: '{raw_published_at}'",
                )

        thumbnails = snippet.get("thumbnails") or {}
        thumbnail = thumbnails.get("medium") or thumbnails.get("default") or {}

        return VideoListItem(
            id=video_id,
            title=snippet.get("title", ""),
            youtube_url=watch_url(video_id),
            published_at=published_at,
            thumbnail_url=thumbnail.get("url"),
        )
