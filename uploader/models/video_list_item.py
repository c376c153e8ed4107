"""
Video List Item Model

Read-only projection of one video returned by the listing call.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class VideoListItem:
    """A video in the authenticated user's uploads"""

    id: str
    title: str
    youtube_url: str
    published_at: Optional[datetime] = None  # None when the API date was unparseable
    thumbnail_url: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for logging/display"""
        return {
            "id": self.id,
            "title": self.title,
            "youtube_url": self.youtube_url,
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "thumbnail_url": self.thumbnail_url,
        }
