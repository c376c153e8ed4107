"""
Upload Log Entry Model

One audit record per upload attempt.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union

from uploader.constants import LogStatus, watch_url
from uploader.models.validation import ValidationError, require_text


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class UploadLogEntry:
    """
    Represents a single upload attempt and its outcome.

    Built once per attempt by the upload controller, persisted immediately,
    then discarded. The audit trail is the log store, not this object.

    Invariants:
    - details is never empty (video ID on success, error message on failure)
    - status SUCCESS implies a non-empty youtube_url
    """

    video_title: str
    file_path: str
    status: Union[LogStatus, str]
    details: str
    youtube_url: Optional[str] = None
    upload_date: Union[datetime, str, None] = field(default_factory=_now)

    def __post_init__(self):
        """Validate fields and normalize status/upload_date"""
        require_text("video_title", self.video_title, "Video title")
        require_text("file_path", self.file_path, "File path")

        try:
            status = LogStatus(self.status)
        except ValueError as e:
            allowed = ", ".join(s.value for s in LogStatus)
            raise ValidationError(
                "status",
                f"Status must be one of: {allowed}. Got: {self.status!r}",
            ) from e
        object.__setattr__(self, "status", status)

        require_text("details", self.details, "Details")

        object.__setattr__(self, "upload_date", self._normalize_date(self.upload_date))

        if status is LogStatus.SUCCESS and not (self.youtube_url or "").strip():
            raise ValidationError(
                "youtube_url",
                "YouTube URL cannot be empty for a SUCCESSFUL upload",
            )

    @staticmethod
    def _normalize_date(value) -> datetime:
        if value is None:
            return _now()
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError as e:
                raise ValidationError(
                    "upload_date",
                    f"Invalid upload_date string format. Please use ISO8601. Got: {value}",
                ) from e
        if not isinstance(value, datetime):
            raise ValidationError(
                "upload_date",
                "upload_date must be a datetime, an ISO8601 string, or None. "
                f"Got: {type(value).__name__}",
            )
        # Naive timestamps are taken as local time
        if value.tzinfo is None:
            value = value.astimezone()
        return value

    @classmethod
    def success(cls, video_title: str, file_path: str, video_id: str) -> "UploadLogEntry":
        """Build a SUCCESS entry; the watch URL is derived from video_id"""
        return cls(
            video_title=video_title,
            file_path=file_path,
            status=LogStatus.SUCCESS,
            details=video_id,
            youtube_url=watch_url(video_id),
        )

    @classmethod
    def failure(cls, video_title: str, file_path: str, error_message: str) -> "UploadLogEntry":
        """Build a FAILURE entry with a blank URL"""
        return cls(
            video_title=video_title,
            file_path=file_path,
            status=LogStatus.FAILURE,
            details=(error_message or "").strip() or "Unknown error",
            youtube_url=None,
        )

    @property
    def is_success(self) -> bool:
        return self.status is LogStatus.SUCCESS

    def to_row(self) -> List[str]:
        """Cells in audit-log column order (see CSV_HEADERS)"""
        return [
            self.upload_date.isoformat(),
            self.file_path,
            self.video_title,
            self.status.value,
            self.details,
            self.youtube_url or "",
        ]

    def to_dict(self) -> dict:
        """Convert to dictionary for logging/display"""
        return {
            "video_title": self.video_title,
            "file_path": self.file_path,
            "youtube_url": self.youtube_url,
            "upload_date": self.upload_date.isoformat(),
            "status": self.status.value,
            "details": self.details,
        }
