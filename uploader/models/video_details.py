"""
Video Details Model

Metadata for one video to upload, validated at construction.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from uploader.constants import DEFAULT_PRIVACY_STATUS, PrivacyStatus
from uploader.models.validation import ValidationError, require_text


@dataclass(frozen=True)
class VideoDetails:
    """
    Represents the metadata for a video to be uploaded.

    Constructed once per upload invocation from user input and never mutated.
    Existence of file_path is checked by the gateway at upload time, not here.

    Invalid privacy values are rejected rather than replaced by the default.

    Example:
        details = VideoDetails(
            file_path="/videos/demo.mp4",
            title="Demo",
            category_id="22",
            tags=["demo", "test"],
        )
    """

    file_path: Union[str, os.PathLike]
    title: str
    category_id: Union[str, int]
    description: Optional[str] = ""
    privacy_status: Optional[Union[PrivacyStatus, str]] = DEFAULT_PRIVACY_STATUS
    tags: Optional[Sequence[str]] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate and normalize fields (frozen, so via object.__setattr__)"""
        file_path = self.file_path
        if isinstance(file_path, os.PathLike):
            file_path = os.fspath(file_path)
        require_text("file_path", file_path, "File path")
        object.__setattr__(self, "file_path", file_path)

        require_text("title", self.title, "Title")

        description = self.description if self.description is not None else ""
        if not isinstance(description, str):
            raise ValidationError(
                "description",
                f"Description must be a string. Got: {type(description).__name__}",
            )
        object.__setattr__(self, "description", description)

        object.__setattr__(self, "category_id", self._normalize_category(self.category_id))
        object.__setattr__(self, "privacy_status", self._normalize_privacy(self.privacy_status))
        object.__setattr__(self, "tags", self._normalize_tags(self.tags))

    @staticmethod
    def _normalize_category(category_id: Any) -> str:
        # bool is an int subclass, never a category
        if isinstance(category_id, int) and not isinstance(category_id, bool):
            category_id = str(category_id)
        if not isinstance(category_id, str) or not category_id.strip():
            raise ValidationError(
                "category_id",
                f"Category ID cannot be blank. Got: {category_id!r}",
            )
        category_id = category_id.strip()
        if not category_id.isdigit():
            raise ValidationError(
                "category_id",
                f"Category ID must be numeric (e.g. '22'). Got: {category_id!r}",
            )
        return category_id

    @staticmethod
    def _normalize_privacy(privacy_status: Any) -> PrivacyStatus:
        if privacy_status is None:
            return DEFAULT_PRIVACY_STATUS
        try:
            return PrivacyStatus(privacy_status)
        except ValueError as e:
            allowed = ", ".join(status.value for status in PrivacyStatus)
            raise ValidationError(
                "privacy_status",
                f"Privacy status must be one of: {allowed}. Got: {privacy_status!r}",
            ) from e

    @staticmethod
    def _normalize_tags(tags: Any) -> Tuple[str, ...]:
        if tags is None:
            return ()
        if isinstance(tags, (str, bytes)) or not isinstance(tags, Sequence):
            raise ValidationError(
                "tags",
                f"Tags must be a list of strings. Got: {type(tags).__name__}",
            )
        if any(not isinstance(tag, str) for tag in tags):
            raise ValidationError("tags", f"All tags must be strings. Got: {list(tags)!r}")
        return tuple(tags)

    def to_metadata(self) -> Dict[str, Any]:
        """
        Build the videos.insert request body.

        Returns:
            Dictionary with "snippet" and "status" parts
        """
        return {
            "snippet": {
                "title": self.title,
                "description": self.description,
                "tags": list(self.tags),
                "categoryId": self.category_id,
            },
            "status": {
                "privacyStatus": self.privacy_status.value,
            },
        }

    def __str__(self) -> str:
        return f"VideoDetails(title='{self.title}', privacy='{self.privacy_status.value}')"
