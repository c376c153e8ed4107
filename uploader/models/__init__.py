"""
Models Package

Immutable value records passed between layers.
"""

from uploader.models.upload_log_entry import UploadLogEntry
from uploader.models.validation import ValidationError
from uploader.models.video_details import VideoDetails
from uploader.models.video_list_item import VideoListItem

__all__ = [
    "UploadLogEntry",
    "ValidationError",
    "VideoDetails",
    "VideoListItem",
]
