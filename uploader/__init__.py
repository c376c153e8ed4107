"""
YouTube Uploader

Upload videos to YouTube with OAuth authentication and keep a CSV audit
log of every upload attempt.

Public API:
    - UploadController: Authenticate, upload, and record the attempt
    - ListVideosController: List the user's uploaded videos
    - UploaderFactory: Wires components from configuration
    - VideoDetails: Validated upload request
    - UploadLogEntry: Audit log row
    - VideoListItem: Listed video summary

Usage:
    from uploader import UploaderFactory, VideoDetails

    controller = UploaderFactory().create_upload_controller()
    entry = controller.execute(
        VideoDetails(file_path="demo.mp4", title="Demo", category_id="22")
    )
"""

__version__ = "0.1.0"

from uploader.controllers.list_controller import ListVideosController  # noqa: E402
from uploader.controllers.upload_controller import UploadController  # noqa: E402
from uploader.factory import UploaderFactory  # noqa: E402
from uploader.models import UploadLogEntry, VideoDetails, VideoListItem  # noqa: E402

# Public API
__all__ = [
    "ListVideosController",
    "UploadController",
    "UploadLogEntry",
    "UploaderFactory",
    "VideoDetails",
    "VideoListItem",
    "__version__",
]
