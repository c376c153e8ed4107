"""
Controllers Package

High-level upload and listing coordinators.
"""

from uploader.controllers.list_controller import ListVideosController
from uploader.controllers.upload_controller import UploadController

__all__ = [
    "ListVideosController",
    "UploadController",
]
