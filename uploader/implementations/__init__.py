"""
Implementations Package

Concrete gateway and log store implementations.
"""

from uploader.implementations.csv_log_store import CsvLogStore
from uploader.implementations.mock_gateway import MockVideoGateway
from uploader.implementations.youtube_gateway import YouTubeGateway, classify_remote_error

__all__ = [
    "CsvLogStore",
    "MockVideoGateway",
    "YouTubeGateway",
    "classify_remote_error",
]
