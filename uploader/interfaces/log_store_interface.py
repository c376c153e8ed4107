"""
Log Store Interface

Abstract interface for persisting upload attempts.
"""

from abc import ABC, abstractmethod

from uploader.models import UploadLogEntry


class LogStoreInterface(ABC):
    """
    Abstract base class for audit log stores.

    Implementations append; they never rewrite or deduplicate entries.
    """

    @abstractmethod
    def save(self, entry: UploadLogEntry) -> None:
        """
        Append one entry.

        Args:
            entry: Upload attempt to record

        Raises:
            OSError: On filesystem errors (never swallowed)
        """
