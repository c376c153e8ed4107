"""
CSV Log Store Implementation

Append-only CSV audit log of upload attempts, readable with any
spreadsheet or tabular tool.
"""

import csv
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from uploader.constants import CSV_HEADERS, DEFAULT_LOG_FILE_PATH
from uploader.interfaces.log_store_interface import LogStoreInterface
from uploader.models import UploadLogEntry


class CsvLogStore(LogStoreInterface):
    """
    CSV-backed audit log.

    On construction the file is guaranteed to exist and start with
    CSV_HEADERS (repair-on-open). save() only ever appends.

    A file whose first row is not the expected header is moved aside to
    <name>.<timestamp>.bak before a fresh log is started, so no audit rows
    are destroyed by the repair.
    """

    def __init__(
        self,
        log_file_path: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize CSV log store.

        Args:
            log_file_path: Path to the CSV file (default: logs/upload_log.csv)
            logger: Logger to use (default: module logger)

        Raises:
            OSError: If the file or its directory cannot be created
        """
        self.logger = logger or logging.getLogger(__name__)
        self.log_file_path = Path(log_file_path or DEFAULT_LOG_FILE_PATH)

        self._ensure_log_file_with_headers()
        self.logger.info(f"CSV log store initialized. Log file: {self.log_file_path}")

    def save(self, entry: UploadLogEntry) -> None:
        """
        Append one row for the entry.

        Raises:
            OSError: On filesystem errors (permission, disk full)
            csv.Error: If the row cannot be encoded
        """
        self.logger.debug(f"Attempting to save log entry: {entry.to_dict()}")
        try:
            with open(self.log_file_path, "a", newline="", encoding="utf-8") as f:
                csv.writer(f).writerow(entry.to_row())
        except (OSError, csv.Error) as e:
            self.logger.error(f"Failed to save log entry to {self.log_file_path}: {e}")
            raise

        self.logger.info(f"Saved log entry to {self.log_file_path}")

    def _ensure_log_file_with_headers(self) -> None:
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.log_file_path.exists():
            self.logger.info(f"Log file {self.log_file_path} does not exist. Creating with headers.")
            self._write_headers()
            return

        if self.log_file_path.stat().st_size == 0:
            self.logger.info(f"Log file {self.log_file_path} is empty. Writing headers.")
            self._write_headers()
            return

        try:
            first_row = self._read_first_row()
        except UnicodeDecodeError as e:
            self.logger.warning(f"Log file {self.log_file_path} is not valid UTF-8: {e}")
            first_row = None

        if first_row == CSV_HEADERS:
            self.logger.debug(f"Log file {self.log_file_path} already has headers.")
            self._terminate_last_line()
            return

        backup_path = self._backup_path()
        self.logger.warning(
            f"Log file {self.log_file_path} has unexpected headers {first_row}. "
            f"Moving it to {backup_path} and starting a new log.",
        )
        os.replace(self.log_file_path, backup_path)
        self._write_headers()

    def _read_first_row(self) -> List[str]:
        with open(self.log_file_path, "r", newline="", encoding="utf-8") as f:
            return next(csv.reader(f), [])

    def _terminate_last_line(self) -> None:
        """Rows are appended, so the file must end with a line break"""
        with open(self.log_file_path, "rb") as f:
            f.seek(-1, os.SEEK_END)
            last_byte = f.read(1)
        if last_byte != b"\n":
            self.logger.info(f"Log file {self.log_file_path} lacks a final newline. Adding one.")
            with open(self.log_file_path, "ab") as f:
                f.write(b"\r\n")

    def _backup_path(self) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        return self.log_file_path.with_name(f"{self.log_file_path.name}.{timestamp}.bak")

    def _write_headers(self) -> None:
        with open(self.log_file_path, "w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow(CSV_HEADERS)
        self.logger.info(f"Wrote CSV headers to {self.log_file_path}")
