"""File management for the site list, with atomic writes."""

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any, Optional

from splurge_master_password.exceptions import FileOperationError, ValidationError
from splurge_master_password.models import SiteConfiguration

logger = logging.getLogger(__name__)


class FileManager:
    """Reads and writes a ``SiteConfiguration`` JSON file."""

    _FORMAT_VERSION = "1.0"

    def __init__(self, config_file: str) -> None:
        """Initialize the file manager.

        Args:
            config_file: Path of the site list file
        """
        if not config_file or not str(config_file).strip():
            raise ValidationError("Site list file path cannot be empty")
        self._config_file = Path(config_file)

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _write_json_atomic(
        self,
        file_path: Path,
        data: dict[str, Any]
    ) -> None:
        """Write JSON data atomically using temporary file.

        Args:
            file_path: Path to the target file
            data: Data to write

        Raises:
            FileOperationError: If write operation fails
        """
        temp_file = file_path.with_suffix(".temp")
        archive_file = file_path.with_suffix(".archive")

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            with temp_file.open("w", encoding="utf-8") as f:
                json.dump(
                    data,
                    f,
                    indent=2,
                    ensure_ascii=False
                )

            if file_path.exists():
                shutil.move(str(file_path), str(archive_file))

            shutil.move(str(temp_file), str(file_path))

            self._set_secure_permissions(file_path)

            if archive_file.exists():
                archive_file.unlink()

        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            if archive_file.exists() and not file_path.exists():
                shutil.move(str(archive_file), str(file_path))
            raise FileOperationError(f"Failed to write file {file_path}: {e}") from e

    def _read_json(self, file_path: Path) -> Optional[dict[str, Any]]:
        """Read JSON data from file.

        Args:
            file_path: Path to the file to read

        Returns:
            JSON data as dictionary, or None if file doesn't exist

        Raises:
            FileOperationError: If read operation fails
        """
        if not file_path.exists():
            return None

        try:
            with file_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise FileOperationError(f"Unexpected content in {file_path}: expected a JSON object")
        return data

    def read_configuration(self) -> Optional[SiteConfiguration]:
        """Read the site list.

        Returns:
            SiteConfiguration, or None if the file doesn't exist

        Raises:
            FileOperationError: If the file cannot be read or parsed
        """
        data = self._read_json(self._config_file)
        if data is None:
            return None

        try:
            configuration = SiteConfiguration.from_dict(data)
        except (KeyError, TypeError, ValidationError) as e:
            raise FileOperationError(f"Failed to parse site list {self._config_file}: {e}") from e

        logger.debug("Site list loaded", extra={
            "site_count": len(configuration.sites),
            "event": "site_list_loaded",
        })
        return configuration

    def load_or_create(self) -> SiteConfiguration:
        """Read the site list, or return an empty one if the file is missing."""
        return self.read_configuration() or SiteConfiguration()

    def save_configuration(self, configuration: SiteConfiguration) -> None:
        """Save the site list atomically.

        Args:
            configuration: Site list to save

        Raises:
            FileOperationError: If save operation fails
        """
        data = {"version": self._FORMAT_VERSION}
        data.update(configuration.to_dict())
        self._write_json_atomic(self._config_file, data)

        logger.info("Site list saved", extra={
            "site_count": len(configuration.sites),
            "event": "site_list_saved",
        })

    def _set_secure_permissions(self, file_path: Path) -> None:
        """Set secure file permissions (owner read/write only).

        Args:
            file_path: Path to the file to secure
        """
        try:
            os.chmod(file_path, 0o600)
        except OSError as e:
            # Not supported on every platform
            logger.debug(f"Could not restrict permissions on {file_path}: {e}")
