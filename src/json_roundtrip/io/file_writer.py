"""File writer for rendered JSON output."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
from ..types import ProcessingError, ErrorType


class FileWriter:
    """Writes rendered JSON text to a file, creating parent directories."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write_text(self, path: Union[str, Path], text: str,
                   trailing_newline: bool = True) -> Dict[str, Any]:
        """
        Write text to a file as UTF-8.

        Args:
            path: Destination file path
            text: Rendered JSON text
            trailing_newline: Append a newline after the text

        Returns:
            Dictionary with file information

        Raises:
            ProcessingError: If writing fails
        """
        file_path = Path(path)
        self._ensure_directory_exists(file_path.parent)

        content = text + "\n" if trailing_newline else text
        try:
            with open(file_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise ProcessingError(
                f"Failed to write {file_path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"path": str(file_path)}
            )

        file_size = file_path.stat().st_size
        self.logger.info(f"Wrote {file_size} bytes to {file_path}")

        return {
            "path": str(file_path.absolute()),
            "size": file_size,
        }

    def _ensure_directory_exists(self, directory_path: Path) -> None:
        """
        Ensure that a directory exists, creating it if necessary.

        Args:
            directory_path: Path to directory

        Raises:
            ProcessingError: If directory creation fails
        """
        try:
            directory_path.mkdir(parents=True, exist_ok=True)

            if not os.access(directory_path, os.W_OK):
                raise ProcessingError(
                    f"Directory {directory_path} is not writable",
                    ErrorType.FILESYSTEM
                )

        except OSError as e:
            raise ProcessingError(
                f"Failed to create directory {directory_path}: {str(e)}",
                ErrorType.FILESYSTEM
            )
