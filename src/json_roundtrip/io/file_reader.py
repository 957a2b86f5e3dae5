"""File reader for JSON input documents."""

import logging
from pathlib import Path
from typing import Optional, Union
from ..types import ProcessingError, ErrorType
from ..error_handler import ErrorHandler


class FileReader:
    """
    Reads a whole JSON document from disk into one text buffer.

    Input is decoded as UTF-8; a leading byte order mark is dropped.
    Every failure surfaces as a ProcessingError so callers never see a
    bare OSError or UnicodeDecodeError.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def read_text(self, path: Union[str, Path]) -> str:
        """
        Read the file at path.

        Args:
            path: Path of the JSON file

        Returns:
            Decoded file contents

        Raises:
            ProcessingError: FILESYSTEM if the file cannot be read,
                ENCODING if it is not valid UTF-8
        """
        validation_result = self.error_handler.validate_file_path(str(path))
        if not validation_result.is_valid:
            raise ProcessingError(
                validation_result.errors[0].message,
                ErrorType.FILESYSTEM,
                context={"path": str(path)}
            )

        file_path = Path(path)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise ProcessingError(
                f"Failed to read {file_path}: {e.strerror or e}",
                ErrorType.FILESYSTEM,
                context={"path": str(file_path)}
            )

        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ProcessingError(
                f"{file_path} is not valid UTF-8 (byte {e.start})",
                ErrorType.ENCODING,
                context={"path": str(file_path), "offset": e.start}
            )

        self.logger.debug(f"Read {len(data)} bytes from {file_path}")
        return text
