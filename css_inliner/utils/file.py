"""File utility for CSS Inliner."""

import os
import logging

import chardet

from .error import FileOperationError

logger = logging.getLogger(__name__)

def detect_encoding(file_path: str) -> str:
    """Detect file encoding, falling back to utf-8.

    Args:
        file_path: Path to file

    Returns:
        Detected encoding
    """
    with open(file_path, 'rb') as f:
        raw_data = f.read()

    encoding = chardet.detect(raw_data)['encoding']
    if not encoding:
        logger.debug(f"No encoding detected for {file_path}, using utf-8")
        encoding = 'utf-8'
    return encoding

def read_text_file(file_path: str) -> str:
    """Read a text file in its detected encoding.

    Args:
        file_path: Path to the file

    Returns:
        File content

    Raises:
        FileOperationError: If file read fails
    """
    try:
        encoding = detect_encoding(file_path)
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

def write_text_file(file_path: str, content: str, encoding: str = 'utf-8') -> None:
    """Write content to a file, creating its directory if needed.

    Raises:
        FileOperationError: If file write fails
    """
    try:
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(file_path, 'w', encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise FileOperationError(f"Failed to write file {file_path}: {e}") from e

# Exported functions
__all__ = ['detect_encoding', 'read_text_file', 'write_text_file']
