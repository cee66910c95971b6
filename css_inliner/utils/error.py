"""Error utility for CSS Inliner."""

class CSSInlinerError(Exception):
    """Base exception for CSS Inliner."""
    pass

class ValidationError(CSSInlinerError):
    """Raised when input validation fails."""
    pass

class FileOperationError(CSSInlinerError):
    """Raised when file operations fail."""
    pass

class NetworkError(CSSInlinerError):
    """Raised when a document or stylesheet cannot be fetched."""
    pass

# Exported exceptions
__all__ = [
    'CSSInlinerError',
    'ValidationError',
    'FileOperationError',
    'NetworkError',
]
