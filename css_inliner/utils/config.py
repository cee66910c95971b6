"""Configuration utility for CSS Inliner."""

# Project version
VERSION = "1.0.0"

# Network
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3

# User-Agent for requests
USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
    'AppleWebKit/537.36 (KHTML, like Gecko) '
    'Chrome/91.0.4472.124 Safari/537.36'
)

# File size limits (in bytes)
MAX_HTML_SIZE = 10 * 1024 * 1024    # 10 MB

# At-rules copied verbatim into the preserved stylesheet when inlining
PRESERVED_AT_RULES = ('font-face', 'import', 'keyframes', 'media')

# Tags that get a bare tag selector when extracting inline styles
GLOBAL_TAGS = ('body', 'html', 'head')

# Prefix of classes generated for elements with no usable selector
AUTO_CLASS_PREFIX = 'auto-style'

# Default href of the linked stylesheet in the "external" variants
DEFAULT_STYLESHEET_HREF = 'styles.css'

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_LEVEL = 'INFO'

# Exported config
__all__ = [
    'VERSION',
    'REQUEST_TIMEOUT', 'MAX_RETRIES', 'USER_AGENT',
    'MAX_HTML_SIZE',
    'PRESERVED_AT_RULES', 'GLOBAL_TAGS', 'AUTO_CLASS_PREFIX',
    'DEFAULT_STYLESHEET_HREF',
    'LOG_FORMAT', 'LOG_DATE_FORMAT', 'LOG_LEVEL',
]
