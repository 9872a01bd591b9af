"""
Constants and default configuration values for URL joining.
"""

import re

# Separators
PATH_SEPARATOR = "/"
QUERY_MARK = "?"
QUERY_PAIR_SEPARATOR = "&"
QUERY_KEY_VALUE_SEPARATOR = "="
PROTOCOL_DELIMITER = "://"

# Scheme letter, then letters/digits/+/./-, then "://"
PROTOCOL_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")

# Characters left unescaped in query keys/values, on top of the ones
# urllib.parse.quote always keeps (A-Z a-z 0-9 _ . - ~).
# Together they match the encodeURIComponent unreserved set.
QUERY_SAFE_CHARS = "!*'()"

# Option defaults
DEFAULT_NORMALIZE = True
DEFAULT_TRAILING_SLASH = None  # None = leave as computed
