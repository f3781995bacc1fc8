"""High-value constants for the didyoumean package."""

# Package metadata
PACKAGE_VERSION = "1.0.0"
PACKAGE_NAME = "didyoumean"

# Environment variable prefix for MatcherConfig overrides
ENV_PREFIX = "DIDYOUMEAN_"

# Matching defaults
DEFAULT_THRESHOLD = 0.4  # fraction of input length, exclusive
DEFAULT_CASE_SENSITIVE = False
DEFAULT_NO_MATCH_VALUE = None
DEFAULT_RETURN_MATCHED_RECORD = False
DEFAULT_MAX_SUGGESTIONS = 3
