"""didyoumean

Pick the candidate a user most likely meant when they typed a (possibly
misspelled) string, by Levenshtein edit distance.
"""

from .config import MatcherConfig, get_config, setup_logging
from .consts import PACKAGE_VERSION
from .distance import bounded_levenshtein, levenshtein
from .exceptions import ConfigError, DidYouMeanError
from .matcher import Matcher, did_you_mean, extract_text, get_matcher
from .models import MatchKind, MatchResult

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "get_config",
    "get_matcher",
    "setup_logging",
    "did_you_mean",
    "extract_text",
    "levenshtein",
    "bounded_levenshtein",
    "Matcher",
    "MatcherConfig",
    "MatchKind",
    "MatchResult",
    "DidYouMeanError",
    "ConfigError",
]
