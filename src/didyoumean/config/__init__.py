"""Configuration package"""

from functools import cache

from .logging import setup_logging
from .settings import MatcherConfig


@cache
def get_config() -> MatcherConfig:
    """Get a cached MatcherConfig instance built from defaults and environment."""
    return MatcherConfig()


__all__ = ["MatcherConfig", "get_config", "setup_logging"]
