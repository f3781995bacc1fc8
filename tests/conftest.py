"""Pytest configuration and shared fixtures"""

import os

import pytest

from didyoumean.config import MatcherConfig, get_config
from didyoumean.consts import ENV_PREFIX
from didyoumean.matcher import Matcher, get_matcher

SOCIAL_NETWORKS = ["resume", "twitter", "instagram", "linkedin"]


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears DIDYOUMEAN_* environment variables.

    This ensures MatcherConfig tests see the true defaults without
    interference from environment variables that might be set in the user's
    shell.
    """
    saved = {key: value for key, value in os.environ.items() if key.startswith(ENV_PREFIX)}

    for key in saved:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        for key in [k for k in os.environ if k.startswith(ENV_PREFIX)]:
            os.environ.pop(key, None)
        os.environ.update(saved)


@pytest.fixture
def clean_config(clean_env):
    """MatcherConfig built from defaults only."""
    return MatcherConfig()


@pytest.fixture
def matcher(clean_config):
    """Matcher with default configuration."""
    return Matcher(clean_config)


@pytest.fixture
def social_networks():
    """Plain string candidate list."""
    return list(SOCIAL_NETWORKS)


@pytest.fixture
def social_records():
    """Structured candidate list keyed by 'id'."""
    return [{"id": name} for name in SOCIAL_NETWORKS]


@pytest.fixture
def default_matcher(clean_env):
    """The cached default matcher, reset before and after the test."""
    get_config.cache_clear()
    get_matcher.cache_clear()
    try:
        yield get_matcher()
    finally:
        get_config.cache_clear()
        get_matcher.cache_clear()
