from didyoumean import __version__
from didyoumean.consts import (
    DEFAULT_MAX_SUGGESTIONS,
    DEFAULT_THRESHOLD,
    ENV_PREFIX,
    PACKAGE_NAME,
    PACKAGE_VERSION,
)


class TestPackageConstants:
    """Test package constants are properly defined"""

    def test_package_version_defined(self):
        """Test that package version is defined"""
        assert isinstance(PACKAGE_VERSION, str)
        assert "." in PACKAGE_VERSION  # Should be semantic version
        assert __version__ == PACKAGE_VERSION

    def test_env_prefix(self):
        """Test the environment prefix is derived from the package name"""
        assert ENV_PREFIX == f"{PACKAGE_NAME.upper()}_"

    def test_matching_defaults(self):
        assert DEFAULT_THRESHOLD == 0.4
        assert DEFAULT_MAX_SUGGESTIONS > 0
