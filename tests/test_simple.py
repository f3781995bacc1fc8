"""Simple tests (verify pytest working)"""

from unittest import TestCase


class TestPackage(TestCase):

    def test_imports(self):
        """Test that all main imports work"""
        try:
            from didyoumean import (
                ConfigError,
                DidYouMeanError,
                Matcher,
                MatcherConfig,
                MatchKind,
                MatchResult,
                did_you_mean,
                levenshtein,
            )
        except ImportError as e:
            self.fail(e)

    def test_config_error_is_package_error(self):
        from didyoumean import ConfigError, DidYouMeanError

        error = ConfigError("bad", suggestions=["fix it"])
        self.assertIsInstance(error, DidYouMeanError)
        self.assertEqual(error.message, "bad")
        self.assertEqual(error.errors, [])
        self.assertEqual(error.suggestions, ["fix it"])
        self.assertEqual(error.context, {})
