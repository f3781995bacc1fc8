"""didyoumean custom exceptions.

Exception Design Principles:
1. Matching never raises: empty input, unmatched input and malformed
   candidates are reported through MatchResult, not exceptions
2. Use these custom exceptions only when additional useful context can be provided
3. Configuration mistakes are programming errors, recoverable by the caller
   choosing a valid value (ConfigError)
"""


class DidYouMeanError(Exception):
    """Base exception for all didyoumean errors.

    Raised only for misuse of the configuration API, never by matching.
    ``errors`` holds the validation messages, ``suggestions`` lists accepted
    values and ``context`` records the offending fields.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] = None,  # detailed list of errors (if available)
        suggestions: list[str] = None,  # remedial actions
        context: dict = None,  # additional detailed context
    ):
        """Initialize DidYouMeanError.

        Args:
            message: Primary error message for users
            errors: List of specific error details
            suggestions: List of actionable suggestions for resolution
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.context = context or {}


class ConfigError(DidYouMeanError):
    """Matcher configuration errors - recoverable by choosing a valid value.

    Raised by the Matcher setters when an assignment fails validation:
    - Negative or non-numeric threshold
    - Non-boolean flags
    - Unknown configuration field names

    Wraps pydantic's ValidationError so callers get the offending field and
    value in ``context`` together with a hint on what is accepted.
    """

    pass
