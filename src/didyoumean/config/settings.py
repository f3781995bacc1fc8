"""Matcher configuration with Pydantic v2"""

from typing import Any

from pydantic import ConfigDict, Field, computed_field
from pydantic_settings import BaseSettings

from ..consts import (
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_NO_MATCH_VALUE,
    DEFAULT_RETURN_MATCHED_RECORD,
    DEFAULT_THRESHOLD,
    ENV_PREFIX,
)


class MatcherConfig(BaseSettings):
    """Selection policy for a Matcher.

    Fields may be reassigned at any time; assignments are validated and take
    effect on the next match call.
    """

    model_config = ConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    threshold: float | None = Field(
        default=DEFAULT_THRESHOLD,
        ge=0,
        description=(
            "Maximum edit distance as a fraction of the input length (exclusive). "
            "None returns the closest candidate however distant."
        ),
    )
    case_sensitive: bool = Field(
        default=DEFAULT_CASE_SENSITIVE,
        description="Compare input and candidates without lower-casing",
    )
    no_match_value: Any = Field(
        default=DEFAULT_NO_MATCH_VALUE,
        exclude=True,
        description=(
            "Value returned when no candidate qualifies. "
            "Read from DIDYOUMEAN_NO_MATCH_VALUE as a plain string"
        ),
    )
    return_matched_record: bool = Field(
        default=DEFAULT_RETURN_MATCHED_RECORD,
        description="Return the whole record instead of the extracted string when a key is used",
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )

    @computed_field
    @property
    def unbounded(self) -> bool:
        """True when no threshold applies."""
        return self.threshold is None

    def max_distance(self, input_length: int) -> float | None:
        """Exclusive distance bound for an input of the given length."""
        if self.threshold is None:
            return None
        return self.threshold * input_length

    def __repr__(self) -> str:
        return (
            f"MatcherConfig(threshold={self.threshold!r}, "
            f"case_sensitive={self.case_sensitive!r}, "
            f"return_matched_record={self.return_matched_record!r})"
        )
