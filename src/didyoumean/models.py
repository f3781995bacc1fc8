from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

# =============================================================================
# MATCH RESULT MODEL
# =============================================================================
# Tagged outcome of a single Matcher.match call


class MatchKind(StrEnum):
    """Outcome of a match."""

    MATCHED = "matched"  # winning extracted string
    MATCHED_RECORD = "matched_record"  # winning original record
    NO_MATCH = "no_match"  # valid input, nothing qualified
    INVALID_INPUT = "invalid_input"  # empty or absent input


class MatchResult(BaseModel):
    """Tagged result of matching an input against a candidate list."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: MatchKind = Field(..., description="Which outcome this result represents")
    value: Any = Field(
        None,
        description=(
            "Winning string or record, or the configured no-match value "
            "for NO_MATCH and INVALID_INPUT"
        ),
    )
    text: str | None = Field(
        None, description="Extracted string of the winning candidate"
    )
    distance: int | None = Field(
        None, ge=0, description="Edit distance of the winning candidate"
    )
    index: int | None = Field(
        None, ge=0, description="Position of the winner in the candidate list"
    )

    @computed_field
    @property
    def matched(self) -> bool:
        """True for MATCHED and MATCHED_RECORD."""
        return self.kind in (MatchKind.MATCHED, MatchKind.MATCHED_RECORD)

    def unwrap(self) -> Any:
        """Return the winner, or the no-match value."""
        return self.value

    @classmethod
    def invalid_input(cls, no_match_value: Any = None) -> "MatchResult":
        return cls(kind=MatchKind.INVALID_INPUT, value=no_match_value)

    @classmethod
    def no_match(cls, no_match_value: Any = None) -> "MatchResult":
        return cls(kind=MatchKind.NO_MATCH, value=no_match_value)

    @classmethod
    def winner(
        cls, value: Any, text: str, distance: int, index: int, *, record: bool = False
    ) -> "MatchResult":
        """Build a MATCHED or MATCHED_RECORD result."""
        return cls(
            kind=MatchKind.MATCHED_RECORD if record else MatchKind.MATCHED,
            value=value,
            text=text,
            distance=distance,
            index=index,
        )

    def __bool__(self) -> bool:
        return self.matched
