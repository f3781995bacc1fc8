"""Tests for MatchResult"""

import pytest
from pydantic import ValidationError

from didyoumean.models import MatchKind, MatchResult


class TestMatchResult:
    """Test MatchResult construction and helpers"""

    def test_winner(self):
        result = MatchResult.winner("instagram", "instagram", 3, 2)

        assert result.kind == MatchKind.MATCHED
        assert result.matched
        assert bool(result)
        assert result.unwrap() == "instagram"

    def test_record_winner(self):
        record = {"id": "instagram"}
        result = MatchResult.winner(record, "instagram", 0, 0, record=True)

        assert result.kind == MatchKind.MATCHED_RECORD
        assert result.matched
        assert result.unwrap() == record
        assert result.text == "instagram"

    @pytest.mark.parametrize(
        "factory,kind",
        [
            (MatchResult.no_match, MatchKind.NO_MATCH),
            (MatchResult.invalid_input, MatchKind.INVALID_INPUT),
        ],
    )
    def test_unmatched_results(self, factory, kind):
        result = factory(False)

        assert result.kind == kind
        assert not result.matched
        assert not result
        assert result.unwrap() is False

    def test_results_are_frozen(self):
        """Test results cannot be modified after creation"""
        result = MatchResult.no_match()
        with pytest.raises(ValidationError):
            result.value = "changed"

    def test_negative_distance_rejected(self):
        with pytest.raises(ValidationError):
            MatchResult(kind=MatchKind.MATCHED, value="a", distance=-1)

    def test_kind_values(self):
        assert MatchKind.NO_MATCH == "no_match"
        assert MatchResult.no_match().model_dump()["kind"] == "no_match"
