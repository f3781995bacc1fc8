"""Pick the candidate closest to a possibly misspelled input."""

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import cache
from typing import Any

from pydantic import ValidationError

from .config import MatcherConfig, get_config
from .consts import DEFAULT_MAX_SUGGESTIONS
from .distance import bounded_levenshtein, levenshtein
from .exceptions import ConfigError
from .models import MatchResult

logger = logging.getLogger("didyoumean.matcher")

# A field name looked up on each candidate, or a function returning its text
Key = str | Callable[[Any], Any] | None


def extract_text(candidate: Any, key: Key = None) -> str | None:
    """Get the string to compare from a candidate.

    Args:
        candidate: Plain string or structured record.
        key: Field name (mapping item or attribute) or extractor callable.
            If None, the candidate itself is used. An extractor raising
            KeyError, IndexError, AttributeError or TypeError marks the
            candidate as having nothing to compare.

    Returns:
        Non-empty string, or None when the candidate has nothing to compare.
    """
    if not key:
        value = candidate
    elif callable(key):
        try:
            value = key(candidate)
        except (KeyError, IndexError, AttributeError, TypeError):
            # extractor could not read this record
            value = None
    elif isinstance(candidate, Mapping):
        value = candidate.get(key)
    else:
        value = getattr(candidate, key, None)

    if isinstance(value, str) and value:
        return value
    return None


class Matcher:
    """Selects the best candidate for an input by edit distance.

    Responsibilities:
    - Normalize input and candidates per configuration
    - Apply the threshold and first-match tie-break policy
    - Report the outcome as a MatchResult
    """

    def __init__(self, config: MatcherConfig | None = None):
        """Initialize Matcher.

        Args:
            config: MatcherConfig instance. If None, a fresh one is built from
                defaults and environment.
        """
        self.config = config or MatcherConfig()
        logger.debug(f"Matcher created with {self.config!r}")

    # ===== MATCHING =====

    def match(
        self, input: str | None, candidates: Iterable[Any], key: Key = None
    ) -> MatchResult:
        """Find the candidate closest to ``input``.

        Candidates are scanned once in order; a candidate replaces the current
        winner only with a strictly smaller distance, so the earliest of equally
        close candidates wins.

        Args:
            input: Text the user typed.
            candidates: Strings, or records when ``key`` is given.
            key: Field name or extractor callable for structured candidates.

        Returns:
            MatchResult tagged MATCHED, MATCHED_RECORD, NO_MATCH or INVALID_INPUT.
        """
        config = self.config
        if not input or not isinstance(input, str):
            logger.debug("match called with empty input")
            return MatchResult.invalid_input(config.no_match_value)

        case_sensitive = config.case_sensitive
        target = input if case_sensitive else input.lower()
        return_record = bool(key) and config.return_matched_record

        best_distance = config.max_distance(len(target))
        winner = None
        skipped = 0

        for index, candidate in enumerate(candidates):
            text = extract_text(candidate, key)
            if text is None:
                skipped += 1
                continue

            compared = text if case_sensitive else text.lower()
            if best_distance is None:
                distance = levenshtein(target, compared)
            else:
                distance = bounded_levenshtein(target, compared, best_distance)
                if distance is None:
                    continue

            best_distance = distance
            winner = MatchResult.winner(
                candidate if return_record else text,
                text,
                distance,
                index,
                record=return_record,
            )

        if skipped:
            logger.debug(f"Skipped {skipped} candidates without comparable text")

        if winner is None:
            logger.debug(f"No match for '{input}'")
            return MatchResult.no_match(config.no_match_value)

        logger.debug(
            f"Matched '{input}' to '{winner.text}' at distance {winner.distance}"
        )
        return winner

    def did_you_mean(
        self, input: str | None, candidates: Iterable[Any], key: Key = None
    ) -> Any:
        """Return the winning string or record, or the configured no-match value.

        Empty input also yields the no-match value; use ``match`` to tell the
        two apart.
        """
        return self.match(input, candidates, key).unwrap()

    def suggest(
        self,
        input: str | None,
        candidates: Iterable[Any],
        key: Key = None,
        max_results: int = DEFAULT_MAX_SUGGESTIONS,
    ) -> list[Any]:
        """Rank every qualifying candidate, closest first.

        Uses the same extraction, case and threshold rules as ``match``.
        Candidates at equal distance keep their list order.

        Args:
            input: Text the user typed.
            candidates: Strings, or records when ``key`` is given.
            key: Field name or extractor callable for structured candidates.
            max_results: Maximum number of suggestions to return.

        Returns:
            List of strings (or records, when configured), best first.
        """
        config = self.config
        if not input or not isinstance(input, str) or max_results <= 0:
            return []

        case_sensitive = config.case_sensitive
        target = input if case_sensitive else input.lower()
        return_record = bool(key) and config.return_matched_record
        bound = config.max_distance(len(target))

        ranked = []
        for index, candidate in enumerate(candidates):
            text = extract_text(candidate, key)
            if text is None:
                continue

            compared = text if case_sensitive else text.lower()
            if bound is None:
                distance = levenshtein(target, compared)
            else:
                distance = bounded_levenshtein(target, compared, bound)
                if distance is None:
                    continue
            ranked.append((distance, index, candidate if return_record else text))

        ranked.sort(key=lambda x: (x[0], x[1]))
        logger.debug(f"Found {len(ranked)} suggestions for '{input}'")
        return [item[2] for item in ranked[:max_results]]

    # ===== CONFIGURATION =====

    def configure(self, **fields: Any) -> MatcherConfig:
        """Update several configuration fields at once.

        Either every field is applied or, on a validation failure, none is.

        Raises:
            ConfigError: If a field is unknown or a value is invalid.
        """
        unknown = sorted(set(fields) - set(MatcherConfig.model_fields))
        if unknown:
            raise ConfigError(
                f"Unknown configuration field(s): {', '.join(unknown)}",
                suggestions=[
                    f"Valid fields are: {', '.join(MatcherConfig.model_fields)}"
                ],
                context={"unknown_fields": unknown},
            )

        previous = {name: getattr(self.config, name) for name in fields}
        try:
            for name, value in fields.items():
                setattr(self.config, name, value)
        except ValidationError as e:
            for name, value in previous.items():
                setattr(self.config, name, value)
            raise ConfigError(
                "Invalid matcher configuration",
                errors=[
                    f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ],
                suggestions=[
                    "threshold must be a number >= 0, or None to always return the closest match",
                    "case_sensitive and return_matched_record must be booleans",
                ],
                context={"fields": {name: repr(value) for name, value in fields.items()}},
            ) from e

        logger.debug(f"Matcher reconfigured: {self.config!r}")
        return self.config

    def set_threshold(self, threshold: float | None) -> None:
        """Set the distance threshold as a fraction of input length, or None."""
        self.configure(threshold=threshold)

    def set_case_sensitive(self, case_sensitive: bool) -> None:
        self.configure(case_sensitive=case_sensitive)

    def set_no_match_value(self, no_match_value: Any) -> None:
        self.configure(no_match_value=no_match_value)

    def set_return_matched_record(self, return_matched_record: bool) -> None:
        self.configure(return_matched_record=return_matched_record)


@cache
def get_matcher() -> Matcher:
    """Get a cached Matcher sharing the cached default config."""
    return Matcher(get_config())


def did_you_mean(input: str | None, candidates: Iterable[Any], key: Key = None) -> Any:
    """Match with the default matcher; see ``Matcher.did_you_mean``."""
    return get_matcher().did_you_mean(input, candidates, key)
