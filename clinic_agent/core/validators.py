"""Field extraction utilities for caller utterances.

Every extractor is pure and total: it never raises, and "no match" is
signalled with ``None`` (or an empty string for the issue).
"""
import re
from typing import Optional

from clinic_agent.config.constants import ValidationConfig
from clinic_agent.config.phrases import (
    DAY_PATTERN,
    DIGIT_PATTERN,
    ISSUE_FILLER_PATTERNS,
    NAME_FILLER_PATTERNS,
    TIME_OF_DAY_PATTERN,
)

_AGE_PATTERN = re.compile(ValidationConfig.AGE_DIGITS_PATTERN)


class FieldExtractor:
    """Turns free text into typed patient profile fields."""

    @staticmethod
    def capitalize_words(value: str) -> str:
        """Upper-case the first letter of each word, lower-case the rest."""
        return " ".join(part[:1].upper() + part[1:].lower() for part in value.split())

    @staticmethod
    def extract_name(text: str) -> Optional[str]:
        """Extract a caller name from e.g. 'mera naam Rahul Verma hai'."""

        cleaned = text
        for pattern, count in NAME_FILLER_PATTERNS:
            cleaned = pattern.sub(" ", cleaned, count=count)
        cleaned = cleaned.strip()

        if not cleaned:
            return None

        # A long remainder is a sentence, not a name
        if len(cleaned.split()) > ValidationConfig.MAX_NAME_TOKENS:
            return None

        return FieldExtractor.capitalize_words(cleaned)

    @staticmethod
    def extract_age(text: str) -> Optional[int]:
        """Extract an age in years from the first run of 1-3 digits."""

        match = _AGE_PATTERN.search(text)
        if not match:
            return None

        age = int(match.group(0))
        if age < ValidationConfig.MIN_AGE or age > ValidationConfig.MAX_AGE:
            return None

        return age

    @staticmethod
    def sanitize_issue(text: str) -> str:
        """Strip first-person filler from a complaint. May return ''."""

        cleaned = text
        for pattern in ISSUE_FILLER_PATTERNS:
            cleaned = pattern.sub("", cleaned)
        return cleaned.strip()

    @staticmethod
    def sanitize_slot(text: str) -> Optional[str]:
        """Normalize a requested day/time, or None if it does not look like one."""

        normalized = " ".join(text.split())
        if not normalized:
            return None

        has_time = bool(
            DIGIT_PATTERN.search(normalized) or TIME_OF_DAY_PATTERN.search(normalized)
        )
        has_day = bool(DAY_PATTERN.search(normalized))

        if not has_time and not has_day:
            return None

        return normalized
