"""PHI (Protected Health Information) redaction for log output.

Caller utterances carry names, ages, complaints and sometimes contact details.
Utterances are logged at the "partial" level; profile snapshots go through
``redact_dict``, which masks the profile fields by key and fully redacts the rest.
"""
import re
from typing import Any, Dict, Optional


class PHIRedactor:
    """Masks contact details, ID numbers and profile fields."""

    PROFILE_KEYS = ("name", "age", "issue")

    # 12 digits, optionally grouped 4-4-4 (Aadhaar style)
    NATIONAL_ID_PATTERN = re.compile(r'\b\d{4}[-\s]?\d{4}[-\s]?\d{4}\b')

    # +91 98765 43210, 098765-43210, 9876543210
    PHONE_PATTERN = re.compile(r'(?<!\d)(?:\+?91[-\s]?|0)?[6-9]\d{4}[-\s]?\d{5}(?!\d)')

    EMAIL_PATTERN = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b')

    DIGITS_PATTERN = re.compile(r'\d+')

    def __init__(self, placeholder: str = "[REDACTED]"):
        self.placeholder = placeholder

    def redact(self, text: str, redact_level: str = "full") -> str:
        """Redact PHI from text.

        Args:
            text: Text to redact
            redact_level: "partial" masks ID numbers, phones (last 4 digits
                kept) and emails (domain kept); "full" also replaces every
                remaining digit run with "#"

        Returns:
            Redacted text
        """
        if not text:
            return text

        redacted = self.NATIONAL_ID_PATTERN.sub(self.placeholder, text)
        redacted = self.PHONE_PATTERN.sub(self._redact_phone, redacted)
        redacted = self.EMAIL_PATTERN.sub(self._redact_email, redacted)

        if redact_level == "full":
            redacted = self.DIGITS_PATTERN.sub("#", redacted)

        return redacted

    @staticmethod
    def _redact_phone(match: re.Match) -> str:
        digits = re.sub(r'\D', '', match.group(0))
        return "XXXXXX" + digits[-4:]

    @staticmethod
    def _redact_email(match: re.Match) -> str:
        return f"***@{match.group(0).split('@', 1)[1]}"

    def redact_dict(self, data: Dict[str, Any], redact_level: str = "full") -> Dict[str, Any]:
        """Mask profile fields that are set and redact every other string value."""
        redacted: Dict[str, Any] = {}
        for key, value in data.items():
            if key in self.PROFILE_KEYS and value is not None:
                redacted[key] = self.placeholder
            elif isinstance(value, str):
                redacted[key] = self.redact(value, redact_level)
            else:
                redacted[key] = value
        return redacted


_redactor: Optional[PHIRedactor] = None


def get_phi_redactor() -> PHIRedactor:
    """Get global PHI redactor instance."""
    global _redactor
    if _redactor is None:
        _redactor = PHIRedactor()
    return _redactor
