"""Dialect phrase tables used by the extractors and the FAQ matcher.

Every table is an ordered sequence of case-insensitive patterns. Control flow
never embeds phrases directly, so a different locale only swaps this module.
"""
import re

from clinic_agent.core.models import FaqTopic

_I = re.IGNORECASE

# ============================================================================
# NAME
# ============================================================================

# Removed from the caller's answer, in order, before the rest is read as a name.
# Each entry is (pattern, count); count 1 strips the first occurrence only, so a
# name such as "Hai" survives in "hai hai Rahul", 0 strips every occurrence.
NAME_FILLER_PATTERNS = (
    (re.compile(r"\b(?:mera|meri|main|hamara)\s+naam\s+(?:hai\s+)?", _I), 1),
    (re.compile(r"\bmy\s+name\s+is\s+", _I), 1),
    (re.compile(r"\bnaam\b", _I), 1),
    (re.compile(r"\bhai\b", _I), 1),
    (re.compile(r"\bji\b", _I), 0),
    (re.compile(r"[.,!?;:]+"), 0),
)

# ============================================================================
# ISSUE
# ============================================================================

ISSUE_FILLER_PATTERNS = (
    re.compile(r"\b(?:mujhe|mere|meri|main)\s+", _I),
)

# ============================================================================
# SLOT
# ============================================================================

DIGIT_PATTERN = re.compile(r"\d")

# "am"/"pm" on their own only count in dotted form, so "I am fine" is not a slot
TIME_OF_DAY_PATTERN = re.compile(
    r"\b(?:subah|savere|dopahar|dopeher|shaam|sham|raat|baje|"
    r"morning|afternoon|noon|evening|night|o'?clock)\b|\b[ap]\.m\.",
    _I,
)

DAY_PATTERN = re.compile(
    r"\b(?:aaj|kal|parso|parson|"
    r"som(?:vaar|var|waar|war)|mangal(?:vaar|var|waar|war)?|budh(?:vaar|var|waar|war)?|"
    r"guru(?:vaar|var|waar|war)?|shukr(?:a)?(?:vaar|var|waar|war)?|"
    r"shani(?:vaar|var|waar|war|shchar)?|ravi(?:vaar|var|waar|war)|itvaar|itwar|"
    r"today|tomorrow|day\s+after|"
    r"monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b",
    _I,
)

# Reschedule intent once a booking is confirmed
RESCHEDULE_PATTERN = re.compile(
    r"\b(?:time|slot|change|reschedule|dusra|doosra|badal\w*)\b",
    _I,
)

# ============================================================================
# FAQ
# ============================================================================

# Priority order matters: the first topic whose pattern matches wins
FAQ_TOPIC_PATTERNS = (
    (FaqTopic.SERVICES, re.compile(r"service|treatment|ilaj|ilaaj|problem", _I)),
    (FaqTopic.HOURS, re.compile(r"time|timing|hours|\bkab\b|khule|khulta|open", _I)),
    (FaqTopic.DOCTOR, re.compile(r"doctor|\bdr\b|daktar", _I)),
    (FaqTopic.FEES, re.compile(r"fee|charge|cost|kitne\s+paise", _I)),
    (FaqTopic.ADDRESS, re.compile(r"address|location|kahaan|kahan", _I)),
)
