"""Configuration constants for the clinic receptionist agent.

This module centralizes all magic numbers and configuration values
used throughout the application for better maintainability.
"""

# ============================================================================
# VALIDATION CONFIGURATION
# ============================================================================

class ValidationConfig:
    """Input extraction limits."""

    MIN_AGE = 1
    """Youngest accepted patient age (years)"""

    MAX_AGE = 120
    """Oldest accepted patient age (years)"""

    AGE_DIGITS_PATTERN = r"\d{1,3}"
    """First run of up to three digits is read as the age"""

    MAX_NAME_TOKENS = 6
    """Longer remainders are treated as sentences, not names"""


# ============================================================================
# RATE LIMITING CONFIGURATION
# ============================================================================

class RateLimitConfig:
    """Rate limits for the HTTP chat surface."""

    SESSIONS_PER_MINUTE = 30
    """New sessions per client per minute"""

    MESSAGES_PER_MINUTE = 120
    """Utterances per client per minute"""

    DEBUG_PER_MINUTE = 10
    """Debug endpoint requests per client per minute"""


# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    MAX_LOG_TEXT_LENGTH = 100
    """Maximum utterance length written to logs"""

    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# ============================================================================
# METRICS CONFIGURATION
# ============================================================================

class MetricsConfig:
    """Prometheus metrics configuration."""

    LATENCY_BUCKETS = (0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25)
    """Histogram buckets for turn processing time (seconds)"""

    TURN_COUNT_BUCKETS = (1, 2, 4, 6, 8, 12, 16, 24, 32)
    """Histogram buckets for turns needed to complete a booking"""
