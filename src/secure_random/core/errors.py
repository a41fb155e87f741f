"""
Error kinds raised by secure_random.

Only two failure kinds exist:
- RangeError: a parameter lies outside its declared domain (lengths, digit
  counts, float bound format). Always raised before any entropy is consumed.
- OrderError: an explicit min/max pair is inconsistent (min > max).

Both derive from ValueError so that generic callers can handle them without
importing this module. Errors of the entropy source itself (OSError and the
like) are never wrapped.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SecureRandomError(Exception):
    """Base class for every error raised by secure_random."""

    pass


class RangeError(SecureRandomError, ValueError):
    """
    A parameter fell outside its declared [min, max] domain.

    The message is fixed per domain (string length, integer length, float
    fractional digits, float range bounds) and never includes the rejected value.
    """

    pass


class OrderError(SecureRandomError, ValueError):
    """An explicit (min, max) pair was supplied with min > max."""

    pass
