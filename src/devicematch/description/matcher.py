"""
Device description matching.

A pattern description matches a candidate when every field set on the
pattern is found, as a case-insensitive regular expression, somewhere in
the candidate's corresponding field.
"""

from __future__ import annotations

import functools
import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from devicematch.description.models import DeviceDescription


logger = logging.getLogger(__name__)


# Attributes compared by matches(), in evaluation order.
# Serial is never compared; templates describe models, not units.
MATCH_FIELDS = (
    "interface_name",
    "device_class",
    "manufacturer",
    "product",
    "version",
    "capabilities",
)


class PatternError(Exception):
    """Pattern field is not a valid regular expression."""

    def __init__(self, field: str | None, pattern: str, reason: str) -> None:
        self.field = field
        self.pattern = pattern
        where = f" in '{field}'" if field else ""
        super().__init__(f"Invalid regex{where}: {pattern!r} ({reason})")


@functools.lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


def match_pair(
    left: str | None,
    right: str | None,
    *,
    strict: bool = True,
    field: str | None = None,
) -> bool:
    """
    Match a single field pair.

    Args:
        left: Pattern value; absent matches anything
        right: Candidate value; absent fails any set pattern
        strict: Raise PatternError on invalid regex, else treat as no match
        field: Field name used in error messages

    Returns:
        True if left is absent or found anywhere in right

    Raises:
        PatternError: If left is not a valid regex and strict is set
    """
    if not left:
        return True
    if not right:
        return False

    try:
        regex = _compile(left)
    except re.error as e:
        if strict:
            raise PatternError(field, left, str(e)) from e
        logger.warning("Invalid regex pattern in %s: %s", field or "field", left)
        return False

    return regex.search(right) is not None


def matches(
    pattern: DeviceDescription,
    candidate: DeviceDescription,
    *,
    strict: bool = True,
) -> bool:
    """
    Check if a candidate description matches a pattern description.

    Fields are compared in MATCH_FIELDS order; evaluation stops at the
    first field that does not match.

    Args:
        pattern: Description whose set fields act as constraints
        candidate: Description of a concrete device
        strict: Raise PatternError on invalid regex, else treat as no match

    Returns:
        True if all fields match
    """
    for name in MATCH_FIELDS:
        if not match_pair(
            getattr(pattern, name),
            getattr(candidate, name),
            strict=strict,
            field=name,
        ):
            logger.debug(
                "Description %r does not match %r on %s",
                str(candidate), str(pattern), name,
            )
            return False
    return True
