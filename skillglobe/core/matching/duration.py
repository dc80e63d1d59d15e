"""
Parsing of free-text experience durations.

Profiles describe each role's length as text ("2 years 6 months",
"1.5 years", "18 months"); matching needs it in years.
"""

import re
from typing import Final

from skillglobe.utils.logger import get_logger

logger = get_logger(__name__)

YEARS_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\d+(?:\.\d+)?)\s*years?", re.IGNORECASE)
MONTHS_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\d+)\s*months?", re.IGNORECASE)


class MalformedDurationError(ValueError):
    """Raised for a non-empty duration with no year or month quantity."""

    def __init__(self, duration: str):
        self.duration = duration
        super().__init__(f"Cannot parse experience duration: {duration!r}")


def parse_duration_to_years(duration: str, strict: bool = False) -> float:
    """
    Convert a duration string to years.

    Only the first year quantity and the first month quantity count;
    other text is ignored. An empty string is zero years.

    Args:
        duration: Free-text duration, e.g. "2 years 6 months"
        strict: Raise instead of returning 0 for unparseable text

    Returns:
        Duration in years

    Raises:
        MalformedDurationError: If strict and the text holds no quantity
    """
    year_match = YEARS_PATTERN.search(duration)
    month_match = MONTHS_PATTERN.search(duration)

    if not year_match and not month_match:
        if duration.strip():
            if strict:
                raise MalformedDurationError(duration)
            logger.warning(f"Unparseable experience duration {duration!r}, counting 0 years")
        return 0.0

    years = 0.0
    if year_match:
        years += float(year_match.group(1))
    if month_match:
        years += int(month_match.group(1)) / 12
    return years
