"""Local natural language due-date parsing for task titles.

The scan is a case-insensitive substring search over the raw title, checked in
a fixed precedence order:

1. "today"      -> today
2. "tomorrow"   -> today + 1
3. "next week"  -> today + 7
4. weekday name -> next occurrence strictly after today (same weekday -> +7)
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from taskpad.utils.date_classifier import today_of


class LocalNLPParser:
    """Parse due dates out of free-text task titles."""

    def __init__(self):
        """Initialize the parser."""
        self.relative_phrases = [
            ("today", 0),
            ("tomorrow", 1),
            ("next week", 7),
        ]
        # Checked Sunday first; values are datetime.weekday() numbers
        self.weekdays = {
            "sunday": 6,
            "monday": 0,
            "tuesday": 1,
            "wednesday": 2,
            "thursday": 3,
            "friday": 4,
            "saturday": 5,
        }

    def parse_date(self, text: str, now: date | datetime) -> date | None:
        """Parse a due date from text.

        Args:
            text: Text potentially containing a date phrase
            now: Reference time; only its calendar date is used

        Returns:
            Parsed date or None when no trigger phrase is present
        """
        today = today_of(now)
        text_lower = text.lower()

        for phrase, days in self.relative_phrases:
            if phrase in text_lower:
                return today + timedelta(days=days)

        for day_name, day_num in self.weekdays.items():
            if day_name in text_lower:
                days_ahead = (day_num - today.weekday()) % 7
                if days_ahead == 0:
                    days_ahead = 7  # Next week if today
                return today + timedelta(days=days_ahead)

        return None


def parse_natural_date(text: str, now: date | datetime) -> str | None:
    """Convenience function returning the parsed due date as ``YYYY-MM-DD``.

    Example:
        >>> parse_natural_date("lunch tomorrow", date(2024, 6, 10))
        '2024-06-11'
    """
    parsed = LocalNLPParser().parse_date(text, now)
    return parsed.isoformat() if parsed else None
