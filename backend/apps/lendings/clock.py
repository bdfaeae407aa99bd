"""
Time source for the lending engine.
"""
from django.utils import timezone


class SystemClock:
    """Wall-clock time in the active Django timezone."""

    def now(self):
        return timezone.now()
