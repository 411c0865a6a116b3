from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo


def resolve_timezone(name):
    if not name or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


class Clock:
    """Source of "now" for the booking core.

    All datetimes handled by the core are naive wall-clock values in the
    booking time zone; aware inputs are converted with ``to_local``.
    """

    def __init__(self, tz_name="UTC"):
        self.tz = resolve_timezone(tz_name)

    def now(self):
        raise NotImplementedError

    def today(self):
        return self.now().date()

    def to_local(self, value):
        if value.tzinfo is None:
            return value
        return value.astimezone(self.tz).replace(tzinfo=None)


class SystemClock(Clock):
    def now(self):
        return datetime.now(self.tz).replace(tzinfo=None)


class FixedClock(Clock):
    """Clock frozen at a given instant, moved only by ``advance``/``set``."""

    def __init__(self, now, tz_name="UTC"):
        super().__init__(tz_name)
        self._now = now

    def now(self):
        return self._now

    def set(self, now):
        self._now = now

    def advance(self, **kwargs):
        self._now = self._now + timedelta(**kwargs)
        return self._now
