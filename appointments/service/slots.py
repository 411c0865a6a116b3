from datetime import datetime, time, timedelta

WEEKEND_DAYS = (5, 6)  # Saturday, Sunday


def parse_hhmm(value):
    """Parse a local "HH:MM" string into a ``time``."""
    if isinstance(value, time):
        return value
    try:
        hours, minutes = (int(part) for part in str(value).split(":"))
        return time(hours, minutes)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid time {value!r}, expected HH:MM")


def format_hhmm(value):
    return value.strftime("%H:%M")


def is_weekend(value):
    return value.weekday() in WEEKEND_DAYS


def overlaps(start_a, end_a, start_b, end_b):
    """Half-open interval intersection; touching intervals do not overlap."""
    return start_a < end_b and start_b < end_a


def opening_window(opening, closing, day):
    """Start and end instants of the business day.

    A closing time at or before the opening time is read as an overnight
    window and the end rolls to the next calendar day.
    """
    start = datetime.combine(day, parse_hhmm(opening))
    end = datetime.combine(day, parse_hhmm(closing))
    if end <= start:
        end += timedelta(days=1)
    return start, end


def generate_slots(opening, closing, duration_minutes, day):
    """Candidate start times for ``day``, spaced by the service duration.

    Every returned slot ``t`` satisfies ``t + duration <= closing``. Occupancy
    and "now" are not taken into account here.
    """
    if duration_minutes is None or int(duration_minutes) <= 0:
        raise ValueError("Service duration must be a positive number of minutes")

    step = timedelta(minutes=int(duration_minutes))
    start, end = opening_window(opening, closing, day)

    slots = []
    slot = start
    while slot + step <= end:
        slots.append(slot)
        slot += step
    return slots
