"""Calendar slots, day bucketing and week navigation."""

from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Union
from models.appointment import Appointment
from config.constants import (
    FIRST_SLOT,
    LAST_SLOT,
    SLOT_INTERVAL_MINUTES,
    DAY_LABELS,
    DAY_NAMES,
    MONTH_NAMES_GENITIVE
)

DateLike = Union[date, str]


def as_date(value: DateLike) -> date:
    """
    Coerce a date or ISO string (YYYY-MM-DD) to a date.

    Raises:
        ValueError: if the string is not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, '%Y-%m-%d').date()


def generate_time_slots() -> List[str]:
    """
    Bookable slot times of a day.

    Returns:
        "HH:MM" strings from the first to the last slot inclusive, one per
        slot interval
    """
    slots = []
    current_time = datetime.strptime(FIRST_SLOT, '%H:%M')
    end_time = datetime.strptime(LAST_SLOT, '%H:%M')

    while current_time <= end_time:
        slots.append(current_time.strftime('%H:%M'))
        current_time += timedelta(minutes=SLOT_INTERVAL_MINUTES)

    return slots


def bucket_by_time(day_appointments: Iterable[Appointment]) -> Dict[str, List[Appointment]]:
    """
    Group one day's appointments by slot.

    Every slot is present, possibly with an empty list. Appointments at a
    time that is not a slot do not appear in any bucket.

    Args:
        day_appointments: Appointments of a single day

    Returns:
        Ordered mapping of slot time to appointments in input order
    """
    buckets: Dict[str, List[Appointment]] = {slot: [] for slot in generate_time_slots()}

    for apt in day_appointments:
        if apt.time in buckets:
            buckets[apt.time].append(apt)

    return buckets


def off_grid_appointments(day_appointments: Iterable[Appointment]) -> List[Appointment]:
    """Appointments whose time is not one of the calendar slots."""
    slots = set(generate_time_slots())
    return [apt for apt in day_appointments if apt.time not in slots]


def week_of(value: DateLike) -> List[date]:
    """
    Monday-to-Sunday week containing a date.

    Args:
        value: Date or ISO date string

    Returns:
        Seven dates starting on Monday
    """
    day = as_date(value)
    # Sunday=0..Saturday=6 weekday, shifted so Monday starts the week
    sunday_based = (day.weekday() + 1) % 7
    monday = day - timedelta(days=(sunday_based + 6) % 7)
    return [monday + timedelta(days=i) for i in range(7)]


def is_today(value: DateLike, now: datetime) -> bool:
    """Whether a date is the calendar day of now."""
    return as_date(value) == now.date()


def prev_day(selected: DateLike) -> date:
    """Day before the selected date."""
    return as_date(selected) - timedelta(days=1)


def next_day(selected: DateLike) -> date:
    """Day after the selected date."""
    return as_date(selected) + timedelta(days=1)


def today(now: Optional[datetime] = None) -> date:
    """Current calendar day."""
    return (now or datetime.now()).date()


def day_label(value: DateLike) -> str:
    """Short weekday label, e.g. Пн."""
    return DAY_LABELS[as_date(value).weekday()]


def format_full_date(value: DateLike) -> str:
    """Heading for a selected day, e.g. "Среда, 10 января 2024"."""
    day = as_date(value)
    return f"{DAY_NAMES[day.weekday()]}, {day.day} {MONTH_NAMES_GENITIVE[day.month - 1]} {day.year}"


def week_strip(selected: DateLike, now: datetime) -> List[Dict[str, Any]]:
    """
    Day picker entries for the week of the selected date.

    Args:
        selected: Selected date
        now: Reference time

    Returns:
        One dict per weekday with date, label, day of month and flags
    """
    selected_day = as_date(selected)
    return [
        {
            'date': day.isoformat(),
            'label': DAY_LABELS[i],
            'day': day.day,
            'selected': day == selected_day,
            'today': day == now.date()
        }
        for i, day in enumerate(week_of(selected_day))
    ]
