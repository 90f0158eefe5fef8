# modules/employee_profile/dates.py
from __future__ import annotations

import calendar
import enum
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Tuple, Union

from modules.employee_profile.schemas import EmploymentBlock, EmploymentStatus

EMPTY_DATE = "0000-00-00"
NOT_AVAILABLE = "N/A"
INVALID_DATE = "Invalid Date"
ZERO_DURATION = "0 Days"

# average lengths used only when converting a summed day count
DAYS_PER_YEAR = 365.25
DAYS_PER_MONTH = 30.4375

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ].*)?$")


# ---------- Date values ----------
class DateKind(str, enum.Enum):
    UNSET    = "unset"
    OPEN     = "open"       # no end yet, shown as "Present"
    CONCRETE = "concrete"
    INVALID  = "invalid"    # set, but not a date we can read


@dataclass(frozen=True)
class DateValue:
    kind: DateKind
    value: Optional[date] = None
    raw: str = ""

    @classmethod
    def unset(cls) -> "DateValue":
        return cls(DateKind.UNSET)

    @classmethod
    def open_ended(cls) -> "DateValue":
        return cls(DateKind.OPEN)

    @classmethod
    def concrete(cls, d: date) -> "DateValue":
        return cls(DateKind.CONCRETE, d, d.isoformat())

    @property
    def is_set(self) -> bool:
        return self.kind is not DateKind.UNSET

    @property
    def is_open(self) -> bool:
        return self.kind is DateKind.OPEN

    @property
    def is_concrete(self) -> bool:
        return self.kind is DateKind.CONCRETE

    def iso(self) -> Optional[str]:
        return self.value.isoformat() if self.is_concrete else None


RawDate = Union[str, date, DateValue, None]


def parse_date_value(raw: RawDate) -> DateValue:
    """
    Read a raw backend date into a DateValue.

    None, "" and "0000-00-00" are unset. Strings must start with YYYY-MM-DD;
    a trailing time part is ignored. Anything else that is set but unreadable
    comes back as INVALID with the input text kept in ``raw``.
    """
    if isinstance(raw, DateValue):
        return raw
    if raw is None:
        return DateValue.unset()
    if isinstance(raw, datetime):
        return DateValue.concrete(raw.date())
    if isinstance(raw, date):
        return DateValue.concrete(raw)

    text = str(raw).strip()
    if not text or text.startswith(EMPTY_DATE):
        return DateValue.unset()
    m = _ISO_DATE_RE.match(text)
    if not m:
        return DateValue(DateKind.INVALID, raw=str(raw))
    try:
        return DateValue.concrete(date(int(m.group(1)), int(m.group(2)), int(m.group(3))))
    except ValueError:
        return DateValue(DateKind.INVALID, raw=str(raw))


def is_set(raw: RawDate) -> bool:
    return parse_date_value(raw).is_set


def first_set(*candidates: RawDate) -> DateValue:
    for c in candidates:
        v = parse_date_value(c)
        if v.is_set:
            return v
    return DateValue.unset()


def day_before(raw: RawDate) -> DateValue:
    v = parse_date_value(raw)
    if not v.is_concrete:
        return DateValue.unset()
    try:
        return DateValue.concrete(v.value - timedelta(days=1))
    except OverflowError:
        return DateValue.unset()


# ---------- Formatting ----------
def format_display_date(raw: RawDate) -> str:
    """DD/MM/YYYY, "N/A" when unset, the raw text back when it is not a date."""
    v = parse_date_value(raw)
    if v.kind is DateKind.UNSET:
        return NOT_AVAILABLE
    if v.kind is DateKind.OPEN:
        return "Present"
    if v.kind is DateKind.INVALID:
        return v.raw
    d = v.value
    return f"{d.day:02d}/{d.month:02d}/{d.year}"


def format_duration_parts(years: int, months: int, days: int) -> str:
    parts = []
    for n, unit in ((years, "Year"), (months, "Month"), (days, "Day")):
        if n > 0:
            parts.append(f"{n} {unit}{'s' if n > 1 else ''}")
    return ", ".join(parts) if parts else ZERO_DURATION


def format_file_size(size: Optional[int]) -> str:
    if size is None:
        return NOT_AVAILABLE
    if size < 1024:
        return f"{size} B"
    kb = size / 1024
    if kb < 1024:
        return f"{kb:.1f} KB"
    mb = kb / 1024
    if mb < 1024:
        return f"{mb:.1f} MB"
    return f"{mb / 1024:.1f} GB"


# ---------- Single interval (calendar exact) ----------
def calendar_difference(start: date, end: date) -> Tuple[int, int, int]:
    """
    Inclusive years/months/days between two dates.

    Both endpoints count, so the day component starts one higher than the
    plain day difference. A negative day count borrows the length of the
    month before ``end``'s month; a negative month count borrows a year.
    """
    if end < start:
        return 0, 0, 0

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day + 1

    if days < 0:
        months -= 1
        prev_year, prev_month = (end.year, end.month - 1) if end.month > 1 else (end.year - 1, 12)
        days += calendar.monthrange(prev_year, prev_month)[1]
    if months < 0:
        years -= 1
        months += 12
    return years, months, days


def calculate_detailed_duration(
    start_raw: RawDate,
    end_raw: RawDate = None,
    today: Optional[date] = None,
) -> str:
    """
    Elapsed time from ``start_raw`` to ``end_raw`` as "3 Years, 2 Months, 10 Days".

    A missing or open end is measured to ``today`` (local date when omitted).
    Never raises: unset start gives "N/A", an unreadable endpoint gives
    "Invalid Date" and a reversed interval gives "0 Days".
    """
    start = parse_date_value(start_raw)
    if not start.is_set:
        return NOT_AVAILABLE

    end = parse_date_value(end_raw)
    if end.kind in (DateKind.UNSET, DateKind.OPEN):
        end = DateValue.concrete(today or date.today())

    if not (start.is_concrete and end.is_concrete):
        return INVALID_DATE
    if end.value < start.value:
        return ZERO_DURATION

    return format_duration_parts(*calendar_difference(start.value, end.value))


# ---------- Many intervals (day sum, approximate breakdown) ----------
def inclusive_days(start: date, end: date) -> int:
    if end < start:
        return 0
    return (end - start).days + 1


def split_day_total(total_days: int) -> Tuple[int, int, int]:
    if total_days <= 0:
        return 0, 0, 0
    years = math.floor(total_days / DAYS_PER_YEAR)
    remaining = total_days - years * DAYS_PER_YEAR
    months = math.floor(remaining / DAYS_PER_MONTH)
    days = math.floor(remaining - months * DAYS_PER_MONTH + 0.5)

    if days >= 30:
        months += 1
        days -= 30
    if months >= 12:
        years += 1
        months -= 12
    return years, months, days


def in_service_days(block: EmploymentBlock, today: date) -> int:
    """Inclusive day count of one In-Service block; 0 for other statuses or unusable dates."""
    if block.status != EmploymentStatus.IN_SERVICE.value:
        return 0

    start = first_set(block.from_date, block.status_date)
    if not start.is_concrete:
        return 0

    end = DateValue.concrete(today)
    if not block.is_currently_working:
        to_date = parse_date_value(block.to_date)
        if to_date.kind is DateKind.INVALID:
            return 0
        if to_date.is_concrete:
            end = to_date

    return inclusive_days(start.value, end.value)


def calculate_total_in_service_duration(
    blocks: Optional[Iterable[EmploymentBlock]] = None,
    today: Optional[date] = None,
) -> str:
    """
    Total service across every In-Service block, gaps excluded.

    Day counts are summed per block first, then broken down with average
    year and month lengths, so the result is deliberately not the same as
    ``calculate_detailed_duration`` over any single interval.
    """
    today = today or date.today()
    total = sum(in_service_days(b, today) for b in (blocks or []))
    return format_duration_parts(*split_day_total(total))
