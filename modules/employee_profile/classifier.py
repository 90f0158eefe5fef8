# modules/employee_profile/classifier.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from modules.employee_profile.dates import (
    NOT_AVAILABLE,
    DateKind,
    DateValue,
    calculate_detailed_duration,
    day_before,
    first_set,
    format_display_date,
    parse_date_value,
)
from modules.employee_profile.schemas import (
    REJOINABLE_STATUSES,
    TERMINAL_STATUSES,
    EmploymentBlock,
    EmploymentStatus,
)

PRESENT = "Present"
CURRENT_POSTING_BADGE = "Current Posting"


@dataclass(frozen=True)
class BlockClassification:
    is_current: bool
    is_terminal: bool
    is_exit_status: bool
    is_rejoin_case: bool
    is_open: bool
    start: DateValue
    end: DateValue
    start_display: str
    end_display: str
    label: str
    duration: str
    badge: str
    badge_tone: str
    rejoin_note: Optional[str] = None


def is_terminal(block: EmploymentBlock) -> bool:
    return block.status in TERMINAL_STATUSES


def is_exit_status(block: EmploymentBlock) -> bool:
    return block.status in REJOINABLE_STATUSES


def is_current_posting(block: EmploymentBlock) -> bool:
    return block.is_currently_working and block.status == EmploymentStatus.IN_SERVICE.value


def is_open_span(block: EmploymentBlock) -> bool:
    # the currently-working flag wins over any toDate on the block
    if block.is_currently_working:
        return True
    return is_exit_status(block) and not parse_date_value(block.to_date).is_set and not is_terminal(block)


def resolve_start(block: EmploymentBlock) -> DateValue:
    start = first_set(block.status_date, block.from_date, block.to_date)
    if is_open_span(block):
        status_date = parse_date_value(block.status_date)
        from_date = parse_date_value(block.from_date)
        if is_exit_status(block) and status_date.is_set:
            start = status_date
        elif from_date.is_set:
            start = from_date
    return start


def resolve_end(block: EmploymentBlock, next_block: Optional[EmploymentBlock] = None) -> DateValue:
    if is_open_span(block):
        return DateValue.open_ended()
    end = first_set(block.to_date, block.status_date)
    if end.is_set:
        return end
    if next_block is not None:
        return day_before(next_block.from_date)
    return DateValue.unset()


def _display(value: DateValue) -> str:
    if value.kind is DateKind.OPEN:
        return PRESENT
    if not value.is_set:
        return NOT_AVAILABLE
    return format_display_date(value)


def _label(block: EmploymentBlock, start_display: str, end: DateValue, end_display: str) -> str:
    if block.status == EmploymentStatus.RETIRED.value:
        return f"Retired on {format_display_date(block.status_date)}"
    if block.status == EmploymentStatus.DECEASED.value:
        return f"Deceased on {format_display_date(block.status_date)}"

    span = f"{start_display} — {end_display}"
    if block.status != EmploymentStatus.IN_SERVICE.value and parse_date_value(block.status_date).is_set:
        if not block.is_currently_working and end.is_set and not end.is_open:
            return span
        return f"Since {format_display_date(block.status_date)}"
    return span


def classify(
    block: EmploymentBlock,
    next_block: Optional[EmploymentBlock] = None,
    today: Optional[date] = None,
) -> BlockClassification:
    """
    Resolve one block against its storage-order successor.

    ``next_block`` only matters for a closed block with neither toDate nor
    statusDate: its end becomes the day before the successor's fromDate.
    """
    current = is_current_posting(block)
    terminal = is_terminal(block)
    exit_status = is_exit_status(block)
    rejoin_case = exit_status and not block.is_currently_working and parse_date_value(block.status_date).is_set

    start = resolve_start(block)
    end = resolve_end(block, next_block)
    start_display = _display(start)
    end_display = _display(end)

    if terminal and parse_date_value(block.status_date).is_set:
        duration = calculate_detailed_duration(block.status_date, None, today)
    else:
        duration = calculate_detailed_duration(start, end, today)

    rejoin_note = None
    if rejoin_case and next_block is not None:
        rejoin_note = f"{block.status} from: {start_display} to {end_display}"

    return BlockClassification(
        is_current=current,
        is_terminal=terminal,
        is_exit_status=exit_status,
        is_rejoin_case=rejoin_case,
        is_open=end.is_open,
        start=start,
        end=end,
        start_display=start_display,
        end_display=end_display,
        label=_label(block, start_display, end, end_display),
        duration=duration,
        badge=CURRENT_POSTING_BADGE if current else (block.status or NOT_AVAILABLE),
        badge_tone="current" if current else ("terminal" if terminal else "neutral"),
        rejoin_note=rejoin_note,
    )


def classify_block(
    history: Sequence[EmploymentBlock],
    index: int,
    today: Optional[date] = None,
) -> BlockClassification:
    next_block = history[index + 1] if index + 1 < len(history) else None
    return classify(history[index], next_block, today)
