# modules/employee_profile/timeline.py
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from modules.employee_profile import schemas
from modules.employee_profile.classifier import (
    BlockClassification,
    classify_block,
    is_current_posting,
    is_exit_status,
    is_terminal,
)
from modules.employee_profile.dates import (
    NOT_AVAILABLE,
    DateValue,
    calculate_total_in_service_duration,
    parse_date_value,
)
from modules.employee_profile.presentation import MasterDataLookup

logger = logging.getLogger(__name__)

Category = schemas.TimelineCategory

_GROUP_ORDER = (Category.CURRENT, Category.TERMINAL, Category.EXITED, Category.OTHER)

NO_DISCIPLINARY_RECORDS = "No disciplinary records found"


# ---------- Reordering ----------
def _promoted_exit_index(history: Sequence[schemas.EmploymentBlock]) -> Optional[int]:
    """First exit-status block (list order) that is not currently working; only one is promoted."""
    for i, block in enumerate(history):
        if is_exit_status(block) and not block.is_currently_working:
            return i
    return None


def categorize_history(history: Sequence[schemas.EmploymentBlock]) -> List[Category]:
    promoted = _promoted_exit_index(history)
    out = []
    for i, block in enumerate(history):
        if is_current_posting(block):
            out.append(Category.CURRENT)
        elif is_terminal(block):
            out.append(Category.TERMINAL)
        elif i == promoted:
            out.append(Category.EXITED)
        else:
            out.append(Category.OTHER)
    return out


def display_order(history: Sequence[schemas.EmploymentBlock]) -> List[Tuple[Category, int]]:
    """(category, stored index) pairs in render order; stable within each group."""
    groups: Dict[Category, List[int]] = {c: [] for c in _GROUP_ORDER}
    for i, category in enumerate(categorize_history(history)):
        groups[category].append(i)
    return [(c, i) for c in _GROUP_ORDER for i in groups[c]]


def reorder_history(history: Sequence[schemas.EmploymentBlock]) -> List[schemas.EmploymentBlock]:
    return [history[i] for _, i in display_order(history)]


# ---------- Chronology ----------
def check_chronology(history: Sequence[schemas.EmploymentBlock]) -> List[int]:
    """
    Indexes of blocks with no toDate and no statusDate whose successor's
    fromDate is on or before their own, so the inferred end (day before the
    successor's fromDate) would fall before the start. The inference assumes
    oldest-first storage; a history stored newest-first trips this for every
    such block.
    """
    bad = []
    for i in range(len(history) - 1):
        block, nxt = history[i], history[i + 1]
        if parse_date_value(block.to_date).is_set or parse_date_value(block.status_date).is_set:
            continue
        start = parse_date_value(block.from_date)
        boundary = parse_date_value(nxt.from_date)
        if start.is_concrete and boundary.is_concrete and boundary.value <= start.value:
            bad.append(i)
    return bad


# ---------- Timeline ----------
def _fallback(block: schemas.EmploymentBlock) -> BlockClassification:
    return BlockClassification(
        is_current=False,
        is_terminal=False,
        is_exit_status=False,
        is_rejoin_case=False,
        is_open=False,
        start=DateValue.unset(),
        end=DateValue.unset(),
        start_display=NOT_AVAILABLE,
        end_display=NOT_AVAILABLE,
        label=f"{NOT_AVAILABLE} — {NOT_AVAILABLE}",
        duration=NOT_AVAILABLE,
        badge=block.status or NOT_AVAILABLE,
        badge_tone="neutral",
    )


def build_entry(
    block: schemas.EmploymentBlock,
    category: Category,
    info: BlockClassification,
    lookup: MasterDataLookup,
    is_active_marker: bool = False,
) -> schemas.TimelineEntry:
    return schemas.TimelineEntry(
        block_id=block.id,
        category=category,
        status=block.status,
        is_active_marker=is_active_marker,
        is_open=info.is_open,
        is_terminal=info.is_terminal,
        is_exit_status=info.is_exit_status,
        is_rejoin_case=info.is_rejoin_case,
        start_date=info.start.iso(),
        end_date=info.end.iso(),
        start_display=info.start_display,
        end_display=info.end_display,
        label=info.label,
        duration=info.duration,
        badge=info.badge,
        badge_tone=info.badge_tone,
        rejoin_note=info.rejoin_note,
        designation=lookup.designation(block.designation_id),
        bps=block.bps,
        unit=lookup.unit(block.unit_id),
        posting_place_title=block.posting_place_title,
        tehsil=lookup.tehsil(block.tehsil_id),
        headquarters=lookup.headquarters(block.hq_id),
        order_number=block.order_number,
        leaves=block.leaves,
        disciplinary_actions=block.disciplinary_actions,
        disciplinary_empty_message=None if block.disciplinary_actions else NO_DISCIPLINARY_RECORDS,
    )


def build_timeline(
    history: Sequence[schemas.EmploymentBlock],
    today: Optional[date] = None,
    master: Optional[schemas.MasterData] = None,
) -> List[schemas.TimelineEntry]:
    lookup = MasterDataLookup(master)
    entries = []
    for display_idx, (category, index) in enumerate(display_order(history)):
        block = history[index]
        try:
            info = classify_block(history, index, today)
        except Exception as e:
            # one bad block must not take the whole history down
            logger.exception("Could not classify employment block %s: %s", block.id, e)
            info = _fallback(block)
        entries.append(build_entry(block, category, info, lookup, is_active_marker=display_idx == 0))
    return entries


def build_timeline_out(
    history: Sequence[schemas.EmploymentBlock],
    today: Optional[date] = None,
    master: Optional[schemas.MasterData] = None,
) -> schemas.TimelineOut:
    return schemas.TimelineOut(
        entries=build_timeline(history, today, master),
        # totals use stored order, never the display order
        total_in_service_duration=calculate_total_in_service_duration(history, today),
    )
