# modules/employee_profile/services.py
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from config.settings import settings
from modules.employee_profile import presentation, schemas
from modules.employee_profile.dates import calculate_total_in_service_duration
from modules.employee_profile.timeline import build_timeline, build_timeline_out, check_chronology

logger = logging.getLogger(__name__)

NO_DOCUMENTS = "No documents uploaded yet."


def _warn_chronology(employee: schemas.Employee) -> None:
    bad = check_chronology(employee.employment_history)
    if bad:
        logger.warning(
            "Employee %s: employment history not stored oldest-first around block(s) %s; "
            "inferred end dates may be reversed",
            employee.id,
            ", ".join(employee.employment_history[i].id for i in bad),
        )


def get_timeline(
    employee: schemas.Employee,
    today: Optional[date] = None,
    master: Optional[schemas.MasterData] = None,
) -> schemas.TimelineOut:
    _warn_chronology(employee)
    return build_timeline_out(employee.employment_history, today, master)


def build_profile_view(
    employee: schemas.Employee,
    *,
    view_mode: Optional[str] = None,
    compliance: Optional[schemas.ComplianceResult] = None,
    master: Optional[schemas.MasterData] = None,
    today: Optional[date] = None,
    document_api_base: Optional[str] = None,
) -> schemas.ProfileView:
    """
    Derived view-state for one employee snapshot.

    Only the sections switched on by ``view_mode`` are computed; an unknown
    mode yields the header, compliance banner and nothing else.
    """
    mode = presentation.normalize_view_mode(view_mode, settings.DEFAULT_VIEW_MODE)
    sections = presentation.view_sections(mode)
    lookup = presentation.MasterDataLookup(master)

    view = schemas.ProfileView(
        employee_id=employee.id,
        full_name=employee.full_name,
        view_mode=mode,
        title=presentation.view_title(mode),
        sections=sections,
        current_posting=presentation.build_current_posting(employee, lookup),
        compliance=presentation.build_compliance_banner(compliance, employee.date_of_appointment),
    )

    if sections.personal:
        view.personal = presentation.build_personal_section(employee, lookup)

    if sections.service:
        _warn_chronology(employee)
        view.timeline = build_timeline(employee.employment_history, today, master)
        view.total_in_service_duration = calculate_total_in_service_duration(
            employee.employment_history, today
        )
        logger.debug("Employee %s: %d timeline entries", employee.id, len(view.timeline))

    if sections.financial:
        view.financial = presentation.build_financial_section(employee)

    if sections.documents:
        view.documents = presentation.build_document_entries(
            employee.documents, document_api_base or settings.DOCUMENT_API_BASE
        )
        view.documents_empty_message = None if view.documents else NO_DOCUMENTS

    return view
