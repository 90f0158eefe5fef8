# modules/employee_profile/presentation.py
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from modules.employee_profile import schemas
from modules.employee_profile.dates import (
    NOT_AVAILABLE,
    format_display_date,
    format_file_size,
)

# ---------- View modes ----------
_SECTION_MODES: Dict[str, tuple] = {
    "personal":  ("personal",),
    "service":   ("service",),
    "financial": ("financial",),
    "documents": ("documents",),
    "all":       ("personal", "service", "financial", "documents"),
    "complete":  ("personal", "service", "financial", "documents"),
    "profile":   ("personal", "service", "financial", "documents"),
}

_VIEW_TITLES = {
    "personal":  "Personal Information",
    "service":   "Service Record",
    "financial": "Financial & ACRs",
    "documents": "Documents Repository",
    "all":       "Complete Profile",
    "complete":  "Complete Profile",
}


def normalize_view_mode(view_mode: Optional[str], default: str = "all") -> str:
    return (view_mode or default).strip().lower()


def view_sections(view_mode: Optional[str]) -> schemas.ViewSections:
    shown = _SECTION_MODES.get(normalize_view_mode(view_mode), ())
    return schemas.ViewSections(**{name: True for name in shown})


def view_title(view_mode: Optional[str]) -> str:
    return _VIEW_TITLES.get(normalize_view_mode(view_mode), "Profile View")


# ---------- Master data ----------
def resolve_title(
    items: Iterable, item_id: Optional[str], attr: str = "title", default: Optional[str] = None
) -> str:
    item_id = item_id or ""
    for item in items:
        if item.id == item_id and getattr(item, attr, None):
            return getattr(item, attr)
    return item_id if default is None else default


class MasterDataLookup:
    """id -> title resolution; unknown ids fall back to the id itself."""

    def __init__(self, master: Optional[schemas.MasterData] = None):
        self._master = master or schemas.MasterData()

    def designation(self, item_id: Optional[str]) -> str:
        return resolve_title(self._master.designations, item_id)

    def tehsil(self, item_id: Optional[str]) -> str:
        return resolve_title(self._master.tehsils, item_id)

    def headquarters(self, item_id: Optional[str]) -> str:
        return resolve_title(self._master.headquarters, item_id)

    def unit(self, item_id: Optional[str]) -> str:
        return resolve_title(self._master.units, item_id)

    def qualification(self, item_id: Optional[str]) -> str:
        return resolve_title(self._master.qualifications, item_id, "degree_title", default="Unknown")


# ---------- Personal / current posting ----------
def _or_na(value: Optional[str]) -> str:
    return value if value else NOT_AVAILABLE


def build_personal_section(employee: schemas.Employee, lookup: MasterDataLookup) -> schemas.PersonalSection:
    if employee.qualification_id:
        qualification = lookup.qualification(employee.qualification_id)
    else:
        qualification = employee.degree_title or "Unknown"

    return schemas.PersonalSection(
        full_name=employee.full_name,
        father_name=employee.father_name,
        cnic=employee.cnic,
        dob=format_display_date(employee.dob),
        date_of_appointment=format_display_date(employee.date_of_appointment),
        gender=_or_na(employee.gender),
        religion=_or_na(employee.religion),
        domicile=_or_na(employee.domicile),
        contact_primary=_or_na(employee.contact_primary),
        contact_secondary=_or_na(employee.contact_secondary),
        address_permanent=_or_na(employee.address_permanent),
        address_temporary=_or_na(employee.address_temporary),
        qualification=qualification,
    )


def build_current_posting(employee: schemas.Employee, lookup: MasterDataLookup) -> Optional[schemas.CurrentPosting]:
    # header card shows the first stored block, whatever its status
    if not employee.employment_history:
        return None
    block = employee.employment_history[0]
    return schemas.CurrentPosting(
        designation=lookup.designation(block.designation_id),
        bps=_or_na(block.bps),
        unit=lookup.unit(block.unit_id),
        posting_place_title=_or_na(block.posting_place_title),
        tehsil=lookup.tehsil(block.tehsil_id),
    )


# ---------- Compliance ----------
def has_compliance_gaps(result: Optional[schemas.ComplianceResult]) -> bool:
    if result is None:
        return False
    return bool(result.missing_years_acr or result.missing_years_assets or result.missing_years_fbr)


def build_compliance_banner(
    result: Optional[schemas.ComplianceResult],
    appointment_date: Optional[str] = None,
) -> Optional[schemas.ComplianceBanner]:
    if not has_compliance_gaps(result):
        return None
    return schemas.ComplianceBanner(
        message=(
            "This employee has missing mandatory filings based on their Service History "
            f"and Appointment Date ({format_display_date(appointment_date)})."
        ),
        missing_acr=[str(y) for y in result.missing_years_acr],
        missing_assets=[str(y) for y in result.missing_years_assets],
        missing_fbr=[str(y) for y in result.missing_years_fbr],
    )


# ---------- Documents ----------
_IMAGE_RE = re.compile(r"\.(jpg|jpeg|png|gif|bmp|webp)$", re.IGNORECASE)


def document_api_base(api_url: str) -> str:
    """Strip a trailing index.php and slash from the backend API url."""
    return re.sub(r"/index\.php$", "", (api_url or "").strip(), flags=re.IGNORECASE).rstrip("/")


def build_document_url(doc: schemas.EmployeeDocument, api_base: str) -> str:
    base = document_api_base(api_base)
    if doc.id:
        return f"{base}/serve_document.php?id={doc.id}"
    if doc.file_path:
        return f"{base}/{doc.file_path.lstrip('/')}"
    return ""


def preview_kind(doc: schemas.EmployeeDocument) -> str:
    name = (doc.file_name or "").lower()
    kind = (doc.document_type or doc.file_type or "").lower()
    if name.endswith(".pdf") or "pdf" in kind:
        return "pdf"
    if _IMAGE_RE.search(name):
        return "image"
    return "other"


def build_document_entries(
    documents: Iterable[schemas.EmployeeDocument],
    api_base: str,
) -> List[schemas.DocumentEntry]:
    return [
        schemas.DocumentEntry(
            id=doc.id,
            name=doc.file_name or "Document",
            type=doc.document_type or doc.file_type or "Unknown",
            uploaded=format_display_date(doc.uploaded_at),
            size=format_file_size(doc.file_size),
            preview_kind=preview_kind(doc),
            url=build_document_url(doc, api_base),
            description=doc.description,
        )
        for doc in documents
    ]


# ---------- Financial ----------
def build_financial_section(employee: schemas.Employee) -> schemas.FinancialSection:
    acrs = sorted(employee.acrs, key=lambda a: a.year or 0, reverse=True)
    return schemas.FinancialSection(
        acrs=acrs,
        acrs_empty_message=None if acrs else "No ACRs uploaded yet.",
        assets=list(employee.assets),
        assets_empty_message=None if employee.assets else "No assets declared.",
        fbr_records=list(employee.fbr_records),
        fbr_empty_message=None if employee.fbr_records else "No FBR records available.",
        gp_fund_summary=employee.gp_fund_summary or schemas.GPFundSummary(),
        gp_fund_history=list(employee.gp_fund_history),
    )
