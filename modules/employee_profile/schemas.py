# modules/employee_profile/schemas.py
from __future__ import annotations

import enum
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Backend JSON is camelCase; python code uses snake_case names.
_CAMEL = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    coerce_numbers_to_str=True,
    extra="ignore",
)


class EmploymentStatus(str, enum.Enum):
    IN_SERVICE = "In-Service"
    RETIRED    = "Retired"
    RESIGNED   = "Resigned"
    DECEASED   = "Deceased"
    TERMINATED = "Terminated"
    SUSPENDED  = "Suspended"
    OSD        = "OSD"
    DEPUTATION = "Deputation"
    ABSENT     = "Absent"
    REMOVE     = "Remove"


# plain str values: str-enum members hash by name, not by value
TERMINAL_STATUSES = frozenset({
    EmploymentStatus.RETIRED.value,
    EmploymentStatus.DECEASED.value,
})
REJOINABLE_STATUSES = frozenset({
    EmploymentStatus.RESIGNED.value,
    EmploymentStatus.TERMINATED.value,
    EmploymentStatus.OSD.value,
    EmploymentStatus.DEPUTATION.value,
    EmploymentStatus.SUSPENDED.value,
    EmploymentStatus.ABSENT.value,
    EmploymentStatus.REMOVE.value,
})

_STATUS_ALIASES = {
    "inservice": EmploymentStatus.IN_SERVICE,
    "removed":   EmploymentStatus.REMOVE,
}


def normalize_status(value) -> str:
    """Canonical status text; unknown values come back stripped but otherwise untouched."""
    if value is None:
        return ""
    if isinstance(value, EmploymentStatus):
        return value.value
    raw = str(value).strip()
    key = re.sub(r"[\s_\-]+", "", raw).lower()
    for status in EmploymentStatus:
        if re.sub(r"[\s_\-]+", "", status.value).lower() == key:
            return status.value
    if key in _STATUS_ALIASES:
        return _STATUS_ALIASES[key].value
    return raw


# ---------- Employment ----------
class Leave(BaseModel):
    model_config = _CAMEL

    id: Optional[str] = None
    type: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    days: Optional[float] = None
    remarks: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _none_text(cls, v):
        return "" if v is None else v


class InquiryStatus(str, enum.Enum):
    PENDING = "Pending"
    DECIDED = "Decided"


class DisciplinaryAction(BaseModel):
    model_config = _CAMEL

    id: Optional[str] = None
    complaint_inquiry: Optional[str] = None
    allegation: Optional[str] = None
    inquiry_status: Optional[InquiryStatus] = None
    court_name: Optional[str] = None
    hearing_date: Optional[str] = None
    decision_date: Optional[str] = None
    decision: Optional[str] = None
    action_date: Optional[str] = None
    remarks: Optional[str] = None

    @field_validator("inquiry_status", mode="before")
    @classmethod
    def _inquiry_status(cls, v):
        if v is None or isinstance(v, InquiryStatus):
            return v
        s = str(v).strip().capitalize()
        return s if s in (InquiryStatus.PENDING.value, InquiryStatus.DECIDED.value) else None

    @property
    def effective_inquiry_status(self) -> str:
        if self.inquiry_status is not None:
            return self.inquiry_status.value
        return InquiryStatus.DECIDED.value if self.decision else InquiryStatus.PENDING.value


class EmploymentBlock(BaseModel):
    model_config = _CAMEL

    id: str
    status: str = ""
    status_date: Optional[str] = None
    status_remarks: Optional[str] = None
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    is_currently_working: bool = False

    designation_id: str = ""
    bps: Optional[str] = None
    hq_id: str = ""
    tehsil_id: str = ""
    posting_category_id: str = ""
    unit_id: str = ""
    posting_place_title: str = ""
    order_number: Optional[str] = None
    order_date: Optional[str] = None

    leaves: List[Leave] = Field(default_factory=list)
    disciplinary_actions: List[DisciplinaryAction] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v):
        return normalize_status(v)

    @field_validator(
        "id", "designation_id", "hq_id", "tehsil_id", "posting_category_id", "unit_id", "posting_place_title",
        mode="before",
    )
    @classmethod
    def _none_text(cls, v):
        # nullable foreign keys and titles render blank
        return "" if v is None else v

    @field_validator("is_currently_working", mode="before")
    @classmethod
    def _flag(cls, v):
        # tinyint columns arrive as 0/1 or "0"/"1"
        if v is None or v == "":
            return False
        if isinstance(v, str) and v.strip().isdigit():
            return int(v) != 0
        return v

    @field_validator("leaves", "disciplinary_actions", mode="before")
    @classmethod
    def _none_list(cls, v):
        return v or []


# ---------- Financial / compliance sub-records ----------
class ACR(BaseModel):
    model_config = _CAMEL

    id: Optional[str] = None
    year: Optional[int] = None
    period_from: Optional[str] = None
    period_to: Optional[str] = None
    score: Optional[str] = None
    status: Optional[str] = None
    remarks: Optional[str] = None


class AssetDeclaration(BaseModel):
    model_config = _CAMEL

    id: Optional[str] = None
    financial_year: str = ""
    submission_date: Optional[str] = None
    status: Optional[str] = None
    remarks: Optional[str] = None

    @field_validator("financial_year", mode="before")
    @classmethod
    def _none_text(cls, v):
        return "" if v is None else v


class GPFundRecord(BaseModel):
    model_config = _CAMEL

    id: Optional[str] = None
    type: str = ""
    amount: float = 0
    date: Optional[str] = None
    description: str = ""
    status: Optional[str] = None

    @field_validator("type", "description", mode="before")
    @classmethod
    def _none_text(cls, v):
        return "" if v is None else v


class GPFundSummary(BaseModel):
    model_config = _CAMEL

    total_availed: float = 0
    times_availed: int = 0
    current_balance: float = 0
    monthly_deduction: float = 0
    last_updated: Optional[str] = None


class FBRRecord(BaseModel):
    model_config = _CAMEL

    id: Optional[str] = None
    tax_year: Optional[int] = None
    filer_status: str = ""
    submission_date: Optional[str] = None
    tax_paid: Optional[float] = None
    remarks: Optional[str] = None

    @field_validator("filer_status", mode="before")
    @classmethod
    def _none_text(cls, v):
        return "" if v is None else v


class EmployeeDocument(BaseModel):
    model_config = _CAMEL

    id: Optional[str] = None
    document_type: Optional[str] = None
    file_name: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    file_path: Optional[str] = None
    description: Optional[str] = None
    uploaded_at: Optional[str] = None
    status: Optional[str] = None


# ---------- Employee (aggregate root) ----------
class Employee(BaseModel):
    model_config = _CAMEL

    id: str
    full_name: str = ""
    father_name: str = ""
    cnic: str = ""
    dob: Optional[str] = None
    date_of_appointment: Optional[str] = None
    gender: Optional[str] = None
    martial_status: Optional[str] = None
    religion: Optional[str] = None
    domicile: Optional[str] = None
    contact_primary: Optional[str] = None
    contact_secondary: Optional[str] = None
    address_permanent: Optional[str] = None
    address_temporary: Optional[str] = None
    qualification_id: Optional[str] = None
    degree_title: Optional[str] = None
    photo_url: Optional[str] = None
    status: Optional[str] = None

    employment_history: List[EmploymentBlock] = Field(default_factory=list)
    acrs: List[ACR] = Field(default_factory=list)
    assets: List[AssetDeclaration] = Field(default_factory=list)
    gp_fund_history: List[GPFundRecord] = Field(default_factory=list)
    gp_fund_summary: Optional[GPFundSummary] = None
    fbr_records: List[FBRRecord] = Field(default_factory=list)
    documents: List[EmployeeDocument] = Field(default_factory=list)

    @field_validator("full_name", "father_name", "cnic", mode="before")
    @classmethod
    def _none_text(cls, v):
        return "" if v is None else v

    @field_validator(
        "employment_history", "acrs", "assets", "gp_fund_history", "fbr_records", "documents",
        mode="before",
    )
    @classmethod
    def _none_list(cls, v):
        return v or []


# ---------- Master data (id -> title lookups) ----------
class TitledItem(BaseModel):
    model_config = _CAMEL

    id: str
    title: str = ""


class Qualification(BaseModel):
    model_config = _CAMEL

    id: str
    degree_title: str = ""


class MasterData(BaseModel):
    model_config = _CAMEL

    designations: List[TitledItem] = Field(default_factory=list)
    tehsils: List[TitledItem] = Field(default_factory=list)
    headquarters: List[TitledItem] = Field(default_factory=list)
    units: List[TitledItem] = Field(default_factory=list)
    qualifications: List[Qualification] = Field(default_factory=list)


class ComplianceResult(BaseModel):
    model_config = _CAMEL

    missing_years_acr: List[int] = Field(default_factory=list, alias="missingYearsACR")
    missing_years_assets: List[str] = Field(default_factory=list, alias="missingYearsAssets")
    missing_years_fbr: List[int] = Field(default_factory=list, alias="missingYearsFBR")

    @field_validator("missing_years_acr", "missing_years_assets", "missing_years_fbr", mode="before")
    @classmethod
    def _none_list(cls, v):
        return v or []


# ---------- View-state (output) ----------
class TimelineCategory(str, enum.Enum):
    CURRENT  = "current"
    TERMINAL = "terminal"
    EXITED   = "exited"   # most recent exit not followed by a rejoin
    OTHER    = "other"


class TimelineEntry(BaseModel):
    model_config = _CAMEL

    block_id: str
    category: TimelineCategory
    status: str
    is_active_marker: bool = False
    is_open: bool = False
    is_terminal: bool = False
    is_exit_status: bool = False
    is_rejoin_case: bool = False

    start_date: Optional[str] = None   # ISO, None when unset
    end_date: Optional[str] = None     # ISO, None when unset or open
    start_display: str = "N/A"
    end_display: str = "N/A"
    label: str = ""
    duration: str = "N/A"
    badge: str = ""
    badge_tone: str = "neutral"
    rejoin_note: Optional[str] = None

    designation: str = ""
    bps: Optional[str] = None
    unit: str = ""
    posting_place_title: str = ""
    tehsil: str = ""
    headquarters: str = ""
    order_number: Optional[str] = None

    leaves: List[Leave] = Field(default_factory=list)
    disciplinary_actions: List[DisciplinaryAction] = Field(default_factory=list)
    disciplinary_empty_message: Optional[str] = None


class TimelineOut(BaseModel):
    model_config = _CAMEL

    entries: List[TimelineEntry] = Field(default_factory=list)
    total_in_service_duration: str = "0 Days"


class ViewSections(BaseModel):
    model_config = _CAMEL

    personal: bool = False
    service: bool = False
    financial: bool = False
    documents: bool = False


class PersonalSection(BaseModel):
    model_config = _CAMEL

    full_name: str = ""
    father_name: str = ""
    cnic: str = ""
    dob: str = "N/A"
    date_of_appointment: str = "N/A"
    gender: str = "N/A"
    religion: str = "N/A"
    domicile: str = "N/A"
    contact_primary: str = "N/A"
    contact_secondary: str = "N/A"
    address_permanent: str = "N/A"
    address_temporary: str = "N/A"
    qualification: str = "Unknown"


class CurrentPosting(BaseModel):
    model_config = _CAMEL

    designation: str = ""
    bps: str = "N/A"
    unit: str = ""
    posting_place_title: str = "N/A"
    tehsil: str = ""


class ComplianceBanner(BaseModel):
    model_config = _CAMEL

    title: str = "Administrative Compliance Alerts"
    message: str = ""
    missing_acr: List[str] = Field(default_factory=list)
    missing_assets: List[str] = Field(default_factory=list)
    missing_fbr: List[str] = Field(default_factory=list)


class DocumentEntry(BaseModel):
    model_config = _CAMEL

    id: Optional[str] = None
    name: str = "Document"
    type: str = "Unknown"
    uploaded: str = "N/A"
    size: str = "N/A"
    preview_kind: str = "other"   # pdf | image | other
    url: str = ""
    description: Optional[str] = None


class FinancialSection(BaseModel):
    model_config = _CAMEL

    acrs: List[ACR] = Field(default_factory=list)
    acrs_empty_message: Optional[str] = None
    assets: List[AssetDeclaration] = Field(default_factory=list)
    assets_empty_message: Optional[str] = None
    fbr_records: List[FBRRecord] = Field(default_factory=list)
    fbr_empty_message: Optional[str] = None
    gp_fund_summary: GPFundSummary = Field(default_factory=GPFundSummary)
    gp_fund_history: List[GPFundRecord] = Field(default_factory=list)


class ProfileView(BaseModel):
    model_config = _CAMEL

    employee_id: str
    full_name: str = ""
    view_mode: str
    title: str
    sections: ViewSections
    personal: Optional[PersonalSection] = None
    current_posting: Optional[CurrentPosting] = None
    timeline: List[TimelineEntry] = Field(default_factory=list)
    total_in_service_duration: Optional[str] = None
    financial: Optional[FinancialSection] = None
    documents: Optional[List[DocumentEntry]] = None
    documents_empty_message: Optional[str] = None
    compliance: Optional[ComplianceBanner] = None


# ---------- Requests ----------
class ProfileRequest(BaseModel):
    model_config = _CAMEL

    employee: Employee
    compliance: Optional[ComplianceResult] = None
    master_data: Optional[MasterData] = None


class DurationRequest(BaseModel):
    model_config = _CAMEL

    start: Optional[str] = None
    end: Optional[str] = None


class DurationOut(BaseModel):
    model_config = _CAMEL

    duration: str
