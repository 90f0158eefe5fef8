# tests/test_presentation.py
import pytest

from modules.employee_profile import presentation
from modules.employee_profile.schemas import (
    ComplianceResult,
    Employee,
    EmployeeDocument,
    MasterData,
)


@pytest.mark.parametrize(
    "mode, expected",
    [
        ("personal", (True, False, False, False)),
        ("service", (False, True, False, False)),
        ("financial", (False, False, True, False)),
        ("documents", (False, False, False, True)),
        ("all", (True, True, True, True)),
        ("profile", (True, True, True, True)),
        ("Complete", (True, True, True, True)),
        ("bogus", (False, False, False, False)),
    ],
)
def test_view_sections(mode, expected):
    s = presentation.view_sections(mode)
    assert (s.personal, s.service, s.financial, s.documents) == expected


def test_view_title():
    assert presentation.view_title("service") == "Service Record"
    assert presentation.view_title("all") == "Complete Profile"
    assert presentation.view_title("profile") == "Profile View"
    assert presentation.view_title("unknown") == "Profile View"


def test_compliance_banner_only_when_something_is_missing():
    assert presentation.build_compliance_banner(None) is None
    assert presentation.build_compliance_banner(ComplianceResult()) is None

    result = ComplianceResult.model_validate({
        "missingYearsACR": [2019, 2020],
        "missingYearsAssets": ["2021-22"],
        "missingYearsFBR": None,
    })
    banner = presentation.build_compliance_banner(result, "2005-01-01")

    assert banner.title == "Administrative Compliance Alerts"
    assert "(01/01/2005)" in banner.message
    assert banner.missing_acr == ["2019", "2020"]
    assert banner.missing_assets == ["2021-22"]
    assert banner.missing_fbr == []


def test_master_lookup_falls_back():
    lookup = presentation.MasterDataLookup(MasterData.model_validate({
        "units": [{"id": "u1", "title": "Copying Agency"}],
        "qualifications": [{"id": "q1", "degreeTitle": "LLB"}],
    }))
    assert lookup.unit("u1") == "Copying Agency"
    assert lookup.unit("u2") == "u2"
    assert lookup.unit(None) == ""
    assert lookup.qualification("q1") == "LLB"
    assert lookup.qualification("q9") == "Unknown"


def test_resolve_title_matches_id_or_falls_back():
    items = MasterData.model_validate({"designations": [{"id": 3, "title": "Civil Judge"}]}).designations
    assert presentation.resolve_title(items, "3") == "Civil Judge"
    assert presentation.resolve_title(items, "4") == "4"
    assert presentation.resolve_title(items, "4", default="Unknown") == "Unknown"


def test_document_entries():
    docs = [
        EmployeeDocument.model_validate({"id": 7, "fileName": "order.PDF", "fileSize": 2048, "uploadedAt": "2023-02-01"}),
        EmployeeDocument.model_validate({"fileName": "photo.jpg", "filePath": "/uploads/photo.jpg", "documentType": "CNIC"}),
        EmployeeDocument.model_validate({}),
    ]
    entries = presentation.build_document_entries(docs, "http://localhost/judiciary_hrms/api/index.php")

    assert entries[0].url == "http://localhost/judiciary_hrms/api/serve_document.php?id=7"
    assert entries[0].preview_kind == "pdf"
    assert entries[0].size == "2.0 KB"
    assert entries[0].uploaded == "01/02/2023"
    assert entries[0].type == "Unknown"

    assert entries[1].url == "http://localhost/judiciary_hrms/api/uploads/photo.jpg"
    assert entries[1].preview_kind == "image"
    assert entries[1].type == "CNIC"

    assert entries[2].name == "Document"
    assert entries[2].uploaded == "N/A"
    assert entries[2].url == ""


def test_financial_section(employee_payload):
    employee = Employee.model_validate(employee_payload)
    section = presentation.build_financial_section(employee)

    assert [a.year for a in section.acrs] == [2021, 2019]
    assert section.acrs_empty_message is None
    assert section.assets_empty_message == "No assets declared."
    assert section.fbr_empty_message == "No FBR records available."
    assert section.gp_fund_summary.total_availed == 0


def test_personal_section_and_current_posting(employee_payload, master_payload):
    employee = Employee.model_validate(employee_payload)
    lookup = presentation.MasterDataLookup(MasterData.model_validate(master_payload))

    personal = presentation.build_personal_section(employee, lookup)
    assert personal.dob == "02/04/1980"
    assert personal.qualification == "LLB"
    assert personal.religion == "N/A"

    posting = presentation.build_current_posting(employee, lookup)
    assert posting.designation == "Junior Clerk"
    assert posting.bps == "14"
    assert posting.unit == "Copying Agency"
