# tests/test_services.py
import logging

from modules.employee_profile import services
from modules.employee_profile.schemas import ComplianceResult, Employee, MasterData


def _view(employee_payload, master_payload, today, mode):
    return services.build_profile_view(
        Employee.model_validate(employee_payload),
        view_mode=mode,
        master=MasterData.model_validate(master_payload),
        today=today,
    )


def test_full_profile(employee_payload, master_payload, today):
    view = _view(employee_payload, master_payload, today, "all")

    assert view.title == "Complete Profile"
    assert view.personal.full_name == "Ayesha Khan"
    assert [e.block_id for e in view.timeline] == ["h3", "h2", "h1"]
    assert view.timeline[0].label == "01/01/2012 — Present"
    assert view.timeline[0].designation == "Senior Clerk"
    assert view.timeline[1].category.value == "exited"
    assert view.timeline[1].label == "01/01/2010 — 31/12/2011"
    assert view.timeline[2].leaves[0].days == 3
    # 1826 + 4764 days, broken down with average year/month lengths
    assert view.total_in_service_duration == "18 Years, 16 Days"
    assert view.financial.acrs[0].year == 2021
    assert view.documents[0].url.endswith("serve_document.php?id=7")
    assert view.documents_empty_message is None
    assert view.compliance is None


def test_service_only_profile_skips_other_sections(employee_payload, master_payload, today):
    view = _view(employee_payload, master_payload, today, "service")

    assert view.sections.service and not view.sections.personal
    assert view.personal is None
    assert view.financial is None
    assert view.documents is None
    assert len(view.timeline) == 3


def test_unknown_mode_shows_header_only(employee_payload, master_payload, today):
    view = _view(employee_payload, master_payload, today, "weird")

    assert view.title == "Profile View"
    assert view.timeline == []
    assert view.total_in_service_duration is None
    assert view.current_posting.designation == "Junior Clerk"


def test_default_mode_comes_from_settings(employee_payload, today):
    view = services.build_profile_view(Employee.model_validate(employee_payload), today=today)
    assert view.view_mode == "all"


def test_empty_documents_message(employee_payload, today):
    employee_payload["documents"] = []
    view = services.build_profile_view(Employee.model_validate(employee_payload), view_mode="documents", today=today)
    assert view.documents == []
    assert view.documents_empty_message == "No documents uploaded yet."


def test_compliance_banner(employee_payload, today):
    view = services.build_profile_view(
        Employee.model_validate(employee_payload),
        view_mode="personal",
        compliance=ComplianceResult.model_validate({"missingYearsFBR": [2022]}),
        today=today,
    )
    assert view.compliance.missing_fbr == ["2022"]
    assert "(01/01/2005)" in view.compliance.message


def test_newest_first_history_logs_warning(make_block, today, caplog):
    employee = Employee(
        id="9",
        employment_history=[make_block(id="new", fromDate="2015-01-01"), make_block(id="old", fromDate="2010-01-01")],
    )
    with caplog.at_level(logging.WARNING, logger="modules.employee_profile.services"):
        out = services.get_timeline(employee, today=today)

    assert len(out.entries) == 2
    assert "new" in caplog.text
