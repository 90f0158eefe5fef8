# tests/test_schemas.py
import pytest

from modules.employee_profile.schemas import Employee, EmploymentBlock, normalize_status


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("In-Service", "In-Service"),
        ("InService", "In-Service"),
        ("in service", "In-Service"),
        ("RETIRED", "Retired"),
        ("osd", "OSD"),
        ("Removed", "Remove"),
        (" Promoted ", "Promoted"),
        (None, ""),
    ],
)
def test_normalize_status(raw, expected):
    assert normalize_status(raw) == expected


def test_block_accepts_backend_shapes():
    block = EmploymentBlock.model_validate({
        "id": 5,
        "status": "inservice",
        "fromDate": "2010-01-01",
        "isCurrentlyWorking": "1",
        "bps": 17,
        "leaves": None,
        "disciplinaryActions": [{"inquiryStatus": "decided", "decision": "Censure"}],
    })
    assert block.id == "5"
    assert block.status == "In-Service"
    assert block.is_currently_working is True
    assert block.bps == "17"
    assert block.leaves == []
    assert block.disciplinary_actions[0].effective_inquiry_status == "Decided"


def test_unknown_inquiry_status_falls_back_to_decision():
    block = EmploymentBlock.model_validate({
        "id": "1",
        "disciplinaryActions": [{"inquiryStatus": "???", "decision": "Dismissed"}],
    })
    assert block.disciplinary_actions[0].inquiry_status is None
    assert block.disciplinary_actions[0].effective_inquiry_status == "Decided"


def test_employee_null_collections(employee_payload):
    employee = Employee.model_validate(employee_payload)
    assert employee.fbr_records == []
    assert len(employee.employment_history) == 3
    assert employee.employment_history[0].disciplinary_actions == []
