# tests/conftest.py
from datetime import date
from itertools import count

import pytest

from modules.employee_profile.schemas import EmploymentBlock

TODAY = date(2025, 1, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def make_block():
    ids = count(1)

    def _make(**fields):
        fields.setdefault("id", f"b{next(ids)}")
        fields.setdefault("status", "In-Service")
        return EmploymentBlock.model_validate(fields)

    return _make


@pytest.fixture
def employee_payload():
    """Backend-shaped (camelCase) employee record with a resign/rejoin history."""
    return {
        "id": "42",
        "fullName": "Ayesha Khan",
        "fatherName": "Imran Khan",
        "cnic": "35202-1234567-1",
        "dob": "1980-04-02",
        "dateOfAppointment": "2005-01-01",
        "gender": "Female",
        "contactPrimary": "0300-1234567",
        "addressPermanent": "12 Mall Road, Lahore",
        "qualificationId": "q1",
        "employmentHistory": [
            {
                "id": "h1",
                "status": "In-Service",
                "fromDate": "2005-01-01",
                "toDate": "2009-12-31",
                "isCurrentlyWorking": 0,
                "designationId": "d1",
                "unitId": "u1",
                "tehsilId": "t1",
                "hqId": "hq1",
                "postingPlaceTitle": "Civil Courts",
                "bps": 14,
                "leaves": [
                    {"id": "l1", "type": "Casual Leave", "startDate": "2006-03-01", "endDate": "2006-03-03", "days": 3}
                ],
                "disciplinaryActions": None,
            },
            {
                "id": "h2",
                "status": "Resigned",
                "statusDate": "2010-01-01",
                "toDate": "2011-12-31",
                "isCurrentlyWorking": False,
                "designationId": "d1",
                "unitId": "u1",
                "tehsilId": "t1",
                "hqId": "hq1",
            },
            {
                "id": "h3",
                "status": "In-Service",
                "fromDate": "2012-01-01",
                "isCurrentlyWorking": True,
                "designationId": "d2",
                "unitId": "u2",
                "tehsilId": "t2",
                "hqId": "hq1",
                "postingPlaceTitle": "Sessions Court",
                "orderNumber": "ORD-77",
                "disciplinaryActions": [
                    {
                        "id": "da1",
                        "allegation": "Absence from duty",
                        "decision": "Warning issued",
                        "actionDate": "2015-05-05",
                        "decisionDate": "2015-06-01",
                    }
                ],
            },
        ],
        "acrs": [
            {"id": "a1", "year": 2019, "periodFrom": "2019-01-01", "periodTo": "2019-12-31", "score": "Good", "status": "Countersigned"},
            {"id": "a2", "year": 2021, "periodFrom": "2021-01-01", "periodTo": "2021-12-31", "score": "Outstanding", "status": "Countersigned"},
        ],
        "assets": [],
        "fbrRecords": None,
        "documents": [
            {"id": "7", "documentType": "CNIC", "fileName": "cnic.pdf", "fileSize": 2048, "uploadedAt": "2023-02-01 10:00:00"}
        ],
    }


@pytest.fixture
def master_payload():
    return {
        "designations": [{"id": "d1", "title": "Junior Clerk"}, {"id": "d2", "title": "Senior Clerk"}],
        "units": [{"id": "u1", "title": "Copying Agency"}],
        "tehsils": [{"id": "t1", "title": "Model Town"}, {"id": "t2", "title": "Cantt"}],
        "headquarters": [{"id": "hq1", "title": "Lahore"}],
        "qualifications": [{"id": "q1", "degreeTitle": "LLB"}],
    }
