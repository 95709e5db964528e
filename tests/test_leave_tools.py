from datetime import datetime, timedelta, timezone

import pytest

from leavedesk.dispatch import Success
from leavedesk.tools import leave
from leavedesk.tools.leave_descriptions import LEAVE_REQUEST_REJECTED

FULL_REQUEST = {
    "startDate": "2025-05-01",
    "days": 3,
    "reason": "family trip",
    "delegate": "Amy",
    "employeeName": "David",
}


@pytest.mark.parametrize(
    "name, expected",
    [("david", 5), ("DAVID", 5), ("Eric", 6), ("eric", 6), ("Frank", 3), ("davidson", 3)],
)
def test_leave_record_amount(dispatcher, name, expected):
    assert dispatcher.call_tool("GetLeaveRecordAmount", {"employeeName": name}) == Success(expected)


def test_leave_request_formats_fields_in_order(dispatcher):
    result = dispatcher.call_tool("LeaveRequest", FULL_REQUEST)
    assert result == Success("David 請假 3天，從 2025-05-01 開始，事由為 family trip，代理人 Amy")


def test_leave_request_accepts_numeric_string_days(dispatcher):
    result = dispatcher.call_tool("LeaveRequest", {**FULL_REQUEST, "days": "2"})
    assert "請假 2天" in result.value


@pytest.mark.parametrize("field", ["startDate", "delegate", "employeeName"])
def test_leave_request_missing_field_is_in_band_rejection(dispatcher, field):
    result = dispatcher.call_tool("LeaveRequest", {**FULL_REQUEST, field: ""})
    assert result.ok
    assert result.value == LEAVE_REQUEST_REJECTED


def test_leave_request_reason_may_be_empty(dispatcher):
    result = dispatcher.call_tool("LeaveRequest", {**FULL_REQUEST, "reason": ""})
    assert result.value != LEAVE_REQUEST_REJECTED
    assert "事由為 ，" in result.value


def test_leave_request_absent_field_is_protocol_failure(dispatcher):
    arguments = dict(FULL_REQUEST)
    del arguments["delegate"]
    result = dispatcher.call_tool("LeaveRequest", arguments)
    assert not result.ok
    assert result.message == "missing required argument: delegate"


def test_current_date_format_and_offset(dispatcher):
    result = dispatcher.call_tool("GetCurrentDate", {})
    reported = datetime.strptime(result.value, "%Y-%m-%d %H:%M:%S")
    expected = datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(hours=8)
    assert abs((reported - expected).total_seconds()) < 5


def test_current_date_uses_fixed_offset(monkeypatch):
    fixed = datetime(2024, 12, 31, 20, 30, 15, tzinfo=timezone.utc)
    monkeypatch.setattr(leave, "_utcnow", lambda: fixed)
    assert leave.get_current_date() == "2025-01-01 04:30:15"
