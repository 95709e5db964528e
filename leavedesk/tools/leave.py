"""
Leave tools.

Mock HR backend: a fixed table of leave balances and a leave request that
only formats a confirmation. Nothing is persisted.

Parameter names are the wire keys clients send, hence camelCase.
"""

from datetime import datetime, timedelta, timezone

from ..config import UTC_OFFSET_HOURS
from .leave_descriptions import LEAVE_REQUEST_ACCEPTED, LEAVE_REQUEST_REJECTED

# Leave days taken, keyed by lower-cased employee name
LEAVE_DAYS_TAKEN = {
    "david": 5,
    "eric": 6,
}
DEFAULT_LEAVE_DAYS = 3

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ------------------------------------------------------------------
# 1. Leave balance lookup
# ------------------------------------------------------------------
def get_leave_record_amount(employeeName: str) -> int:
    return LEAVE_DAYS_TAKEN.get(employeeName.lower(), DEFAULT_LEAVE_DAYS)


# ------------------------------------------------------------------
# 2. Leave request
# ------------------------------------------------------------------
def leave_request(
    startDate: str, days: int, reason: str, delegate: str, employeeName: str
) -> str:
    # reason may be empty; only the date, delegate and applicant are mandatory
    if not startDate or not delegate or not employeeName:
        return LEAVE_REQUEST_REJECTED

    return LEAVE_REQUEST_ACCEPTED.format(
        employee_name=employeeName,
        days=days,
        start_date=startDate,
        reason=reason,
        delegate=delegate,
    )


# ------------------------------------------------------------------
# 3. Current date
# ------------------------------------------------------------------
def get_current_date() -> str:
    """Current wall-clock time at the configured fixed UTC offset."""
    local = _utcnow() + timedelta(hours=UTC_OFFSET_HOURS)
    return local.strftime(DATE_FORMAT)
