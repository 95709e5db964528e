"""
Static tool definitions.

HOW TO ADD A NEW TOOL:
──────────────────────
1. Write a plain function whose parameter names are the wire keys.
2. Add a ``(ToolDescriptor, function)`` pair to TOOL_DEFINITIONS below,
   listing the parameters in the same order as the function signature.
3. Restart the server. The registry refuses to start on duplicate names
   or a descriptor that does not match its function.

Order here determines the order clients see in tools/list.
"""

from ..registry import ParameterDescriptor, ParamType, ToolDescriptor, ToolRegistry, build_registry
from .leave import get_current_date, get_leave_record_amount, leave_request
from .leave_descriptions import (
    DAYS_DESCRIPTION,
    DELEGATE_DESCRIPTION,
    EMPLOYEE_NAME_DESCRIPTION,
    GET_CURRENT_DATE_DESCRIPTION,
    GET_LEAVE_RECORD_AMOUNT_DESCRIPTION,
    LEAVE_REQUEST_DESCRIPTION,
    REASON_DESCRIPTION,
    START_DATE_DESCRIPTION,
)

TOOL_DEFINITIONS = (
    (
        ToolDescriptor(
            name="GetLeaveRecordAmount",
            description=GET_LEAVE_RECORD_AMOUNT_DESCRIPTION.strip(),
            parameters=(
                ParameterDescriptor("employeeName", ParamType.STRING, EMPLOYEE_NAME_DESCRIPTION),
            ),
        ),
        get_leave_record_amount,
    ),
    (
        # String fields accept "" here: leave_request answers with its own
        # rejection message rather than a protocol error.
        ToolDescriptor(
            name="LeaveRequest",
            description=LEAVE_REQUEST_DESCRIPTION.strip(),
            parameters=(
                ParameterDescriptor("startDate", ParamType.STRING, START_DATE_DESCRIPTION, allow_empty=True),
                ParameterDescriptor("days", ParamType.INTEGER, DAYS_DESCRIPTION),
                ParameterDescriptor("reason", ParamType.STRING, REASON_DESCRIPTION, allow_empty=True),
                ParameterDescriptor("delegate", ParamType.STRING, DELEGATE_DESCRIPTION, allow_empty=True),
                ParameterDescriptor("employeeName", ParamType.STRING, EMPLOYEE_NAME_DESCRIPTION, allow_empty=True),
            ),
        ),
        leave_request,
    ),
    (
        ToolDescriptor(
            name="GetCurrentDate",
            description=GET_CURRENT_DATE_DESCRIPTION.strip(),
        ),
        get_current_date,
    ),
)


def build_default_registry() -> ToolRegistry:
    """Build the registry from TOOL_DEFINITIONS. Raises on any bad definition."""
    return build_registry(TOOL_DEFINITIONS)


__all__ = ['TOOL_DEFINITIONS', 'build_default_registry']
