from ..config import UTC_OFFSET_HOURS

GET_LEAVE_RECORD_AMOUNT_DESCRIPTION = """
Look up how many days of leave an employee has taken.
Use this tool when asked about an employee's leave record or remaining leave.

Parameters:
- employeeName: the employee to look up (case-insensitive)

Returns the number of leave days as an integer.
"""

LEAVE_REQUEST_DESCRIPTION = """
Submit a leave request and return the outcome.
Call GetCurrentDate first if the user gives a relative start date
such as "tomorrow" or "next Monday".

Parameters:
- startDate: first day of leave (e.g. 2025-05-01)
- days: number of leave days
- reason: free-text reason for the leave (may be empty)
- delegate: colleague covering while the employee is away
- employeeName: employee requesting the leave

All fields except the reason are mandatory. A request with a missing
field is not an error: the tool returns a rejection message instead.
"""

GET_CURRENT_DATE_DESCRIPTION = f"""
Get today's date and time (UTC{UTC_OFFSET_HOURS:+d}), formatted as YYYY-MM-DD HH:MM:SS.
Use this to resolve relative dates before submitting a leave request.
"""

EMPLOYEE_NAME_DESCRIPTION = "Name of the employee"
START_DATE_DESCRIPTION = "First day of leave"
DAYS_DESCRIPTION = "Number of leave days"
REASON_DESCRIPTION = "Reason for the leave"
DELEGATE_DESCRIPTION = "Colleague covering during the leave"

# Response templates returned to the caller verbatim
LEAVE_REQUEST_REJECTED = "請假失敗，請確認所有必填欄位已填寫。"
LEAVE_REQUEST_ACCEPTED = "{employee_name} 請假 {days}天，從 {start_date} 開始，事由為 {reason}，代理人 {delegate}"
