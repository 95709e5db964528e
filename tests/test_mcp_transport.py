import asyncio

import mcp.types as types

from leavedesk.api.mcp_transport import build_mcp_server
from leavedesk.dispatch import Dispatcher


def _list_tools(server):
    handler = server.request_handlers[types.ListToolsRequest]
    result = asyncio.run(handler(types.ListToolsRequest(method="tools/list")))
    return result.root.tools


def _call_tool(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(handler(request)).root


def test_list_tools_exposes_input_schema(dispatcher):
    tools = _list_tools(build_mcp_server(dispatcher))
    assert [t.name for t in tools] == ["GetLeaveRecordAmount", "LeaveRequest", "GetCurrentDate"]
    schema = tools[0].inputSchema
    assert schema["required"] == ["employeeName"]
    assert schema["properties"]["employeeName"]["type"] == "string"


def test_call_tool_returns_text_content(dispatcher):
    result = _call_tool(build_mcp_server(dispatcher), "GetLeaveRecordAmount", {"employeeName": "Eric"})
    assert not result.isError
    assert result.content[0].type == "text"
    assert result.content[0].text == "6"


def test_call_tool_coerces_string_integer(dispatcher):
    # Would fail JSON-schema validation; the dispatcher accepts it
    result = _call_tool(
        build_mcp_server(dispatcher),
        "LeaveRequest",
        {"startDate": "2025-05-01", "days": "4", "reason": "rest", "delegate": "Amy", "employeeName": "Eric"},
    )
    assert not result.isError
    assert "請假 4天" in result.content[0].text


def test_unknown_tool_is_error_result(dispatcher):
    result = _call_tool(build_mcp_server(dispatcher), "Nope", {})
    assert result.isError
    assert "unknown tool: Nope" in result.content[0].text


def test_invalid_argument_is_error_result(dispatcher):
    result = _call_tool(build_mcp_server(dispatcher), "GetLeaveRecordAmount", {})
    assert result.isError
    assert "missing required argument: employeeName" in result.content[0].text


def test_tool_fault_is_error_result(scratch_registry):
    result = _call_tool(build_mcp_server(Dispatcher(scratch_registry)), "Explode", {"message": "x"})
    assert result.isError
    assert "tool 'Explode' failed: boom" in result.content[0].text
