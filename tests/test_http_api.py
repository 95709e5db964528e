def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "tools": 3}


def test_list_tools(client):
    response = client.get("/api/tools")
    assert response.status_code == 200
    assert [t["name"] for t in response.json()] == [
        "GetLeaveRecordAmount",
        "LeaveRequest",
        "GetCurrentDate",
    ]


def test_list_tools_is_stable(client):
    assert client.get("/api/tools").json() == client.get("/api/tools").json()


def test_call_tool_success(client):
    response = client.post(
        "/api/tools/GetLeaveRecordAmount/call",
        json={"arguments": {"employeeName": "david"}},
    )
    assert response.status_code == 200
    assert response.json() == {"status": "success", "value": 5}


def test_call_tool_without_body_arguments(client):
    response = client.post("/api/tools/GetCurrentDate/call", json={})
    assert response.json()["status"] == "success"


def test_call_unknown_tool(client):
    response = client.post("/api/tools/Nope/call", json={"arguments": {}})
    assert response.status_code == 200
    assert response.json() == {"status": "error", "message": "unknown tool: Nope"}


def test_call_tool_invalid_argument(client):
    response = client.post(
        "/api/tools/GetLeaveRecordAmount/call",
        json={"arguments": {"employeeName": ""}},
    )
    assert response.json() == {
        "status": "error",
        "message": "argument 'employeeName' must not be empty",
    }


def test_business_rejection_is_success(client):
    response = client.post(
        "/api/tools/LeaveRequest/call",
        json={
            "arguments": {
                "startDate": "",
                "days": 1,
                "reason": "",
                "delegate": "Amy",
                "employeeName": "Eric",
            }
        },
    )
    body = response.json()
    assert body["status"] == "success"
    assert body["value"] == "請假失敗，請確認所有必填欄位已填寫。"


def test_sse_and_message_routes_mounted(client):
    paths = {getattr(route, "path", None) for route in client.app.routes}
    assert "/sse" in paths
    assert "/messages" in paths


def test_call_tool_null_arguments_is_envelope(client):
    response = client.post(
        "/api/tools/GetLeaveRecordAmount/call", json={"arguments": None}
    )
    assert response.status_code == 200
    assert response.json() == {
        "status": "error",
        "message": "missing required argument: employeeName",
    }


def test_call_tool_list_arguments_is_envelope(client):
    response = client.post(
        "/api/tools/GetLeaveRecordAmount/call", json={"arguments": ["david"]}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "arguments must be an object, got list"


def test_call_tool_with_no_body(client):
    response = client.post("/api/tools/GetCurrentDate/call")
    assert response.status_code == 200
    assert response.json()["status"] == "success"
