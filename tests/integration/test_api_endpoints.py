TWO_ENTRY_TEXT = "AdditionOperation:3+2i,2+3i,1+-1i;ConjugateOperation:2+-3i,2+3i"


def _calc(client, headers, operation, operand1, operand2=None):
    body = {"operation": operation, "operand1": {"real": operand1[0], "imaginary": operand1[1]}}
    if operand2 is not None:
        body["operand2"] = {"real": operand2[0], "imaginary": operand2[1]}
    return client.post("/calculator/calculate", headers=headers, json=body)


def test_root_and_health(client):
    assert client.get("/").json()["service"] == "complexcalc"
    assert client.get("/health").json() == {"status": "healthy"}


def test_requires_bearer_token(client):
    r = client.get("/history")
    assert r.status_code == 401


def test_list_operations(client, auth_header):
    r = client.get("/calculator/operations", headers=auth_header)
    assert r.status_code == 200
    ops = {o["identity"]: o for o in r.json()["operations"]}
    assert len(ops) == 9
    assert ops["DivisionOperation"]["arity"] == "binary"
    assert ops["RootOperation"]["arity"] == "unary"


def test_calculate_and_history(client, auth_header):
    r = _calc(client, auth_header, "AdditionOperation", (2, 3), (1, -1))
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["result"] == {"real": 3.0, "imaginary": 2.0}
    assert data["symbol"] == "+"
    assert data["history_size"] == 1
    assert data["cursor"] == 0
    assert [p["name"] for p in data["plot"]] == ["First Value", "Second Value", "Result"]

    r = _calc(client, auth_header, "ConjugateOperation", (2, 3))
    assert r.json()["cursor"] == 1

    hist = client.get("/history", headers=auth_header).json()
    assert hist["size"] == 2
    assert hist["history"][0]["operation"] == "AdditionOperation"
    assert hist["history"][1]["operand2"] is None

    export = client.get("/history/export", headers=auth_header).json()
    assert export["text"] == TWO_ENTRY_TEXT


def test_division_by_zero_is_rejected_and_not_recorded(client, auth_header):
    _calc(client, auth_header, "AdditionOperation", (1, 1), (1, 1))
    r = _calc(client, auth_header, "DivisionOperation", (1, 2), (0, 0))
    assert r.status_code == 400
    assert "divide by zero" in r.json()["detail"]
    r = _calc(client, auth_header, "SubtractionOperation", (1, 2))
    assert r.status_code == 400
    assert client.get("/history", headers=auth_header).json()["size"] == 1


def test_unknown_operation_is_a_validation_error(client, auth_header):
    r = _calc(client, auth_header, "NotARealOp", (1, 2))
    assert r.status_code == 422


def test_undo_redo(client, auth_header):
    _calc(client, auth_header, "AdditionOperation", (2, 3), (1, -1))
    r = client.post("/history/undo", headers=auth_header).json()
    assert r == {"moved": False, "cursor": 0, "entry": None}

    _calc(client, auth_header, "SquareOperation", (1, 1))
    r = client.post("/history/undo", headers=auth_header).json()
    assert r["moved"] is True
    assert r["entry"]["result"] == {"real": 3.0, "imaginary": 2.0}

    r = client.post("/history/redo", headers=auth_header).json()
    assert r["cursor"] == 1
    assert r["entry"]["operation"] == "SquareOperation"
    assert client.post("/history/redo", headers=auth_header).json()["moved"] is False


def test_get_history_entry_out_of_range(client, auth_header):
    assert client.get("/history/0", headers=auth_header).status_code == 404
    _calc(client, auth_header, "RootOperation", (3, 4))
    r = client.get("/history/0", headers=auth_header)
    assert r.status_code == 200
    assert r.json()["result"] == {"real": 2.0, "imaginary": 1.0}
    assert client.get("/history/-1", headers=auth_header).status_code == 404


def test_import_and_failed_import(client, auth_header):
    r = client.post("/history/import", headers=auth_header, json={"text": TWO_ENTRY_TEXT})
    assert r.status_code == 200, r.text
    assert r.json()["size"] == 2
    assert r.json()["cursor"] == 1

    r = client.post("/history/import", headers=auth_header, json={"text": "NotARealOp:1+1i,1+1i"})
    assert r.status_code == 400
    r = client.post("/history/import", headers=auth_header, json={"text": "AdditionOperation:1+1,1+1i,1+1i"})
    assert r.status_code == 400
    assert client.get("/history/export", headers=auth_header).json()["text"] == TWO_ENTRY_TEXT


def test_save_load_and_clear(client, auth_header):
    client.post("/history/import", headers=auth_header, json={"text": TWO_ENTRY_TEXT})
    r = client.post("/history/save", headers=auth_header, json={"name": "api-history.txt"})
    assert r.status_code == 200, r.text
    assert r.json()["path"].endswith("api-history.txt")

    r = client.delete("/history", headers=auth_header)
    assert r.json()["ok"] is True
    hist = client.get("/history", headers=auth_header).json()
    assert hist == {"history": [], "size": 0, "cursor": -1}

    r = client.post("/history/load", headers=auth_header, json={"name": "api-history.txt"})
    assert r.status_code == 200
    assert r.json()["size"] == 2
    assert r.json()["cursor"] == 1

    r = client.post("/history/load", headers=auth_header, json={"name": "does-not-exist.txt"})
    assert r.status_code == 500
    assert "does-not-exist.txt" in r.json()["detail"]
    assert client.post("/history/load", headers=auth_header, json={"name": ".."}).status_code == 400
    assert client.post("/history/save", headers=auth_header, json={"name": "a/b"}).status_code == 422


def test_operator_and_equals(client, auth_header):
    r = client.post("/calculator/equals", headers=auth_header, json={"value": {"real": 1}})
    assert r.status_code == 400

    body = {"operation": "SubtractionOperation", "value": {"real": 10, "imaginary": 4}}
    r = client.post("/calculator/operator", headers=auth_header, json=body)
    assert r.status_code == 200
    assert r.json()["held"] == {"real": 10.0, "imaginary": 4.0}

    r = client.post("/calculator/equals", headers=auth_header, json={"value": {"real": 3, "imaginary": 1}})
    assert r.status_code == 200
    assert r.json()["result"] == {"real": 7.0, "imaginary": 3.0}

    body = {"operation": "RootOperation", "value": {"real": 4}}
    assert client.post("/calculator/operator", headers=auth_header, json=body).status_code == 400


def test_shapes(client, auth_header):
    body = {"shape": "triangle", "measure": "circumference", "value": {"real": 2.5}}
    r = client.post("/calculator/shapes", headers=auth_header, json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["result"] == {"real": 7.5, "imaginary": 0.0}
    assert data["recorded"] is False
    assert data["history_size"] == 0

    body["value"] = {"real": 2.5, "imaginary": 1}
    assert client.post("/calculator/shapes", headers=auth_header, json=body).status_code == 400


def test_memory(client, auth_header):
    assert client.get("/memory", headers=auth_header).json()["value"] == {"real": 0.0, "imaginary": 0.0}
    client.post("/memory/set", headers=auth_header, json={"value": {"real": 1, "imaginary": 2}})
    r = client.post("/memory/add", headers=auth_header, json={"value": {"real": 3, "imaginary": -1}})
    assert r.json()["value"] == {"real": 4.0, "imaginary": 1.0}
    r = client.delete("/memory", headers=auth_header)
    assert r.json()["value"] == {"real": 0.0, "imaginary": 0.0}


def test_root_reports_version(client):
    assert client.get("/").json() == {"status": "ok", "service": "complexcalc", "version": "0.1.0"}


def test_error_responses_documented_with_error_model(client):
    paths = client.get("/openapi.json").json()["paths"]
    for path, method, status in [
        ("/calculator/calculate", "post", "400"),
        ("/history/{index}", "get", "404"),
        ("/history/load", "post", "500"),
        ("/memory", "get", "401"),
    ]:
        schema = paths[path][method]["responses"][status]["content"]["application/json"]["schema"]
        assert schema["$ref"].endswith("/ErrorResponse")
    health = paths["/health"]["get"]["responses"]["200"]["content"]["application/json"]["schema"]
    assert health["$ref"].endswith("/HealthResponse")
