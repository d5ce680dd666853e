"""
HTTP tests for the GraphQL POST endpoint
"""

from fastapi.testclient import TestClient

from peoplegraph.api.app import create_app
from peoplegraph.api.endpoints import graphql as graphql_endpoint
from peoplegraph.config import Settings
from peoplegraph.graphql.encoder import DeferredResult

GRAPHQL_PATH = "/graphql-app"

FIRST_NAMES = [{"firstName": "Jane"}, {"firstName": "Travis"}]


def test_people_first_names(client):
    resp = client.post(GRAPHQL_PATH, json={"query": "{ people { firstName } }"})

    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"data": {"people": FIRST_NAMES}}


def test_named_query_matches_restricted_full_fetch(client):
    full = client.post(GRAPHQL_PATH, json={"query": "{ people { firstName lastName } }"}).json()
    named = client.post(GRAPHQL_PATH, json={"query": "query Example { people { firstName } }"})

    expected = [{"firstName": p["firstName"]} for p in full["data"]["people"]]
    assert named.json() == {"data": {"people": expected}}


def test_unused_variable(client):
    resp = client.post(
        GRAPHQL_PATH,
        json={"query": "query($x:Int){people{firstName}}", "variables": {"x": 1}},
    )

    assert resp.status_code == 200
    assert resp.json() == {"data": {"people": FIRST_NAMES}}


def test_variables_as_json_string(client):
    resp = client.post(
        GRAPHQL_PATH,
        json={"query": "query($x:Int){people{firstName}}", "variables": '{"x": 1}'},
    )

    assert resp.json() == {"data": {"people": FIRST_NAMES}}


def test_empty_body_runs_introspection(client):
    resp = client.post(GRAPHQL_PATH, content=b"")

    assert resp.status_code == 200
    assert resp.json()["data"]["__schema"]["queryType"]["name"] == "Query"


def test_whitespace_body_runs_introspection(client):
    resp = client.post(GRAPHQL_PATH, content=b"  \r\n ")

    assert resp.json()["data"]["__schema"]["queryType"]["name"] == "Query"


def test_empty_query_runs_introspection(client):
    resp = client.post(GRAPHQL_PATH, json={"query": ""})

    assert resp.json()["data"]["__schema"]["queryType"]["name"] == "Query"


def test_blank_query_runs_introspection(client):
    resp = client.post(GRAPHQL_PATH, json={"query": "  \r\n "})

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["__schema"]["queryType"]["name"] == "Query"


def test_repeated_query_is_byte_identical(client):
    payload = {"query": "{ people { firstName lastName } }"}

    first = client.post(GRAPHQL_PATH, json=payload)
    second = client.post(GRAPHQL_PATH, json=payload)

    assert first.content == second.content


def test_graphql_error_is_200(client):
    resp = client.post(GRAPHQL_PATH, json={"query": "{ people { middleName } }"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["data"] is None
    assert "middleName" in body["errors"][0]["message"]


def test_malformed_json_is_400(client):
    resp = client.post(
        GRAPHQL_PATH,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert "not valid JSON" in resp.json()["errors"][0]["message"]


def test_non_object_body_is_400(client):
    resp = client.post(GRAPHQL_PATH, json=["query"])

    assert resp.status_code == 400
    assert resp.json()["errors"][0]["message"] == "Request body must be a JSON object"


def test_get_is_not_found(client):
    resp = client.get(GRAPHQL_PATH)

    assert resp.status_code == 404
    assert resp.text == "Not Found"


def test_deferred_patches_are_not_sent(client, monkeypatch):
    """Only the initial payload is returned; patches are drained afterwards."""
    drained = []

    async def patches():
        yield {"incremental": [{"data": {"late": True}}]}
        drained.append(True)

    async def fake_execute(request, **kwargs):
        return DeferredResult(data={"people": []}, patches=patches())

    monkeypatch.setattr(graphql_endpoint, "execute_request", fake_execute)

    resp = client.post(GRAPHQL_PATH, json={"query": "{ people { firstName } }"})

    assert resp.status_code == 200
    assert resp.json() == {"data": {"people": []}}
    # TestClient runs background tasks before returning
    assert drained == [True]


def test_unhandled_exception_is_500_with_message(client, monkeypatch):
    async def broken_execute(request, **kwargs):
        raise RuntimeError("engine exploded")

    monkeypatch.setattr(graphql_endpoint, "execute_request", broken_execute)

    resp = client.post(GRAPHQL_PATH, json={"query": "{ people { firstName } }"})

    assert resp.status_code == 500
    assert resp.text == "engine exploded"


def test_unhandled_exception_detail_can_be_hidden(monkeypatch):
    async def broken_execute(request, **kwargs):
        raise RuntimeError("engine exploded")

    monkeypatch.setattr(graphql_endpoint, "execute_request", broken_execute)
    app = create_app(Settings(debug=False, expose_error_details=False))

    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.post(GRAPHQL_PATH, json={"query": "{ people { firstName } }"})

    assert resp.status_code == 500
    assert resp.text == "Internal Server Error"


def test_custom_graphql_path():
    app = create_app(Settings(debug=False, graphql_path="/graphql"))

    with TestClient(app) as client:
        moved = client.post("/graphql", json={"query": "{ people { firstName } }"})
        old = client.post(GRAPHQL_PATH, json={"query": "{ people { firstName } }"})

    assert moved.json() == {"data": {"people": FIRST_NAMES}}
    assert old.status_code == 404
