from __future__ import annotations

import asyncio
import types

import pytest
import requests

from fakes import make_auth
from golem_cli.clients.deployment import DeploymentClientLive
from golem_cli.clients.grant import GrantClientLive
from golem_cli.clients.login import LoginClientLive
from golem_cli.clients.project import ProjectClientLive
from golem_cli.clients.transport import CloudHttp
from golem_cli.errors import (
    BadRequest,
    InvalidHeaderValue,
    NotFound,
    RequestFailure,
    ResourceFamily,
    UnexpectedStatus,
)
from golem_cli.model import ProjectId
from golem_cli.schemas import TokenSecret


def _response(status_code: int, body=None):
    def _json():
        if body is None:
            raise ValueError("no body")
        return body

    return types.SimpleNamespace(
        status_code=status_code,
        json=_json,
        text="" if body is None else str(body),
        content=b"" if body is None else b"x",
    )


def _capture(monkeypatch, http: CloudHttp, response) -> dict:
    captured: dict[str, object] = {}

    def fake_request(method, url, *, json=None, params=None, files=None, headers=None, timeout=None):  # noqa: ANN001
        captured.update(
            method=method, url=url, json=json, params=params, headers=headers, timeout=timeout
        )
        return response

    monkeypatch.setattr(http._session, "request", fake_request)
    return captured


def test_request_sends_bearer_header(monkeypatch) -> None:
    auth = make_auth()
    http = CloudHttp(base_url="http://localhost:9881/", auth=auth, timeout=0.5)
    captured = _capture(monkeypatch, http, _response(200, []))

    result = asyncio.run(ProjectClientLive(http).find("shop"))

    assert result == []
    assert captured["url"] == "http://localhost:9881/v2/projects"
    assert captured["params"] == {"project-name": "shop"}
    assert captured["headers"] == {"Authorization": auth.header()}
    assert captured["timeout"] == 0.5


def test_error_status_maps_to_family_variant(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")
    _capture(monkeypatch, http, _response(400, {"errors": ["site.host invalid"]}))

    with pytest.raises(BadRequest) as exc_info:
        http.request_sync(ResourceFamily.DEPLOYMENT, "PUT", "/v1/api/deployments")
    assert exc_info.value.errors == ["site.host invalid"]


def test_unknown_status_is_unexpected(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")
    _capture(monkeypatch, http, _response(418, None))

    with pytest.raises(UnexpectedStatus) as exc_info:
        http.request_sync(ResourceFamily.ACCOUNT, "GET", "/v2/accounts/a")
    assert exc_info.value.status_code == 418


def test_connection_errors_are_request_failures(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")

    def boom(*args, **kwargs):  # noqa: ANN002, ANN003
        raise requests.exceptions.ConnectTimeout("timed out")

    monkeypatch.setattr(http._session, "request", boom)
    with pytest.raises(RequestFailure) as exc_info:
        asyncio.run(ProjectClientLive(http).get_default())
    assert "timed out" in exc_info.value.details


def test_invalid_header_is_reported(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")

    def bad_header(*args, **kwargs):  # noqa: ANN002, ANN003
        raise requests.exceptions.InvalidHeader("Invalid leading whitespace")

    monkeypatch.setattr(http._session, "request", bad_header)
    with pytest.raises(InvalidHeaderValue):
        http.request_sync(ResourceFamily.TOKEN, "GET", "/v2/accounts/a/tokens")


def test_deployment_delete_sends_query(monkeypatch) -> None:
    http = CloudHttp(base_url="http://gateway")
    captured = _capture(monkeypatch, http, _response(200, "API deployment deleted"))
    project_id = ProjectId(make_auth().token.data.id)

    result = asyncio.run(DeploymentClientLive(http).delete(project_id, "def-1", "site.example"))

    assert result == "API deployment deleted"
    assert captured["method"] == "DELETE"
    assert captured["params"] == {
        "project-id": str(project_id),
        "api-definition-id": "def-1",
        "site": "site.example",
    }


def test_login_uses_secret_header(monkeypatch) -> None:
    auth = make_auth()
    token_body = auth.token.data.model_dump(mode="json", by_alias=True)
    http = CloudHttp(base_url="http://localhost:9881")
    captured = _capture(monkeypatch, http, _response(200, token_body))
    secret = TokenSecret(value=auth.token.secret.value)

    token = asyncio.run(LoginClientLive(http).current_token(secret))

    assert token.data.account_id == auth.token.data.account_id
    assert token.secret == secret
    assert captured["headers"] == {"Authorization": f"bearer {secret.value}"}


def test_not_found_message_from_body(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")
    _capture(monkeypatch, http, _response(404, {"message": "no default project"}))

    with pytest.raises(NotFound) as exc_info:
        asyncio.run(ProjectClientLive(http).get_default())
    assert exc_info.value.message == "no default project"


def test_empty_success_body_is_request_failure(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")
    _capture(monkeypatch, http, _response(200, None))

    with pytest.raises(RequestFailure) as exc_info:
        asyncio.run(ProjectClientLive(http).get_default())
    assert exc_info.value.details.startswith("invalid Project response: body: ")


def test_schema_mismatch_in_list_is_request_failure(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")
    _capture(monkeypatch, http, _response(200, [{"projectId": "not-a-uuid"}]))

    with pytest.raises(RequestFailure) as exc_info:
        asyncio.run(ProjectClientLive(http).find(None))
    assert exc_info.value.details.startswith("invalid Project response: ")


def test_non_array_list_body_is_request_failure(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")
    _capture(monkeypatch, http, _response(200, {"projects": []}))

    with pytest.raises(RequestFailure) as exc_info:
        asyncio.run(ProjectClientLive(http).find("shop"))
    assert exc_info.value.details == "invalid Project list response: expected a JSON array"


def test_unknown_role_is_request_failure(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")
    _capture(monkeypatch, http, _response(200, ["Admin", "SomeNewRole"]))

    with pytest.raises(RequestFailure) as exc_info:
        asyncio.run(GrantClientLive(http).get_all(make_auth().account_id()))
    assert exc_info.value.details.startswith("Unknown role: SomeNewRole.")


def test_close_releases_session(monkeypatch) -> None:
    http = CloudHttp(base_url="http://localhost:9881")
    calls: list[bool] = []
    monkeypatch.setattr(http._session, "close", lambda: calls.append(True))

    http.close()

    assert calls == [True]
