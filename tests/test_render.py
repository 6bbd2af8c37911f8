from __future__ import annotations

import io
import json
from uuid import UUID

import yaml

from golem_cli.model import Format, GolemResult
from golem_cli.render import render, render_text
from golem_cli.schemas import ApiDeployment, ApiSite

DEPLOYMENT = ApiDeployment(
    project_id=UUID("7b7e1a0e-3c2a-4d55-9a7f-5c1b3c6f7a10"),
    api_definition_id="def-1",
    site=ApiSite(host="api.example.com", subdomain="tenant1"),
)


def test_json_uses_api_field_names() -> None:
    payload = json.loads(render_text(GolemResult.ok(DEPLOYMENT), Format.JSON))
    assert payload == {
        "apiDefinitionId": "def-1",
        "projectId": "7b7e1a0e-3c2a-4d55-9a7f-5c1b3c6f7a10",
        "site": {"host": "api.example.com", "subdomain": "tenant1"},
    }


def test_yaml_renders_lists() -> None:
    text = render_text(GolemResult.ok([DEPLOYMENT]), Format.YAML)
    assert yaml.safe_load(text)[0]["site"]["subdomain"] == "tenant1"


def test_text_result_is_printed_verbatim() -> None:
    out = io.StringIO()
    render(GolemResult.string("Deleted"), Format.JSON, out)
    assert out.getvalue() == "Deleted\n"


def test_yaml_string_payload_has_no_document_marker() -> None:
    text = render_text(GolemResult.ok("API deployment deleted"), Format.YAML)
    assert text == "API deployment deleted\n"
