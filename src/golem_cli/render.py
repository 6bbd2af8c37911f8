"""Rendering of command results as JSON or YAML."""

from __future__ import annotations

import json
from typing import Any

import yaml
from pydantic import BaseModel

from golem_cli.model import Format, GolemResult


def to_serializable(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    if isinstance(payload, (list, tuple)):
        return [to_serializable(item) for item in payload]
    if isinstance(payload, dict):
        return {str(key): to_serializable(value) for key, value in payload.items()}
    return payload


def render_text(result: GolemResult, fmt: Format) -> str:
    if result.is_text:
        return f"{result.text}\n"
    data = to_serializable(result.payload)
    if fmt is Format.JSON:
        return json.dumps(data, indent=2) + "\n"
    if isinstance(data, str):
        # safe_dump would append a "..." document end marker to a bare scalar
        return f"{data}\n"
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def render(result: GolemResult, fmt: Format, stdout) -> None:
    stdout.write(render_text(result, fmt))


__all__ = ["render", "render_text", "to_serializable"]
