"""Component resource client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from golem_cli.clients.transport import CloudHttp, decode, decode_list
from golem_cli.errors import RequestFailure, ResourceFamily
from golem_cli.model import ComponentId, ComponentName, ProjectId
from golem_cli.schemas import Component

FAMILY = ResourceFamily.COMPONENT


class ComponentClient(Protocol):
    async def find(
        self, project_id: ProjectId | None, name: ComponentName | None
    ) -> list[Component]: ...

    async def get_metadata(self, component_id: ComponentId, version: int) -> Component: ...

    async def get_latest_metadata(self, component_id: ComponentId) -> Component: ...

    async def add(
        self, project_id: ProjectId | None, name: ComponentName, file: Path
    ) -> Component: ...

    async def update(self, component_id: ComponentId, file: Path) -> Component: ...


def _read_component(file: Path) -> bytes:
    try:
        return file.read_bytes()
    except OSError as exc:
        raise RequestFailure(f"can't read component file {file}: {exc}") from exc


@dataclass
class ComponentClientLive:
    http: CloudHttp

    async def find(
        self, project_id: ProjectId | None, name: ComponentName | None
    ) -> list[Component]:
        params: dict[str, str] = {}
        if project_id is not None:
            params["project-id"] = str(project_id)
        if name is not None:
            params["component-name"] = name.value
        body = await self.http.request(FAMILY, "GET", "/v2/components", params=params or None)
        return decode_list(Component, body)

    async def get_metadata(self, component_id: ComponentId, version: int) -> Component:
        body = await self.http.request(
            FAMILY, "GET", f"/v2/components/{component_id}/versions/{version}"
        )
        return decode(Component, body)

    async def get_latest_metadata(self, component_id: ComponentId) -> Component:
        body = await self.http.request(FAMILY, "GET", f"/v2/components/{component_id}/latest")
        return decode(Component, body)

    async def add(
        self, project_id: ProjectId | None, name: ComponentName, file: Path
    ) -> Component:
        query: dict[str, str] = {"componentName": name.value}
        if project_id is not None:
            query["projectId"] = str(project_id)
        files = {
            "query": (None, json.dumps(query), "application/json"),
            "component": (file.name, _read_component(file), "application/octet-stream"),
        }
        body = await self.http.request(FAMILY, "POST", "/v2/components", files=files)
        return decode(Component, body)

    async def update(self, component_id: ComponentId, file: Path) -> Component:
        files = {
            "component": (file.name, _read_component(file), "application/octet-stream"),
        }
        body = await self.http.request(
            FAMILY, "PUT", f"/v2/components/{component_id}/upload", files=files
        )
        return decode(Component, body)


__all__ = ["ComponentClient", "ComponentClientLive"]
