"""Project resource client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from golem_cli.clients.transport import CloudHttp, decode, decode_list
from golem_cli.errors import ResourceFamily
from golem_cli.model import AccountId
from golem_cli.schemas import Project, ProjectData

FAMILY = ResourceFamily.PROJECT


class ProjectClient(Protocol):
    async def find(self, name: str | None) -> list[Project]: ...

    async def get_default(self) -> Project: ...

    async def create(
        self, name: str, owner_account_id: AccountId, description: str | None
    ) -> Project: ...


@dataclass
class ProjectClientLive:
    http: CloudHttp

    async def find(self, name: str | None) -> list[Project]:
        params = {"project-name": name} if name is not None else None
        body = await self.http.request(FAMILY, "GET", "/v2/projects", params=params)
        return decode_list(Project, body)

    async def get_default(self) -> Project:
        body = await self.http.request(FAMILY, "GET", "/v2/projects/default")
        return decode(Project, body)

    async def create(
        self, name: str, owner_account_id: AccountId, description: str | None
    ) -> Project:
        data = ProjectData(
            name=name,
            owner_account_id=owner_account_id.value,
            description=description or "",
        )
        body = await self.http.request(
            FAMILY,
            "POST",
            "/v2/projects",
            json_payload=data.model_dump(mode="json", by_alias=True),
        )
        return decode(Project, body)

__all__ = ["ProjectClient", "ProjectClientLive"]
