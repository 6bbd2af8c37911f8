"""Project policy client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from golem_cli.clients.transport import CloudHttp, decode
from golem_cli.errors import ResourceFamily
from golem_cli.model import ProjectAction, ProjectPolicyId
from golem_cli.schemas import ProjectActions, ProjectPolicy, ProjectPolicyData

FAMILY = ResourceFamily.POLICY


class ProjectPolicyClient(Protocol):
    async def create(self, name: str, actions: list[ProjectAction]) -> ProjectPolicy: ...

    async def get(self, policy_id: ProjectPolicyId) -> ProjectPolicy: ...


@dataclass
class ProjectPolicyClientLive:
    http: CloudHttp

    async def create(self, name: str, actions: list[ProjectAction]) -> ProjectPolicy:
        data = ProjectPolicyData(
            name=name,
            project_actions=ProjectActions(actions=[action.value for action in actions]),
        )
        body = await self.http.request(
            FAMILY,
            "POST",
            "/v2/project-policies",
            json_payload=data.model_dump(mode="json", by_alias=True),
        )
        return decode(ProjectPolicy, body)

    async def get(self, policy_id: ProjectPolicyId) -> ProjectPolicy:
        body = await self.http.request(FAMILY, "GET", f"/v2/project-policies/{policy_id}")
        return decode(ProjectPolicy, body)


__all__ = ["ProjectPolicyClient", "ProjectPolicyClientLive"]
