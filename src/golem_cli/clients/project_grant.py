"""Project grant (sharing) client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from golem_cli.clients.transport import CloudHttp, decode
from golem_cli.errors import ResourceFamily
from golem_cli.model import AccountId, ProjectAction, ProjectId, ProjectPolicyId
from golem_cli.schemas import ProjectGrant, ProjectGrantDataRequest

FAMILY = ResourceFamily.PROJECT_GRANT


class ProjectGrantClient(Protocol):
    async def create(
        self,
        project_id: ProjectId,
        recipient_account_id: AccountId,
        policy_id: ProjectPolicyId,
    ) -> ProjectGrant: ...

    async def create_actions(
        self,
        project_id: ProjectId,
        recipient_account_id: AccountId,
        actions: list[ProjectAction],
    ) -> ProjectGrant: ...


@dataclass
class ProjectGrantClientLive:
    http: CloudHttp

    async def _post(self, project_id: ProjectId, data: ProjectGrantDataRequest) -> ProjectGrant:
        body = await self.http.request(
            FAMILY,
            "POST",
            f"/v2/projects/{project_id}/grants",
            json_payload=data.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return decode(ProjectGrant, body)

    async def create(
        self,
        project_id: ProjectId,
        recipient_account_id: AccountId,
        policy_id: ProjectPolicyId,
    ) -> ProjectGrant:
        data = ProjectGrantDataRequest(
            grantee_account_id=recipient_account_id.value,
            project_policy_id=policy_id.value,
        )
        return await self._post(project_id, data)

    async def create_actions(
        self,
        project_id: ProjectId,
        recipient_account_id: AccountId,
        actions: list[ProjectAction],
    ) -> ProjectGrant:
        data = ProjectGrantDataRequest(
            grantee_account_id=recipient_account_id.value,
            project_actions=[action.value for action in actions],
        )
        return await self._post(project_id, data)


__all__ = ["ProjectGrantClient", "ProjectGrantClientLive"]
