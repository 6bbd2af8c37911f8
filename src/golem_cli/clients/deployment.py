"""API gateway deployment client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from golem_cli.clients.transport import CloudHttp, decode, decode_list
from golem_cli.errors import ResourceFamily
from golem_cli.model import ProjectId
from golem_cli.schemas import ApiDeployment

FAMILY = ResourceFamily.DEPLOYMENT


class DeploymentClient(Protocol):
    async def get(self, project_id: ProjectId, api_definition_id: str) -> list[ApiDeployment]: ...

    async def update(self, deployment: ApiDeployment) -> ApiDeployment: ...

    async def delete(self, project_id: ProjectId, api_definition_id: str, site: str) -> str: ...


@dataclass
class DeploymentClientLive:
    http: CloudHttp

    async def get(self, project_id: ProjectId, api_definition_id: str) -> list[ApiDeployment]:
        body = await self.http.request(
            FAMILY,
            "GET",
            "/v1/api/deployments",
            params={"project-id": str(project_id), "api-definition-id": api_definition_id},
        )
        return decode_list(ApiDeployment, body)

    async def update(self, deployment: ApiDeployment) -> ApiDeployment:
        body = await self.http.request(
            FAMILY,
            "PUT",
            "/v1/api/deployments",
            json_payload=deployment.model_dump(mode="json", by_alias=True),
        )
        return decode(ApiDeployment, body)

    async def delete(self, project_id: ProjectId, api_definition_id: str, site: str) -> str:
        body = await self.http.request(
            FAMILY,
            "DELETE",
            "/v1/api/deployments",
            params={
                "project-id": str(project_id),
                "api-definition-id": api_definition_id,
                "site": site,
            },
        )
        return str(body) if body is not None else ""


__all__ = ["DeploymentClient", "DeploymentClientLive"]
