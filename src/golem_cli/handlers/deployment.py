"""API gateway deployment commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from golem_cli.clients.deployment import DeploymentClient
from golem_cli.errors import ResourceFamily, normalized
from golem_cli.model import GolemResult, ProjectRef
from golem_cli.resolve import ProjectResolver
from golem_cli.schemas import ApiDeployment, ApiSite


@dataclass(frozen=True)
class DeploymentGet:
    project_ref: ProjectRef
    definition_id: str


@dataclass(frozen=True)
class DeploymentAdd:
    project_ref: ProjectRef
    definition_id: str
    host: str
    subdomain: str


@dataclass(frozen=True)
class DeploymentDelete:
    project_ref: ProjectRef
    site: str
    definition_id: str


DeploymentCommand = Union[DeploymentGet, DeploymentAdd, DeploymentDelete]


class DeploymentHandler:
    def __init__(self, client: DeploymentClient, projects: ProjectResolver) -> None:
        self.client = client
        self.projects = projects

    async def handle(self, command: DeploymentCommand) -> GolemResult:
        if isinstance(command, DeploymentGet):
            project_id = await self.projects.resolve_id_or_default(command.project_ref)
            with normalized(ResourceFamily.DEPLOYMENT):
                res = await self.client.get(project_id, command.definition_id)
            return GolemResult.ok(res)

        if isinstance(command, DeploymentAdd):
            project_id = await self.projects.resolve_id_or_default(command.project_ref)
            deployment = ApiDeployment(
                project_id=project_id.value,
                api_definition_id=command.definition_id,
                site=ApiSite(host=command.host, subdomain=command.subdomain),
            )
            with normalized(ResourceFamily.DEPLOYMENT):
                res = await self.client.update(deployment)
            return GolemResult.ok(res)

        if isinstance(command, DeploymentDelete):
            project_id = await self.projects.resolve_id_or_default(command.project_ref)
            with normalized(ResourceFamily.DEPLOYMENT):
                res = await self.client.delete(project_id, command.definition_id, command.site)
            return GolemResult.ok(res)

        raise TypeError(f"unsupported deployment command: {command!r}")


__all__ = [
    "DeploymentAdd",
    "DeploymentCommand",
    "DeploymentDelete",
    "DeploymentGet",
    "DeploymentHandler",
]
