"""Project commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from golem_cli.auth import CloudAuthentication
from golem_cli.clients.project import ProjectClient
from golem_cli.errors import ResourceFamily, normalized
from golem_cli.model import GolemResult


@dataclass(frozen=True)
class ProjectList:
    project_name: Optional[str] = None


@dataclass(frozen=True)
class ProjectAdd:
    project_name: str
    project_description: Optional[str] = None


@dataclass(frozen=True)
class ProjectGetDefault:
    pass


ProjectCommand = Union[ProjectList, ProjectAdd, ProjectGetDefault]


class ProjectHandler:
    def __init__(self, client: ProjectClient, auth: CloudAuthentication) -> None:
        self.client = client
        self.auth = auth

    async def handle(self, command: ProjectCommand) -> GolemResult:
        with normalized(ResourceFamily.PROJECT):
            if isinstance(command, ProjectList):
                return GolemResult.ok(await self.client.find(command.project_name))
            if isinstance(command, ProjectAdd):
                project = await self.client.create(
                    command.project_name,
                    self.auth.account_id(),
                    command.project_description,
                )
                return GolemResult.ok(project)
            if isinstance(command, ProjectGetDefault):
                return GolemResult.ok(await self.client.get_default())

        raise TypeError(f"unsupported project command: {command!r}")


__all__ = ["ProjectAdd", "ProjectCommand", "ProjectGetDefault", "ProjectHandler", "ProjectList"]
