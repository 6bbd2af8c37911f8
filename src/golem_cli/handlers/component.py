"""Component commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from golem_cli.clients.component import ComponentClient
from golem_cli.errors import ResourceFamily, normalized
from golem_cli.model import ComponentIdOrName, ComponentName, GolemResult, ProjectRef
from golem_cli.resolve import ComponentResolver, ProjectResolver


@dataclass(frozen=True)
class ComponentAdd:
    project_ref: ProjectRef
    component_name: ComponentName
    component_file: Path


@dataclass(frozen=True)
class ComponentUpdate:
    component: ComponentIdOrName
    component_file: Path


@dataclass(frozen=True)
class ComponentList:
    project_ref: ProjectRef
    component_name: Optional[ComponentName] = None


@dataclass(frozen=True)
class ComponentGet:
    component: ComponentIdOrName
    version: Optional[int] = None


ComponentCommand = Union[ComponentAdd, ComponentUpdate, ComponentList, ComponentGet]


class ComponentHandler:
    def __init__(
        self,
        client: ComponentClient,
        projects: ProjectResolver,
        components: ComponentResolver,
    ) -> None:
        self.client = client
        self.projects = projects
        self.components = components

    async def handle(self, command: ComponentCommand) -> GolemResult:
        if isinstance(command, ComponentAdd):
            project_id = await self.projects.resolve_id(command.project_ref)
            with normalized(ResourceFamily.COMPONENT):
                res = await self.client.add(
                    project_id, command.component_name, command.component_file
                )
            return GolemResult.ok(res)

        if isinstance(command, ComponentUpdate):
            component_id = await self.components.resolve_id(command.component)
            with normalized(ResourceFamily.COMPONENT):
                res = await self.client.update(component_id, command.component_file)
            return GolemResult.ok(res)

        if isinstance(command, ComponentList):
            project_id = await self.projects.resolve_id(command.project_ref)
            with normalized(ResourceFamily.COMPONENT):
                res = await self.client.find(project_id, command.component_name)
            return GolemResult.ok(res)

        if isinstance(command, ComponentGet):
            component_id = await self.components.resolve_id(command.component)
            with normalized(ResourceFamily.COMPONENT):
                if command.version is None:
                    res = await self.client.get_latest_metadata(component_id)
                else:
                    res = await self.client.get_metadata(component_id, command.version)
            return GolemResult.ok(res)

        raise TypeError(f"unsupported component command: {command!r}")


__all__ = [
    "ComponentAdd",
    "ComponentCommand",
    "ComponentGet",
    "ComponentHandler",
    "ComponentList",
    "ComponentUpdate",
]
