"""Resolution of project and component references into concrete ids."""

from __future__ import annotations

import logging

from golem_cli.clients.component import ComponentClient
from golem_cli.clients.project import ProjectClient
from golem_cli.errors import GolemError, ResourceFamily, normalized
from golem_cli.model import ComponentId, ComponentIdOrName, ProjectId, ProjectRef

logger = logging.getLogger(__name__)


class ProjectResolver:
    """Resolves ProjectRef values for one CLI invocation.

    The default project is looked up at most once; later resolutions of
    ``ProjectRef.default()`` reuse the first answer.
    """

    def __init__(self, projects: ProjectClient) -> None:
        self.projects = projects
        self._default: ProjectId | None = None

    async def _by_name(self, name: str) -> ProjectId:
        with normalized(ResourceFamily.PROJECT):
            matches = await self.projects.find(name)
        if not matches:
            raise GolemError(f"Not found: Can't find project {name}")
        if len(matches) > 1:
            ids = ", ".join(str(project.project_id) for project in matches)
            raise GolemError(f"Ambiguous project name {name}: matches {ids}")
        project_id = ProjectId(matches[0].project_id)
        logger.debug("resolved project %s -> %s", name, project_id)
        return project_id

    async def resolve_id(self, ref: ProjectRef) -> ProjectId | None:
        """Resolve ``ref``; the default project is left to the server (None)."""
        if ref.project_id is not None:
            return ref.project_id
        if ref.project_name is not None:
            return await self._by_name(ref.project_name)
        return None

    async def resolve_id_or_default(self, ref: ProjectRef) -> ProjectId:
        resolved = await self.resolve_id(ref)
        if resolved is not None:
            return resolved
        if self._default is None:
            with normalized(ResourceFamily.PROJECT):
                project = await self.projects.get_default()
            self._default = ProjectId(project.project_id)
            logger.debug("resolved default project -> %s", self._default)
        return self._default


class ComponentResolver:
    def __init__(self, components: ComponentClient, projects: ProjectResolver) -> None:
        self.components = components
        self.projects = projects

    async def resolve_id(self, ref: ComponentIdOrName) -> ComponentId:
        if ref.component_id is not None:
            return ref.component_id

        project_id = await self.projects.resolve_id(ref.project_ref)
        with normalized(ResourceFamily.COMPONENT):
            versions = await self.components.find(project_id, ref.component_name)

        ids = sorted({version.versioned_component_id.component_id for version in versions}, key=str)
        if not ids:
            raise GolemError(f"Not found: Can't find component {ref.component_name}")
        if len(ids) > 1:
            joined = ", ".join(str(component_id) for component_id in ids)
            raise GolemError(f"Ambiguous component name {ref.component_name}: matches {joined}")
        component_id = ComponentId(ids[0])
        logger.debug("resolved component %s -> %s", ref.component_name, component_id)
        return component_id


__all__ = ["ComponentResolver", "ProjectResolver"]
