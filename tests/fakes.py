"""In-memory resource clients for handler and resolver tests."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from golem_cli.auth import CloudAuthentication
from golem_cli.errors import BackendError
from golem_cli.schemas import (
    ApiDeployment,
    Component,
    Project,
    ProjectData,
    Token,
    TokenSecret,
    UnsafeToken,
    VersionedComponentId,
)

ACCOUNT = "account-1"


def make_auth(account_id: str = ACCOUNT) -> CloudAuthentication:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    token = UnsafeToken(
        data=Token(id=uuid4(), account_id=account_id, created_at=now, expires_at=now),
        secret=TokenSecret(value=UUID("00000000-0000-0000-0000-0000000000aa")),
    )
    return CloudAuthentication(token)


def make_project(name: str, project_id: UUID | None = None) -> Project:
    return Project(
        project_id=project_id or uuid4(),
        project_data=ProjectData(name=name, owner_account_id=ACCOUNT),
    )


def make_component(name: str, component_id: UUID, version: int = 0) -> Component:
    return Component(
        versioned_component_id=VersionedComponentId(component_id=component_id, version=version),
        component_name=name,
    )


class FakeProjects:
    def __init__(
        self,
        projects: list[Project] | None = None,
        default: Project | None = None,
        error: BackendError | None = None,
    ) -> None:
        self.projects = list(projects or [])
        self.default = default
        self.error = error
        self.calls: list[tuple] = []

    async def find(self, name):
        self.calls.append(("find", name))
        if self.error is not None:
            raise self.error
        return [p for p in self.projects if name is None or p.project_data.name == name]

    async def get_default(self):
        self.calls.append(("get_default",))
        if self.error is not None:
            raise self.error
        return self.default

    async def create(self, name, owner_account_id, description):
        self.calls.append(("create", name, owner_account_id, description))
        project = make_project(name)
        self.projects.append(project)
        return project

    async def delete(self, project_id):
        self.calls.append(("delete", project_id))


class FakeDeployments:
    def __init__(self, error: BackendError | None = None) -> None:
        self.error = error
        self.calls: list[tuple] = []

    async def get(self, project_id, api_definition_id):
        self.calls.append(("get", project_id, api_definition_id))
        if self.error is not None:
            raise self.error
        return []

    async def update(self, deployment: ApiDeployment):
        self.calls.append(("update", deployment))
        if self.error is not None:
            raise self.error
        return deployment

    async def delete(self, project_id, api_definition_id, site):
        self.calls.append(("delete", project_id, api_definition_id, site))
        if self.error is not None:
            raise self.error
        return "API deployment deleted"


class FakeComponents:
    def __init__(self, components: list[Component] | None = None) -> None:
        self.components = list(components or [])
        self.calls: list[tuple] = []

    async def find(self, project_id, name):
        self.calls.append(("find", project_id, name))
        return [c for c in self.components if name is None or c.component_name == name.value]

    async def get_metadata(self, component_id, version):
        self.calls.append(("get_metadata", component_id, version))
        return make_component("fetched", component_id.value, version)

    async def get_latest_metadata(self, component_id):
        self.calls.append(("get_latest_metadata", component_id))
        return make_component("fetched", component_id.value, 3)

    async def add(self, project_id, name, file):
        self.calls.append(("add", project_id, name, file))
        return make_component(name.value, uuid4())

    async def update(self, component_id, file):
        self.calls.append(("update", component_id, file))
        return make_component("updated", component_id.value, 1)
