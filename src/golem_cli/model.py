"""CLI-side domain values: references, enumerations and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
from uuid import UUID


def _expected(values: list[str]) -> str:
    return ", ".join(f'"{value}"' for value in values)


class _NamedEnum(str, Enum):
    """Enumeration parsed by exact identity with its member names."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str):
        for member in cls:
            if member.value == raw:
                return member
        raise ValueError(
            f"Unknown {cls._label()}: {raw}. Expected one of {_expected([m.value for m in cls])}"
        )

    @classmethod
    def _label(cls) -> str:
        return "value"


class Format(_NamedEnum):
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def _label(cls) -> str:
        return "format"


class Role(_NamedEnum):
    ADMIN = "Admin"
    WHITELIST_ADMIN = "WhitelistAdmin"
    MARKETING_ADMIN = "MarketingAdmin"
    VIEW_PROJECT = "ViewProject"
    DELETE_PROJECT = "DeleteProject"
    CREATE_PROJECT = "CreateProject"
    INSTANCE_SERVER = "InstanceServer"

    @classmethod
    def _label(cls) -> str:
        return "role"


class ProjectAction(_NamedEnum):
    VIEW_COMPONENT = "ViewComponent"
    CREATE_COMPONENT = "CreateComponent"
    UPDATE_COMPONENT = "UpdateComponent"
    DELETE_COMPONENT = "DeleteComponent"
    VIEW_INSTANCE = "ViewInstance"
    CREATE_INSTANCE = "CreateInstance"
    UPDATE_INSTANCE = "UpdateInstance"
    DELETE_INSTANCE = "DeleteInstance"
    VIEW_PROJECT_GRANTS = "ViewProjectGrants"
    CREATE_PROJECT_GRANTS = "CreateProjectGrants"
    DELETE_PROJECT_GRANTS = "DeleteProjectGrants"

    @classmethod
    def _label(cls) -> str:
        return "action"


@dataclass(frozen=True)
class AccountId:
    # No validation: account ids are opaque to the CLI.
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProjectId:
    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TokenId:
    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ProjectPolicyId:
    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ComponentId:
    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ComponentName:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProjectRef:
    """Project given by id, by name, or left to the account default.

    At most one of ``project_id`` / ``project_name`` is set.
    """

    project_id: Optional[ProjectId] = None
    project_name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.project_id is not None and self.project_name is not None:
            raise ValueError("project id and project name are mutually exclusive")

    @classmethod
    def id(cls, project_id: ProjectId) -> "ProjectRef":
        return cls(project_id=project_id)

    @classmethod
    def name(cls, project_name: str) -> "ProjectRef":
        return cls(project_name=project_name)

    @classmethod
    def default(cls) -> "ProjectRef":
        return cls()

    @property
    def is_default(self) -> bool:
        return self.project_id is None and self.project_name is None

    @classmethod
    def from_args(cls, project_id: UUID | None, project_name: str | None) -> "ProjectRef":
        if project_id is not None:
            if project_name is not None:
                raise ValueError("project id and project name are mutually exclusive")
            return cls.id(ProjectId(project_id))
        if project_name is not None:
            return cls.name(project_name)
        return cls.default()

    def to_args(self) -> tuple[UUID | None, str | None]:
        if self.project_id is not None:
            return self.project_id.value, None
        return None, self.project_name


@dataclass(frozen=True)
class ComponentIdOrName:
    """Component given by id, or by name within a project reference."""

    component_id: Optional[ComponentId] = None
    component_name: Optional[ComponentName] = None
    project_ref: ProjectRef = ProjectRef()

    def __post_init__(self) -> None:
        if (self.component_id is None) == (self.component_name is None):
            raise ValueError("exactly one of component id and component name is required")
        if self.component_id is not None and not self.project_ref.is_default:
            raise ValueError("a project reference is only allowed with a component name")

    @classmethod
    def id(cls, component_id: ComponentId) -> "ComponentIdOrName":
        return cls(component_id=component_id)

    @classmethod
    def name(cls, component_name: ComponentName, project_ref: ProjectRef) -> "ComponentIdOrName":
        return cls(component_name=component_name, project_ref=project_ref)

    @classmethod
    def from_args(
        cls,
        component_id: UUID | None,
        component_name: str | None,
        project_id: UUID | None = None,
        project_name: str | None = None,
    ) -> "ComponentIdOrName":
        if component_id is not None:
            if component_name is not None:
                raise ValueError("component id and component name are mutually exclusive")
            if project_id is not None or project_name is not None:
                raise ValueError("a project reference is only allowed with a component name")
            return cls.id(ComponentId(component_id))
        if component_name is None:
            raise ValueError("exactly one of component id and component name is required")
        return cls.name(ComponentName(component_name), ProjectRef.from_args(project_id, project_name))

    def to_args(self) -> tuple[UUID | None, str | None, UUID | None, str | None]:
        if self.component_id is not None:
            return self.component_id.value, None, None, None
        project_id, project_name = self.project_ref.to_args()
        return None, self.component_name.value, project_id, project_name


@dataclass(frozen=True)
class GolemResult:
    """Terminal value of every command: a serializable payload or literal text."""

    payload: Any = None
    text: Optional[str] = None

    @classmethod
    def ok(cls, payload: Any) -> "GolemResult":
        return cls(payload=payload)

    @classmethod
    def string(cls, text: str) -> "GolemResult":
        return cls(text=text)

    @property
    def is_text(self) -> bool:
        return self.text is not None


__all__ = [
    "AccountId",
    "ComponentId",
    "ComponentIdOrName",
    "ComponentName",
    "Format",
    "GolemResult",
    "ProjectAction",
    "ProjectId",
    "ProjectPolicyId",
    "ProjectRef",
    "Role",
    "TokenId",
]
