"""Golem Cloud API payload schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountData(ApiModel):
    name: str
    email: str


class Account(ApiModel):
    id: str
    name: str
    email: str
    plan_id: Optional[UUID] = None


class Token(ApiModel):
    id: UUID
    account_id: str
    created_at: datetime
    expires_at: datetime


class TokenSecret(ApiModel):
    value: UUID


class UnsafeToken(ApiModel):
    data: Token
    secret: TokenSecret


class ProjectData(ApiModel):
    name: str
    owner_account_id: str
    description: str = ""
    default_environment_id: str = "default"
    project_type: str = "Default"


class Project(ApiModel):
    project_id: UUID
    project_data: ProjectData


class ProjectActions(ApiModel):
    actions: List[str]


class ProjectPolicyData(ApiModel):
    name: str
    project_actions: ProjectActions


class ProjectPolicy(ApiModel):
    id: UUID
    name: str
    project_actions: ProjectActions


class ProjectGrantData(ApiModel):
    grantee_account_id: str
    grantor_project_id: UUID
    project_policy_id: UUID


class ProjectGrantDataRequest(ApiModel):
    grantee_account_id: str
    project_policy_id: Optional[UUID] = None
    project_actions: Optional[List[str]] = None
    project_policy_name: Optional[str] = None


class ProjectGrant(ApiModel):
    id: UUID
    data: ProjectGrantData


class VersionedComponentId(ApiModel):
    component_id: UUID
    version: int


class Component(ApiModel):
    versioned_component_id: VersionedComponentId
    component_name: str
    component_size: int = 0
    project_id: Optional[UUID] = None
    metadata: dict = Field(default_factory=dict)


class ApiSite(ApiModel):
    host: str
    subdomain: str


class ApiDeployment(ApiModel):
    api_definition_id: str
    project_id: UUID
    site: ApiSite


__all__ = [
    "Account",
    "AccountData",
    "ApiDeployment",
    "ApiModel",
    "ApiSite",
    "Component",
    "Project",
    "ProjectActions",
    "ProjectData",
    "ProjectGrant",
    "ProjectGrantData",
    "ProjectGrantDataRequest",
    "ProjectPolicy",
    "ProjectPolicyData",
    "Token",
    "TokenSecret",
    "UnsafeToken",
    "VersionedComponentId",
]
