"""Project sharing: grant another account access to a project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from golem_cli.clients.project_grant import ProjectGrantClient
from golem_cli.errors import ResourceFamily, normalized
from golem_cli.model import AccountId, GolemResult, ProjectAction, ProjectPolicyId, ProjectRef
from golem_cli.resolve import ProjectResolver


@dataclass(frozen=True)
class Share:
    """Either ``project_policy_id`` or a non-empty ``project_actions``."""

    project_ref: ProjectRef
    recipient_account_id: AccountId
    project_policy_id: Optional[ProjectPolicyId] = None
    project_actions: Tuple[ProjectAction, ...] = ()

    def __post_init__(self) -> None:
        if (self.project_policy_id is None) == (not self.project_actions):
            raise ValueError("exactly one of project policy id and project actions is required")


class ShareHandler:
    def __init__(self, client: ProjectGrantClient, projects: ProjectResolver) -> None:
        self.client = client
        self.projects = projects

    async def handle(self, command: Share) -> GolemResult:
        project_id = await self.projects.resolve_id_or_default(command.project_ref)
        with normalized(ResourceFamily.PROJECT_GRANT):
            if command.project_policy_id is not None:
                grant = await self.client.create(
                    project_id, command.recipient_account_id, command.project_policy_id
                )
            else:
                grant = await self.client.create_actions(
                    project_id, command.recipient_account_id, list(command.project_actions)
                )
        return GolemResult.ok(grant)


__all__ = ["Share", "ShareHandler"]
