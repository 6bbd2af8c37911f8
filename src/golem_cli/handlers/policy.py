"""Project policy commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from golem_cli.clients.policy import ProjectPolicyClient
from golem_cli.errors import ResourceFamily, normalized
from golem_cli.model import GolemResult, ProjectAction, ProjectPolicyId


@dataclass(frozen=True)
class PolicyAdd:
    project_policy_name: str
    project_actions: Tuple[ProjectAction, ...]


@dataclass(frozen=True)
class PolicyGet:
    project_policy_id: ProjectPolicyId


PolicyCommand = Union[PolicyAdd, PolicyGet]


class PolicyHandler:
    def __init__(self, client: ProjectPolicyClient) -> None:
        self.client = client

    async def handle(self, command: PolicyCommand) -> GolemResult:
        with normalized(ResourceFamily.POLICY):
            if isinstance(command, PolicyAdd):
                policy = await self.client.create(
                    command.project_policy_name, list(command.project_actions)
                )
                return GolemResult.ok(policy)
            if isinstance(command, PolicyGet):
                return GolemResult.ok(await self.client.get(command.project_policy_id))

        raise TypeError(f"unsupported policy command: {command!r}")


__all__ = ["PolicyAdd", "PolicyCommand", "PolicyGet", "PolicyHandler"]
