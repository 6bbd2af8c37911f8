"""Account role grant commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from golem_cli.auth import CloudAuthentication
from golem_cli.clients.grant import GrantClient
from golem_cli.errors import ResourceFamily, normalized
from golem_cli.model import AccountId, GolemResult, Role


@dataclass(frozen=True)
class GrantGet:
    account_id: Optional[AccountId] = None


@dataclass(frozen=True)
class GrantAdd:
    role: Role
    account_id: Optional[AccountId] = None


@dataclass(frozen=True)
class GrantDelete:
    role: Role
    account_id: Optional[AccountId] = None


GrantCommand = Union[GrantGet, GrantAdd, GrantDelete]


class GrantHandler:
    def __init__(self, client: GrantClient, auth: CloudAuthentication) -> None:
        self.client = client
        self.auth = auth

    async def handle(self, command: GrantCommand) -> GolemResult:
        account_id = command.account_id or self.auth.account_id()
        with normalized(ResourceFamily.GRANT):
            if isinstance(command, GrantGet):
                roles = await self.client.get_all(account_id)
                return GolemResult.ok([role.value for role in roles])
            if isinstance(command, GrantAdd):
                await self.client.put(account_id, command.role)
                return GolemResult.string("RoleGranted")
            if isinstance(command, GrantDelete):
                await self.client.delete(account_id, command.role)
                return GolemResult.string("RoleRemoved")

        raise TypeError(f"unsupported grant command: {command!r}")


__all__ = ["GrantAdd", "GrantCommand", "GrantDelete", "GrantGet", "GrantHandler"]
