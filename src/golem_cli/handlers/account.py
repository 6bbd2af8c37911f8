"""Account commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from golem_cli.auth import CloudAuthentication
from golem_cli.clients.account import AccountClient
from golem_cli.errors import ResourceFamily, normalized
from golem_cli.model import AccountId, GolemResult
from golem_cli.schemas import AccountData


@dataclass(frozen=True)
class AccountGet:
    account_id: Optional[AccountId] = None


@dataclass(frozen=True)
class AccountUpdate:
    account_id: Optional[AccountId] = None
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class AccountAdd:
    name: str
    email: str


@dataclass(frozen=True)
class AccountDelete:
    account_id: Optional[AccountId] = None


AccountCommand = Union[AccountGet, AccountUpdate, AccountAdd, AccountDelete]


class AccountHandler:
    def __init__(self, client: AccountClient, auth: CloudAuthentication) -> None:
        self.client = client
        self.auth = auth

    def _account_id(self, account_id: AccountId | None) -> AccountId:
        return account_id if account_id is not None else self.auth.account_id()

    async def handle(self, command: AccountCommand) -> GolemResult:
        with normalized(ResourceFamily.ACCOUNT):
            if isinstance(command, AccountGet):
                account = await self.client.get(self._account_id(command.account_id))
                return GolemResult.ok(account)

            if isinstance(command, AccountUpdate):
                account_id = self._account_id(command.account_id)
                existing = await self.client.get(account_id)
                data = AccountData(
                    name=command.name if command.name is not None else existing.name,
                    email=command.email if command.email is not None else existing.email,
                )
                return GolemResult.ok(await self.client.put(account_id, data))

            if isinstance(command, AccountAdd):
                account = await self.client.post(AccountData(name=command.name, email=command.email))
                return GolemResult.ok(account)

            if isinstance(command, AccountDelete):
                await self.client.delete(self._account_id(command.account_id))
                return GolemResult.string("Deleted")

        raise TypeError(f"unsupported account command: {command!r}")


__all__ = [
    "AccountAdd",
    "AccountCommand",
    "AccountDelete",
    "AccountGet",
    "AccountHandler",
    "AccountUpdate",
]
