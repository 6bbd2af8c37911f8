"""Token commands."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from golem_cli.auth import CloudAuthentication
from golem_cli.clients.token import TokenClient
from golem_cli.errors import ResourceFamily, normalized
from golem_cli.model import AccountId, GolemResult, TokenId

DEFAULT_EXPIRY = datetime(2100, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class TokenList:
    account_id: Optional[AccountId] = None


@dataclass(frozen=True)
class TokenAdd:
    account_id: Optional[AccountId] = None
    expires_at: datetime = DEFAULT_EXPIRY


@dataclass(frozen=True)
class TokenDelete:
    token_id: TokenId
    account_id: Optional[AccountId] = None


TokenCommand = Union[TokenList, TokenAdd, TokenDelete]


class TokenHandler:
    def __init__(self, client: TokenClient, auth: CloudAuthentication) -> None:
        self.client = client
        self.auth = auth

    async def handle(self, command: TokenCommand) -> GolemResult:
        account_id = command.account_id or self.auth.account_id()
        with normalized(ResourceFamily.TOKEN):
            if isinstance(command, TokenList):
                return GolemResult.ok(await self.client.get_all(account_id))
            if isinstance(command, TokenAdd):
                return GolemResult.ok(await self.client.post(account_id, command.expires_at))
            if isinstance(command, TokenDelete):
                await self.client.delete(account_id, command.token_id)
                return GolemResult.string("Deleted")

        raise TypeError(f"unsupported token command: {command!r}")


__all__ = ["TokenAdd", "TokenCommand", "TokenDelete", "TokenHandler", "TokenList"]
