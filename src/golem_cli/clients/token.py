"""Token resource client."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from golem_cli.clients.transport import CloudHttp, decode, decode_list
from golem_cli.errors import ResourceFamily
from golem_cli.model import AccountId, TokenId
from golem_cli.schemas import Token, UnsafeToken

FAMILY = ResourceFamily.TOKEN


class TokenClient(Protocol):
    async def get_all(self, account_id: AccountId) -> list[Token]: ...

    async def post(self, account_id: AccountId, expires_at: datetime) -> UnsafeToken: ...

    async def delete(self, account_id: AccountId, token_id: TokenId) -> None: ...


@dataclass
class TokenClientLive:
    http: CloudHttp

    async def get_all(self, account_id: AccountId) -> list[Token]:
        body = await self.http.request(FAMILY, "GET", f"/v2/accounts/{account_id}/tokens")
        return decode_list(Token, body)

    async def post(self, account_id: AccountId, expires_at: datetime) -> UnsafeToken:
        body = await self.http.request(
            FAMILY,
            "POST",
            f"/v2/accounts/{account_id}/tokens",
            json_payload={"expiresAt": expires_at.isoformat()},
        )
        return decode(UnsafeToken, body)

    async def delete(self, account_id: AccountId, token_id: TokenId) -> None:
        await self.http.request(FAMILY, "DELETE", f"/v2/accounts/{account_id}/tokens/{token_id}")


__all__ = ["TokenClient", "TokenClientLive"]
