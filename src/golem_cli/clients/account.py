"""Account resource client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from golem_cli.clients.transport import CloudHttp, decode
from golem_cli.errors import ResourceFamily
from golem_cli.model import AccountId
from golem_cli.schemas import Account, AccountData

FAMILY = ResourceFamily.ACCOUNT


class AccountClient(Protocol):
    async def get(self, account_id: AccountId) -> Account: ...

    async def put(self, account_id: AccountId, data: AccountData) -> Account: ...

    async def post(self, data: AccountData) -> Account: ...

    async def delete(self, account_id: AccountId) -> None: ...


@dataclass
class AccountClientLive:
    http: CloudHttp

    async def get(self, account_id: AccountId) -> Account:
        body = await self.http.request(FAMILY, "GET", f"/v2/accounts/{account_id}")
        return decode(Account, body)

    async def put(self, account_id: AccountId, data: AccountData) -> Account:
        body = await self.http.request(
            FAMILY,
            "PUT",
            f"/v2/accounts/{account_id}",
            json_payload=data.model_dump(mode="json", by_alias=True),
        )
        return decode(Account, body)

    async def post(self, data: AccountData) -> Account:
        body = await self.http.request(
            FAMILY,
            "POST",
            "/v2/accounts",
            json_payload=data.model_dump(mode="json", by_alias=True),
        )
        return decode(Account, body)

    async def delete(self, account_id: AccountId) -> None:
        await self.http.request(FAMILY, "DELETE", f"/v2/accounts/{account_id}")


__all__ = ["AccountClient", "AccountClientLive"]
