"""Account role grant client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from golem_cli.clients.transport import CloudHttp
from golem_cli.errors import RequestFailure, ResourceFamily
from golem_cli.model import AccountId, Role

FAMILY = ResourceFamily.GRANT


class GrantClient(Protocol):
    async def get_all(self, account_id: AccountId) -> list[Role]: ...

    async def put(self, account_id: AccountId, role: Role) -> None: ...

    async def delete(self, account_id: AccountId, role: Role) -> None: ...


@dataclass
class GrantClientLive:
    http: CloudHttp

    async def get_all(self, account_id: AccountId) -> list[Role]:
        body = await self.http.request(FAMILY, "GET", f"/v2/accounts/{account_id}/grants")
        try:
            return [Role.parse(str(item)) for item in body or []]
        except ValueError as exc:
            raise RequestFailure(str(exc)) from exc

    async def put(self, account_id: AccountId, role: Role) -> None:
        await self.http.request(FAMILY, "PUT", f"/v2/accounts/{account_id}/grants/{role.value}")

    async def delete(self, account_id: AccountId, role: Role) -> None:
        await self.http.request(
            FAMILY, "DELETE", f"/v2/accounts/{account_id}/grants/{role.value}"
        )


__all__ = ["GrantClient", "GrantClientLive"]
