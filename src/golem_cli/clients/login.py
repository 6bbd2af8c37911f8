"""Login client: exchanges a token secret for the token it belongs to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from golem_cli.auth import token_header
from golem_cli.clients.transport import CloudHttp, decode
from golem_cli.errors import ResourceFamily
from golem_cli.schemas import Token, TokenSecret, UnsafeToken

FAMILY = ResourceFamily.LOGIN


class LoginClient(Protocol):
    async def current_token(self, secret: TokenSecret) -> UnsafeToken: ...


@dataclass
class LoginClientLive:
    http: CloudHttp

    async def current_token(self, secret: TokenSecret) -> UnsafeToken:
        body = await self.http.request(
            FAMILY,
            "GET",
            "/v2/login/token",
            authorization=token_header(secret),
        )
        return UnsafeToken(data=decode(Token, body), secret=secret)


__all__ = ["LoginClient", "LoginClientLive"]
