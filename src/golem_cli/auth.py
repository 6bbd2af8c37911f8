"""Authentication context for one CLI invocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from golem_cli.errors import GolemError, ResourceFamily, normalized
from golem_cli.model import AccountId
from golem_cli.schemas import TokenSecret, UnsafeToken

if TYPE_CHECKING:
    from golem_cli.clients.login import LoginClient


def token_header(secret: TokenSecret) -> str:
    return f"bearer {secret.value}"


@dataclass(frozen=True)
class CloudAuthentication:
    token: UnsafeToken

    def header(self) -> str:
        return token_header(self.token.secret)

    def account_id(self) -> AccountId:
        return AccountId(self.token.data.account_id)


async def authenticate(login: LoginClient, secret: str) -> CloudAuthentication:
    """Build the invocation's authentication context from a token secret."""
    try:
        token_secret = TokenSecret(value=secret.strip())
    except ValidationError as exc:
        raise GolemError("Invalid token secret: expected a UUID") from exc
    with normalized(ResourceFamily.LOGIN):
        token = await login.current_token(token_secret)
    return CloudAuthentication(token)


__all__ = ["CloudAuthentication", "authenticate", "token_header"]
