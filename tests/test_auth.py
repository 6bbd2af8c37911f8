from __future__ import annotations

import asyncio

import pytest

from fakes import ACCOUNT, make_auth
from golem_cli.auth import authenticate
from golem_cli.errors import GolemError, LoginExternalError
from golem_cli.model import AccountId


def test_header_and_account_id() -> None:
    auth = make_auth()
    assert auth.header() == "bearer 00000000-0000-0000-0000-0000000000aa"
    assert auth.account_id() == AccountId(ACCOUNT)


class _Login:
    def __init__(self, error=None) -> None:
        self.error = error
        self.secrets: list[object] = []

    async def current_token(self, secret):
        self.secrets.append(secret)
        if self.error is not None:
            raise self.error
        return make_auth().token


def test_authenticate_builds_context() -> None:
    login = _Login()
    auth = asyncio.run(authenticate(login, "00000000-0000-0000-0000-0000000000aa"))
    assert auth.account_id() == AccountId(ACCOUNT)
    assert len(login.secrets) == 1


def test_authenticate_rejects_malformed_secret() -> None:
    login = _Login()
    with pytest.raises(GolemError) as exc_info:
        asyncio.run(authenticate(login, "not-a-uuid"))
    assert str(exc_info.value) == "Invalid token secret: expected a UUID"
    assert login.secrets == []


def test_authenticate_normalizes_login_errors() -> None:
    login = _Login(error=LoginExternalError("github unavailable"))
    with pytest.raises(GolemError) as exc_info:
        asyncio.run(authenticate(login, "00000000-0000-0000-0000-0000000000aa"))
    assert str(exc_info.value) == "External service call error on Login: github unavailable"
