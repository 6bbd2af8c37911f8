"""Shared HTTP transport for the Golem Cloud resource clients."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from golem_cli.auth import CloudAuthentication
from golem_cli.errors import (
    InvalidHeaderValue,
    RequestFailure,
    ResourceFamily,
    error_from_response,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode(model: type[ModelT], body: Any) -> ModelT:
    """Validate a 2xx response body, reporting a mismatch as RequestFailure."""
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "body"
        raise RequestFailure(
            f"invalid {model.__name__} response: {location}: {first['msg']}"
        ) from exc


def decode_list(model: type[ModelT], body: Any) -> list[ModelT]:
    if body is None:
        return []
    if not isinstance(body, list):
        raise RequestFailure(f"invalid {model.__name__} list response: expected a JSON array")
    return [decode(model, item) for item in body]


@dataclass
class CloudHttp:
    base_url: str
    auth: CloudAuthentication | None = None
    timeout: float = 30.0
    retries: int = 2

    def __post_init__(self) -> None:
        self._session = requests.Session()
        retry = Retry(
            total=max(0, int(self.retries)),
            connect=max(0, int(self.retries)),
            read=max(0, int(self.retries)),
            status=max(0, int(self.retries)),
            status_forcelist=(429, 502, 503),
            backoff_factor=0.2,
            allowed_methods=("GET",),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

    def close(self) -> None:
        self._session.close()

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self, secret_header: str | None) -> dict[str, str]:
        if secret_header is not None:
            return {"Authorization": secret_header}
        if self.auth is not None:
            return {"Authorization": self.auth.header()}
        return {}

    def request_sync(
        self,
        family: ResourceFamily,
        method: str,
        path: str,
        *,
        json_payload: Any = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        authorization: str | None = None,
    ) -> Any:
        logger.debug("%s %s", method, path)
        try:
            response = self._session.request(
                method,
                self._url(path),
                json=json_payload,
                params=params,
                files=files,
                headers=self._headers(authorization),
                timeout=self.timeout,
            )
        except requests.exceptions.InvalidHeader as exc:
            raise InvalidHeaderValue(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            raise RequestFailure(str(exc)) from exc

        if response.status_code >= 400:
            try:
                body: object = response.json()
            except ValueError:
                body = response.text
            logger.debug("%s %s -> %s", method, path, response.status_code)
            raise error_from_response(family, response.status_code, body)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RequestFailure(f"invalid JSON response: {exc}") from exc

    async def request(self, family: ResourceFamily, method: str, path: str, **kwargs: Any) -> Any:
        return await asyncio.to_thread(self.request_sync, family, method, path, **kwargs)


__all__ = ["CloudHttp", "decode", "decode_list"]
