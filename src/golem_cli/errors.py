"""Backend error variants and their normalization into GolemError."""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterator


class GolemError(RuntimeError):
    """User-facing error carrying one rendered message."""

    def __init__(self, message: str) -> None:
        if not message:
            raise ValueError("GolemError requires a non-empty message")
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        return isinstance(other, GolemError) and other.message == self.message

    def __hash__(self) -> int:
        return hash(self.message)


class BackendError(RuntimeError):
    """Base of every error a resource client can raise."""


class RequestFailure(BackendError):
    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


class InvalidHeaderValue(BackendError):
    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


class UnexpectedStatus(BackendError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"status {status_code}")
        self.status_code = status_code


class NotFound(BackendError):
    """404 with a backend-supplied message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequest(BackendError):
    """400 with a list of validation errors."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = list(errors)


class LimitExceeded(BackendError):
    """403 outside of login."""

    def __init__(self, error: str) -> None:
        super().__init__(error)
        self.error = error


class InternalError(BackendError):
    def __init__(self, error: str) -> None:
        super().__init__(error)
        self.error = error


class AlreadyExists(BackendError):
    """409 raised when a component is created twice."""

    def __init__(self, component_id: str) -> None:
        super().__init__(component_id)
        self.component_id = component_id


class GatewayTimeout(BackendError):
    def __init__(self) -> None:
        super().__init__("gateway timeout")


class LoginRestricted(BackendError):
    """403 on login: none of the account's verified emails is whitelisted."""

    def __init__(self, error: str = "") -> None:
        super().__init__(error)
        self.error = error


class LoginExternalError(BackendError):
    """401 on login: the external identity provider call failed."""

    def __init__(self, error: str) -> None:
        super().__init__(error)
        self.error = error


class ResourceFamily(str, Enum):
    ACCOUNT = "account"
    TOKEN = "token"
    PROJECT = "project"
    GRANT = "grant"
    POLICY = "policy"
    PROJECT_GRANT = "project-grant"
    COMPONENT = "component"
    DEPLOYMENT = "deployment"
    LOGIN = "login"


LOGIN_RESTRICTED_MESSAGE = (
    "At the moment account creation is restricted.\n"
    "None of your verified emails is whitelisted.\n"
    "Please contact us to create an account.\n"
)

_Mapper = Callable[[BackendError], str]

_COMMON: dict[type[BackendError], _Mapper] = {
    RequestFailure: lambda e: f"Unexpected request failure: {e.details}",
    InvalidHeaderValue: lambda e: f"Unexpected invalid header value: {e.details}",
    UnexpectedStatus: lambda e: f"Unexpected status: {e.status_code}",
}
_NOT_FOUND: dict[type[BackendError], _Mapper] = {
    NotFound: lambda e: f"Not found: {e.message}",
}
_BAD_REQUEST: dict[type[BackendError], _Mapper] = {
    BadRequest: lambda e: f"Invalid API call: {', '.join(e.errors)}",
}
_LIMIT: dict[type[BackendError], _Mapper] = {
    LimitExceeded: lambda e: f"Limit Exceeded: {e.error}",
}
_INTERNAL: dict[type[BackendError], _Mapper] = {
    InternalError: lambda e: f"Internal server error: {e.error}",
}
_TIMEOUT: dict[type[BackendError], _Mapper] = {
    GatewayTimeout: lambda e: "Gateway Timeout",
}

_BASIC = {**_COMMON, **_NOT_FOUND, **_BAD_REQUEST, **_INTERNAL}
_LIMITED = {**_BASIC, **_LIMIT}

_MAPPERS: dict[ResourceFamily, dict[type[BackendError], _Mapper]] = {
    ResourceFamily.ACCOUNT: _BASIC,
    ResourceFamily.TOKEN: _BASIC,
    ResourceFamily.GRANT: _BASIC,
    ResourceFamily.PROJECT: _LIMITED,
    ResourceFamily.POLICY: _LIMITED,
    ResourceFamily.PROJECT_GRANT: _LIMITED,
    ResourceFamily.COMPONENT: {
        **_LIMITED,
        **_TIMEOUT,
        AlreadyExists: lambda e: f"{e.component_id} already exists",
    },
    ResourceFamily.DEPLOYMENT: {**_LIMITED, **_TIMEOUT},
    ResourceFamily.LOGIN: {
        **_COMMON,
        LoginRestricted: lambda e: LOGIN_RESTRICTED_MESSAGE,
        InternalError: lambda e: f"Internal server error on Login: {e.error}",
        LoginExternalError: lambda e: f"External service call error on Login: {e.error}",
    },
}

# HTTP status -> variant class, per family. Anything else is UnexpectedStatus.
_STATUS_VARIANTS: dict[ResourceFamily, dict[int, type[BackendError]]] = {}
_SHARED_STATUSES: dict[int, type[BackendError]] = {
    400: BadRequest,
    403: LimitExceeded,
    404: NotFound,
    409: AlreadyExists,
    500: InternalError,
    504: GatewayTimeout,
}
for _family, _mapping in _MAPPERS.items():
    if _family is ResourceFamily.LOGIN:
        _STATUS_VARIANTS[_family] = {
            401: LoginExternalError,
            403: LoginRestricted,
            500: InternalError,
        }
        continue
    _STATUS_VARIANTS[_family] = {
        status: variant for status, variant in _SHARED_STATUSES.items() if variant in _mapping
    }


def variants_of(family: ResourceFamily) -> tuple[type[BackendError], ...]:
    return tuple(_MAPPERS[family])


def statuses_of(family: ResourceFamily) -> dict[int, type[BackendError]]:
    return dict(_STATUS_VARIANTS[family])


def _body_text(body: object, key: str) -> str:
    if isinstance(body, dict):
        value = body.get(key)
        if value is not None:
            return str(value)
    if isinstance(body, str):
        return body
    return ""


def error_from_response(family: ResourceFamily, status_code: int, body: object) -> BackendError:
    """Build the family's error variant for an HTTP error response."""
    variant = _STATUS_VARIANTS[family].get(status_code)
    if variant is None:
        return UnexpectedStatus(status_code)
    if variant is BadRequest:
        errors = body.get("errors") if isinstance(body, dict) else None
        if not isinstance(errors, list):
            errors = [_body_text(body, "error")] if body else []
        return BadRequest([str(item) for item in errors])
    if variant is NotFound:
        return NotFound(_body_text(body, "message") or _body_text(body, "error"))
    if variant is AlreadyExists:
        return AlreadyExists(_body_text(body, "component_id") or _body_text(body, "componentId"))
    if variant is GatewayTimeout:
        return GatewayTimeout()
    return variant(_body_text(body, "error"))


def normalize(family: ResourceFamily, error: BackendError) -> GolemError:
    """Project a backend error of the given family onto a GolemError.

    Raises TypeError when the variant is not part of the family's closed set.
    """
    mapper = _MAPPERS[family].get(type(error))
    if mapper is None:
        raise TypeError(f"{family.value} errors have no {type(error).__name__} variant")
    return GolemError(mapper(error))


@contextmanager
def normalized(family: ResourceFamily) -> Iterator[None]:
    """Re-raise any BackendError from the block as the family's GolemError."""
    try:
        yield
    except BackendError as exc:
        raise normalize(family, exc) from exc


__all__ = [
    "GolemError",
    "BackendError",
    "RequestFailure",
    "InvalidHeaderValue",
    "UnexpectedStatus",
    "NotFound",
    "BadRequest",
    "LimitExceeded",
    "InternalError",
    "AlreadyExists",
    "GatewayTimeout",
    "LoginRestricted",
    "LoginExternalError",
    "ResourceFamily",
    "LOGIN_RESTRICTED_MESSAGE",
    "error_from_response",
    "normalize",
    "normalized",
    "statuses_of",
    "variants_of",
]
