"""Golem Cloud CLI public surface."""

from golem_cli.auth import CloudAuthentication, authenticate, token_header
from golem_cli.errors import (
    AlreadyExists,
    BackendError,
    BadRequest,
    GatewayTimeout,
    GolemError,
    InternalError,
    InvalidHeaderValue,
    LimitExceeded,
    LoginExternalError,
    LoginRestricted,
    NotFound,
    RequestFailure,
    ResourceFamily,
    UnexpectedStatus,
    normalize,
)
from golem_cli.model import (
    AccountId,
    ComponentId,
    ComponentIdOrName,
    ComponentName,
    Format,
    GolemResult,
    ProjectAction,
    ProjectId,
    ProjectPolicyId,
    ProjectRef,
    Role,
    TokenId,
)
from golem_cli.render import render
from golem_cli.resolve import ComponentResolver, ProjectResolver

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
    "normalize",
    "CloudAuthentication",
    "authenticate",
    "token_header",
    "AccountId",
    "ComponentId",
    "ComponentIdOrName",
    "ComponentName",
    "Format",
    "GolemResult",
    "ProjectAction",
    "ProjectId",
    "ProjectPolicyId",
    "ProjectRef",
    "Role",
    "TokenId",
    "ProjectResolver",
    "ComponentResolver",
    "render",
]
