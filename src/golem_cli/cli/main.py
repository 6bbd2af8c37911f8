"""Command-line interface for golem-cloud."""

from __future__ import annotations

import argparse
import asyncio
import logging
import re
import sys
from dataclasses import replace
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from pathlib import Path
from typing import Any, Sequence
from uuid import UUID

from golem_cli.auth import CloudAuthentication, authenticate
from golem_cli.cli.config import TOKEN_SECRET_ENV_VAR, CLIConfig, ConfigError, load_cli_config
from golem_cli.clients import (
    AccountClientLive,
    CloudHttp,
    ComponentClientLive,
    DeploymentClientLive,
    GrantClientLive,
    LoginClientLive,
    ProjectClientLive,
    ProjectGrantClientLive,
    ProjectPolicyClientLive,
    TokenClientLive,
)
from golem_cli.errors import GolemError
from golem_cli.handlers import (
    AccountHandler,
    ComponentHandler,
    DeploymentHandler,
    GrantHandler,
    PolicyHandler,
    ProjectHandler,
    ShareHandler,
    TokenHandler,
)
from golem_cli.handlers.account import AccountAdd, AccountDelete, AccountGet, AccountUpdate
from golem_cli.handlers.component import ComponentAdd, ComponentGet, ComponentList, ComponentUpdate
from golem_cli.handlers.deployment import DeploymentAdd, DeploymentDelete, DeploymentGet
from golem_cli.handlers.grant import GrantAdd, GrantDelete, GrantGet
from golem_cli.handlers.policy import PolicyAdd, PolicyGet
from golem_cli.handlers.project import ProjectAdd, ProjectGetDefault, ProjectList
from golem_cli.handlers.share import Share
from golem_cli.handlers.token import DEFAULT_EXPIRY, TokenAdd, TokenDelete, TokenList
from golem_cli.model import (
    AccountId,
    ComponentIdOrName,
    ComponentName,
    Format,
    GolemResult,
    ProjectAction,
    ProjectPolicyId,
    ProjectRef,
    Role,
    TokenId,
)
from golem_cli.render import render
from golem_cli.resolve import ComponentResolver, ProjectResolver

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_COMMAND_FAILED = 1

_BEARER_CREDENTIAL = re.compile(r"(?i)(bearer\s+)([^,\s]+)")


def _cli_version() -> str:
    try:
        return pkg_version("golem-cloud-cli")
    except PackageNotFoundError:
        return "0.0.0+local"


def _enum_arg(enum_cls):
    def parse(raw: str):
        try:
            return enum_cls.parse(raw)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    parse.__name__ = enum_cls.__name__.lower()
    return parse


def _datetime_arg(raw: str) -> datetime:
    try:
        value = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid timestamp: {raw}") from exc
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _add_project_ref(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-P", "--project-id", type=UUID, default=None, help="Project id")
    group.add_argument("-p", "--project-name", default=None, help="Project name")


def _add_component_ref(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("-C", "--component-id", type=UUID, default=None, help="Component id")
    group.add_argument("-c", "--component-name", default=None, help="Component name")
    _add_project_ref(parser)


def _add_account_id(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-A",
        "--account-id",
        default=None,
        help="Account id (default: the authenticated account)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="golem-cloud")
    parser.add_argument(
        "--version",
        action="version",
        version=f"golem-cloud {_cli_version()}",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to CLI config TOML (default: ~/.golem/config.toml)",
    )
    parser.add_argument(
        "-F",
        "--format",
        type=_enum_arg(Format),
        default=None,
        help='Output format: "json" or "yaml" (default from config)',
    )
    parser.add_argument("--cloud-url", default=None, help="Cloud API base URL override")
    parser.add_argument("--gateway-url", default=None, help="API gateway base URL override")
    parser.add_argument(
        "-T",
        "--auth-token",
        default=None,
        help=f"Token secret (default: ${TOKEN_SECRET_ENV_VAR} or config)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    account = sub.add_parser("account", help="Manage accounts")
    account_sub = account.add_subparsers(dest="account_command", required=True)
    account_get = account_sub.add_parser("get", help="Show account details")
    _add_account_id(account_get)
    account_update = account_sub.add_parser("update", help="Update account name or email")
    _add_account_id(account_update)
    account_update.add_argument("-n", "--account-name", default=None)
    account_update.add_argument("-e", "--account-email", default=None)
    account_add = account_sub.add_parser("add", help="Create an account")
    account_add.add_argument("-n", "--account-name", required=True)
    account_add.add_argument("-e", "--account-email", required=True)
    account_delete = account_sub.add_parser("delete", help="Delete an account")
    _add_account_id(account_delete)

    token = sub.add_parser("token", help="Manage access tokens")
    token_sub = token.add_subparsers(dest="token_command", required=True)
    token_list = token_sub.add_parser("list", help="List tokens")
    _add_account_id(token_list)
    token_add = token_sub.add_parser("add", help="Create a token")
    _add_account_id(token_add)
    token_add.add_argument(
        "--expires-at",
        type=_datetime_arg,
        default=DEFAULT_EXPIRY,
        help="Expiration timestamp (ISO 8601, default 2100-01-01T00:00:00Z)",
    )
    token_delete = token_sub.add_parser("delete", help="Delete a token")
    _add_account_id(token_delete)
    token_delete.add_argument("token_id", type=UUID)

    project = sub.add_parser("project", help="Manage projects")
    project_sub = project.add_subparsers(dest="project_command", required=True)
    project_list = project_sub.add_parser("list", help="List projects")
    project_list.add_argument("-p", "--project-name", default=None)
    project_add = project_sub.add_parser("add", help="Create a project")
    project_add.add_argument("-p", "--project-name", required=True)
    project_add.add_argument("-t", "--project-description", default=None)
    project_sub.add_parser("get-default", help="Show the default project")

    grant = sub.add_parser("grant", help="Manage account roles")
    grant_sub = grant.add_subparsers(dest="grant_command", required=True)
    grant_get = grant_sub.add_parser("get", help="List granted roles")
    _add_account_id(grant_get)
    grant_add = grant_sub.add_parser("add", help="Grant a role")
    _add_account_id(grant_add)
    grant_add.add_argument("role", type=_enum_arg(Role))
    grant_delete = grant_sub.add_parser("delete", help="Revoke a role")
    _add_account_id(grant_delete)
    grant_delete.add_argument("role", type=_enum_arg(Role))

    policy = sub.add_parser("policy", help="Manage project policies")
    policy_sub = policy.add_subparsers(dest="policy_command", required=True)
    policy_add = policy_sub.add_parser("add", help="Create a project policy")
    policy_add.add_argument("--project-policy-name", required=True)
    policy_add.add_argument(
        "--project-actions",
        type=_enum_arg(ProjectAction),
        nargs="+",
        required=True,
    )
    policy_get = policy_sub.add_parser("get", help="Show a project policy")
    policy_get.add_argument("project_policy_id", type=UUID)

    share = sub.add_parser("share", help="Share a project with another account")
    _add_project_ref(share)
    share.add_argument("--recipient-account-id", required=True)
    share_target = share.add_mutually_exclusive_group(required=True)
    share_target.add_argument("--project-policy-id", type=UUID, default=None)
    share_target.add_argument(
        "--project-actions",
        type=_enum_arg(ProjectAction),
        nargs="+",
        default=None,
    )

    component = sub.add_parser("component", help="Manage components")
    component_sub = component.add_subparsers(dest="component_command", required=True)
    component_add = component_sub.add_parser("add", help="Upload a new component")
    _add_project_ref(component_add)
    component_add.add_argument("-c", "--component-name", required=True)
    component_add.add_argument("component_file", type=Path)
    component_update = component_sub.add_parser("update", help="Upload a new component version")
    _add_component_ref(component_update)
    component_update.add_argument("component_file", type=Path)
    component_list = component_sub.add_parser("list", help="List components")
    _add_project_ref(component_list)
    component_list.add_argument("-c", "--component-name", default=None)
    component_get = component_sub.add_parser("get", help="Show component metadata")
    _add_component_ref(component_get)
    component_get.add_argument("-t", "--version", type=int, default=None)

    deployment = sub.add_parser("deployment", help="Manage API gateway deployments")
    deployment_sub = deployment.add_subparsers(dest="deployment_command", required=True)
    deployment_get = deployment_sub.add_parser("get", help="Show deployments of an API definition")
    _add_project_ref(deployment_get)
    deployment_get.add_argument("-d", "--definition-id", required=True, metavar="api-definition-id")
    deployment_add = deployment_sub.add_parser("add", help="Deploy an API definition to a site")
    _add_project_ref(deployment_add)
    deployment_add.add_argument("-d", "--definition-id", required=True, metavar="api-definition-id")
    deployment_add.add_argument("-H", "--host", required=True, metavar="site-host")
    deployment_add.add_argument("-s", "--subdomain", required=True, metavar="site-subdomain")
    deployment_delete = deployment_sub.add_parser("delete", help="Remove a deployment")
    _add_project_ref(deployment_delete)
    deployment_delete.add_argument("-s", "--site", required=True)
    deployment_delete.add_argument("-d", "--definition-id", required=True, metavar="api-definition-id")

    return parser


def _account_id(args: argparse.Namespace) -> AccountId | None:
    return AccountId(args.account_id) if args.account_id else None


def _project_ref(args: argparse.Namespace) -> ProjectRef:
    return ProjectRef.from_args(args.project_id, args.project_name)


def _component_ref(args: argparse.Namespace) -> ComponentIdOrName:
    return ComponentIdOrName.from_args(
        args.component_id,
        args.component_name,
        args.project_id,
        args.project_name,
    )


def _build_command(args: argparse.Namespace) -> Any:
    """Turn the parsed namespace into the subcommand value for its handler."""
    if args.command == "account":
        if args.account_command == "get":
            return AccountGet(account_id=_account_id(args))
        if args.account_command == "update":
            return AccountUpdate(
                account_id=_account_id(args),
                name=args.account_name,
                email=args.account_email,
            )
        if args.account_command == "add":
            return AccountAdd(name=args.account_name, email=args.account_email)
        return AccountDelete(account_id=_account_id(args))

    if args.command == "token":
        if args.token_command == "list":
            return TokenList(account_id=_account_id(args))
        if args.token_command == "add":
            return TokenAdd(account_id=_account_id(args), expires_at=args.expires_at)
        return TokenDelete(token_id=TokenId(args.token_id), account_id=_account_id(args))

    if args.command == "project":
        if args.project_command == "list":
            return ProjectList(project_name=args.project_name)
        if args.project_command == "add":
            return ProjectAdd(
                project_name=args.project_name,
                project_description=args.project_description,
            )
        return ProjectGetDefault()

    if args.command == "grant":
        if args.grant_command == "get":
            return GrantGet(account_id=_account_id(args))
        if args.grant_command == "add":
            return GrantAdd(role=args.role, account_id=_account_id(args))
        return GrantDelete(role=args.role, account_id=_account_id(args))

    if args.command == "policy":
        if args.policy_command == "add":
            return PolicyAdd(
                project_policy_name=args.project_policy_name,
                project_actions=tuple(args.project_actions),
            )
        return PolicyGet(project_policy_id=ProjectPolicyId(args.project_policy_id))

    if args.command == "share":
        return Share(
            project_ref=_project_ref(args),
            recipient_account_id=AccountId(args.recipient_account_id),
            project_policy_id=(
                ProjectPolicyId(args.project_policy_id) if args.project_policy_id else None
            ),
            project_actions=tuple(args.project_actions or ()),
        )

    if args.command == "component":
        if args.component_command == "add":
            return ComponentAdd(
                project_ref=_project_ref(args),
                component_name=ComponentName(args.component_name),
                component_file=args.component_file,
            )
        if args.component_command == "update":
            return ComponentUpdate(component=_component_ref(args), component_file=args.component_file)
        if args.component_command == "list":
            return ComponentList(
                project_ref=_project_ref(args),
                component_name=ComponentName(args.component_name) if args.component_name else None,
            )
        return ComponentGet(component=_component_ref(args), version=args.version)

    if args.command == "deployment":
        if args.deployment_command == "get":
            return DeploymentGet(project_ref=_project_ref(args), definition_id=args.definition_id)
        if args.deployment_command == "add":
            return DeploymentAdd(
                project_ref=_project_ref(args),
                definition_id=args.definition_id,
                host=args.host,
                subdomain=args.subdomain,
            )
        return DeploymentDelete(
            project_ref=_project_ref(args),
            site=args.site,
            definition_id=args.definition_id,
        )

    raise ValueError(f"unknown command: {args.command}")


def _build_handler(
    command: str,
    *,
    cloud: CloudHttp,
    gateway: CloudHttp,
    auth: CloudAuthentication,
) -> Any:
    projects = ProjectResolver(ProjectClientLive(cloud))
    if command == "account":
        return AccountHandler(AccountClientLive(cloud), auth)
    if command == "token":
        return TokenHandler(TokenClientLive(cloud), auth)
    if command == "project":
        return ProjectHandler(ProjectClientLive(cloud), auth)
    if command == "grant":
        return GrantHandler(GrantClientLive(cloud), auth)
    if command == "policy":
        return PolicyHandler(ProjectPolicyClientLive(cloud))
    if command == "share":
        return ShareHandler(ProjectGrantClientLive(cloud), projects)
    if command == "component":
        components = ComponentClientLive(cloud)
        return ComponentHandler(components, projects, ComponentResolver(components, projects))
    if command == "deployment":
        return DeploymentHandler(DeploymentClientLive(gateway), projects)
    raise ValueError(f"unknown command: {command}")


async def _execute(
    command_name: str,
    command: Any,
    *,
    config: CLIConfig,
    secret: str,
) -> GolemResult:
    login_http = CloudHttp(base_url=config.cloud_url, timeout=config.timeout)
    try:
        auth = await authenticate(LoginClientLive(login_http), secret)
    finally:
        login_http.close()
    logger.debug("authenticated as account %s", auth.account_id())

    cloud = CloudHttp(base_url=config.cloud_url, auth=auth, timeout=config.timeout)
    gateway = CloudHttp(base_url=config.gateway_url, auth=auth, timeout=config.timeout)
    try:
        handler = _build_handler(command_name, cloud=cloud, gateway=gateway, auth=auth)
        return await handler.handle(command)
    finally:
        cloud.close()
        gateway.close()


def _configure_logging(verbose: bool, stderr) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(message)s",
        stream=stderr,
    )


def _sanitize_error_text(value: str) -> str:
    return _BEARER_CREDENTIAL.sub(r"\1[REDACTED]", value)


def _print_error(stderr, prefix: str, message: str, *, code: int) -> int:
    print(f"{prefix}: {_sanitize_error_text(message)}", file=stderr)
    return code


def main(argv: Sequence[str] | None = None, *, stdout=sys.stdout, stderr=sys.stderr) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, stderr)

    try:
        config = load_cli_config(args.config)
    except ConfigError as exc:
        return _print_error(stderr, "config error", str(exc), code=EXIT_COMMAND_FAILED)

    overrides = {}
    if args.cloud_url:
        overrides["cloud_url"] = args.cloud_url
        overrides["gateway_url"] = args.gateway_url or args.cloud_url
    elif args.gateway_url:
        overrides["gateway_url"] = args.gateway_url
    if overrides:
        config = replace(config, **overrides)

    try:
        command = _build_command(args)
    except ValueError as exc:
        parser.error(str(exc))

    secret = args.auth_token or config.token_secret
    if not secret:
        return _print_error(
            stderr,
            "auth error",
            f"no token secret; pass --auth-token or set {TOKEN_SECRET_ENV_VAR}",
            code=EXIT_COMMAND_FAILED,
        )

    try:
        result = asyncio.run(_execute(args.command, command, config=config, secret=secret))
    except GolemError as exc:
        print(_sanitize_error_text(str(exc)), file=stderr)
        return EXIT_COMMAND_FAILED

    render(result, args.format or config.format, stdout)
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
