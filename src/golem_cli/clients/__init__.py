from golem_cli.clients.account import AccountClient, AccountClientLive
from golem_cli.clients.component import ComponentClient, ComponentClientLive
from golem_cli.clients.deployment import DeploymentClient, DeploymentClientLive
from golem_cli.clients.grant import GrantClient, GrantClientLive
from golem_cli.clients.login import LoginClient, LoginClientLive
from golem_cli.clients.policy import ProjectPolicyClient, ProjectPolicyClientLive
from golem_cli.clients.project import ProjectClient, ProjectClientLive
from golem_cli.clients.project_grant import ProjectGrantClient, ProjectGrantClientLive
from golem_cli.clients.token import TokenClient, TokenClientLive
from golem_cli.clients.transport import CloudHttp

__all__ = [
    "AccountClient",
    "AccountClientLive",
    "CloudHttp",
    "ComponentClient",
    "ComponentClientLive",
    "DeploymentClient",
    "DeploymentClientLive",
    "GrantClient",
    "GrantClientLive",
    "LoginClient",
    "LoginClientLive",
    "ProjectClient",
    "ProjectClientLive",
    "ProjectGrantClient",
    "ProjectGrantClientLive",
    "ProjectPolicyClient",
    "ProjectPolicyClientLive",
    "TokenClient",
    "TokenClientLive",
]
