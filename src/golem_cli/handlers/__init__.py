"""Command handlers, one per subcommand group."""

from golem_cli.handlers.account import AccountHandler
from golem_cli.handlers.component import ComponentHandler
from golem_cli.handlers.deployment import DeploymentHandler
from golem_cli.handlers.grant import GrantHandler
from golem_cli.handlers.policy import PolicyHandler
from golem_cli.handlers.project import ProjectHandler
from golem_cli.handlers.share import ShareHandler
from golem_cli.handlers.token import TokenHandler

__all__ = [
    "AccountHandler",
    "ComponentHandler",
    "DeploymentHandler",
    "GrantHandler",
    "PolicyHandler",
    "ProjectHandler",
    "ShareHandler",
    "TokenHandler",
]
