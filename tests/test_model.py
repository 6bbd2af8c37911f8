from __future__ import annotations

from uuid import uuid4

import pytest

from golem_cli.model import (
    ComponentId,
    ComponentIdOrName,
    ComponentName,
    Format,
    ProjectAction,
    ProjectId,
    ProjectRef,
    Role,
)


def test_format_parse_exact_names() -> None:
    assert Format.parse("json") is Format.JSON
    assert Format.parse("yaml") is Format.YAML


def test_format_parse_is_case_sensitive() -> None:
    with pytest.raises(ValueError) as exc_info:
        Format.parse("JSON")
    assert str(exc_info.value) == 'Unknown format: JSON. Expected one of "json", "yaml"'


def test_role_parse() -> None:
    assert Role.parse("Admin") is Role.ADMIN
    assert str(Role.INSTANCE_SERVER) == "InstanceServer"


def test_role_parse_failure_lists_all_roles() -> None:
    with pytest.raises(ValueError) as exc_info:
        Role.parse("admin")
    message = str(exc_info.value)
    assert message.startswith("Unknown role: admin. Expected one of ")
    for name in (
        "Admin",
        "WhitelistAdmin",
        "MarketingAdmin",
        "ViewProject",
        "DeleteProject",
        "CreateProject",
        "InstanceServer",
    ):
        assert f'"{name}"' in message
    assert len(list(Role)) == 7


def test_project_action_parse() -> None:
    assert ProjectAction.parse("ViewComponent") is ProjectAction.VIEW_COMPONENT
    with pytest.raises(ValueError) as exc_info:
        ProjectAction.parse("viewcomponent")
    assert str(exc_info.value).startswith("Unknown action: viewcomponent. Expected one of ")
    assert '"DeleteProjectGrants"' in str(exc_info.value)


@pytest.mark.parametrize(
    "ref",
    [
        ProjectRef.id(ProjectId(uuid4())),
        ProjectRef.name("my-project"),
        ProjectRef.default(),
    ],
)
def test_project_ref_argument_conversion_is_idempotent(ref) -> None:
    args = ref.to_args()
    again = ProjectRef.from_args(*args)
    assert again == ref
    assert again.to_args() == args


def test_project_ref_rejects_id_and_name() -> None:
    with pytest.raises(ValueError):
        ProjectRef.from_args(uuid4(), "both")
    with pytest.raises(ValueError):
        ProjectRef(project_id=ProjectId(uuid4()), project_name="both")


@pytest.mark.parametrize(
    "ref",
    [
        ComponentIdOrName.id(ComponentId(uuid4())),
        ComponentIdOrName.name(ComponentName("shopping-cart"), ProjectRef.default()),
        ComponentIdOrName.name(ComponentName("shopping-cart"), ProjectRef.name("shop")),
        ComponentIdOrName.name(ComponentName("shopping-cart"), ProjectRef.id(ProjectId(uuid4()))),
    ],
)
def test_component_ref_argument_conversion_is_idempotent(ref) -> None:
    assert ComponentIdOrName.from_args(*ref.to_args()) == ref


def test_component_ref_rejects_partial_states() -> None:
    with pytest.raises(ValueError):
        ComponentIdOrName.from_args(None, None)
    with pytest.raises(ValueError):
        ComponentIdOrName.from_args(uuid4(), "name")
    with pytest.raises(ValueError):
        ComponentIdOrName.from_args(uuid4(), None, None, "project")
