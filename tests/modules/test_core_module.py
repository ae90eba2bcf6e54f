"""Unit tests for the `core` module."""

import pytest

from flowconf.core.exceptions import ConfigValidationError
from flowconf.models import (
    Author,
    Authoring,
    AuthoringModeEnum,
    GitDestination,
    GitOrigin,
    Move,
    Replace,
    WorkflowModeEnum,
)
from flowconf.modules import CoreModule
from tests.utils.scripts import make_options

_ORIGIN = GitOrigin(url="https://example.com/src.git")
_DEST = GitDestination(url="https://example.com/dst.git", fetch="main", push="main")
_AUTHORING = Authoring(
    default_author=Author(name="Flowconf", email="flow@example.com"),
    mode=AuthoringModeEnum.OVERWRITE,
)


def _declare(core: CoreModule, name: str = "push", **kwargs: object) -> None:
    core.workflow(name, _ORIGIN, _DEST, _AUTHORING, **kwargs)


class TestProject:
    def test_set_once(self) -> None:
        core = CoreModule()
        core.project("myproj")
        assert core.project_name == "myproj"
        with pytest.raises(ConfigValidationError, match="already set to 'myproj'"):
            core.project("other")

    def test_empty_name(self) -> None:
        with pytest.raises(ConfigValidationError, match="non-empty"):
            CoreModule().project("  ")


class TestWorkflow:
    def test_declare(self) -> None:
        core = CoreModule()
        _declare(core, transformations=[Move(before="a", after="b")], mode="ITERATIVE")
        wf = core.workflows["push"]
        assert wf.origin == _ORIGIN
        assert wf.destination == _DEST
        assert wf.mode == WorkflowModeEnum.ITERATIVE
        assert wf.transformations == (Move(before="a", after="b"),)

    def test_workflows_read_only(self) -> None:
        core = CoreModule()
        _declare(core)
        with pytest.raises(TypeError):
            core.workflows["other"] = core.workflows["push"]  # type: ignore[index]

    def test_duplicate_name(self) -> None:
        core = CoreModule()
        _declare(core)
        with pytest.raises(ConfigValidationError, match="'push' already exists"):
            _declare(core)

    def test_invalid_mode_lists_valid(self) -> None:
        with pytest.raises(ConfigValidationError, match="Valid modes: SQUASH, ITERATIVE"):
            _declare(CoreModule(), mode="FANCY")

    def test_origin_type_checked(self) -> None:
        core = CoreModule()
        with pytest.raises(ConfigValidationError, match="'origin' must be a Origin, got str"):
            core.workflow("push", "https://example.com", _DEST, _AUTHORING)

    def test_transformation_type_checked(self) -> None:
        with pytest.raises(ConfigValidationError, match=r"transformations\[1\]"):
            _declare(CoreModule(), transformations=[Move(before="a", after="b"), "nope"])

    def test_exclude_must_be_strings(self) -> None:
        with pytest.raises(ConfigValidationError, match="exclude_in_origin"):
            _declare(CoreModule(), exclude_in_origin=[1])

    def test_last_revision_from_options(self) -> None:
        core = CoreModule()
        core.set_options(make_options("push", last_revision="abc123"))
        _declare(core)
        assert core.workflows["push"].last_revision == "abc123"

    def test_no_options_no_last_revision(self) -> None:
        core = CoreModule()
        _declare(core)
        assert core.workflows["push"].last_revision is None


class TestTransformations:
    def test_replace_with_groups(self) -> None:
        r = CoreModule().replace(
            "foo${n}", "bar${n}", regex_groups={"n": "[0-9]+"}, paths=["**/*.java"]
        )
        assert r == Replace(
            before="foo${n}", after="bar${n}", regex_groups={"n": "[0-9]+"}, paths=("**/*.java",)
        )

    def test_replace_empty_before(self) -> None:
        with pytest.raises(ConfigValidationError, match="'before'"):
            CoreModule().replace("", "x")

    def test_replace_unused_group(self) -> None:
        with pytest.raises(ConfigValidationError, match="'n' is not used"):
            CoreModule().replace("foo", "bar", regex_groups={"n": "[0-9]+"})

    def test_replace_undefined_group(self) -> None:
        with pytest.raises(ConfigValidationError, match="not defined in 'regex_groups': n"):
            CoreModule().replace("foo${n}", "bar")

    def test_replace_invalid_regex(self) -> None:
        with pytest.raises(ConfigValidationError, match="Invalid regex for group 'n'"):
            CoreModule().replace("foo${n}", "bar", regex_groups={"n": "[0-9"})

    def test_move(self) -> None:
        assert CoreModule().move("a", "b") == Move(before="a", after="b")

    def test_move_to_itself(self) -> None:
        with pytest.raises(ConfigValidationError, match="no-op"):
            CoreModule().move("a", "a")
