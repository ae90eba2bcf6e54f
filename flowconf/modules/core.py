"""
`core` module: project name, workflows and the built-in transformations.

This is the only module with per-load state: every workflow declared by the script is
accumulated here and read back by the config extractor once the script has run.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from flowconf.core.exceptions import ConfigValidationError, check_condition
from flowconf.core.options import Options
from flowconf.engines.script import NativeModule, operation
from flowconf.models import (
    Authoring,
    Destination,
    Move,
    Origin,
    Replace,
    Transformation,
    Workflow,
    WorkflowModeEnum,
)

from .base import OptionsAwareModule

CORE_VAR = "core"

_GROUP_RE = re.compile(r"\$\{([^}]+)\}")


def _string_list(value: Any, field: str) -> tuple[str, ...]:
    check_condition(
        isinstance(value, (list, tuple)),
        f"'{field}' must be a list, got {type(value).__name__}",
    )
    check_condition(
        all(isinstance(v, str) for v in value),
        f"'{field}' must only contain strings",
    )
    return tuple(value)


def _check_type(value: Any, expected: type, field: str) -> None:
    check_condition(
        isinstance(value, expected),
        f"'{field}' must be a {expected.__name__}, got {type(value).__name__}",
    )


class CoreModule(NativeModule, OptionsAwareModule):
    name = CORE_VAR

    def __init__(self) -> None:
        self._options: Options | None = None
        self._project_name: str | None = None
        self._workflows: dict[str, Workflow] = {}

    def set_options(self, options: Options) -> None:
        self._options = options

    @property
    def options(self) -> Options | None:
        return self._options

    @property
    def project_name(self) -> str | None:
        return self._project_name

    @property
    def workflows(self) -> Mapping[str, Workflow]:
        return MappingProxyType(self._workflows)

    @operation
    def project(self, name: str) -> None:
        """Set the project name. Can only be called once."""
        check_condition(
            isinstance(name, str) and name.strip() != "",
            "Project name must be a non-empty string",
        )
        check_condition(
            self._project_name is None,
            f"Project name already set to '{self._project_name}'",
        )
        self._project_name = name

    @operation
    def workflow(
        self,
        name: str,
        origin: Origin,
        destination: Destination,
        authoring: Authoring,
        transformations: list[Transformation] | None = None,
        exclude_in_origin: list[str] | None = None,
        exclude_in_destination: list[str] | None = None,
        mode: str = WorkflowModeEnum.SQUASH.value,
        include_changelist_notes: bool = False,
    ) -> None:
        """Declare a workflow. Names must be unique within the config."""
        check_condition(
            isinstance(name, str) and name.strip() != "",
            "Workflow name must be a non-empty string",
        )
        check_condition(
            name not in self._workflows,
            f"A workflow with name '{name}' already exists",
        )
        _check_type(origin, Origin, "origin")
        _check_type(destination, Destination, "destination")
        _check_type(authoring, Authoring, "authoring")

        steps = transformations or []
        check_condition(
            isinstance(steps, (list, tuple)),
            f"'transformations' must be a list, got {type(steps).__name__}",
        )
        for i, step in enumerate(steps):
            _check_type(step, Transformation, f"transformations[{i}]")

        valid_modes = [m.value for m in WorkflowModeEnum]
        check_condition(
            mode in valid_modes,
            f"Invalid mode '{mode}'. Valid modes: {', '.join(valid_modes)}",
        )
        check_condition(
            isinstance(include_changelist_notes, bool),
            "'include_changelist_notes' must be a boolean",
        )

        last_revision = self._options.workflow.last_revision if self._options else None
        self._workflows[name] = Workflow(
            name=name,
            origin=origin,
            destination=destination,
            authoring=authoring,
            transformations=tuple(steps),
            exclude_in_origin=_string_list(exclude_in_origin or [], "exclude_in_origin"),
            exclude_in_destination=_string_list(
                exclude_in_destination or [], "exclude_in_destination"
            ),
            mode=WorkflowModeEnum(mode),
            include_changelist_notes=include_changelist_notes,
            last_revision=last_revision,
        )

    @operation
    def replace(
        self,
        before: str,
        after: str,
        regex_groups: dict[str, str] | None = None,
        paths: list[str] | None = None,
    ) -> Replace:
        """Replace `before` by `after`; ${name} placeholders match regex_groups[name]."""
        check_condition(
            isinstance(before, str) and before != "",
            "'before' must be a non-empty string",
        )
        check_condition(isinstance(after, str), "'after' must be a string")
        groups = regex_groups or {}
        check_condition(isinstance(groups, dict), "'regex_groups' must be a dict")
        used = set(_GROUP_RE.findall(before))
        for group, regex in groups.items():
            check_condition(
                isinstance(group, str) and isinstance(regex, str),
                "'regex_groups' keys and values must be strings",
            )
            check_condition(
                group in used,
                f"Regex group '{group}' is not used in 'before': {before}",
            )
            try:
                re.compile(regex)
            except re.error as e:
                raise ConfigValidationError(f"Invalid regex for group '{group}': {e}") from e
        undefined = sorted((used | set(_GROUP_RE.findall(after))) - set(groups))
        check_condition(
            not undefined,
            f"Regex groups not defined in 'regex_groups': {', '.join(undefined)}",
        )
        return Replace(
            before=before,
            after=after,
            regex_groups=dict(groups),
            paths=_string_list(paths or [], "paths"),
        )

    @operation
    def move(self, before: str, after: str) -> Move:
        """Move a file or directory."""
        check_condition(
            isinstance(before, str) and isinstance(after, str),
            "'before' and 'after' must be strings",
        )
        check_condition(before != after, f"Moving '{before}' to itself is a no-op")
        return Move(before=before, after=after)
