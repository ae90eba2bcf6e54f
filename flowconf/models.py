"""
Values produced by config scripts: authors, origins, destinations, transformations,
workflows and the resolved Config.

All models are frozen so that a loaded configuration cannot be changed by the script
that built it, and two loads of the same script compare equal.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

_AUTHOR_RE = re.compile(r"^(?P<name>[^<>]+)<(?P<email>[^<>]*)>$")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Authoring
# ---------------------------------------------------------------------------


class Author(_Frozen):
    name: str = Field(..., min_length=1)
    email: str

    @classmethod
    def parse(cls, value: str) -> "Author":
        """Parse 'Name <email>'. Raises ValueError when the format does not match."""
        m = _AUTHOR_RE.match(value.strip()) if isinstance(value, str) else None
        if m is None or not m.group("name").strip():
            raise ValueError(
                f"Author '{value}' doesn't match the expected format 'name <mail@example.com>'"
            )
        return cls(name=m.group("name").strip(), email=m.group("email").strip())

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class AuthoringModeEnum(str, Enum):
    """How authors of origin changes are mapped in the destination."""

    OVERWRITE = "OVERWRITE"
    PASS_THRU = "PASS_THRU"
    WHITELISTED = "WHITELISTED"


class Authoring(_Frozen):
    default_author: Author
    mode: AuthoringModeEnum
    whitelist: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Origins / destinations
# ---------------------------------------------------------------------------


class Origin(_Frozen):
    """Where changes are read from."""

    pass


class Destination(_Frozen):
    """Where changes are written to."""

    pass


class GitOrigin(Origin):
    url: str = Field(..., min_length=1)
    ref: str | None = None


class GitDestination(Destination):
    url: str = Field(..., min_length=1)
    fetch: str = Field(..., min_length=1)
    push: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Transformations
# ---------------------------------------------------------------------------


class Transformation(_Frozen):
    pass


class Replace(Transformation):
    """Replace text matching `before` (with ${group} placeholders) by `after`."""

    before: str = Field(..., min_length=1)
    after: str
    regex_groups: dict[str, str] = Field(default_factory=dict)
    paths: tuple[str, ...] = ()


class Move(Transformation):
    """Move a file or directory from `before` to `after`."""

    before: str
    after: str


# ---------------------------------------------------------------------------
# Workflow / Config
# ---------------------------------------------------------------------------


class WorkflowModeEnum(str, Enum):
    """SQUASH imports all pending changes as one; ITERATIVE imports them one by one."""

    SQUASH = "SQUASH"
    ITERATIVE = "ITERATIVE"


class Workflow(_Frozen):
    name: str = Field(..., min_length=1)
    origin: SerializeAsAny[Origin]
    destination: SerializeAsAny[Destination]
    authoring: Authoring
    transformations: tuple[SerializeAsAny[Transformation], ...] = ()
    exclude_in_origin: tuple[str, ...] = ()
    exclude_in_destination: tuple[str, ...] = ()
    mode: WorkflowModeEnum = WorkflowModeEnum.SQUASH
    include_changelist_notes: bool = False
    last_revision: str | None = None


class Config(_Frozen):
    """A loaded configuration: the project name and the workflow selected by the options."""

    project_name: str = Field(..., min_length=1)
    active_workflow: Workflow
