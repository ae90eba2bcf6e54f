"""
Runtime options supplied by the caller for one load.

Options are frozen: every option-aware module receives the same instance by reference.
"""

from pydantic import BaseModel, ConfigDict, Field

from flowconf.core.config import settings
from flowconf.core.console import Console, LogConsole


class GeneralOptions(BaseModel):
    """Options shared by every command: console and verbosity."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    console: Console = Field(default_factory=LogConsole)
    verbose: bool = False


class WorkflowOptions(BaseModel):
    """Which workflow to select, and the revision to start from."""

    model_config = ConfigDict(frozen=True)

    workflow_name: str = Field(default=settings.DEFAULT_WORKFLOW, min_length=1)
    last_revision: str | None = None


class Options(BaseModel):
    model_config = ConfigDict(frozen=True)

    general: GeneralOptions = Field(default_factory=GeneralOptions)
    workflow: WorkflowOptions = Field(default_factory=WorkflowOptions)
