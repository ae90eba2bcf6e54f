"""
flowconf: load workflow configurations from sandboxed config scripts.
"""

from flowconf.core.exceptions import ConfigValidationError, InternalError
from flowconf.core.options import GeneralOptions, Options, WorkflowOptions
from flowconf.loader import ConfigParser
from flowconf.models import Config, Workflow

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigParser",
    "ConfigValidationError",
    "GeneralOptions",
    "InternalError",
    "Options",
    "Workflow",
    "WorkflowOptions",
    "__version__",
]
