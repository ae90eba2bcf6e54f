"""
Native modules available to config scripts.

`authoring` and `core` are always registered; `git`, `env` and `log` are opt-in.
"""

from flowconf.modules.authoring import AuthoringModule
from flowconf.modules.base import OptionsAwareModule
from flowconf.modules.core import CORE_VAR, CoreModule
from flowconf.modules.env import EnvModule
from flowconf.modules.git import GitModule
from flowconf.modules.log import LogModule

BUILTIN_MODULES = (AuthoringModule, CoreModule)
OPTIONAL_MODULES = (GitModule, EnvModule, LogModule)

__all__ = [
    "AuthoringModule",
    "BUILTIN_MODULES",
    "CORE_VAR",
    "CoreModule",
    "EnvModule",
    "GitModule",
    "LogModule",
    "OPTIONAL_MODULES",
    "OptionsAwareModule",
]
