"""
Capabilities native modules can declare on top of NativeModule.
"""

from abc import ABC, abstractmethod

from flowconf.core.options import Options


class OptionsAwareModule(ABC):
    """A module that needs the runtime Options before the script runs."""

    @abstractmethod
    def set_options(self, options: Options) -> None: ...
