"""
Engines: Script (RestrictedPython) interpreter used to evaluate config files.
"""

from flowconf.engines.script import Environment, parse_script

__all__ = [
    "Environment",
    "parse_script",
]
