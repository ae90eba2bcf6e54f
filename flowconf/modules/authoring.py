"""
`authoring` module: how origin authors are mapped to the destination.
"""

from typing import Any

from flowconf.core.exceptions import ConfigValidationError, check_condition
from flowconf.engines.script import NativeModule, operation
from flowconf.models import Author, Authoring, AuthoringModeEnum


def parse_author(value: Any, field: str = "default") -> Author:
    check_condition(isinstance(value, str), f"'{field}' must be a string, got {type(value).__name__}")
    try:
        return Author.parse(value)
    except ValueError as e:
        raise ConfigValidationError(str(e)) from e


class AuthoringModule(NativeModule):
    name = "authoring"

    @operation
    def overwrite(self, default: str) -> Authoring:
        """Use the default author for every change."""
        return Authoring(default_author=parse_author(default), mode=AuthoringModeEnum.OVERWRITE)

    @operation
    def pass_thru(self, default: str) -> Authoring:
        """Keep the origin author; default is used when the origin has none."""
        return Authoring(default_author=parse_author(default), mode=AuthoringModeEnum.PASS_THRU)

    @operation
    def whitelisted(self, default: str, whitelist: list[str]) -> Authoring:
        """Keep the origin author when whitelisted, otherwise use default."""
        check_condition(
            isinstance(whitelist, (list, tuple)) and len(whitelist) > 0,
            "'whitelist' must be a non-empty list of authors",
        )
        check_condition(
            all(isinstance(w, str) and w.strip() for w in whitelist),
            "'whitelist' entries must be non-empty strings",
        )
        dupes = sorted({w for w in whitelist if whitelist.count(w) > 1})
        check_condition(not dupes, f"Duplicated whitelist entries: {', '.join(dupes)}")
        return Authoring(
            default_author=parse_author(default),
            mode=AuthoringModeEnum.WHITELISTED,
            whitelist=tuple(whitelist),
        )
