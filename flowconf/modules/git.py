"""
`git` module: Git origins and destinations.
"""

from flowconf.core.exceptions import check_condition
from flowconf.engines.script import NativeModule, operation
from flowconf.models import GitDestination, GitOrigin


def _require_str(value: object, field: str) -> str:
    check_condition(
        isinstance(value, str) and value.strip() != "",
        f"'{field}' must be a non-empty string",
    )
    return value  # type: ignore[return-value]


class GitModule(NativeModule):
    name = "git"

    @operation
    def origin(self, url: str, ref: str | None = None) -> GitOrigin:
        if ref is not None:
            _require_str(ref, "ref")
        return GitOrigin(url=_require_str(url, "url"), ref=ref)

    @operation
    def destination(self, url: str, fetch: str, push: str) -> GitDestination:
        return GitDestination(
            url=_require_str(url, "url"),
            fetch=_require_str(fetch, "fetch"),
            push=_require_str(push, "push"),
        )
