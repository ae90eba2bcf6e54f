"""Unit tests for the `authoring` module and Author parsing."""

import pytest

from flowconf.core.exceptions import ConfigValidationError
from flowconf.models import Author, AuthoringModeEnum
from flowconf.modules import AuthoringModule


class TestAuthor:
    def test_parse(self) -> None:
        a = Author.parse("Jane Doe <jane@example.com>")
        assert a.name == "Jane Doe"
        assert a.email == "jane@example.com"
        assert str(a) == "Jane Doe <jane@example.com>"

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError, match="doesn't match"):
            Author.parse("jane@example.com")


class TestAuthoringModule:
    def test_overwrite(self) -> None:
        a = AuthoringModule().overwrite("Bot <bot@example.com>")
        assert a.mode == AuthoringModeEnum.OVERWRITE
        assert a.default_author.email == "bot@example.com"

    def test_pass_thru(self) -> None:
        assert AuthoringModule().pass_thru("Bot <bot@example.com>").mode == AuthoringModeEnum.PASS_THRU

    def test_whitelisted(self) -> None:
        a = AuthoringModule().whitelisted("Bot <bot@example.com>", ["a@example.com", "b@example.com"])
        assert a.mode == AuthoringModeEnum.WHITELISTED
        assert a.whitelist == ("a@example.com", "b@example.com")

    def test_whitelisted_empty(self) -> None:
        with pytest.raises(ConfigValidationError, match="non-empty list"):
            AuthoringModule().whitelisted("Bot <bot@example.com>", [])

    def test_whitelisted_duplicates(self) -> None:
        with pytest.raises(ConfigValidationError, match="Duplicated whitelist entries: a"):
            AuthoringModule().whitelisted("Bot <bot@example.com>", ["a", "b", "a"])

    def test_invalid_default(self) -> None:
        with pytest.raises(ConfigValidationError, match="doesn't match"):
            AuthoringModule().overwrite("not an author")

    def test_default_must_be_string(self) -> None:
        with pytest.raises(ConfigValidationError, match="must be a string"):
            AuthoringModule().overwrite(42)  # type: ignore[arg-type]
