"""Unit tests for the optional `git`, `env` and `log` modules."""

import logging
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from flowconf.core.exceptions import ConfigValidationError
from flowconf.models import GitDestination, GitOrigin
from flowconf.modules import EnvModule, GitModule, LogModule
from tests.utils.console import RecordingConsole
from tests.utils.scripts import make_options


class TestGitModule:
    def test_origin(self) -> None:
        assert GitModule().origin("https://example.com/a.git", ref="main") == GitOrigin(
            url="https://example.com/a.git", ref="main"
        )

    def test_origin_requires_url(self) -> None:
        with pytest.raises(ConfigValidationError, match="'url'"):
            GitModule().origin("")

    def test_destination(self) -> None:
        d = GitModule().destination("https://example.com/b.git", fetch="main", push="release")
        assert d == GitDestination(url="https://example.com/b.git", fetch="main", push="release")

    def test_destination_requires_push(self) -> None:
        with pytest.raises(ConfigValidationError, match="'push'"):
            GitModule().destination("https://example.com/b.git", fetch="main", push=None)  # type: ignore[arg-type]


@patch(
    "flowconf.modules.env.settings",
    SimpleNamespace(env_whitelist=frozenset({"FLOWCONF_TEST_KEY", "FLOWCONF_TEST_FLAG"})),
)
class TestEnvModule:
    def test_whitelisted_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLOWCONF_TEST_KEY", "42")
        env = EnvModule()
        assert env.get("FLOWCONF_TEST_KEY") == "42"
        assert env.get_int("FLOWCONF_TEST_KEY") == 42

    def test_not_whitelisted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME_SECRET", "s3cr3t")
        env = EnvModule()
        assert env.get("HOME_SECRET") is None
        assert env.get("HOME_SECRET", "fallback") == "fallback"

    def test_get_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLOWCONF_TEST_FLAG", "yes")
        assert EnvModule().get_bool("FLOWCONF_TEST_FLAG") is True

    def test_get_int_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLOWCONF_TEST_KEY", "abc")
        assert EnvModule().get_int("FLOWCONF_TEST_KEY", 7) == 7


class TestLogModule:
    def test_routes_to_console(self) -> None:
        console = RecordingConsole()
        log = LogModule()
        log.set_options(make_options(console=console))
        log.info("loaded %s", "push")
        log.warn("careful")
        log.error("bad %d", 3)
        assert console.messages == [
            ("info", "loaded push"),
            ("warn", "careful"),
            ("error", "bad 3"),
        ]

    def test_mismatched_args_do_not_raise(self) -> None:
        console = RecordingConsole()
        log = LogModule()
        log.set_options(make_options(console=console))
        log.info("no placeholders", 1)
        assert console.messages == [("info", "no placeholders 1")]

    def test_debug_uses_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="flowconf.modules.log"):
            LogModule().debug("details %s", "here")
        assert "details here" in caplog.text
