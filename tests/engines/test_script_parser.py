"""Unit tests for engines.script.parser."""

import ast

from flowconf.engines.script import EventCollector, Severity, parse_script
from flowconf.engines.script.parser import find_imports


class TestParseScript:
    def test_parse_simple(self) -> None:
        events = EventCollector()
        parsed = parse_script("x = 1", events, "test.sky")
        assert parsed.ok
        assert parsed.filename == "test.sky"
        assert parsed.imports == ()
        assert events.events == []

    def test_syntax_error_reported_with_line(self) -> None:
        events = EventCollector()
        parsed = parse_script("x = 1\ndef f(  ", events, "test.sky")
        assert not parsed.ok
        errors = [e for e in events.events if e.kind == Severity.ERROR]
        assert len(errors) == 1
        assert errors[0].location is not None
        assert errors[0].location.filename == "test.sky"
        assert errors[0].location.line == 2
        assert "SyntaxError" in errors[0].message

    def test_underscore_name_rejected(self) -> None:
        events = EventCollector()
        parsed = parse_script("_secret = 1", events, "test.sky")
        assert not parsed.ok
        assert events.events[0].kind == Severity.ERROR
        assert "_secret" in events.events[0].message

    def test_import_collected(self) -> None:
        parsed = parse_script("import os\n", EventCollector(), "test.sky")
        assert parsed.imports == ("os",)

    def test_import_collected_when_compile_rejects_it(self) -> None:
        events = EventCollector()
        parsed = parse_script("from lib import *\n", events, "test.sky")
        assert not parsed.ok
        assert parsed.imports == ("lib",)

    def test_print_does_not_warn(self) -> None:
        events = EventCollector()
        parsed = parse_script("print('hi')\n", events, "test.sky")
        assert parsed.ok
        assert events.events == []


class TestFindImports:
    def test_all_forms_in_source_order(self) -> None:
        tree = ast.parse(
            "load('//lib/common.sky', 'helper')\n"
            "from foo.bar import baz\n"
            "import os, sys\n"
            "from . import sibling\n"
        )
        assert find_imports(tree) == ("//lib/common.sky", "foo.bar", "os", "sys", ".")

    def test_no_imports(self) -> None:
        assert find_imports(ast.parse("core.project('x')")) == ()

    def test_dynamic_load(self) -> None:
        assert find_imports(ast.parse("load(name)")) == ("<dynamic>",)
