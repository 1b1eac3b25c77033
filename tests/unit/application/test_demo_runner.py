"""Tests for the demo runner."""

import pytest

from patternbook.application.decorators import get_demo_registry
from patternbook.application.runner import DemoRunner
from patternbook.config.schemas import DemoConfig
from patternbook.domain.base.exceptions import DemoNotFoundError

SEPARATOR = "-" * 50


@pytest.mark.usefixtures("demo_modules", "fresh_bell")
class TestDemoRunner:
    def setup_method(self):
        self.runner = DemoRunner()

    def test_run_prints_separator_first(self, capsys):
        registration = self.runner.run("template-method")

        assert registration.name == "template-method"
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == SEPARATOR
        assert "Baking the Sourdough Bread. (20 minutes)" in lines

    def test_custom_separator(self, capsys):
        DemoRunner(DemoConfig(separator_char="=", separator_width=10)).run("dry")

        assert capsys.readouterr().out.startswith("=" * 10 + "\n")

    def test_run_unknown(self, capsys):
        with pytest.raises(DemoNotFoundError):
            self.runner.run("nope")
        assert capsys.readouterr().out == ""

    def test_run_many_in_order(self, capsys):
        names = [r.name for r in self.runner.run_many(["dry", "liskov"])]

        assert names == ["dry", "liskov"]
        out = capsys.readouterr().out
        assert out.count(SEPARATOR) == 2
        assert out.index("ProductDry") < out.index("RoundCircle")

    def test_run_many_checks_names_before_running(self, capsys):
        with pytest.raises(DemoNotFoundError, match="typo"):
            self.runner.run_many(["dry", "typo"])
        assert capsys.readouterr().out == ""

    def test_run_all(self, capsys):
        registrations = self.runner.run_all()

        assert [r.name for r in registrations] == [r.name for r in get_demo_registry()]
        assert capsys.readouterr().out.count(SEPARATOR + "\n") == len(registrations)
