"""Tests for demo registration and discovery."""

import pytest

from patternbook.application import decorators
from patternbook.application.decorators import (
    DemoRegistration,
    demo,
    get_demo,
    get_demo_registry,
    get_registry_stats,
)
from patternbook.application.discovery import DEMO_PACKAGES, discover_demos
from patternbook.domain.base.exceptions import DemoNotFoundError

EXPECTED_DEMOS = {
    "patterns": {
        "abstract-factory", "factory-method", "air-conditioner", "credit-card",
        "decorator", "singleton", "template-method",
    },
    "solid": {
        "single-responsibility", "journal", "open-closed-shapes", "open-closed-products",
        "liskov", "interface-segregation", "dependency-inversion", "dry",
    },
    "injection": {"dependency-injection", "container-injection"},
}


class TestDiscovery:
    def test_imports_every_demo_module(self, demo_modules):
        assert "patternbook.patterns.singleton" in demo_modules
        assert "patternbook.solid.open_closed" in demo_modules
        assert "patternbook.injection.container_wiring" in demo_modules
        assert all(name.startswith(DEMO_PACKAGES) for name in demo_modules)

    def test_rediscovery_is_harmless(self, demo_modules):
        assert sorted(discover_demos()) == sorted(demo_modules)

    def test_every_demo_registered(self, demo_modules):
        for category, names in EXPECTED_DEMOS.items():
            assert {r.name for r in get_demo_registry(category)} == names

    def test_stats(self, demo_modules):
        assert get_registry_stats() == {category: len(names) for category, names in EXPECTED_DEMOS.items()}

    def test_unknown_package_fails(self):
        with pytest.raises(ModuleNotFoundError):
            discover_demos(["patternbook.no_such_package"])


class TestRegistry:
    def test_get_demo(self, demo_modules):
        registration = get_demo("singleton")

        assert registration.category == "patterns"
        assert registration.module == "patternbook.patterns.singleton"
        assert callable(registration.entry_point)

    def test_get_unknown_demo(self, demo_modules):
        with pytest.raises(DemoNotFoundError, match="Demo 'flyweight' is not registered"):
            get_demo("flyweight")

    def test_registry_sorted_by_category_then_name(self, demo_modules):
        keys = [(r.category, r.name) for r in get_demo_registry()]
        assert keys == sorted(keys)

    def test_unknown_category_is_empty(self, demo_modules):
        assert get_demo_registry("behavioural") == []

    def test_to_dict_omits_entry_point(self, demo_modules):
        assert set(get_demo("dry").to_dict()) == {"name", "category", "summary", "module"}

    def test_every_demo_has_summary(self, demo_modules):
        assert all(r.summary for r in get_demo_registry())


class TestDemoDecorator:
    @pytest.fixture(autouse=True)
    def isolated_registry(self, monkeypatch):
        monkeypatch.setattr(decorators, "_demo_registry", {})

    def test_registers_and_returns_function(self):
        def sample():
            pass

        assert demo("sample", category="misc", summary="A sample")(sample) is sample
        assert sample._demo_name == "sample"
        assert isinstance(get_demo("sample"), DemoRegistration)

    def test_summary_defaults_to_docstring_first_line(self):
        @demo("documented")
        def documented():
            """Show something.

            More detail here.
            """

        assert get_demo("documented").summary == "Show something."
        assert get_demo("documented").category == "misc"

    def test_duplicate_name_rejected(self):
        @demo("clash")
        def first():
            pass

        def second():
            pass

        with pytest.raises(ValueError, match="already registered"):
            demo("clash")(second)

    def test_reregistering_same_function_allowed(self):
        def sample():
            pass

        demo("again")(sample)
        demo("again")(sample)

        assert len(get_demo_registry()) == 1
