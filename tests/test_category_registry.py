"""
Unit tests for the category alias registry
"""
import pytest

from activity_search.categories.keywords import CATEGORY_DEFINITIONS
from activity_search.categories.registry import (
    CategoryAliasRegistry,
    CategoryRegistryBuilder,
    get_category_registry,
)


@pytest.mark.unit
class TestDefaultRegistry:
    """Test lookups against the built-in keyword table."""

    @pytest.mark.parametrize("value,expected", [
        ("RANDO", "9"),
        ("rando", "9"),
        ("Randonnée", "9"),
        ("RANDONNEE", "9"),
        ("hiking", "9"),
        ("Wanderung", "9"),
        ("ハイキング", "9"),
        ("course", "3"),
        ("COURSE", "3"),
        ("  run  ", "3"),
        ("Vélo", "5"),
        ("VELO", "5"),
        ("EVENTCREATION.TYPE.SKI", "2"),
        ("スキー", "2"),
        ("3", "3"),
        ("17", "17"),
        ("Семья", "17"),
    ])
    def test_resolves_surface_forms(self, registry, value, expected):
        assert registry.resolve_canonical_code(value) == expected

    @pytest.mark.parametrize("value", ["chess", "", "   ", None, "18"])
    def test_unresolvable_values(self, registry, value):
        assert registry.resolve_canonical_code(value) is None

    def test_first_registration_keeps_shared_keyword(self, registry):
        # "wandern" is listed for walking and hiking; walking is registered first
        assert registry.resolve_canonical_code("wandern") == "4"

    def test_every_definition_has_one_code(self, registry):
        codes = [definition.code for definition in CATEGORY_DEFINITIONS]
        assert len(codes) == len(set(codes))
        assert registry.codes == tuple(codes)

    def test_labels(self, registry):
        assert registry.label_for("9") == "RANDO"
        assert registry.label_for("5") == "BIKE"
        assert registry.label_for("99") is None

    def test_keywords_are_normalized_and_unique(self, registry):
        keywords = registry.keywords_for("9")
        assert "hiking" in keywords
        assert keywords.count("randonnee") == 1
        assert "randonnée" not in keywords

    def test_keywords_for_unknown_code(self, registry):
        assert registry.keywords_for("99") == ()

    def test_contains(self, registry):
        assert "RANDO" in registry
        assert "chess" not in registry
        assert 42 not in registry

    def test_categories_listing(self, registry):
        listing = registry.categories()
        assert len(listing) == 17
        assert listing[0] == {
            'code': "1",
            'label': "VTT",
            'keywords': list(registry.keywords_for("1")),
        }

    def test_singleton(self):
        assert get_category_registry() is get_category_registry()


@pytest.mark.unit
class TestCategoryRegistryBuilder:
    """Test registration rules."""

    def test_first_write_wins(self):
        builder = CategoryRegistryBuilder()
        builder.register("3", ["run", "trek"], ["RUN"])
        builder.register("9", ["trek", "hike"], ["RANDO"])
        registry = builder.build()

        assert registry.resolve_canonical_code("trek") == "3"
        assert registry.resolve_canonical_code("TREK") == "3"
        assert registry.resolve_canonical_code("hike") == "9"

    def test_registers_all_case_forms(self):
        registry = CategoryRegistryBuilder().register("5", ["Vélo"], ["BIKE"]).build()

        for form in ("Vélo", "VÉLO", "vélo", "velo"):
            assert registry.aliases[form] == "5"

    def test_code_resolves_to_itself(self):
        registry = CategoryRegistryBuilder().register("12", [], []).build()
        assert registry.resolve_canonical_code("12") == "12"

    def test_blank_keywords_are_skipped(self):
        registry = CategoryRegistryBuilder().register("1", ["", "   ", "vtt"], ["VTT"]).build()

        assert registry.keywords_for("1") == ("vtt",)
        assert "" not in registry.aliases

    def test_label_defaults_to_first_alias(self):
        registry = CategoryRegistryBuilder().register("4", ["walk"], ["WALK", "MARCHE"]).build()
        assert registry.label_for("4") == "WALK"

    def test_empty_code_rejected(self):
        with pytest.raises(ValueError):
            CategoryRegistryBuilder().register("  ", ["walk"])

    def test_registry_is_read_only(self):
        registry = CategoryRegistryBuilder().register("4", ["walk"], ["WALK"]).build()

        assert isinstance(registry, CategoryAliasRegistry)
        with pytest.raises(TypeError):
            registry.aliases["run"] = "4"

    def test_builder_cannot_be_reused(self):
        builder = CategoryRegistryBuilder().register("4", ["walk"], ["WALK"])
        registry = builder.build()

        with pytest.raises(RuntimeError):
            builder.register("9", ["hike"], ["RANDO"])
        assert registry.resolve_canonical_code("hike") is None
