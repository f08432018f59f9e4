"""Tests for the token catalog query interface."""

import copy
import os

import pytest

from token_picker.catalog import TokenCatalog
from token_picker.core.config import PickerConfig, get_config
from token_picker.core.exceptions import CircularReferenceError
from token_picker.core.models import CategoryBuckets
from token_picker.core.types import TokenCategory


class TestTokenCatalog:
    """Tests for TokenCatalog."""

    def test_scenario_brand_color(self, picker_config):
        doc = {"ld": {"color": {"brand": {"500": {"type": "color", "value": "#336699"}}}}}
        catalog = TokenCatalog(doc, config=picker_config)

        assert catalog.resolve_path("ld.color.brand.500") == "#336699"

        colors = catalog.get_categorized_tokens().colors
        assert len(colors) == 1
        assert colors[0].path == "ld.color.brand.500"
        assert colors[0].name == "500"
        assert colors[0].value == "#336699"

    def test_categorized_tokens_idempotent(self, catalog):
        first = catalog.get_categorized_tokens()
        second = catalog.get_categorized_tokens()

        assert first == second
        assert first.to_host_dict() == second.to_host_dict()

    def test_entry_paths_round_trip_to_resolve_path(self, catalog):
        for entry in catalog.entries():
            assert catalog.resolve_path(entry.path) == entry.value, entry.path

    def test_not_loaded(self, picker_config):
        catalog = TokenCatalog(config=picker_config)

        assert not catalog.is_loaded
        assert catalog.entries() == []
        assert catalog.get_categorized_tokens() == CategoryBuckets()
        assert catalog.resolve_path("ld.color.brand.500") is None

    def test_missing_root_group(self, picker_config):
        catalog = TokenCatalog({"other": {"a": {"$value": 1}}}, config=picker_config)

        assert catalog.get_categorized_tokens() == CategoryBuckets()
        assert catalog.resolve_path("other.a") == 1

    def test_malformed_document(self, picker_config):
        catalog = TokenCatalog(["not", "tokens"], config=picker_config)

        assert catalog.is_loaded
        assert catalog.get_categorized_tokens() == CategoryBuckets()
        assert catalog.resolve_path("ld.color") is None

    def test_custom_root_group(self, picker_config):
        doc = {"brand": {"spacing": {"sm": {"$type": "spacing", "$value": 4}}}}
        catalog = TokenCatalog(doc, root_group="brand", config=picker_config)

        spacing = catalog.get_categorized_tokens().spacing
        assert [e.path for e in spacing] == ["brand.spacing.sm"]

    def test_whole_document_root(self, ld_tokens, picker_config):
        catalog = TokenCatalog(ld_tokens, root_group="", config=picker_config)
        assert len(catalog.entries()) == 13
        assert catalog.entries()[0].path == "ld.primitive.color.blue.500"

    def test_load_document_replaces(self, catalog, picker_config):
        catalog.load_document({"ld": {"color": {"x": {"$type": "color", "$value": "#000000"}}}})

        assert [e.path for e in catalog.get_categorized_tokens().colors] == ["ld.color.x"]
        assert catalog.resolve_path("ld.color.brand.500") is None

    def test_load_none_unloads(self, catalog):
        catalog.load_document(None)
        assert not catalog.is_loaded

    def test_document_not_mutated(self, ld_tokens, picker_config):
        before = copy.deepcopy(ld_tokens)
        catalog = TokenCatalog(ld_tokens, config=picker_config)
        catalog.get_categorized_tokens()
        catalog.resolve_path("ld.color.brand.500")
        assert ld_tokens == before

    def test_circular_reference_raises_from_resolve_path(self, cyclic_tokens, picker_config):
        catalog = TokenCatalog(cyclic_tokens, root_group="loop", config=picker_config)

        with pytest.raises(CircularReferenceError):
            catalog.resolve_path("loop.a")
        # The category view still comes back, with the loop left unresolved
        colors = catalog.get_categorized_tokens().colors
        assert [e.value for e in colors] == [None, None, None, "#ffffff"]

    def test_find(self, catalog):
        entry = catalog.find("ld.layout.spacing.padding.md")
        assert entry is not None
        assert entry.value == 8
        assert catalog.find("ld.nope") is None

    def test_search(self, catalog):
        paths = [e.path for e in catalog.search("BRAND")]
        assert paths == ["ld.color.brand.500"]

    def test_search_within_category(self, catalog):
        paths = [e.path for e in catalog.search("spacing", category=TokenCategory.BORDER_RADIUS)]
        assert paths == ["ld.layout.spacing.radius.200"]

    def test_category_rules_file(self, ld_tokens, picker_config, tmp_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text("categories:\n  effects:\n    path_contains: [elevation]\n")
        catalog = TokenCatalog(ld_tokens, category_rules_path=rules_file, config=picker_config)

        buckets = catalog.get_categorized_tokens()
        assert [e.path for e in buckets.effects] == ["ld.effect.elevation.1"]
        assert buckets.colors == []


class TestPickerConfig:
    """Tests for configuration loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TOKEN_PICKER_ROOT_GROUP", raising=False)
        monkeypatch.delenv("TOKEN_PICKER_CATEGORY_RULES", raising=False)

        config = PickerConfig.from_env()
        assert config.root_group == "ld"
        assert not config.has_category_rules()

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TOKEN_PICKER_ROOT_GROUP", "brand")
        monkeypatch.setenv("TOKEN_PICKER_CATEGORY_RULES", str(tmp_path / "rules.yaml"))

        config = PickerConfig.from_env()
        assert config.root_group == "brand"
        assert config.category_rules_path == tmp_path / "rules.yaml"

    def test_load_env_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("TOKEN_PICKER_ROOT_GROUP", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("TOKEN_PICKER_ROOT_GROUP=acme\n")

        try:
            config = PickerConfig.load(env_file)
            assert config.root_group == "acme"
        finally:
            # load_dotenv writes to os.environ directly
            os.environ.pop("TOKEN_PICKER_ROOT_GROUP", None)

    def test_env_file_does_not_leak_into_global_config(self):
        assert os.environ["TOKEN_PICKER_ROOT_GROUP"] == "ld"
        assert get_config().root_group == "ld"
        assert not get_config().has_category_rules()

    def test_catalog_uses_config_root(self, ld_tokens):
        catalog = TokenCatalog(ld_tokens, config=PickerConfig(root_group="ld.color"))
        assert [e.path for e in catalog.entries()] == ["ld.color.brand.500", "ld.color.shadow"]
