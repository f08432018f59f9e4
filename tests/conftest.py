"""Pytest configuration and fixtures for token picker tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from token_picker.catalog import TokenCatalog
from token_picker.core import config as config_module
from token_picker.core.config import PickerConfig


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch) -> None:
    """Pin TOKEN_PICKER_* and drop the cached global config for every test."""
    monkeypatch.setenv("TOKEN_PICKER_ROOT_GROUP", "ld")
    monkeypatch.setenv("TOKEN_PICKER_CATEGORY_RULES", "")
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def ld_tokens() -> dict[str, Any]:
    """Token document in the "ld" namespace, with references and one dead link."""
    return {
        "ld": {
            "primitive": {
                "color": {
                    "blue": {
                        "500": {"$type": "color", "$value": "#336699"},
                    },
                    "black-alpha": {"$type": "color", "$value": "rgba(0, 0, 0, 0.5)"},
                },
                "font": {
                    "size": {
                        "500": {"$type": "fontSize", "$value": 16},
                    },
                    "weight": {
                        "bold": {"$type": "fontWeight", "$value": 700},
                    },
                },
                "spacing": {
                    "200": {"$type": "spacing", "$value": 8},
                },
            },
            "color": {
                "brand": {
                    "500": {"$type": "color", "$value": "{ld.primitive.color.blue.500}"},
                },
                "shadow": {"$type": "color", "$value": "{ld.primitive.color.black-alpha}"},
            },
            "layout": {
                "spacing": {
                    "padding": {
                        "md": {"$type": "spacing", "$value": "{ld.primitive.spacing.200}"},
                    },
                    "radius": {
                        "200": {"$type": "borderRadius", "$value": 4},
                    },
                },
                "borderRadius": {
                    "pill": {"$type": "dimension", "$value": 999},
                },
            },
            "typography": {
                "body": {
                    "font-size": {"$type": "fontSize", "$value": "{ld.primitive.font.size.500}"},
                },
            },
            "effect": {
                "elevation": {
                    "1": {"$type": "shadow", "$value": "0 1px 2px rgba(0,0,0,0.2)"},
                },
            },
            "broken": {"$type": "color", "$value": "{ld.primitive.color.missing}"},
        }
    }


@pytest.fixture
def chain_tokens() -> dict[str, Any]:
    """Legacy-style document where each value references the next."""
    return {
        "a": {"type": "number", "value": "{b.value}"},
        "b": {"type": "number", "value": "{c.value}"},
        "c": {"type": "number", "value": 42},
    }


@pytest.fixture
def cyclic_tokens() -> dict[str, Any]:
    """Document whose tokens reference each other in a loop."""
    return {
        "loop": {
            "a": {"$type": "color", "$value": "{loop.b}"},
            "b": {"$type": "color", "$value": "{loop.a}"},
            "self": {"$type": "color", "$value": "{loop.self}"},
            "ok": {"$type": "color", "$value": "#ffffff"},
        }
    }


@pytest.fixture
def picker_config() -> PickerConfig:
    """Config independent of the environment."""
    return PickerConfig(root_group="ld")


@pytest.fixture
def catalog(ld_tokens: dict[str, Any], picker_config: PickerConfig) -> TokenCatalog:
    """Catalog with the sample "ld" document loaded."""
    return TokenCatalog(ld_tokens, config=picker_config)


@pytest.fixture
def tokens_file(tmp_path: Path, ld_tokens: dict[str, Any]) -> Path:
    """Sample document written to a JSON file."""
    path = tmp_path / "ld-tokens.json"
    path.write_text(json.dumps(ld_tokens), encoding="utf-8")
    return path
