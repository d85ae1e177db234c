"""Shared pytest fixtures for bem-entity-name tests."""

import pytest

from bem_entity_name.config import NAMING_PRESET_ENV


@pytest.fixture(autouse=True)
def default_naming_preset(monkeypatch):
    """Run every test against the origin convention unless it opts out."""
    monkeypatch.delenv(NAMING_PRESET_ENV, raising=False)


@pytest.fixture
def menu_item_data():
    return {"block": "menu", "elem": "item", "mod": "current"}


@pytest.fixture
def equivalent_modifier_inputs():
    """Different input shapes describing the same button_theme_islands entity."""
    return [
        {"block": "button", "mod": {"name": "theme", "val": "islands"}},
        {"block": "button", "modName": "theme", "modVal": "islands"},
        {"block": "button", "mod_name": "theme", "mod_val": "islands"},
        {"block": "button", "mod": "theme", "modVal": "islands"},
        {"block": "button", "mod": {"name": "theme"}, "modVal": "islands"},
    ]
