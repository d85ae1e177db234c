import pytest

from bem_entity_name import BemEntityName, EntityType


@pytest.mark.parametrize(
    "data, expected_id, expected_type",
    [
        ({"block": "button"}, "button", EntityType.BLOCK),
        ({"block": "button", "elem": "text"}, "button__text", EntityType.ELEM),
        ({"block": "button", "mod": "disabled"}, "button_disabled", EntityType.BLOCK_MOD),
        (
            {"block": "button", "mod": {"name": "theme", "val": "islands"}},
            "button_theme_islands",
            EntityType.BLOCK_MOD,
        ),
        (
            {"block": "menu", "elem": "item", "mod": "current"},
            "menu__item_current",
            EntityType.ELEM_MOD,
        ),
        (
            {"block": "menu", "elem": "item", "modName": "size", "modVal": "s"},
            "menu__item_size_s",
            EntityType.ELEM_MOD,
        ),
    ],
)
def test_id_and_type(data, expected_id, expected_type):
    name = BemEntityName(data)
    assert name.id == expected_id
    assert name.type == expected_type


def test_menu_item_is_elem_mod(menu_item_data):
    name = BemEntityName(menu_item_data)
    assert name.type == "elemMod"
    assert name.id == "menu__item_current"


def test_empty_mod_val_omitted_from_id():
    name = BemEntityName({"block": "b", "mod": {"name": "m", "val": ""}})
    assert name.mod["val"] == ""
    assert name.id == "b_m"
    assert name.type == EntityType.BLOCK_MOD


def test_id_is_stable_across_access():
    name = BemEntityName({"block": "button", "elem": "text", "mod": "focused"})
    first = name.id
    assert name.id == first
    assert name.id is first
    assert name.type is name.type


def test_id_computed_once():
    calls = []

    class CountingName(BemEntityName):
        @staticmethod
        def stringify_entity(entity):
            calls.append(dict(entity))
            return entity["block"]

    name = CountingName({"block": "button", "mod": "disabled"})
    assert name.id == "button"
    assert name.id == "button"
    assert calls == [{"block": "button", "modName": "disabled", "modVal": True}]


def test_type_collaborator_receives_normalized_tuple():
    seen = []

    class RecordingName(BemEntityName):
        @staticmethod
        def type_of_entity(entity):
            seen.append(dict(entity))
            return EntityType.ELEM

    name = RecordingName({"block": "b", "elem": "", "mod": {"name": "m", "val": ""}})
    assert name.type == EntityType.ELEM
    assert seen == [{"block": "b", "modName": "m"}]


def test_str_is_id():
    name = BemEntityName({"block": "button", "elem": "text"})
    assert str(name) == name.id == "button__text"
    assert f"name: {name}" == "name: button__text"


def test_mod_name_deprecated():
    name = BemEntityName({"block": "b", "mod": {"name": "m", "val": "v"}})
    with pytest.warns(DeprecationWarning, match="mod_name"):
        assert name.mod_name == "m"
    with pytest.warns(DeprecationWarning):
        assert name.modName == "m"


def test_mod_val_deprecated():
    name = BemEntityName({"block": "b", "mod": {"name": "m", "val": "v"}})
    with pytest.warns(DeprecationWarning, match="mod_val"):
        assert name.mod_val == "v"
    with pytest.warns(DeprecationWarning):
        assert name.modVal == "v"


def test_deprecated_accessors_without_modifier():
    name = BemEntityName({"block": "b"})
    with pytest.warns(DeprecationWarning):
        assert name.mod_name is None
    with pytest.warns(DeprecationWarning):
        assert name.mod_val is None


def test_with_naming_preset():
    TwoDashes = BemEntityName.with_naming("two-dashes")
    name = TwoDashes({"block": "button", "elem": "text", "mod": "disabled"})
    assert name.id == "button__text--disabled"
    assert TwoDashes.convention.name == "two-dashes"
    assert BemEntityName.convention is None


def test_with_naming_unknown_preset():
    with pytest.raises(ValueError, match="Allowed values"):
        BemEntityName.with_naming("bogus")


def test_default_convention_from_environment(monkeypatch):
    monkeypatch.setenv("BEM_NAMING_PRESET", "react")
    name = BemEntityName({"block": "button", "elem": "text"})
    assert name.id == "button-text"
