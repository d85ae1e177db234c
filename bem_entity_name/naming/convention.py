"""Naming conventions: delimiter sets and the stringify/type_of rules.

A convention only knows how to join the parts of an entity; it does not
check that the parts themselves are valid words.

Example:
    >>> origin = get_convention("origin")
    >>> origin.stringify({"block": "menu", "elem": "item", "modName": "current"})
    'menu__item_current'
    >>> origin.type_of({"block": "menu", "elem": "item", "modName": "current"})
    <EntityType.ELEM_MOD: 'elemMod'>
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from bem_entity_name.config import configure_logging
from bem_entity_name.naming.types import EntityType

logger = logging.getLogger(__name__)

PRESETS_PATH = Path(__file__).parent / "presets.yml"


class NamingConvention(BaseModel):
    """Delimiters used to render an entity as a string."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "custom"
    elem: str = Field("__", min_length=1, description="Block/element delimiter.")
    mod_name: str = Field(
        "_", min_length=1, description="Delimiter before a modifier name."
    )
    mod_val: str = Field(
        "_", min_length=1, description="Delimiter before a modifier value."
    )

    def stringify(self, entity: Mapping[str, Any]) -> str:
        """Return the string form of an entity tuple.

        Returns an empty string when ``block`` is missing. A modifier value
        of ``True`` (or an omitted one) renders the modifier name only.
        """
        block = entity.get("block")
        if not block:
            return ""

        tokens = [str(block)]
        elem = entity.get("elem")
        if elem:
            tokens += [self.elem, str(elem)]

        if _has_modifier(entity):
            mod_val = entity.get("modVal", True)
            tokens += [self.mod_name, str(entity["modName"])]
            if mod_val is not True:
                tokens += [self.mod_val, str(mod_val)]

        return "".join(tokens)

    def type_of(self, entity: Mapping[str, Any]) -> EntityType | None:
        """Return the structural category of an entity tuple, or None."""
        if not entity.get("block"):
            return None
        is_mod = _has_modifier(entity)
        if entity.get("elem"):
            return EntityType.ELEM_MOD if is_mod else EntityType.ELEM
        return EntityType.BLOCK_MOD if is_mod else EntityType.BLOCK


def _has_modifier(entity: Mapping[str, Any]) -> bool:
    if not entity.get("modName"):
        return False
    if "modVal" not in entity:
        return True
    mod_val = entity["modVal"]
    # 0 is a real value; False is not.
    return bool(mod_val) or (mod_val == 0 and not isinstance(mod_val, bool))


@cache
def load_presets() -> dict[str, NamingConvention]:
    """Load the built-in conventions from presets.yml."""
    configure_logging()
    with open(PRESETS_PATH, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    presets = {
        name: NamingConvention(name=name, **delims) for name, delims in raw.items()
    }
    logger.debug("Loaded naming presets: %s", ", ".join(presets))
    return presets


def preset_names() -> list[str]:
    return sorted(load_presets())


def get_convention(name: str) -> NamingConvention:
    """Return a built-in convention by name.

    Raises:
        ValueError: If ``name`` is not a known preset.
    """
    try:
        return load_presets()[name]
    except KeyError as e:
        raise ValueError(
            f"Invalid naming preset '{name}'. Allowed values: {preset_names()}"
        ) from e
