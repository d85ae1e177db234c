"""Naming convention helpers used to derive entity ids and types.

The module-level ``stringify`` and ``type_of`` follow the convention named
by ``BEM_NAMING_PRESET`` (``origin`` unless configured).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bem_entity_name.config import settings
from bem_entity_name.naming.convention import (
    NamingConvention,
    get_convention,
    load_presets,
    preset_names,
)
from bem_entity_name.naming.types import EntityTuple, EntityType


def default_convention() -> NamingConvention:
    return get_convention(settings().naming_preset)


def stringify(entity: Mapping[str, Any]) -> str:
    """Return the entity string using the default convention."""
    return default_convention().stringify(entity)


def type_of(entity: Mapping[str, Any]) -> EntityType | None:
    """Return the entity type using the default convention."""
    return default_convention().type_of(entity)


# Friendly alias matching the bem-naming function name
typeOf = type_of

__all__ = [
    "EntityTuple",
    "EntityType",
    "NamingConvention",
    "default_convention",
    "get_convention",
    "load_presets",
    "preset_names",
    "stringify",
    "type_of",
    "typeOf",
]
