"""Pydantic models holding the normalized form of an entity name.

Input may describe a modifier in three overlapping ways; all of them are
resolved here, once, into a single ``mod`` field:

- ``mod="disabled"``: shorthand, value defaults to ``True``.
- ``mod={"name": "theme", "val": "islands"}``: explicit value is kept
  verbatim when the ``val`` key is present, even if falsy.
- ``modName``/``modVal`` (or ``mod_name``/``mod_val``): deprecated
  top-level fields, used only when ``mod`` does not supply the part.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

ModVal = bool | str | int | float

LEGACY_MOD_NAME_KEYS = ("modName", "mod_name")
LEGACY_MOD_VAL_KEYS = ("modVal", "mod_val")


class Modifier(BaseModel):
    """A named state or variant of a block or element."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    val: ModVal = True


class EntityFields(BaseModel):
    """Normalized ``{block, elem?, mod?}`` store of an entity name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    block: str
    elem: str | None = None
    mod: Modifier | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        fields: dict[str, Any] = {"block": data.get("block")}
        if data.get("elem"):
            fields["elem"] = data["elem"]
        modifier = resolve_modifier(data)
        if modifier is not None:
            fields["mod"] = modifier
        return fields

    @field_validator("block", mode="before")
    @classmethod
    def _require_block(cls, value: Any) -> Any:
        if not value:
            raise ValueError("block is undefined")
        return value


def _legacy(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if data.get(key) is not None:
            logger.debug("Using deprecated entity field '%s'", key)
            return data[key]
    return None


def resolve_modifier(data: Mapping[str, Any]) -> dict[str, Any] | None:
    """Return ``{"name", "val"}`` for the modifier described by data, or None.

    An explicit ``mod`` name or value always wins over the deprecated
    top-level fields. No modifier is produced when no name resolves.
    """
    mod = data.get("mod")
    match mod:
        case None:
            mod = {}
        case str():
            mod = {"name": mod}
        case Modifier():
            mod = mod.model_dump()
        case Mapping():
            pass
        case _:
            raise ValueError(
                "mod must be a string or a mapping with 'name' and 'val', "
                f"got {type(mod).__name__}"
            )

    name = mod.get("name") or _legacy(data, LEGACY_MOD_NAME_KEYS)
    if not name:
        return None

    if mod.get("val") is not None:
        val = mod["val"]
    else:
        val = _legacy(data, LEGACY_MOD_VAL_KEYS)
    return {"name": name, "val": True if val is None else val}
