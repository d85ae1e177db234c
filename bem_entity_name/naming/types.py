"""Types shared by the naming convention helpers."""

from __future__ import annotations

from enum import StrEnum
from typing import NotRequired, Required, TypedDict


class EntityType(StrEnum):
    """Structural category of a BEM entity."""

    BLOCK = "block"
    ELEM = "elem"
    BLOCK_MOD = "blockMod"
    ELEM_MOD = "elemMod"


class EntityTuple(TypedDict, total=False):
    """Flat entity description consumed by ``stringify`` and ``type_of``.

    Key presence is significant: a missing ``modVal`` means a boolean
    modifier, while a present but falsy one (other than ``0``) disables it.
    """

    block: Required[str]
    elem: NotRequired[str]
    modName: NotRequired[str]
    modVal: NotRequired[str | int | float | bool]
