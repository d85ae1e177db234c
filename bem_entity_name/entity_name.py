"""BemEntityName: immutable value type for a block/element/modifier name.

Example:
    >>> name = BemEntityName({"block": "menu", "elem": "item", "mod": "current"})
    >>> name.id
    'menu__item_current'
    >>> name.type
    <EntityType.ELEM_MOD: 'elemMod'>
    >>> name.mod
    {'name': 'current', 'val': True}
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from functools import cached_property
from typing import Any, ClassVar

from pydantic import ValidationError

from bem_entity_name import naming
from bem_entity_name.exceptions import InvalidEntityError
from bem_entity_name.models import EntityFields
from bem_entity_name.naming import EntityTuple, EntityType, NamingConvention

logger = logging.getLogger(__name__)

# Marker checked by ``is_bem_entity``; survives duplicate copies of the package.
ENTITY_MARKER = "_is_bem_entity"


class BemEntityName:
    """Name of a BEM entity: a block, optionally an element and a modifier."""

    stringify_entity: ClassVar = staticmethod(naming.stringify)
    type_of_entity: ClassVar = staticmethod(naming.type_of)
    convention: ClassVar[NamingConvention | None] = None

    def __init__(self, obj: Mapping[str, Any] | Any = None, /, **fields: Any):
        """Validate and normalize an entity description.

        Args:
            obj: Mapping with ``block``, optional ``elem`` and a modifier
                given as ``mod`` (string or ``{name, val}``) or via the
                deprecated ``modName``/``modVal`` fields. Another entity
                name is accepted too.
            **fields: Same keys as keyword arguments; they extend ``obj``.

        Raises:
            InvalidEntityError: If ``block`` is missing or falsy, or a
                field has the wrong shape.
            TypeError: If ``obj`` is neither a mapping nor an entity name.
        """
        data = {**self._as_mapping(obj), **fields}
        try:
            store = EntityFields.model_validate(data)
        except ValidationError as exc:
            raise self._invalid(exc) from exc

        object.__setattr__(self, "_obj", store)
        object.__setattr__(self, ENTITY_MARKER, True)

    @staticmethod
    def _as_mapping(obj: Any) -> Mapping[str, Any]:
        if obj is None:
            return {}
        if isinstance(obj, Mapping):
            return obj
        if BemEntityName.is_bem_entity(obj):
            return obj.value_of()
        raise TypeError(
            f"Expected a mapping or BemEntityName; got {type(obj).__name__}"
        )

    @staticmethod
    def _invalid(exc: ValidationError) -> InvalidEntityError:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "mod"
        if field == "block":
            return InvalidEntityError("block")
        return InvalidEntityError(field, f"is invalid ({error['msg']})")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def with_naming(
        cls, convention: NamingConvention | str
    ) -> type[BemEntityName]:
        """Return a subclass deriving ids and types with another convention."""
        if isinstance(convention, str):
            convention = naming.get_convention(convention)
        return type(
            cls.__name__,
            (cls,),
            {
                "__module__": cls.__module__,
                "stringify_entity": staticmethod(convention.stringify),
                "type_of_entity": staticmethod(convention.type_of),
                "convention": convention,
            },
        )

    @property
    def block(self) -> str:
        return self._obj.block

    @property
    def elem(self) -> str:
        """Element name, or an empty string for block-level entities."""
        return self._obj.elem or ""

    @property
    def mod(self) -> dict[str, Any]:
        """Modifier as ``{"name", "val"}``; empty dict when there is none."""
        if self._obj.mod is None:
            return {}
        return self._obj.mod.model_dump()

    @property
    def mod_name(self) -> str | None:
        """Deprecated: use ``mod["name"]``."""
        warnings.warn(
            "mod_name is deprecated; use mod['name'] instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.mod.get("name")

    @property
    def mod_val(self) -> Any:
        """Deprecated: use ``mod["val"]``."""
        warnings.warn(
            "mod_val is deprecated; use mod['val'] instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.mod.get("val")

    modName = mod_name
    modVal = mod_val

    def _entity_tuple(self) -> EntityTuple:
        entity: EntityTuple = {"block": self.block}
        mod = self.mod
        if self.elem:
            entity["elem"] = self.elem
        if mod.get("name"):
            entity["modName"] = mod["name"]
        if mod.get("val"):
            entity["modVal"] = mod["val"]
        return entity

    @cached_property
    def id(self) -> str:
        """Identifier of the entity.

        Only meant for uniqueness checks; use a naming convention directly
        when a formatted name is wanted.
        """
        value = self.stringify_entity(self._entity_tuple())
        logger.debug("Computed id %r for %r", value, self)
        return value

    @cached_property
    def type(self) -> EntityType:
        return self.type_of_entity(self._entity_tuple())

    def value_of(self) -> dict[str, Any]:
        """Return ``{block, elem?, mod?}`` without deprecated fields."""
        return self._obj.model_dump(exclude_none=True)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value_of()!r})"

    def __rich_repr__(self):
        yield from self.value_of().items()

    def is_equal(self, entity: Any) -> bool:
        """Return True when ``entity`` has the same id as this one."""
        return entity is not None and self.id == getattr(entity, "id", None)

    def __eq__(self, other: object) -> bool:
        if not BemEntityName.is_bem_entity(other):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash(self.id)

    @staticmethod
    def is_bem_entity(entity: Any) -> bool:
        """Return True if ``entity`` was built by a BemEntityName constructor.

        Checks the instance marker rather than the class, so instances from
        another loaded copy of this module are recognized too.
        """
        return getattr(entity, ENTITY_MARKER, False) is True

    # Friendly aliases matching the JavaScript API
    isEqual = is_equal
    isBemEntity = is_bem_entity
    valueOf = value_of
