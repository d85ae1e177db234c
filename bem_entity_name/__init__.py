"""Value type for BEM entity names (block, element, modifier)."""

import importlib.metadata

from bem_entity_name.entity_name import BemEntityName
from bem_entity_name.exceptions import InvalidEntityError
from bem_entity_name.models import EntityFields, Modifier
from bem_entity_name.naming import EntityType, NamingConvention, stringify, type_of

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (tests collected before an install) has no distribution
# metadata; fall back to a neutral placeholder.
try:  # pragma: no cover - trivial guard
    try:
        __version__ = importlib.metadata.version("bem-entity-name")
    except KeyError:  # metadata object exists but lacks 'Version' key
        __version__ = "0.0.0"
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "BemEntityName",
    "EntityFields",
    "EntityType",
    "InvalidEntityError",
    "Modifier",
    "NamingConvention",
    "stringify",
    "type_of",
]
