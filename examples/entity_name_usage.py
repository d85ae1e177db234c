"""Demonstrate using the BemEntityName value type.

Run with the project venv activated:
    python examples/entity_name_usage.py
"""

from __future__ import annotations

from bem_entity_name import BemEntityName, InvalidEntityError
from bem_entity_name.naming import get_convention


def examples() -> None:
    # Element modifier given with the string shorthand
    name = BemEntityName({"block": "menu", "elem": "item", "mod": "current"})
    print("Entity:", repr(name))
    print("Id:", name.id)
    print("Type:", name.type)

    # Same entity described with the deprecated top-level fields
    legacy = BemEntityName({"block": "menu", "elem": "item", "modName": "current"})
    print("Equal to legacy form:", name.is_equal(legacy))

    # Structural view (no deprecated fields)
    print("Value:", name.value_of())

    # Another convention for ids
    TwoDashes = BemEntityName.with_naming("two-dashes")
    print("Two-dashes id:", TwoDashes(name).id)
    print(
        "React string:",
        get_convention("react").stringify({"block": "button", "elem": "text"}),
    )

    try:
        BemEntityName({"elem": "item"})
    except InvalidEntityError as exc:
        print("Rejected:", exc)


if __name__ == "__main__":
    examples()
