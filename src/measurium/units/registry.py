"""
measurium.units.registry
========================

A structured, extensible, and testable registry of unit categories.

Key points
----------
- Encapsulates global state in a `CategoryRegistry` class (thread-safe).
- Each registered `UnitCategory` keeps its own symbols and aliases; the
  registry resolves a symbol across all of them and refuses registrations
  that would make a symbol ambiguous.
- New categories plug in through `register`; `Quantity` and the arithmetic
  engine never need to know about them.
- Clear public API: `register`, `get`, `has`, `category`, `category_of`, `all`.
- Easily testable and embeddable (multiple registries for testing).
"""
from __future__ import annotations

import logging
import threading
from typing import ClassVar, Dict, Mapping, Optional

from measurium.core.errors import InvalidUnitError
from measurium.core.unit import Unit
from measurium.units.category import UnitCategory, normalize_symbol

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Category registry
# ---------------------------------------------------------------------------
class CategoryRegistry:
    """Thread-safe registry of `UnitCategory` objects.

    Lookups by symbol search every registered category. Symbols must be unique
    across the registry; names and aliases are matched case-insensitively
    inside each category.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._categories: Dict[str, UnitCategory] = {}

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    # -------------------------- public API ---------------------------------
    def register(self, category: UnitCategory, replace: bool = False) -> None:
        """Register (or overwrite if replace is True) a category under its name.

        Raises `ValueError` on a name clash, or when one of the category's
        symbols or aliases already resolves in another registered category.
        """
        # The lock wraps the whole check-and-set.
        with self._lock:
            if category.name in getattr(UnitNamespace, "_reserved_names", ()):
                raise ValueError(
                    f"Cannot register category '{category.name}': "
                    "name conflicts with UnitNamespace attribute/method."
                )

            if not replace:
                if category.name in self._categories:
                    raise ValueError(
                        f"Cannot register category '{category.name}': "
                        "a category with this name already exists."
                    )

                spellings = list(category.symbols()) + list(category.aliases())
                for other in self._categories.values():
                    for spelling in spellings:
                        if other.has(spelling):
                            raise ValueError(
                                f"Cannot register category '{category.name}': "
                                f"'{spelling}' already resolves in category '{other.name}'."
                            )

            self._categories[category.name] = category
            logger.debug(
                "registered unit category %r (base %s, %d units)",
                category.name, category.base_unit.symbol, len(category),
            )

    def unregister(self, name: str) -> None:
        with self._lock:
            if self._categories.pop(name, None) is None:
                raise ValueError(f"Unknown unit category: {name}")
            logger.debug("unregistered unit category %r", name)

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except InvalidUnitError:
            return False

    def get(self, symbol: str) -> Unit:
        """Lookup a unit by symbol, name or alias in any registered category.

        Raises `InvalidUnitError` if no category knows the symbol.
        """
        with self._lock:
            categories = list(self._categories.values())

        # Exact symbols win over aliases ("K" is Kelvin, not an alias elsewhere).
        sym = normalize_symbol(symbol)
        for cat in categories:
            if sym in cat.symbols():
                return cat.get(sym)
        for cat in categories:
            if cat.has(symbol):
                return cat.get(symbol)

        raise InvalidUnitError(f"Unknown unit symbol: {symbol}")

    def category(self, name: str) -> UnitCategory:
        with self._lock:
            cat = self._categories.get(name)
        if cat is None:
            raise ValueError(f"Unknown unit category: {name}")
        return cat

    def category_of(self, unit: Unit) -> Optional[UnitCategory]:
        """Return the registered category whose unit type `unit` belongs to, if any."""
        with self._lock:
            for cat in self._categories.values():
                if isinstance(unit, cat.unit_type):
                    return cat
        return None

    def all(self) -> Mapping[str, UnitCategory]:
        with self._lock:
            return dict(self._categories)

    def as_namespace(self) -> UnitNamespace:
        return UnitNamespace(self)


class UnitNamespace:
    """Attribute-style access to every unit in a registry (``u.ft``, ``u("in")``)."""

    _reserved_names: ClassVar[set[str]] = set()

    def __init__(self, reg: "CategoryRegistry") -> None:
        self._reg = reg

    def __contains__(self, spec: str) -> bool:
        return self._reg.has(spec)

    def __call__(self, spec: str) -> Unit:
        return self._reg.get(spec)

    def __getattr__(self, name: str) -> Unit:
        try:
            return self._reg.get(name)
        except InvalidUnitError as e:
            # Unknown symbol should look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit symbols and aliases for autocomplete."""
        base_dir = set(super().__dir__())
        names: set[str] = set()
        for cat in self._reg.all().values():
            names.update(cat.symbols())
            names.update(cat.aliases())
        return sorted(base_dir | {n for n in names if n.isidentifier()})


UnitNamespace._reserved_names = set(dir(UnitNamespace))


# ---------------------------------------------------------------------------
# Bootstrap a default registry with the shipped categories
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> CategoryRegistry:
    from measurium.units.length import LENGTH
    from measurium.units.temperature import TEMPERATURE
    from measurium.units.volume import VOLUME
    from measurium.units.weight import WEIGHT

    reg = CategoryRegistry()
    for cat in (LENGTH, WEIGHT, VOLUME, TEMPERATURE):
        reg.register(cat)
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: CategoryRegistry = _bootstrap_default_registry()


__all__ = [
    "CategoryRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
]
