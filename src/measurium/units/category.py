"""
measurium.units.category
========================

A `UnitCategory` is the closed, named set of units that may be converted into
one another (all lengths, all weights, ...). It owns symbol and alias lookup for
its members and checks the one-base-unit invariant when it is built.

Categories are immutable after construction; adding a unit means building a
new category.
"""
from __future__ import annotations

import unicodedata
from typing import Dict, Generic, Iterable, Iterator, Mapping, Optional, Tuple, TypeVar

from measurium.core.errors import CategoryMismatchError, InvalidUnitError
from measurium.core.unit import Unit

U = TypeVar("U", bound=Unit)


def normalize_symbol(s: str) -> str:
    """Normalize user-provided unit symbols.

    Rules:
    - Unicode normalize to NFC (composed forms like "°").
    - Map the masculine ordinal 'º', often typed for a degree sign, to '°'.
    - Strip surrounding whitespace.
    - Leave case as-is ("L" is a litre, "l" is not registered).
    """
    if not s:
        return s
    s = unicodedata.normalize("NFC", s.strip())
    return s.replace("º", "°")


def _alias_key(s: str) -> str:
    return normalize_symbol(s).casefold()


class UnitCategory(Generic[U]):
    """Closed set of mutually convertible units sharing one base unit."""

    def __init__(
        self,
        name: str,
        unit_type: type[U],
        units: Iterable[U],
        aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.name = name
        self.unit_type = unit_type
        self._units: Dict[str, U] = {}
        self._aliases: Dict[str, str] = {}

        for unit in units:
            if not isinstance(unit, unit_type):
                raise CategoryMismatchError(unit_type, type(unit), "register")
            sym = normalize_symbol(unit.symbol)
            if sym in self._units:
                raise ValueError(
                    f"Cannot register unit '{unit.symbol}' in '{name}': "
                    "a unit with this symbol already exists."
                )
            self._units[sym] = unit

        if not self._units:
            raise ValueError(f"Category '{name}' must declare at least one unit")

        bases = [u for u in self._units.values() if u.is_base]
        if len(bases) != 1:
            raise ValueError(
                f"Category '{name}' must have exactly one base unit, found {len(bases)}"
            )
        self.base_unit: U = bases[0]

        # Every unit is reachable by its full name as well as its symbol.
        for unit in self._units.values():
            self._aliases.setdefault(_alias_key(unit.name), normalize_symbol(unit.symbol))
        for alias, target in (aliases or {}).items():
            self._add_alias(alias, target)

    def _add_alias(self, alias: str, target: str) -> None:
        target_sym = normalize_symbol(target)
        if target_sym not in self._units:
            raise InvalidUnitError(
                f"Cannot register alias '{alias}': unknown {self.name} unit '{target}'"
            )
        self._aliases[_alias_key(alias)] = target_sym

    # -------------------------- public API ---------------------------------
    def get(self, symbol: str) -> U:
        """Lookup a unit by symbol, full name or alias.

        Symbols are case-sensitive; names and aliases are not.
        Raises `InvalidUnitError` if the category has no such unit.
        """
        sym = normalize_symbol(symbol)
        unit = self._units.get(sym)
        if unit is not None:
            return unit
        target = self._aliases.get(_alias_key(symbol))
        if target is not None:
            return self._units[target]
        raise InvalidUnitError(f"Unknown {self.name} unit: {symbol!r}")

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except InvalidUnitError:
            return False

    def validate(self, unit: object) -> U:
        """Return `unit` if it is one of this category's units, else raise `InvalidUnitError`."""
        if isinstance(unit, self.unit_type) and unit in self._units.values():
            return unit
        raise InvalidUnitError(
            f"{unit!s} is not a declared {self.name} unit; "
            f"expected one of: {', '.join(self.symbols())}"
        )

    @property
    def units(self) -> Tuple[U, ...]:
        return tuple(self._units.values())

    @property
    def supports_arithmetic(self) -> bool:
        return self.unit_type.supports_arithmetic

    def symbols(self) -> Tuple[str, ...]:
        return tuple(self._units)

    def aliases(self) -> Mapping[str, str]:
        return dict(self._aliases)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return self.has(item)
        return isinstance(item, self.unit_type) and item in self._units.values()

    def __iter__(self) -> Iterator[U]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"UnitCategory({self.name!r}, base={self.base_unit.symbol!r}, units={list(self._units)!r})"


__all__ = ["UnitCategory", "normalize_symbol"]
