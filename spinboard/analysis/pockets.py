"""
Pocket tables and wheel variants.

Every pocket label maps to a fixed set of properties (color, parity,
low/high, dozen, street).  A Variant bundles the pocket set of one wheel
with the advisor it uses and the thresholds that go with it.  Tables are
built once at import and never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from config import (
    RED_NUMBERS, DOZENS, ZERO_GROUP, LOW_NUMBERS, STREETS,
    EUROPEAN_ZEROS, AMERICAN_ZEROS,
    STREET_MIN_SPINS, HOT_COLD_ADVISOR_MIN_SPINS,
)


class InvalidPocketError(ValueError):
    """Pocket label is not part of the active wheel."""


class UnknownVariantError(KeyError):
    """No wheel variant registered under that name."""


@dataclass(frozen=True)
class Pocket:
    label: str
    color: str                  # 'red', 'black', 'green'
    parity: Optional[str]       # 'odd', 'even', None for zeros
    height: Optional[str]       # 'low', 'high', None for zeros
    dozen: str                  # '1st', '2nd', '3rd', 'zero'
    street: Optional[int]       # 1-12, None for zeros

    @property
    def is_zero(self):
        return self.color == 'green'

    @property
    def number(self):
        """Integer value, or None for zero pockets."""
        return None if self.is_zero else int(self.label)


def _zero_pocket(label):
    return Pocket(label=label, color='green', parity=None, height=None,
                  dozen=ZERO_GROUP, street=None)


def _number_pocket(n):
    dozen = next(name for name, members in DOZENS.items() if n in members)
    street = next(i for i, members in enumerate(STREETS, start=1) if n in members)
    return Pocket(
        label=str(n),
        color='red' if n in RED_NUMBERS else 'black',
        parity='odd' if n % 2 == 1 else 'even',
        height='low' if n in LOW_NUMBERS else 'high',
        dozen=dozen,
        street=street,
    )


NUMBER_POCKETS = tuple(_number_pocket(n) for n in range(1, 37))


class Variant:
    """One wheel layout: pocket set, lookup table and advisor settings.

    advisor is 'street' (European) or 'hot_cold' (American).
    """

    def __init__(self, name, title, zeros, advisor, min_spins):
        self.name = name
        self.title = title
        self.advisor = advisor
        self.min_spins = min_spins

        pockets = [_zero_pocket(z) for z in zeros] + list(NUMBER_POCKETS)
        self.pockets = tuple(pockets)
        self.labels = tuple(p.label for p in pockets)
        self.table = MappingProxyType({p.label: p for p in pockets})

    @property
    def pocket_space(self):
        return len(self.pockets)

    @property
    def has_streets(self):
        return self.advisor == 'street'

    def normalize(self, pocket):
        """Return the canonical label for pocket, or raise InvalidPocketError.

        Accepts labels ('17', ' 00 ') and plain integers (17).  Booleans
        and anything else are rejected.
        """
        if isinstance(pocket, bool):
            raise InvalidPocketError(f"Invalid pocket {pocket!r} for {self.title}")
        if isinstance(pocket, int):
            label = str(pocket)
        elif isinstance(pocket, str):
            label = pocket.strip()
        else:
            raise InvalidPocketError(f"Invalid pocket {pocket!r} for {self.title}")

        if label not in self.table:
            raise InvalidPocketError(f"Invalid pocket {pocket!r} for {self.title}")
        return label

    def lookup(self, pocket):
        return self.table[self.normalize(pocket)]

    def __repr__(self):
        return f"Variant({self.name!r})"


EUROPEAN = Variant('european', 'European Roulette', EUROPEAN_ZEROS,
                   advisor='street', min_spins=STREET_MIN_SPINS)
AMERICAN = Variant('american', 'American Roulette', AMERICAN_ZEROS,
                   advisor='hot_cold', min_spins=HOT_COLD_ADVISOR_MIN_SPINS)

VARIANTS = MappingProxyType({v.name: v for v in (EUROPEAN, AMERICAN)})


def get_variant(name):
    """Look up a variant by name (case-insensitive)."""
    if isinstance(name, Variant):
        return name
    key = str(name).strip().lower()
    if key not in VARIANTS:
        raise UnknownVariantError(name)
    return VARIANTS[key]
